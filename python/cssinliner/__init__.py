# === File: __init__.py
# Version: 0.01.00
# Date: 2026-10-19 11:20:00 UTC
# Author: K-Cim
# Description: Push <style>/<link> CSS into inline style attributes (HTML e-mails).

from cssinliner.errors import (
    CSSParseError,
    FetchError,
    HTMLParseError,
    InlinerError,
    StructuralPreconditionError,
)
from cssinliner.inliner import InlineOptions, Inliner, inline_html

# === Version globals ===
SCRIPT_NAME = "cssinliner"
SCRIPT_VERSION = "0.01.00"
SCRIPT_DATE = "2026-10-19 11:20:00 UTC"

__all__ = [
    "CSSParseError",
    "FetchError",
    "HTMLParseError",
    "InlineOptions",
    "Inliner",
    "InlinerError",
    "StructuralPreconditionError",
    "inline_html",
]
