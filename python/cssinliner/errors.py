# === File: errors.py
# Version: 0.01.00
# Date: 2026-10-19 09:12:00 UTC
# Author: K-Cim
# Description: Exceptions raised by the inliner. Any of them aborts the whole run.


class InlinerError(Exception):
    pass


class HTMLParseError(InlinerError):
    pass


class CSSParseError(InlinerError):
    pass


class FetchError(InlinerError):
    def __init__(self, url, reason):
        super().__init__(f"Failed to fetch stylesheet {url}: {reason}")
        self.url = url
        self.reason = reason


class StructuralPreconditionError(InlinerError):
    pass
