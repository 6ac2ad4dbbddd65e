# === File: rules.py
# Version: 0.01.00
# Date: 2026-10-19 09:41:00 UTC
# Author: K-Cim
# Description: Parse <style> contents with tinycss2 and split rules into
# inlinable selector/declaration pairs and raw rules kept for the output <style>.

import logging
from dataclasses import dataclass
from typing import Tuple

import tinycss2

from cssinliner.errors import CSSParseError
from cssinliner.selectors import is_inlinable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Declaration:
    name: str
    value: str
    important: bool = False

    def serialize(self):
        if self.important:
            return f"{self.name}: {self.value} !important;"
        return f"{self.name}: {self.value};"


@dataclass(frozen=True)
class InlinableRule:
    selector: str
    declarations: Tuple[Declaration, ...]
    source_order: int


@dataclass(frozen=True)
class AtRule:
    """At-rule (@media, @font-face...) kept verbatim."""

    raw: str

    def serialize(self):
        return self.raw


@dataclass(frozen=True)
class OrphanSelectorRule:
    """One selector split out of a qualified rule because it can't be inlined."""

    selector: str
    declarations: Tuple[Declaration, ...]

    def serialize(self):
        body = " ".join(decl.serialize() for decl in self.declarations)
        return f"{self.selector}{{{body}}}"


def parse_stylesheet(css_text):
    nodes = tinycss2.parse_stylesheet(css_text, skip_comments=True, skip_whitespace=True)
    for node in nodes:
        if node.type == "error":
            raise CSSParseError(
                f"Invalid stylesheet at line {node.source_line}, column {node.source_column}: {node.message}"
            )
    return nodes


def parse_declarations(content):
    """Parse a declaration block (token list or text) into Declarations.

    Invalid declarations are dropped, like a browser does.
    """
    declarations = []
    for node in tinycss2.parse_declaration_list(content, skip_comments=True, skip_whitespace=True):
        if node.type != "declaration":
            logger.debug("Skipping invalid declaration: %s", node.serialize() if node.type != "error" else node.message)
            continue
        value = tinycss2.serialize(node.value).strip()
        # custom properties are case-sensitive
        name = node.name if node.name.startswith("--") else node.lower_name
        declarations.append(Declaration(name, value, node.important))
    return tuple(declarations)


def split_selectors(prelude):
    selectors = [[]]
    for token in prelude:
        if token.type == "literal" and token.value == ",":
            selectors.append([])
        else:
            selectors[-1].append(token)
    texts = [tinycss2.serialize(tokens).strip() for tokens in selectors]
    return [text for text in texts if text]


def collect_rules(stylesheets):
    """Walk parsed stylesheets in document order.

    Returns (inlinable, raw): InlinableRule list for every selector that can be
    inlined, and the AtRule / OrphanSelectorRule list to re-emit as CSS.
    """
    inlinable = []
    raw = []
    source_order = 0

    for stylesheet in stylesheets:
        for node in stylesheet:
            if node.type != "qualified-rule":
                raw.append(AtRule(node.serialize()))
                source_order += 1
                continue

            declarations = parse_declarations(node.content)
            for selector in split_selectors(node.prelude):
                if is_inlinable(selector):
                    inlinable.append(InlinableRule(selector, declarations, source_order))
                else:
                    raw.append(OrphanSelectorRule(selector, declarations))
            source_order += 1

    logger.debug("Collected %d inlinable selectors and %d raw rules", len(inlinable), len(raw))
    return inlinable, raw
