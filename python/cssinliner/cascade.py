# === File: cascade.py
# Version: 0.01.00
# Date: 2026-10-19 10:05:00 UTC
# Author: K-Cim
# Description: Match inlinable rules against the document, resolve the cascade
# per element and write the winning declarations into style attributes.

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from soupsieve import SelectorSyntaxError

from cssinliner.rules import parse_declarations
from cssinliner.selectors import specificity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchedDeclarationSet:
    selector: str
    specificity: Tuple[int, int, int]
    source_order: int
    declarations: tuple

    def rank(self, declaration):
        return declaration.important, self.specificity, self.source_order


@dataclass
class Element:
    tag: object
    matches: List[MatchedDeclarationSet] = field(default_factory=list)


def _select(soup, selector):
    try:
        return soup.select(selector)
    except (SelectorSyntaxError, NotImplementedError) as e:
        logger.debug("Selector %r matches nothing: %s", selector, e)
        return []


def index_elements(soup, rules):
    """Map every element matched by an inlinable rule to its matched declaration sets.

    Elements are keyed on the identity of the bs4 Tag, so nothing is written
    to the document to recognise an element seen by an earlier selector.
    """
    elements = {}
    for rule in rules:
        rule_specificity = specificity(rule.selector)
        for tag in _select(soup, rule.selector):
            element = elements.get(id(tag))
            if element is None:
                element = elements[id(tag)] = Element(tag)
            element.matches.append(
                MatchedDeclarationSet(rule.selector, rule_specificity, rule.source_order, rule.declarations)
            )
    logger.debug("Matched %d elements", len(elements))
    return list(elements.values())


def resolve(element):
    """Fold the element's matched sets into {property: Declaration}.

    !important beats normal, then specificity, then source order. A property
    that gets replaced moves to the end so the order is last-applied.
    """
    resolved = {}
    ranks = {}
    for matched in element.matches:
        for declaration in matched.declarations:
            rank = matched.rank(declaration)
            name = declaration.name
            if name in resolved:
                if rank < ranks[name]:
                    continue
                del resolved[name]
            resolved[name] = declaration
            ranks[name] = rank
    return resolved


def write_inline_style(element, resolved):
    tag = element.tag
    existing = (tag.get("style") or "").strip()
    inline_names = {decl.name for decl in parse_declarations(existing)} if existing else set()

    parts = [decl.serialize() for name, decl in resolved.items() if name not in inline_names]
    if existing:
        if not existing.endswith(";"):
            existing += ";"
        parts.append(existing)
    if parts:
        tag["style"] = " ".join(parts)


def inline_elements(elements):
    for element in elements:
        write_inline_style(element, resolve(element))
