# === File: selectors.py
# Version: 0.01.00
# Date: 2026-10-19 09:20:00 UTC
# Author: K-Cim
# Description: Selector classification (inlinable or not) and CSS specificity.

import tinycss2

UNSUPPORTED_SELECTORS = (
    ":active", ":after", ":before", ":checked", ":disabled", ":enabled",
    ":first-line", ":first-letter", ":focus", ":hover", ":invalid", ":in-range",
    ":lang", ":link", ":root", ":selection", ":target", ":valid", ":visited",
)

# Pseudo-elements that CSS2 allowed with a single colon
LEGACY_PSEUDO_ELEMENTS = {"before", "after", "first-line", "first-letter"}


def is_inlinable(selector):
    """Return False when the selector needs a pseudo-class or pseudo-element."""
    if "::" in selector:
        return False
    return not any(bad in selector for bad in UNSUPPORTED_SELECTORS)


def _split_arguments(tokens):
    parts = [[]]
    for token in tokens:
        if token.type == "literal" and token.value == ",":
            parts.append([])
        else:
            parts[-1].append(token)
    return [part for part in parts if part]


def _specificity_of_tokens(tokens):
    a = b = c = 0
    tokens = [t for t in tokens if t.type != "comment"]
    i = 0
    while i < len(tokens):
        token = tokens[i]
        nxt = tokens[i + 1] if i + 1 < len(tokens) else None

        if token.type == "hash":
            a += 1
        elif token.type == "[] block":
            b += 1
        elif token.type == "ident":
            c += 1
        elif token.type == "literal" and token.value == ".":
            b += 1
            i += 1
        elif token.type == "literal" and token.value == ":":
            if nxt is not None and nxt.type == "literal" and nxt.value == ":":
                # ::pseudo-element
                c += 1
                i += 2
            elif nxt is not None and nxt.type == "ident":
                if nxt.lower_value in LEGACY_PSEUDO_ELEMENTS:
                    c += 1
                else:
                    b += 1
                i += 1
            elif nxt is not None and nxt.type == "function":
                name = nxt.lower_name
                if name in ("not", "is", "has", "matches"):
                    args = _split_arguments(nxt.arguments)
                    if args:
                        sa, sb, sc = max(_specificity_of_tokens(arg) for arg in args)
                        a, b, c = a + sa, b + sb, c + sc
                elif name != "where":
                    b += 1
                i += 1
        i += 1
    return a, b, c


def specificity(selector):
    """Return the (ids, classes/attributes/pseudo-classes, types) tuple of a selector."""
    return _specificity_of_tokens(tinycss2.parse_component_value_list(selector))
