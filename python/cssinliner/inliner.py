# === File: inliner.py
# Version: 0.01.00
# Date: 2026-10-19 10:58:00 UTC
# Author: K-Cim
# Description: The inlining pipeline: parse HTML, fetch linked CSS, collect
# rules, inline them into style attributes and re-insert the raw CSS.

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import NavigableString, Stylesheet

from cssinliner.cascade import index_elements, inline_elements
from cssinliner.errors import HTMLParseError, StructuralPreconditionError
from cssinliner.fetch import fetch_external_stylesheets
from cssinliner.rules import collect_rules, parse_stylesheet

logger = logging.getLogger(__name__)


@dataclass
class InlineOptions:
    fetch_external: bool = False
    source_url: Optional[str] = None
    proxy: Optional[str] = None
    timeout: float = 10


class Inliner:
    def __init__(self, html):
        self.html = html

    @classmethod
    def from_reader(cls, stream):
        return cls(stream.read())

    def inline(self, options=None):
        """Inline the document's CSS and return the mutated BeautifulSoup."""
        options = options or InlineOptions()
        base = urlparse(options.source_url) if options.fetch_external and options.source_url else None

        soup = self._parse_html()
        if options.fetch_external:
            fetch_external_stylesheets(soup, base=base, proxy=options.proxy, timeout=options.timeout)

        stylesheets = extract_stylesheets(soup)
        inlinable, raw = collect_rules(stylesheets)

        elements = index_elements(soup, inlinable)
        inline_elements(elements)
        insert_raw_stylesheet(soup, raw)

        logger.info(
            "Inlined %d stylesheet(s) into %d element(s), %d raw rule(s) kept",
            len(stylesheets), len(elements), len(raw),
        )
        return soup

    def _parse_html(self):
        try:
            return BeautifulSoup(self.html, "html.parser")
        except (ParserRejectedMarkup, TypeError) as e:
            raise HTMLParseError(f"Unable to parse HTML document: {e}") from e


def extract_stylesheets(soup):
    """Parse then remove every <style>, in document order."""
    stylesheets = []
    for style in soup.find_all("style"):
        # fetched sheets hold a plain NavigableString, parsed ones a Stylesheet
        css = style.get_text(types=(NavigableString, Stylesheet))
        stylesheets.append(parse_stylesheet(css))
        style.decompose()
    return stylesheets


def insert_raw_stylesheet(soup, raw_rules):
    raw_css = "\n".join(rule.serialize() for rule in raw_rules)
    if not raw_css:
        return

    head = soup.head
    if head is None:
        raise StructuralPreconditionError("Document has no <head> element to hold non-inlinable CSS")

    style_tag = soup.new_tag("style", attrs={"type": "text/css"})
    style_tag.string = "\n" + raw_css + "\n"
    head.append(style_tag)


def inline_html(html, options=None):
    return str(Inliner(html).inline(options))
