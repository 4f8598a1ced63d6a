"""Thin query layer over a BeautifulSoup tree.

Extractors only need a few things from a parsed document: an ordered list
of elements matching a CSS selector, an attribute value, and the text of an
element (trimmed, or raw with script bodies for word counting).  Keeping those behind small helpers means the
extractors never touch BeautifulSoup's multi-valued attribute handling
directly.
"""

from typing import List, Optional

from bs4 import BeautifulSoup, Tag
from bs4.element import CData, PreformattedString


def build_tree(html: str) -> BeautifulSoup:
    """Parse *html* into a queryable tree.

    lxml is lenient: unclosed tags, stray end tags and other malformed markup
    produce a best-effort tree rather than an error.
    """
    return BeautifulSoup(html, "lxml")


def select(tree: BeautifulSoup, selector: str) -> List[Tag]:
    """Return every element matching *selector*, in document order."""
    return tree.select(selector)


def select_first(tree: BeautifulSoup, selector: str) -> Optional[Tag]:
    return tree.select_one(selector)


def attr(element: Optional[Tag], name: str) -> Optional[str]:
    """Return attribute *name* of *element*, or ``None`` if either is missing."""
    if element is None:
        return None
    value = element.get(name)
    if value is None:
        return None
    # bs4 splits multi-valued attributes such as rel="canonical nofollow"
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def text(element: Optional[Tag]) -> str:
    """Return the whitespace-trimmed text content of *element* and its subtree."""
    if element is None:
        return ""
    return element.get_text().strip()


def all_text(element: Optional[Tag]) -> str:
    """Return the raw concatenated text of *element*, script and style bodies included.

    ``get_text()`` skips ``<script>``/``<style>`` strings; this keeps them and
    only drops comments, doctypes and other markup declarations.
    """
    if element is None:
        return ""
    return "".join(
        string
        for string in element.find_all(string=True)
        if isinstance(string, CData) or not isinstance(string, PreformattedString)
    )
