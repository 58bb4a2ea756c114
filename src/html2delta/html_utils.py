"""Shared BeautifulSoup helpers for HTML decoding."""

from __future__ import annotations

from typing import Iterable, Iterator

from html2delta.exceptions import ConfigurationError

try:
    from bs4 import BeautifulSoup, FeatureNotFound
    from bs4.element import NavigableString, PageElement, PreformattedString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


def parse_html(html: str, parser: str) -> BeautifulSoup:
    """Parse markup with the given BeautifulSoup tree builder."""
    try:
        return BeautifulSoup(html, parser)
    except FeatureNotFound as exc:
        raise ConfigurationError(
            f"HTML parser {parser!r} is not installed"
        ) from exc


def find_body(soup: BeautifulSoup) -> Tag | None:
    """Return the ``<body>`` element, or None when the document has none."""
    body = soup.find("body")
    return body if isinstance(body, Tag) else None


def is_text(node: PageElement) -> bool:
    """True for text content; comments, doctypes and the like are not text."""
    return isinstance(node, NavigableString) and not isinstance(
        node, PreformattedString
    )


def flattened_text(node: PageElement) -> str:
    """Concatenate every descendant text node, discarding tag structure."""
    if isinstance(node, Tag):
        return node.get_text()
    if is_text(node):
        return str(node)
    return ""


def child_elements(tag: Tag) -> Iterator[Tag]:
    """Yield the direct children of ``tag`` that are elements."""
    for child in tag.children:
        if isinstance(child, Tag):
            yield child


def content_nodes(nodes: Iterable[PageElement]) -> Iterator[PageElement]:
    """Yield elements and text nodes, skipping comments and declarations."""
    for node in nodes:
        if isinstance(node, Tag) or is_text(node):
            yield node
