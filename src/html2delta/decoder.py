"""Decode HTML into a document of block nodes with attributed inline text.

Decoding walks the children of ``<body>`` once, depth first:

* text nodes and formatting elements (``<b>``, ``<a>``, ``<span style>`` ...)
  are appended to a running inline buffer;
* block elements (headings, paragraphs, lists, quotes) become document nodes.
  The running buffer is flushed into a paragraph *before* the block is
  emitted, so output order follows document order;
* anything else becomes a paragraph of its flattened text, except images,
  which are not decoded yet.

Headings, quotes and (by default) list items keep only their flattened text.
Paragraph children and top-level inline content keep nested formatting, with
attribute sets merged down the element chain.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from html2delta.config import (
    HTML2DELTA_MAX_DEPTH,
    HTML2DELTA_PARSER,
    SUPPORTED_PARSERS,
)
from html2delta.css import style_to_attributes
from html2delta.exceptions import ConfigurationError, UnknownTagError
from html2delta.html_utils import (
    child_elements,
    content_nodes,
    find_body,
    flattened_text,
    is_text,
    parse_html,
)
from html2delta.schemas import (
    AttributeKey,
    Attributes,
    Delta,
    Document,
    DocumentNode,
    bulleted_list_node,
    heading_node,
    numbered_list_node,
    paragraph_node,
    quote_node,
)
from html2delta.tags import HEADING_LEVELS, HTMLTag, TagKind, as_html_tag, classify_tag

try:
    from bs4.element import PageElement, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

_TAG_ATTRIBUTES: dict[HTMLTag, Attributes] = {
    HTMLTag.BOLD: {AttributeKey.BOLD: True},
    HTMLTag.STRONG: {AttributeKey.BOLD: True},
    HTMLTag.ITALIC: {AttributeKey.ITALIC: True},
    HTMLTag.EM: {AttributeKey.ITALIC: True},
    HTMLTag.UNDERLINE: {AttributeKey.UNDERLINE: True},
    HTMLTag.DEL: {AttributeKey.STRIKETHROUGH: True},
    HTMLTag.CODE: {AttributeKey.CODE: True},
}


@dataclass
class DecoderOptions:
    """Options for HTML decoding.

    Attributes:
        parser: BeautifulSoup tree builder ("lxml", "html.parser" or "html5lib").
        max_depth: Element nesting depth past which content is flattened
            instead of recursed into.
        rich_list_items: If True, list items keep inline formatting the way
            paragraphs do; otherwise they carry flattened text only.
    """

    parser: str = HTML2DELTA_PARSER
    max_depth: int = HTML2DELTA_MAX_DEPTH
    rich_list_items: bool = False

    def __post_init__(self) -> None:
        if self.parser not in SUPPORTED_PARSERS:
            raise ConfigurationError(
                f"Unsupported parser {self.parser!r}; "
                f"expected one of {', '.join(SUPPORTED_PARSERS)}"
            )
        if self.max_depth < 1:
            raise ConfigurationError(
                f"max_depth must be at least 1, got {self.max_depth}"
            )


def decode_html(html: str, options: DecoderOptions | None = None) -> Document:
    """Decode an HTML document into a new document.

    A document without a ``<body>`` decodes to an empty document.
    """
    opts = options or DecoderOptions()
    soup = parse_html(html, opts.parser)
    body = find_body(soup)
    if body is None:
        logger.debug("No <body> element found; returning an empty document")
        return Document.blank()
    return Document.blank().insert(0, decode_nodes(body.children, opts))


def decode_nodes(
    nodes: Iterable[PageElement], options: DecoderOptions | None = None
) -> list[DocumentNode]:
    """Decode a run of sibling DOM nodes into document nodes."""
    return _parse_siblings(nodes, options or DecoderOptions(), depth=0)


def apply_formatting(
    delta: Delta,
    element: Tag,
    *,
    inherited: Attributes | None = None,
    max_depth: int = HTML2DELTA_MAX_DEPTH,
    depth: int = 0,
) -> None:
    """Append a formatting element's text to ``delta``.

    The element's own attributes are laid over ``inherited`` and passed down
    to nested formatting elements.

    Raises:
        UnknownTagError: If ``element`` is not a formatting element.
    """
    attributes = _merge_attributes(inherited, formatting_attributes(element))
    _insert_inline(
        delta, element.children, attributes, max_depth=max_depth, depth=depth + 1
    )


def formatting_attributes(element: Tag) -> Attributes | None:
    """Return the attributes a formatting element contributes by itself."""
    tag = as_html_tag(element.name)
    if tag in _TAG_ATTRIBUTES:
        return dict(_TAG_ATTRIBUTES[tag])
    if tag is HTMLTag.SPAN:
        return style_to_attributes(element.get("style"))
    if tag is HTMLTag.ANCHOR:
        href = element.get("href")
        if href is None:
            return None
        return {AttributeKey.HREF: href}
    raise UnknownTagError(element.name, "apply_formatting")


def _parse_siblings(
    nodes: Iterable[PageElement], opts: DecoderOptions, *, depth: int
) -> list[DocumentNode]:
    delta = Delta()
    result: list[DocumentNode] = []
    for node in content_nodes(nodes):
        if is_text(node):
            delta.insert(str(node))
            continue
        kind = classify_tag(node.name)
        if kind is TagKind.FORMATTING:
            apply_formatting(delta, node, max_depth=opts.max_depth, depth=depth)
            continue
        if kind is TagKind.IGNORED:
            logger.debug("Skipping unsupported <%s> element", node.name)
            continue
        delta = _flush(delta, result)
        if kind is TagKind.BLOCK:
            result.extend(_parse_block(node, opts, depth=depth))
        else:
            result.extend(_parse_fallback(node))
    _flush(delta, result)
    return result


def _flush(delta: Delta, result: list[DocumentNode]) -> Delta:
    """Move pending inline content into a paragraph and return a fresh buffer."""
    if not delta.is_blank():
        result.append(paragraph_node(delta))
    return Delta()


def _parse_block(
    element: Tag, opts: DecoderOptions, *, depth: int
) -> list[DocumentNode]:
    tag = HTMLTag(element.name)
    if tag in HEADING_LEVELS:
        return [heading_node(HEADING_LEVELS[tag], text=flattened_text(element))]
    if tag is HTMLTag.BLOCKQUOTE:
        return [quote_node(text=flattened_text(element))]
    if tag is HTMLTag.PARAGRAPH:
        return [paragraph_node(_inline_delta(element, opts, depth=depth))]
    if tag is HTMLTag.UNORDERED_LIST:
        return [
            bulleted_list_node(_list_item_delta(item, opts, depth=depth + 1))
            for item in child_elements(element)
        ]
    if tag is HTMLTag.ORDERED_LIST:
        return [
            numbered_list_node(_list_item_delta(item, opts, depth=depth + 1))
            for item in child_elements(element)
        ]
    if tag is HTMLTag.LIST_ITEM:
        if depth + 1 > opts.max_depth:
            logger.debug("Depth limit reached at <li>; flattening")
            return _parse_fallback(element)
        return _parse_siblings(element.children, opts, depth=depth + 1)
    raise UnknownTagError(element.name, "block dispatch")


def _parse_fallback(element: Tag) -> list[DocumentNode]:
    text = flattened_text(element)
    if not text.strip():
        return []
    logger.debug("No rule for <%s>; decoding as a plain paragraph", element.name)
    return [paragraph_node(text=text)]


def _list_item_delta(item: Tag, opts: DecoderOptions, *, depth: int) -> Delta:
    if not opts.rich_list_items:
        return Delta().insert(flattened_text(item))
    return _inline_delta(item, opts, depth=depth)


def _inline_delta(element: Tag, opts: DecoderOptions, *, depth: int) -> Delta:
    delta = Delta()
    _insert_inline(
        delta, element.children, None, max_depth=opts.max_depth, depth=depth + 1
    )
    return delta


def _insert_inline(
    delta: Delta,
    nodes: Iterable[PageElement],
    attributes: Attributes | None,
    *,
    max_depth: int,
    depth: int,
) -> None:
    for node in content_nodes(nodes):
        if is_text(node):
            delta.insert(str(node), attributes)
            continue
        kind = classify_tag(node.name)
        if kind is TagKind.IGNORED:
            continue
        if kind is TagKind.FORMATTING and depth < max_depth:
            apply_formatting(
                delta, node, inherited=attributes, max_depth=max_depth, depth=depth
            )
            continue
        if kind is TagKind.FORMATTING:
            logger.debug("Depth limit reached at <%s>; flattening", node.name)
            delta.insert(
                flattened_text(node),
                _merge_attributes(attributes, formatting_attributes(node)),
            )
            continue
        delta.insert(flattened_text(node), attributes)


def _merge_attributes(
    outer: Attributes | None, inner: Attributes | None
) -> Attributes | None:
    if not outer:
        return inner
    if not inner:
        return outer
    return {**outer, **inner}
