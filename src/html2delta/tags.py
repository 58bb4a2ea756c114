"""HTML tag vocabulary understood by the decoder."""

from __future__ import annotations

from enum import Enum


class HTMLTag(str, Enum):
    """Tags with a dedicated decoding rule."""

    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    ORDERED_LIST = "ol"
    UNORDERED_LIST = "ul"
    LIST_ITEM = "li"
    PARAGRAPH = "p"
    BLOCKQUOTE = "blockquote"
    IMAGE = "img"
    ANCHOR = "a"
    ITALIC = "i"
    EM = "em"
    BOLD = "b"
    STRONG = "strong"
    UNDERLINE = "u"
    DEL = "del"
    SPAN = "span"
    CODE = "code"


class TagKind(str, Enum):
    """How the decoder treats an element."""

    FORMATTING = "formatting"
    BLOCK = "block"
    IGNORED = "ignored"
    FALLBACK = "fallback"


FORMATTING_TAGS = frozenset(
    {
        HTMLTag.ANCHOR,
        HTMLTag.ITALIC,
        HTMLTag.EM,
        HTMLTag.BOLD,
        HTMLTag.UNDERLINE,
        HTMLTag.DEL,
        HTMLTag.STRONG,
        HTMLTag.SPAN,
        HTMLTag.CODE,
    }
)

BLOCK_TAGS = frozenset(
    {
        HTMLTag.H1,
        HTMLTag.H2,
        HTMLTag.H3,
        HTMLTag.UNORDERED_LIST,
        HTMLTag.ORDERED_LIST,
        HTMLTag.LIST_ITEM,
        HTMLTag.PARAGRAPH,
        HTMLTag.BLOCKQUOTE,
    }
)

# Images are recognized but not decoded yet.
IGNORED_TAGS = frozenset({HTMLTag.IMAGE})

HEADING_LEVELS = {HTMLTag.H1: 1, HTMLTag.H2: 2, HTMLTag.H3: 3}

_KINDS: dict[str, TagKind] = {}
for _tag in FORMATTING_TAGS:
    _KINDS[_tag.value] = TagKind.FORMATTING
for _tag in BLOCK_TAGS:
    _KINDS[_tag.value] = TagKind.BLOCK
for _tag in IGNORED_TAGS:
    _KINDS[_tag.value] = TagKind.IGNORED

del _tag

if len(_KINDS) != len(HTMLTag):
    raise RuntimeError("every HTMLTag must be classified exactly once")


def classify_tag(name: str | None) -> TagKind:
    """Return the decoding kind of a tag name; unknown tags fall back."""
    if name is None:
        return TagKind.FALLBACK
    return _KINDS.get(name, TagKind.FALLBACK)


def as_html_tag(name: str) -> HTMLTag | None:
    try:
        return HTMLTag(name)
    except ValueError:
        return None
