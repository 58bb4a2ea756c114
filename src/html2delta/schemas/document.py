"""Document tree models."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, Field, model_validator

from html2delta.schemas.delta import Delta, delta_from_text


class NodeType(str, Enum):
    """Block node types."""

    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BULLETED_LIST = "bulleted_list"
    NUMBERED_LIST = "numbered_list"
    QUOTE = "quote"


class DocumentNode(BaseModel):
    """A block in the document.

    Blocks own their inline content and have no children; list items are
    flat siblings rather than nested under a list container.
    """

    type: NodeType
    delta: Delta = Field(default_factory=Delta)
    level: int | None = Field(default=None, ge=1, le=3)

    @model_validator(mode="after")
    def check_level(self) -> DocumentNode:
        if self.type is NodeType.HEADING and self.level is None:
            raise ValueError("heading nodes require a level")
        if self.type is not NodeType.HEADING and self.level is not None:
            raise ValueError(f"{self.type.value} nodes do not take a level")
        return self

    @property
    def text(self) -> str:
        return self.delta.to_plain_text()


class Document(BaseModel):
    """A page holding an ordered list of block nodes."""

    children: list[DocumentNode] = Field(default_factory=list)

    @classmethod
    def blank(cls) -> Document:
        return cls()

    def insert(self, index: int, nodes: Iterable[DocumentNode]) -> Document:
        """Insert ``nodes`` before position ``index`` of the page."""
        self.children[index:index] = list(nodes)
        return self

    @property
    def is_empty(self) -> bool:
        return not self.children


def paragraph_node(
    delta: Delta | None = None, *, text: str | None = None
) -> DocumentNode:
    return DocumentNode(type=NodeType.PARAGRAPH, delta=_content(delta, text))


def heading_node(
    level: int, delta: Delta | None = None, *, text: str | None = None
) -> DocumentNode:
    return DocumentNode(type=NodeType.HEADING, level=level, delta=_content(delta, text))


def bulleted_list_node(
    delta: Delta | None = None, *, text: str | None = None
) -> DocumentNode:
    return DocumentNode(type=NodeType.BULLETED_LIST, delta=_content(delta, text))


def numbered_list_node(
    delta: Delta | None = None, *, text: str | None = None
) -> DocumentNode:
    return DocumentNode(type=NodeType.NUMBERED_LIST, delta=_content(delta, text))


def quote_node(
    delta: Delta | None = None, *, text: str | None = None
) -> DocumentNode:
    return DocumentNode(type=NodeType.QUOTE, delta=_content(delta, text))


def _content(delta: Delta | None, text: str | None) -> Delta:
    if delta is not None:
        return delta
    return delta_from_text(text or "")
