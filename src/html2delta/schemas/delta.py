"""Attributed text runs (deltas)."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field

AttributeValue = Union[bool, str]
Attributes = dict[str, AttributeValue]


class AttributeKey:
    """Attribute names carried by text runs."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"
    HREF = "href"
    HIGHLIGHT_COLOR = "highlight_color"


class TextOp(BaseModel):
    """A single run of text sharing one attribute set."""

    insert: str
    attributes: Attributes | None = None


class Delta(BaseModel):
    """Ordered text runs making up one block's inline content.

    ``insert`` drops empty strings and merges a run into the previous one
    when both carry the same attributes, so deltas stay compact.
    """

    ops: list[TextOp] = Field(default_factory=list)

    def insert(self, text: str, attributes: Attributes | None = None) -> Delta:
        if not text:
            return self
        attributes = dict(attributes) if attributes else None
        if self.ops and self.ops[-1].attributes == attributes:
            last = self.ops[-1]
            self.ops[-1] = TextOp(insert=last.insert + text, attributes=attributes)
        else:
            self.ops.append(TextOp(insert=text, attributes=attributes))
        return self

    @property
    def is_empty(self) -> bool:
        return not self.ops

    def is_blank(self) -> bool:
        """True when the delta holds no text other than whitespace."""
        return not self.to_plain_text().strip()

    def to_plain_text(self) -> str:
        return "".join(op.insert for op in self.ops)

    def runs(self) -> list[tuple[str, Attributes]]:
        """Return ``(text, attributes)`` pairs, with ``{}`` for unattributed runs."""
        return [(op.insert, dict(op.attributes or {})) for op in self.ops]


def delta_from_text(text: str, attributes: Attributes | None = None) -> Delta:
    """Build a delta holding ``text`` as a single run."""
    return Delta().insert(text, attributes)
