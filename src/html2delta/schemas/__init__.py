"""Shared schemas for html2delta."""

from html2delta.schemas.delta import AttributeKey, Attributes, Delta, TextOp
from html2delta.schemas.document import (
    Document,
    DocumentNode,
    NodeType,
    bulleted_list_node,
    heading_node,
    numbered_list_node,
    paragraph_node,
    quote_node,
)

__all__ = [
    "AttributeKey",
    "Attributes",
    "Delta",
    "Document",
    "DocumentNode",
    "NodeType",
    "TextOp",
    "bulleted_list_node",
    "heading_node",
    "numbered_list_node",
    "paragraph_node",
    "quote_node",
]
