"""html2delta: decode HTML into rich-text documents."""

from html2delta.decoder import (
    DecoderOptions,
    apply_formatting,
    decode_html,
    decode_nodes,
)
from html2delta.exceptions import (
    ConfigurationError,
    Html2DeltaError,
    UnknownTagError,
)
from html2delta.schemas import (
    AttributeKey,
    Delta,
    Document,
    DocumentNode,
    NodeType,
    TextOp,
)

__all__ = [
    "AttributeKey",
    "ConfigurationError",
    "DecoderOptions",
    "Delta",
    "Document",
    "DocumentNode",
    "Html2DeltaError",
    "NodeType",
    "TextOp",
    "UnknownTagError",
    "apply_formatting",
    "decode_html",
    "decode_nodes",
]
