"""Inline CSS declarations to text attributes."""

from __future__ import annotations

import logging
import re

from html2delta.colors import css_color_to_hex
from html2delta.schemas.delta import AttributeKey, Attributes

logger = logging.getLogger(__name__)

_BOLD_WEIGHT_THRESHOLD = 500
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_css(style: str | None) -> dict[str, str]:
    """Split a ``style`` attribute into a property -> value mapping.

    Declarations without a colon or with an empty property or value are
    skipped. Property names are lowercased; later declarations win.
    """
    result: dict[str, str] = {}
    if not style:
        return result
    for declaration in style.split(";"):
        prop, sep, value = declaration.partition(":")
        if not sep:
            continue
        prop = prop.strip().lower()
        value = value.strip()
        if not prop or not value:
            continue
        result[prop] = value
    return result


def css_to_attributes(css: dict[str, str]) -> Attributes | None:
    """Map recognized CSS properties onto text attributes.

    Returns None rather than an empty mapping when nothing was recognized.
    """
    attributes: Attributes = {}

    font_weight = css.get("font-weight")
    if font_weight is not None and _is_bold_weight(font_weight):
        attributes[AttributeKey.BOLD] = True

    text_decoration = css.get("text-decoration")
    if text_decoration is not None:
        for decoration in text_decoration.lower().split():
            if decoration == "underline":
                attributes[AttributeKey.UNDERLINE] = True
            elif decoration == "line-through":
                attributes[AttributeKey.STRIKETHROUGH] = True

    background_color = css.get("background-color")
    if background_color is not None:
        highlight_color = css_color_to_hex(background_color)
        if highlight_color is not None:
            attributes[AttributeKey.HIGHLIGHT_COLOR] = highlight_color
        else:
            logger.debug("Ignoring background-color %r", background_color)

    font_style = css.get("font-style")
    if font_style is not None and font_style.lower() == "italic":
        attributes[AttributeKey.ITALIC] = True

    return attributes or None


def style_to_attributes(style: str | None) -> Attributes | None:
    """Resolve a ``style`` attribute value straight to text attributes."""
    return css_to_attributes(parse_css(style))


def _is_bold_weight(value: str) -> bool:
    if value.lower() == "bold":
        return True
    if not _INTEGER_RE.fullmatch(value):
        logger.debug("Ignoring font-weight %r", value)
        return False
    return int(value) >= _BOLD_WEIGHT_THRESHOLD
