"""CSS color strings to editor hex colors."""

from __future__ import annotations

import logging
import re

import webcolors

logger = logging.getLogger(__name__)

RGBA = tuple[int, int, int, int]

# 3, 4, 6 or 8 hex digits
_HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
_FUNC_RE = re.compile(r"^rgba?\((?P<args>[^()]*)\)$")
_ARG_SPLIT_RE = re.compile(r"[\s,/]+")


def parse_css_color(value: str | None) -> RGBA | None:
    """Parse a CSS color into ``(red, green, blue, alpha)`` channels (0-255).

    Understands hex notation, ``rgb()``/``rgba()`` (comma or space separated,
    numeric or percentage channels), ``transparent`` and the CSS named colors.
    Returns None for anything else.
    """
    if value is None:
        return None
    text = value.strip().lower()
    if not text:
        return None
    if text == "transparent":
        return (0, 0, 0, 0)

    match = _HEX_RE.match(text)
    if match:
        return _parse_hex(match.group(1))

    match = _FUNC_RE.match(text)
    if match:
        return _parse_rgb_function(match.group("args"))

    try:
        named = webcolors.name_to_hex(text)
    except ValueError:
        logger.debug("Unrecognized color %r", value)
        return None
    return _parse_hex(named[1:])


def css_color_to_hex(value: str | None) -> str | None:
    """Convert a CSS color to ``0xAARRGGBB`` hex, or None when unparseable."""
    rgba = parse_css_color(value)
    if rgba is None:
        return None
    red, green, blue, alpha = rgba
    return f"0x{alpha:02x}{red:02x}{green:02x}{blue:02x}"


def _parse_hex(digits: str) -> RGBA:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits += "ff"
    red, green, blue, alpha = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
    return (red, green, blue, alpha)


def _parse_rgb_function(args: str) -> RGBA | None:
    parts = [part for part in _ARG_SPLIT_RE.split(args.strip()) if part]
    if len(parts) not in (3, 4):
        return None
    channels: list[int] = []
    for part in parts[:3]:
        channel = _parse_channel(part)
        if channel is None:
            return None
        channels.append(channel)
    alpha = 255
    if len(parts) == 4:
        parsed_alpha = _parse_alpha(parts[3])
        if parsed_alpha is None:
            return None
        alpha = parsed_alpha
    return (channels[0], channels[1], channels[2], alpha)


def _parse_channel(part: str) -> int | None:
    try:
        if part.endswith("%"):
            return _clamp(round(float(part[:-1]) * 255 / 100))
        return _clamp(round(float(part)))
    except (ValueError, OverflowError):
        return None


def _parse_alpha(part: str) -> int | None:
    try:
        if part.endswith("%"):
            return _clamp(round(float(part[:-1]) * 255 / 100))
        return _clamp(round(float(part) * 255))
    except (ValueError, OverflowError):
        return None


def _clamp(channel: int) -> int:
    return max(0, min(255, channel))
