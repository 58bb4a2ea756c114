"""Tests for inline CSS resolution."""

from __future__ import annotations

import pytest

from html2delta.css import css_to_attributes, parse_css, style_to_attributes


class TestParseCss:
    """Tests for parse_css."""

    def test_splits_declarations(self) -> None:
        """Properties and values are trimmed."""
        assert parse_css(" font-weight : bold ; font-style:italic") == {
            "font-weight": "bold",
            "font-style": "italic",
        }

    def test_skips_malformed_declarations(self) -> None:
        """Declarations without a colon or value are dropped."""
        assert parse_css("color:red;;margin:1px;bogus;width:") == {
            "color": "red",
            "margin": "1px",
        }

    def test_splits_on_first_colon_only(self) -> None:
        """Values may themselves contain colons."""
        assert parse_css("background-image: url(http://x.test/a.png)") == {
            "background-image": "url(http://x.test/a.png)"
        }

    def test_lowercases_property_names(self) -> None:
        """CSS property names are case-insensitive."""
        assert parse_css("Font-Weight: bold") == {"font-weight": "bold"}

    @pytest.mark.parametrize("style", [None, ""])
    def test_missing_style(self, style: str | None) -> None:
        """No style attribute parses to an empty mapping."""
        assert parse_css(style) == {}


class TestCssToAttributes:
    """Tests for css_to_attributes and style_to_attributes."""

    def test_unrecognized_properties_give_none(self) -> None:
        """A style with nothing recognized is absent, not empty."""
        assert style_to_attributes("color:red;;margin:1px") is None

    def test_empty_mapping_gives_none(self) -> None:
        """No properties at all also resolves to None."""
        assert css_to_attributes({}) is None

    @pytest.mark.parametrize(
        ("weight", "bold"),
        [
            ("bold", True),
            ("499", False),
            ("500", True),
            ("700", True),
            ("+600", True),
            ("5_00", False),
            ("\u0665\u0660\u0660", False),
            (" 700", False),
            ("normal", False),
            ("bolder", False),
            ("600.5", False),
        ],
    )
    def test_font_weight(self, weight: str, bold: bool) -> None:
        """Bold is set for 'bold' or numeric weights of at least 500."""
        attributes = css_to_attributes({"font-weight": weight}) or {}

        assert attributes.get("bold", False) is bold

    def test_text_decoration_tokens(self) -> None:
        """underline and line-through both map; other tokens are ignored."""
        attributes = style_to_attributes("text-decoration: underline wavy line-through")

        assert attributes == {"underline": True, "strikethrough": True}

    def test_font_style_italic(self) -> None:
        """Only the italic font style maps."""
        assert style_to_attributes("font-style: italic") == {"italic": True}
        assert style_to_attributes("font-style: oblique") is None

    def test_background_color(self) -> None:
        """Resolvable background colors become highlight colors."""
        assert style_to_attributes("background-color: rgb(255, 255, 0)") == {
            "highlight_color": "0xffffff00"
        }

    def test_unresolvable_background_color_is_ignored(self) -> None:
        """Colors that cannot be parsed add nothing."""
        assert style_to_attributes("background-color: var(--accent)") is None

    def test_combined_style(self) -> None:
        """All recognized properties contribute to one attribute set."""
        attributes = style_to_attributes(
            "font-weight:700; text-decoration: underline line-through"
        )

        assert attributes == {"bold": True, "underline": True, "strikethrough": True}
