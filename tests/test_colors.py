"""
Tests for color extraction from the named colors page.
"""

import pytest

from adwaita_themegen.colors.page import ColorTable, parse_color
from adwaita_themegen.colors.palette import STANDARD_COLORS, WIDGET_COLORS, split_variants
from adwaita_themegen.colors.scheme import build_color_schemes
from adwaita_themegen.models import RGBA, Variant
from adwaita_themegen.utils.errors import ColorNotFoundError, ColorParseError
from tests.conftest import PALETTE_VALUES, WIDGET_VALUES, build_color_page


class TestParseColor:
    """Test conversion of color cells."""

    def test_hex_color(self):
        """#RRGGBB is opaque."""
        assert parse_color("#3584e4") == RGBA(r=0x35, g=0x84, b=0xE4, a=0xFF)

    def test_hex_color_uppercase(self):
        assert parse_color("#FAFAFA") == RGBA(r=0xFA, g=0xFA, b=0xFA, a=0xFF)

    def test_hex_color_with_alpha(self):
        """#RRGGBBAA carries its own alpha."""
        assert parse_color("#00000080") == RGBA(r=0, g=0, b=0, a=0x80)

    def test_rgba_color(self):
        """rgba() alpha is scaled to a byte and truncated."""
        assert parse_color("rgba(0, 0, 0, 0.8)") == RGBA(r=0, g=0, b=0, a=204)
        assert parse_color("rgba(0, 0, 0, 0.07)") == RGBA(r=0, g=0, b=0, a=17)
        assert parse_color("rgba(0, 0, 6, 0.36)") == RGBA(r=0, g=0, b=6, a=91)

    def test_rgba_color_spacing(self):
        """Whitespace inside rgba() is not significant."""
        assert parse_color("rgba(255,255,255,1)") == RGBA(r=255, g=255, b=255, a=255)
        assert parse_color("  rgba( 10 , 20 , 30 , .5 ) ") == RGBA(r=10, g=20, b=30, a=127)

    @pytest.mark.parametrize(
        "value",
        ["#fff", "#12345", "rgb(1, 2, 3)", "rgba(1, 2, 3)", "transparent", ""],
    )
    def test_unsupported_formats(self, value):
        """Anything else is rejected."""
        with pytest.raises(ColorParseError):
            parse_color(value)

    def test_out_of_range(self):
        """Channels above 255 or alpha above 1 are rejected."""
        with pytest.raises(ColorParseError, match="out of range"):
            parse_color("rgba(256, 0, 0, 0.5)")
        with pytest.raises(ColorParseError, match="out of range"):
            parse_color("rgba(0, 0, 0, 1.5)")


class TestColorTable:
    """Test row matching on the documentation page."""

    def test_rows_found(self, color_page_html):
        """Every <tr> block is a row, including the header."""
        table = ColorTable.from_html(color_page_html)

        assert len(table) == 1 + len(WIDGET_VALUES) + len(PALETTE_VALUES)

    def test_widget_color_variants(self, color_page_html):
        """Light is the first cell, dark the second."""
        table = ColorTable.from_html(color_page_html)

        assert table.widget_color("window_bg_color", Variant.LIGHT) == RGBA(r=0xFA, g=0xFA, b=0xFA)
        assert table.widget_color("window_bg_color", Variant.DARK) == RGBA(r=0x24, g=0x24, b=0x24)

    def test_html_encoded_and_plain_at(self, color_page_html):
        """Names prefixed with '&#64;' and with '@' are both found."""
        table = ColorTable.from_html(color_page_html)

        # widget rows use &#64;, palette rows use @
        assert table.widget_color("accent_bg_color", Variant.LIGHT) == RGBA(r=0x35, g=0x84, b=0xE4)
        assert table.standard_color("red_3") == RGBA(r=0xE0, g=0x1B, b=0x24)

    def test_name_boundary(self):
        """dark_1 does not match the dark_10 row."""
        page = build_color_page(
            widget_values={},
            palette_values={"dark_10": "#111111", "dark_1": "#222222"},
        )
        table = ColorTable.from_html(page)

        assert table.standard_color("dark_1") == RGBA(r=0x22, g=0x22, b=0x22)
        assert table.standard_color("dark_10") == RGBA(r=0x11, g=0x11, b=0x11)

    def test_first_matching_row_wins(self):
        """A color described twice resolves to its first row."""
        page = build_color_page(widget_values={}, palette_values={"blue_3": "#3584e4"})
        page += "<table><tr><td><tt>@blue_3</tt></td><td><tt>#000000</tt></td></tr></table>"
        table = ColorTable.from_html(page)

        assert table.standard_color("blue_3") == RGBA(r=0x35, g=0x84, b=0xE4)

    def test_multiline_row(self):
        """Rows spanning many lines are matched."""
        page = "<table><tr>\n  <td>\n<tt>&#64;shade_color</tt>\n</td>\n<td><tt>rgba(0, 0, 0, 0.07)</tt></td>\n<td><tt>rgba(0, 0, 0, 0.36)</tt></td>\n</tr></table>"
        table = ColorTable.from_html(page)

        assert table.widget_color("shade_color", Variant.DARK).a == 91

    def test_missing_color(self, color_page_html):
        """An unknown name raises ColorNotFoundError."""
        table = ColorTable.from_html(color_page_html)

        with pytest.raises(ColorNotFoundError, match="@card_bg_color"):
            table.widget_color("card_bg_color", Variant.LIGHT)

    def test_missing_dark_cell(self, color_page_html):
        """A palette row has no dark value to read as a widget color."""
        table = ColorTable.from_html(color_page_html)

        with pytest.raises(ColorParseError, match="No dark value"):
            table.widget_color("red_3", Variant.DARK)

    def test_standard_color_uses_first_cell(self, color_page_html):
        """Standard lookups read the first cell even on widget rows."""
        table = ColorTable.from_html(color_page_html)

        assert table.standard_color("view_bg_color") == RGBA(r=0xFF, g=0xFF, b=0xFF)


class TestColorSchemes:
    """Test mapping of the page through the name tables."""

    def test_all_names_mapped(self, color_page_html):
        """Both schemes contain every widget and standard color."""
        schemes = build_color_schemes(ColorTable.from_html(color_page_html))

        expected = set(WIDGET_COLORS) | set(STANDARD_COLORS)
        assert set(schemes.light) == expected
        assert set(schemes.dark) == expected

    def test_widget_colors(self, color_page_html):
        schemes = build_color_schemes(ColorTable.from_html(color_page_html))

        background_light = schemes.light["theme.ColorNameBackground"]
        background_dark = schemes.dark["theme.ColorNameBackground"]
        assert background_light.color == RGBA(r=0xFA, g=0xFA, b=0xFA)
        assert background_dark.color == RGBA(r=0x24, g=0x24, b=0x24)
        assert background_light.source_name == "window_bg_color"

        assert schemes.light["theme.ColorNameShadow"].color.a == 17
        assert schemes.dark["theme.ColorNameShadow"].color.a == 91

    def test_split_standard_colors(self, color_page_html):
        """'light,dark' entries resolve each variant to its own name."""
        schemes = build_color_schemes(ColorTable.from_html(color_page_html))

        assert schemes.light["theme.ColorRed"].source_name == "red_3"
        assert schemes.dark["theme.ColorRed"].source_name == "red_4"
        assert schemes.dark["theme.ColorRed"].color == RGBA(r=0xC0, g=0x1C, b=0x28)

        assert schemes.light["theme.ColorBlue"].source_name == "blue_3"
        assert schemes.dark["theme.ColorBlue"].source_name == "blue_3"

    def test_scrollbar_alpha_override(self, color_page_html):
        """The scrollbar keeps its RGB but uses alpha 0x5b."""
        schemes = build_color_schemes(ColorTable.from_html(color_page_html))

        assert schemes.light["theme.ColorNameScrollBar"].color == RGBA(r=0, g=0, b=0, a=0x5B)
        assert schemes.dark["theme.ColorNameScrollBar"].color == RGBA(r=0xFF, g=0xFF, b=0xFF, a=0x5B)

    def test_missing_mapped_color(self):
        """A mapped color absent from the page aborts the scheme."""
        values = dict(PALETTE_VALUES)
        del values["purple_3"]
        page = build_color_page(palette_values=values)

        with pytest.raises(ColorNotFoundError, match="purple_3"):
            build_color_schemes(ColorTable.from_html(page))

    def test_custom_tables(self, color_page_html):
        """Tables can be replaced."""
        schemes = build_color_schemes(
            ColorTable.from_html(color_page_html),
            widget_colors={"theme.ColorNameHover": "view_bg_color"},
            standard_colors={},
            alpha_overrides={},
        )

        assert list(schemes.light) == ["theme.ColorNameHover"]
        assert schemes.dark["theme.ColorNameHover"].color == RGBA(r=0x1E, g=0x1E, b=0x1E)

    def test_sorted_items(self, color_page_html):
        """Scheme entries are ordered by Fyne name."""
        schemes = build_color_schemes(ColorTable.from_html(color_page_html))
        names = [name for name, _ in schemes.sorted_items(Variant.DARK)]

        assert names == sorted(names)


class TestSplitVariants:
    """Test parsing of 'light,dark' table entries."""

    def test_single_name(self):
        assert split_variants("blue_3") == ("blue_3", "blue_3")

    def test_two_names(self):
        assert split_variants("dark_5,light_1") == ("dark_5", "light_1")

    def test_invalid(self):
        with pytest.raises(ValueError):
            split_variants("a,b,c")
        with pytest.raises(ValueError):
            split_variants("")
