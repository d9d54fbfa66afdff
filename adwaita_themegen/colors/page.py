"""
Color extraction from the libadwaita "named colors" page.

The page is not parsed as HTML. All colors are described in tables, one color
per row, and the values are matched with regular expressions against that
known structure.
"""

import re
from typing import List

from adwaita_themegen.models import RGBA, Variant
from adwaita_themegen.utils.errors import ColorNotFoundError, ColorParseError
from adwaita_themegen.utils.logging import get_logger

logger = get_logger(__name__)

# All colors are described in a table. Each color is a row.
TABLE_ROW_PATTERN = re.compile(r"<tr>(.*?)</tr>", re.DOTALL)

# The color values are in a <tt> tag, the first one is the light color, the second one is the dark color.
# The color is described in a rgba() format, or in a #RRGGBB format.
COLOR_CELL_PATTERN = re.compile(r"<tt>((?:rgba|#).*?)</tt>", re.DOTALL)

HEX_COLOR_PATTERN = re.compile(r"#([0-9a-fA-F]{6})([0-9a-fA-F]{2})?")
RGBA_COLOR_PATTERN = re.compile(
    r"rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d*\.?\d+)\s*\)"
)


def parse_color(value: str) -> RGBA:
    """
    Convert a color cell to RGBA.

    Accepts ``#RRGGBB``, ``#RRGGBBAA`` and ``rgba(R, G, B, A)`` where ``A`` is a
    float in [0, 1]. The alpha byte of the rgba form is truncated, not rounded.

    Raises:
        ColorParseError: If the value is in none of those forms
    """
    value = value.strip()

    match = HEX_COLOR_PATTERN.fullmatch(value)
    if match:
        rgb, alpha = match.groups()
        return RGBA(
            r=int(rgb[0:2], 16),
            g=int(rgb[2:4], 16),
            b=int(rgb[4:6], 16),
            a=int(alpha, 16) if alpha else 0xFF,
        )

    match = RGBA_COLOR_PATTERN.fullmatch(value)
    if match:
        red, green, blue = (int(channel) for channel in match.groups()[:3])
        alpha = float(match.group(4))
        if max(red, green, blue) > 255 or alpha > 1.0:
            raise ColorParseError(f"Color channel out of range: {value!r}", {"value": value})
        return RGBA(r=red, g=green, b=blue, a=int(alpha * 255))

    raise ColorParseError(f"Unsupported color format: {value!r}", {"value": value})


class ColorTable:
    """The color rows of the documentation page."""

    def __init__(self, rows: List[str]) -> None:
        self.rows = rows

    @classmethod
    def from_html(cls, page: str) -> "ColorTable":
        """Find all the rows in the tables of the page."""
        rows = TABLE_ROW_PATTERN.findall(page)
        logger.debug(f"Found {len(rows)} table rows")
        return cls(rows)

    def __len__(self) -> int:
        return len(self.rows)

    def find_row(self, name: str) -> str:
        """
        Return the first row describing ``@name``.

        The "@" may be HTML encoded as ``&#64;``. The name must not be followed
        by a word character, so ``dark_1`` does not match a ``dark_10`` row.

        Raises:
            ColorNotFoundError: If no row mentions the color
        """
        pattern = re.compile(r"(?:&#64;|@)" + re.escape(name) + r"(?!\w)")
        for row in self.rows:
            if pattern.search(row):
                return row
        raise ColorNotFoundError(name)

    def cells(self, name: str) -> List[str]:
        """Color values of the row describing ``@name``, in document order."""
        return [cell.strip() for cell in COLOR_CELL_PATTERN.findall(self.find_row(name))]

    def widget_color(self, name: str, variant: Variant) -> RGBA:
        """
        Color of a widget color row for one variant.

        Widget rows carry the light value first and the dark value second.
        """
        cells = self.cells(name)
        index = 0 if variant is Variant.LIGHT else 1
        if len(cells) <= index:
            raise ColorParseError(
                f"No {variant.value} value for '@{name}'",
                {"name": name, "cells": len(cells)},
            )
        return parse_color(cells[index])

    def standard_color(self, name: str) -> RGBA:
        """Color of a palette row, which has a single value."""
        cells = self.cells(name)
        if not cells:
            raise ColorParseError(f"No value for '@{name}'", {"name": name})
        return parse_color(cells[0])
