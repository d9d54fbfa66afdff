"""
Build the light and dark color schemes from the color page.
"""

from typing import Dict, Optional

from adwaita_themegen.colors.page import ColorTable
from adwaita_themegen.colors.palette import (
    ALPHA_OVERRIDES,
    STANDARD_COLORS,
    WIDGET_COLORS,
    split_variants,
)
from adwaita_themegen.models import ColorSample, ColorSchemes, Variant
from adwaita_themegen.utils.logging import get_logger

logger = get_logger(__name__)


def build_color_schemes(
    table: ColorTable,
    widget_colors: Optional[Dict[str, str]] = None,
    standard_colors: Optional[Dict[str, str]] = None,
    alpha_overrides: Optional[Dict[str, int]] = None,
) -> ColorSchemes:
    """
    Map the page's colors through the name tables.

    Args:
        table: Rows of the color page
        widget_colors: Fyne name to widget color name (defaults to WIDGET_COLORS)
        standard_colors: Fyne name to "light[,dark]" palette names (defaults to STANDARD_COLORS)
        alpha_overrides: Fyne name to forced alpha (defaults to ALPHA_OVERRIDES)

    Returns:
        Light and dark schemes

    Raises:
        ColorNotFoundError: If a mapped color is missing from the page
        ColorParseError: If a mapped color has an unusable value
    """
    widget_colors = WIDGET_COLORS if widget_colors is None else widget_colors
    standard_colors = STANDARD_COLORS if standard_colors is None else standard_colors
    alpha_overrides = ALPHA_OVERRIDES if alpha_overrides is None else alpha_overrides

    schemes = ColorSchemes()

    for fyne_name, adw_name in widget_colors.items():
        schemes.light[fyne_name] = ColorSample(
            color=table.widget_color(adw_name, Variant.LIGHT),
            source_name=adw_name,
        )
        schemes.dark[fyne_name] = ColorSample(
            color=table.widget_color(adw_name, Variant.DARK),
            source_name=adw_name,
        )

    for fyne_name, names in standard_colors.items():
        light_name, dark_name = split_variants(names)
        light = table.standard_color(light_name)
        dark = table.standard_color(dark_name)

        if fyne_name in alpha_overrides:
            light = light.with_alpha(alpha_overrides[fyne_name])
            dark = dark.with_alpha(alpha_overrides[fyne_name])

        schemes.light[fyne_name] = ColorSample(color=light, source_name=light_name)
        schemes.dark[fyne_name] = ColorSample(color=dark, source_name=dark_name)

    logger.info(f"Extracted {len(schemes.light)} colors per scheme")
    return schemes
