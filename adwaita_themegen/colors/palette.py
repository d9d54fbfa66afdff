"""
Name tables from Fyne theme colors to Adwaita named colors.

To add a new color, add it to one of the tables. The key is the Go expression
of the Fyne color name, the value is the Adwaita color name without the "@".
"""

from typing import Dict, Tuple

# widget colors, light and dark values come from the same row
WIDGET_COLORS: Dict[str, str] = {
    "theme.ColorNameBackground": "window_bg_color",  # or "view_bg_color"
    "theme.ColorNameForeground": "window_fg_color",  # or "view_fg_color"
    "theme.ColorNameMenuBackground": "popover_bg_color",
    "theme.ColorNameSelection": "headerbar_bg_color",
    "theme.ColorNameOverlayBackground": "view_bg_color",
    "theme.ColorNamePrimary": "accent_bg_color",  # accent_color is the primary color for Adwaita
    "theme.ColorNameInputBackground": "view_bg_color",  # or "window_bg_color"
    "theme.ColorNameButton": "headerbar_bg_color",  # closest to the button color
    "theme.ColorNameShadow": "shade_color",
    "theme.ColorNameSuccess": "success_bg_color",
    "theme.ColorNameWarning": "warning_bg_color",  # Adwaita has no "orange_x" for dark
    "theme.ColorNameError": "error_bg_color",
}

# standard palette colors, "light,dark" when the variants differ
STANDARD_COLORS: Dict[str, str] = {
    "theme.ColorRed": "red_3,red_4",  # based on error_bg_color
    "theme.ColorOrange": "orange_3",  # close to warning_bg_color
    "theme.ColorYellow": "yellow_3",  # close to warning_bg_color
    "theme.ColorGreen": "green_4,green_5",  # based on success_bg_color
    "theme.ColorBlue": "blue_3",
    "theme.ColorPurple": "purple_3",
    "theme.ColorBrown": "brown_3",
    "theme.ColorGray": "dark_2",
    "theme.ColorNameScrollBar": "dark_5,light_1",
}

# alpha values forced after extraction, for both variants
ALPHA_OVERRIDES: Dict[str, int] = {
    "theme.ColorNameScrollBar": 0x5B,
}


def split_variants(names: str) -> Tuple[str, str]:
    """Split a "light,dark" entry; a single name is used for both variants."""
    parts = [part.strip() for part in names.split(",")]
    if len(parts) == 2:
        return parts[0], parts[1]
    if len(parts) == 1 and parts[0]:
        return parts[0], parts[0]
    raise ValueError(f"expected 'name' or 'light,dark', got {names!r}")
