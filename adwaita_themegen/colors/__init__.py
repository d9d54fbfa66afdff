"""
Color extraction from the libadwaita documentation and mapping to Fyne names.
"""

from adwaita_themegen.colors.page import ColorTable, parse_color
from adwaita_themegen.colors.scheme import build_color_schemes

__all__ = ["ColorTable", "parse_color", "build_color_schemes"]
