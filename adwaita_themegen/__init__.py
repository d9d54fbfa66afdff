"""
Adwaita theme generator for Fyne.

Scrapes the libadwaita named colors page and the Adwaita icon theme archive,
and generates the Go sources of the Fyne Adwaita theme.
"""

__version__ = "0.1.0"
