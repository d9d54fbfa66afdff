"""
Icon extraction from the Adwaita icon theme archive.
"""

from adwaita_themegen.icons.archive import extract_archive
from adwaita_themegen.icons.bundler import collect_icons
from adwaita_themegen.icons.converter import InkscapeConverter

__all__ = ["extract_archive", "collect_icons", "InkscapeConverter"]
