"""
Go source generation for the Fyne theme.
"""

from adwaita_themegen.codegen.renderer import SourceRenderer
from adwaita_themegen.codegen.writer import format_go_source, write_source

__all__ = ["SourceRenderer", "format_go_source", "write_source"]
