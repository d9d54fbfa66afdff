"""
Retrieval of the raw inputs: the color documentation page and the icon archive.
"""

from adwaita_themegen.sources.client import SourceClient

__all__ = ["SourceClient"]
