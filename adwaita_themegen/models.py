"""
Core data models for the Adwaita theme generator.

These records live for a single generation run: they are produced by the
extractors, consumed by the code generator, and discarded.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, List, Tuple

from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================


class Variant(str, Enum):
    """Color scheme variant."""

    LIGHT = "light"
    DARK = "dark"


# =============================================================================
# Color Models
# =============================================================================


class RGBA(BaseModel):
    """A non-premultiplied 8-bit color."""

    r: int = Field(..., ge=0, le=255, description="Red channel")
    g: int = Field(..., ge=0, le=255, description="Green channel")
    b: int = Field(..., ge=0, le=255, description="Blue channel")
    a: int = Field(0xFF, ge=0, le=255, description="Alpha channel")

    def with_alpha(self, alpha: int) -> "RGBA":
        """Return a copy of this color with another alpha value."""
        return self.model_copy(update={"a": alpha})


class ColorSample(BaseModel):
    """A color extracted from the documentation page."""

    color: RGBA
    source_name: str = Field(..., description="Adwaita color name without the '@'")


class ColorSchemes(BaseModel):
    """Light and dark schemes keyed by Fyne color name."""

    light: Dict[str, ColorSample] = Field(default_factory=dict)
    dark: Dict[str, ColorSample] = Field(default_factory=dict)

    def sorted_items(self, variant: Variant) -> List[Tuple[str, ColorSample]]:
        """Entries of one variant ordered by Fyne color name."""
        scheme = self.light if variant is Variant.LIGHT else self.dark
        return sorted(scheme.items())


# =============================================================================
# Icon Models
# =============================================================================


class IconSample(BaseModel):
    """An icon file bundled as a static resource."""

    static_name: str = Field(..., description="Resource name, the icon file's base name")
    content: bytes = Field(..., description="Raw file content")

    @property
    def is_symbolic(self) -> bool:
        """Symbolic icons are recolored by the theme at runtime."""
        return "symbolic" in self.static_name


# =============================================================================
# Results
# =============================================================================


class GenerationResult(BaseModel):
    """Outcome of writing one generated source file."""

    path: Path
    entries: int = Field(..., ge=0, description="Number of map entries rendered")
    formatted: bool = Field(False, description="Whether gofmt was applied")
