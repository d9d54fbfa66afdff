"""
Custom exceptions for the Adwaita theme generator.

This module defines all custom exceptions used throughout the application
for better error handling and debugging.
"""

from typing import Any, Optional


class ThemeGenError(Exception):
    """Base exception for all theme generator errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Fetch Exceptions
# =============================================================================


class FetchError(ThemeGenError):
    """A remote page or archive could not be retrieved."""

    def __init__(self, source: str, reason: str, status: Optional[int] = None) -> None:
        """Initialize with the failing source."""
        message = f"Failed to fetch '{source}': {reason}"
        details: dict[str, Any] = {"source": source}
        if status is not None:
            details["status"] = status
        super().__init__(message, details)


# =============================================================================
# Extraction Exceptions
# =============================================================================


class ExtractionError(ThemeGenError):
    """Base exception for errors while extracting records from raw input."""

    pass


class ColorNotFoundError(ExtractionError):
    """No table row describes the requested Adwaita color."""

    def __init__(self, name: str) -> None:
        """Initialize with the missing color name."""
        super().__init__(f"Color '@{name}' not found in the color page", {"name": name})


class ColorParseError(ExtractionError):
    """A color cell could not be converted to RGBA."""

    pass


class ArchiveError(ExtractionError):
    """The icon archive is corrupt or contains unsafe members."""

    pass


# =============================================================================
# Conversion Exceptions
# =============================================================================


class ConversionError(ThemeGenError):
    """The external SVG to PNG converter failed."""

    pass


class ConverterNotFoundError(ConversionError):
    """The external converter executable is not installed."""

    def __init__(self, executable: str) -> None:
        """Initialize with the executable name."""
        super().__init__(f"{executable} not found", {"executable": executable})


# =============================================================================
# Generation Exceptions
# =============================================================================


class GenerationError(ThemeGenError):
    """Base exception for source generation errors."""

    pass


class TemplateRenderError(GenerationError):
    """A source template failed to render."""

    pass


class FormatError(GenerationError):
    """gofmt rejected the generated source."""

    pass


class OutputWriteError(GenerationError):
    """The generated source could not be written to disk."""

    pass
