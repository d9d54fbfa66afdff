"""
SVG to PNG conversion through inkscape.

Some Adwaita SVGs use features the Fyne rasterizer does not support. Those are
converted by the inkscape command line and bundled as PNG.
"""

import subprocess
from pathlib import Path
from typing import Optional

from adwaita_themegen.utils.errors import ConversionError, ConverterNotFoundError
from adwaita_themegen.utils.logging import get_logger

logger = get_logger(__name__)


class InkscapeConverter:
    """Run inkscape to rasterize an SVG next to the original file."""

    def __init__(self, executable: Optional[str] = None, timeout: float = 120.0) -> None:
        """
        Args:
            executable: Path to inkscape, None if it is not installed
            timeout: Seconds to wait for one conversion
        """
        self.executable = executable
        self.timeout = timeout

    @property
    def available(self) -> bool:
        return self.executable is not None

    def svg_to_png(self, svg_path: Path) -> Path:
        """
        Convert an SVG file to a PNG file in the same directory.

        Returns:
            Path of the PNG file

        Raises:
            ConverterNotFoundError: If inkscape is not installed
            ConversionError: If inkscape fails or produces no file
        """
        if not self.executable:
            raise ConverterNotFoundError("inkscape")

        svg_path = Path(svg_path)
        png_path = svg_path.with_suffix(".png")

        logger.info(f"Converting {svg_path.name} to PNG")
        try:
            completed = subprocess.run(
                [
                    self.executable,
                    "--export-type=png",
                    "--export-area-drawing",
                    "--vacuum-defs",
                    str(svg_path),
                ],
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ConversionError(f"Failed to run inkscape on {svg_path.name}: {e}")

        if completed.returncode != 0:
            raise ConversionError(
                f"inkscape failed on {svg_path.name}",
                {"returncode": completed.returncode, "stderr": completed.stderr.strip()},
            )
        if not png_path.is_file():
            raise ConversionError(f"inkscape produced no PNG for {svg_path.name}")

        return png_path
