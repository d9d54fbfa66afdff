"""
End-to-end generation of the Adwaita theme sources.

This module orchestrates the fetch, extract, map, render and write stages for
both outputs:

- adwaita_colors.go: the colors for the theme as map[fyne.ThemeColorName]color.Color
- adwaita_icons.go: the icons for the theme as fyne.Resource (themed for symbolic icons)
"""

import tempfile
from pathlib import Path
from typing import List, Optional

from adwaita_themegen.codegen.renderer import SourceRenderer
from adwaita_themegen.codegen.writer import write_source
from adwaita_themegen.colors.page import ColorTable
from adwaita_themegen.colors.scheme import build_color_schemes
from adwaita_themegen.config import Settings, get_settings
from adwaita_themegen.icons.archive import extract_archive
from adwaita_themegen.icons.bundler import collect_icons
from adwaita_themegen.icons.converter import InkscapeConverter
from adwaita_themegen.models import GenerationResult
from adwaita_themegen.sources.client import SourceClient
from adwaita_themegen.utils.errors import ArchiveError
from adwaita_themegen.utils.logging import get_logger, log_stage

logger = get_logger(__name__)


class ThemeGenerator:
    """
    Generates the Fyne theme sources from the Adwaita documentation and icons.

    Every run downloads its inputs again; nothing is cached between runs.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[SourceClient] = None,
        renderer: Optional[SourceRenderer] = None,
        converter: Optional[InkscapeConverter] = None,
    ) -> None:
        """
        Initialize the generator with its components.

        All components are optional and are created from settings if not provided.
        """
        self.settings = settings or get_settings()
        self.client = client or SourceClient(settings=self.settings)
        self.renderer = renderer or SourceRenderer(
            package=self.settings.go_package,
            command=self.settings.regenerate_command,
        )
        self.converter = converter or InkscapeConverter(self.settings.find_inkscape())

    def _write(self, source: str, path: Path, entries: int) -> GenerationResult:
        written, formatted = write_source(
            source,
            path,
            gofmt=self.settings.find_gofmt(),
            format_output=self.settings.format_output,
        )
        return GenerationResult(path=written, entries=entries, formatted=formatted)

    @log_stage("colors")
    async def generate_color_scheme(self, source: Optional[str] = None) -> GenerationResult:
        """
        Generate the color scheme file from the Adwaita documentation.

        Downloads the named colors page, extracts the light and dark value of
        every mapped color and writes both schemes.

        Args:
            source: Page URL or saved page path (defaults to settings)

        Returns:
            The written file
        """
        source = source or self.settings.color_page_url

        page = await self.client.fetch_text(source)
        table = ColorTable.from_html(page)
        schemes = build_color_schemes(table)

        code = self.renderer.render_colors(schemes, source_url=self.settings.color_page_url)
        return self._write(code, self.settings.colors_output_path, len(schemes.light))

    @log_stage("icons")
    async def generate_icons(self, source: Optional[str] = None) -> GenerationResult:
        """
        Generate the icons file from the Adwaita icon theme.

        Downloads the theme as a tar file, extracts it in a temporary directory
        and bundles every icon of the catalog.

        Args:
            source: Archive URL or local archive path (defaults to settings)

        Returns:
            The written file
        """
        source = source or self.settings.icons_archive_url

        data = await self.client.fetch(source)

        with tempfile.TemporaryDirectory(prefix="adwaita") as tmp_dir:
            extract_archive(data, Path(tmp_dir))

            theme_dir = Path(tmp_dir) / self.settings.icon_archive_root / "Adwaita"
            if not theme_dir.is_dir():
                raise ArchiveError(
                    f"Icon archive has no {self.settings.icon_archive_root}/Adwaita directory",
                    {"root": self.settings.icon_archive_root},
                )

            if not self.converter.available:
                logger.warning("inkscape not found, icons forced to PNG will be skipped")
            icons = collect_icons(theme_dir, self.converter)

        code = self.renderer.render_icons(icons)
        return self._write(code, self.settings.icons_output_path, len(icons))

    async def generate_all(
        self,
        color_source: Optional[str] = None,
        icons_source: Optional[str] = None,
    ) -> List[GenerationResult]:
        """Generate the colors, then the icons. The first failure aborts the run."""
        return [
            await self.generate_color_scheme(color_source),
            await self.generate_icons(icons_source),
        ]


def create_theme_generator(settings: Optional[Settings] = None) -> ThemeGenerator:
    """
    Create a theme generator with default components.

    Args:
        settings: Settings to use (defaults to the global settings)

    Returns:
        Configured theme generator
    """
    return ThemeGenerator(settings=settings or get_settings())
