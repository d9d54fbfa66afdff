"""
Render the Go sources from extracted records.
"""

from typing import Dict

from jinja2 import Environment, StrictUndefined, TemplateError

from adwaita_themegen.codegen.gosyntax import go_nrgba, go_quote
from adwaita_themegen.codegen.templates import COLOR_SOURCE_TEMPLATE, ICON_SOURCE_TEMPLATE
from adwaita_themegen.models import ColorSchemes, IconSample, Variant
from adwaita_themegen.utils.errors import TemplateRenderError


class SourceRenderer:
    """Render the colors and icons files with Jinja2."""

    def __init__(self, package: str = "theme", command: str = "go generate ./theme/...") -> None:
        """
        Args:
            package: Go package of the generated files
            command: Regeneration command written in the file headers
        """
        self.package = package
        self.command = command
        self.env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters["go_quote"] = go_quote
        self.env.filters["nrgba"] = go_nrgba

    def _render(self, template_source: str, name: str, **context) -> str:
        try:
            template = self.env.from_string(template_source)
            return template.render(package=self.package, command=self.command, **context)
        except TemplateError as e:
            raise TemplateRenderError(f"Failed to render {name}: {e}", {"template": name})

    def render_colors(self, schemes: ColorSchemes, source_url: str) -> str:
        """Source of the color scheme file, entries sorted by color name."""
        return self._render(
            COLOR_SOURCE_TEMPLATE,
            "colors",
            source_url=source_url,
            dark_scheme=schemes.sorted_items(Variant.DARK),
            light_scheme=schemes.sorted_items(Variant.LIGHT),
        )

    def render_icons(self, icons: Dict[str, IconSample]) -> str:
        """Source of the icons file, entries sorted by icon name."""
        return self._render(ICON_SOURCE_TEMPLATE, "icons", icons=sorted(icons.items()))
