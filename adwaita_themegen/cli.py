"""
Command-line interface for the Adwaita theme generator.

Generates the Fyne theme sources from the libadwaita color documentation and
the Adwaita icon theme.
"""

import asyncio
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from adwaita_themegen.colors.palette import ALPHA_OVERRIDES, STANDARD_COLORS, WIDGET_COLORS
from adwaita_themegen.config import Settings, get_settings
from adwaita_themegen.icons.catalog import FORCE_PNG, ICONS
from adwaita_themegen.models import GenerationResult
from adwaita_themegen.pipeline import create_theme_generator
from adwaita_themegen.utils.errors import ThemeGenError
from adwaita_themegen.utils.logging import setup_logging

# Initialize Typer app and Rich console
app = typer.Typer(
    name="adwaita-themegen",
    help="Generate the Fyne Adwaita theme sources from GNOME resources",
    add_completion=False,
)
console = Console()

OutputDirOption = typer.Option(
    None,
    "--output-dir",
    "-o",
    help="Directory for the generated files (defaults to settings)",
)
NoFormatOption = typer.Option(
    False,
    "--no-format",
    help="Do not run gofmt on the generated files",
)


def _settings_for(output_dir: Optional[Path], no_format: bool) -> Settings:
    settings = get_settings()
    update: Dict[str, Any] = {}
    if output_dir is not None:
        update["output_dir"] = output_dir
    if no_format:
        update["format_output"] = False
    return settings.model_copy(update=update) if update else settings


def _report(results: List[GenerationResult]) -> None:
    for result in results:
        note = "" if result.formatted else " (unformatted)"
        console.print(
            f"[green]✓[/green] Generated {result.path} with {result.entries} entries{note}",
            soft_wrap=True,
        )


def _run(description: str, coro) -> List[GenerationResult]:
    async def _with_progress():
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task(description, total=None)
            result = await coro
        return result if isinstance(result, list) else [result]

    try:
        return asyncio.run(_with_progress())
    except ThemeGenError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)


@app.command()
def colors(
    source: Optional[str] = typer.Option(
        None,
        "--source",
        "-s",
        help="Color page URL or saved HTML file",
    ),
    output_dir: Optional[Path] = OutputDirOption,
    no_format: bool = NoFormatOption,
):
    """Generate the light and dark color schemes."""
    generator = create_theme_generator(_settings_for(output_dir, no_format))
    _report(_run("Generating color schemes...", generator.generate_color_scheme(source)))


@app.command()
def icons(
    source: Optional[str] = typer.Option(
        None,
        "--source",
        "-s",
        help="Icon theme archive URL or local tar file",
    ),
    output_dir: Optional[Path] = OutputDirOption,
    no_format: bool = NoFormatOption,
):
    """Bundle the Adwaita icons as Fyne resources."""
    generator = create_theme_generator(_settings_for(output_dir, no_format))
    _report(_run("Bundling icons...", generator.generate_icons(source)))


@app.command("all")
def generate_all(
    color_source: Optional[str] = typer.Option(
        None,
        "--color-source",
        help="Color page URL or saved HTML file",
    ),
    icons_source: Optional[str] = typer.Option(
        None,
        "--icons-source",
        help="Icon theme archive URL or local tar file",
    ),
    output_dir: Optional[Path] = OutputDirOption,
    no_format: bool = NoFormatOption,
):
    """Generate both the color schemes and the icons."""
    generator = create_theme_generator(_settings_for(output_dir, no_format))
    _report(
        _run(
            "Generating Adwaita theme...",
            generator.generate_all(color_source=color_source, icons_source=icons_source),
        )
    )


@app.command()
def mappings():
    """Show the Fyne to Adwaita name tables."""
    table = Table(title=f"Colors ({len(WIDGET_COLORS) + len(STANDARD_COLORS)})")
    table.add_column("Fyne name", style="cyan")
    table.add_column("Adwaita name")
    table.add_column("Kind", style="dim")

    for name, adw_name in sorted(WIDGET_COLORS.items()):
        table.add_row(name, f"@{adw_name}", "widget")
    for name, adw_names in sorted(STANDARD_COLORS.items()):
        kind = "palette"
        if name in ALPHA_OVERRIDES:
            kind += f", alpha 0x{ALPHA_OVERRIDES[name]:02x}"
        table.add_row(name, ", ".join(f"@{n}" for n in adw_names.split(",")), kind)
    console.print(table)

    mapped = {name: path for name, path in ICONS.items() if path}
    table = Table(title=f"Icons ({len(mapped)} of {len(ICONS)} mapped)")
    table.add_column("Fyne name", style="cyan")
    table.add_column("Adwaita file")
    table.add_column("Format", justify="center")

    for name, path in sorted(ICONS.items()):
        if not path:
            table.add_row(name, "[dim]not defined[/dim]", "")
            continue
        table.add_row(name, path, "PNG" if name in FORCE_PNG else "SVG")
    console.print(table)


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write JSON logs to this file"),
):
    """Adwaita theme generator for Fyne."""
    log_level = "DEBUG" if debug else None
    try:
        setup_logging(log_level=log_level, log_file_path=log_file)
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid settings: {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
