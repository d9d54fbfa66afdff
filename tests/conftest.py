"""
Shared fixtures: a synthetic color page and an in-memory icon archive.
"""

import io
import tarfile
from pathlib import Path
from typing import Dict, Tuple

import pytest

from adwaita_themegen.config import Settings, reset_settings

ARCHIVE_ROOT = "adwaita-icon-theme-master-Adwaita"

# widget colors: (light, dark), as written on the libadwaita 1.0 page
WIDGET_VALUES: Dict[str, Tuple[str, str]] = {
    "window_bg_color": ("#fafafa", "#242424"),
    "window_fg_color": ("rgba(0, 0, 0, 0.8)", "#ffffff"),
    "popover_bg_color": ("#ffffff", "#383838"),
    "headerbar_bg_color": ("#ebebeb", "#303030"),
    "view_bg_color": ("#ffffff", "#1e1e1e"),
    "accent_bg_color": ("#3584e4", "#3584e4"),
    "shade_color": ("rgba(0, 0, 0, 0.07)", "rgba(0, 0, 0, 0.36)"),
    "success_bg_color": ("#26a269", "#26a269"),
    "warning_bg_color": ("#cd9309", "#cd9309"),
    "error_bg_color": ("#c01c28", "#c01c28"),
}

PALETTE_VALUES: Dict[str, str] = {
    "red_3": "#e01b24",
    "red_4": "#c01c28",
    "orange_3": "#ff7800",
    "yellow_3": "#f6d32d",
    "green_4": "#2ec27e",
    "green_5": "#26a269",
    "blue_3": "#3584e4",
    "purple_3": "#9141ac",
    "brown_3": "#986a44",
    "dark_2": "#5e5c64",
    "dark_5": "#000000",
    "light_1": "#ffffff",
}

SYMBOLIC_SVG = b'<svg xmlns="http://www.w3.org/2000/svg"><path d="m 1 1 h 14"/></svg>\n'
SCALABLE_SVG = b'<svg xmlns="http://www.w3.org/2000/svg"><rect width="64" height="64"/></svg>\n'


def build_color_page(widget_values=None, palette_values=None) -> str:
    """Render a page shaped like the libadwaita named colors documentation."""
    widget_values = WIDGET_VALUES if widget_values is None else widget_values
    palette_values = PALETTE_VALUES if palette_values is None else palette_values

    parts = ["<html><body>", "<h2>Standalone Colors</h2>", "<table>"]
    parts.append("<tr>\n<th>Name</th>\n<th>Light</th>\n<th>Dark</th>\n</tr>")
    for name, (light, dark) in widget_values.items():
        parts.append(
            f"<tr>\n<td><tt>&#64;{name}</tt></td>\n"
            f"<td><tt>{light}</tt></td>\n<td><tt>{dark}</tt></td>\n</tr>"
        )
    parts.append("</table>")
    parts.append("<h2>Palette Colors</h2>")
    parts.append("<table>")
    for name, value in palette_values.items():
        parts.append(f"<tr>\n<td><tt>@{name}</tt></td>\n<td><tt>{value}</tt></td>\n</tr>")
    parts.append("</table></body></html>")
    return "\n".join(parts)


def build_icon_archive(files: Dict[str, bytes], root: str = ARCHIVE_ROOT) -> bytes:
    """Create a tar archive laid out like the GitLab export of the icon theme."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w") as archive:
        directory = tarfile.TarInfo(f"{root}/")
        directory.type = tarfile.DIRTYPE
        archive.addfile(directory)
        for relative_path, content in files.items():
            info = tarfile.TarInfo(f"{root}/Adwaita/{relative_path}")
            info.size = len(content)
            archive.addfile(info, io.BytesIO(content))
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from the developer's environment and cached settings."""
    for name in ("ADWAITA_OUTPUT_DIR", "ADWAITA_FORMAT_OUTPUT", "ADWAITA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def color_page_html() -> str:
    return build_color_page()


@pytest.fixture
def icon_files() -> Dict[str, bytes]:
    return {
        "symbolic/ui/window-close-symbolic.svg": SYMBOLIC_SVG,
        "symbolic/actions/edit-delete-symbolic.svg": SYMBOLIC_SVG,
        "scalable/places/folder.svg": SCALABLE_SVG,
        "scalable/mimetypes/audio-x-generic.svg": SCALABLE_SVG,
    }


@pytest.fixture
def icon_archive(icon_files) -> bytes:
    return build_icon_archive(icon_files)


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings writing to a temporary directory, without gofmt or inkscape."""
    return Settings(
        _env_file=None,
        output_dir=tmp_path / "out",
        format_output=False,
        inkscape_path=None,
        gofmt_path=None,
    )


@pytest.fixture
def saved_sources(tmp_path, color_page_html, icon_archive) -> Tuple[Path, Path]:
    """The color page and icon archive saved as local files."""
    page = tmp_path / "named-colors.html"
    page.write_text(color_page_html, encoding="utf-8")
    archive = tmp_path / "adwaita-icon-theme-master.tar"
    archive.write_bytes(icon_archive)
    return page, archive
