# Config
"""
Configuration for the Adwaita theme generator.

Settings are read from the environment (prefix ``ADWAITA_``) and from an
optional ``.env`` file in the working directory.
"""

import logging
import shutil
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# the gnome page describing the colors
ADWAITA_COLOR_PAGE = "https://gnome.pages.gitlab.gnome.org/libadwaita/doc/1.0/named-colors.html"
# gitlab page with the icons, tar file here
ADWAITA_ICONS_ARCHIVE = (
    "https://gitlab.gnome.org/GNOME/adwaita-icon-theme/-/archive/master/"
    "adwaita-icon-theme-master.tar?path=Adwaita"
)


class Settings(BaseSettings):
    """Runtime settings for a generation run."""

    model_config = SettingsConfigDict(
        env_prefix="ADWAITA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    dev_mode: bool = False
    log_file_path: Optional[Path] = None

    # Sources
    color_page_url: str = ADWAITA_COLOR_PAGE
    icons_archive_url: str = ADWAITA_ICONS_ARCHIVE
    icon_archive_root: str = "adwaita-icon-theme-master-Adwaita"
    http_timeout: float = Field(60.0, description="Total timeout of one GET, in seconds")
    user_agent: str = "adwaita-themegen"

    # Output
    output_dir: Path = Path(".")
    colors_output: str = "adwaita_colors.go"
    icons_output: str = "adwaita_icons.go"
    go_package: str = "theme"
    regenerate_command: str = "go generate ./theme/..."

    # External tools
    inkscape_path: Optional[str] = None
    gofmt_path: Optional[str] = None
    format_output: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is one the logging module knows."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("http_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Timeout must be positive."""
        if v <= 0:
            raise ValueError("http_timeout must be positive")
        return v

    @field_validator("colors_output", "icons_output")
    @classmethod
    def validate_go_filename(cls, v: str) -> str:
        """Outputs are Go files."""
        if not v.endswith(".go"):
            raise ValueError("output file names must end with .go")
        return v

    @property
    def colors_output_path(self) -> Path:
        return self.output_dir / self.colors_output

    @property
    def icons_output_path(self) -> Path:
        return self.output_dir / self.icons_output

    def find_inkscape(self) -> Optional[str]:
        """Return the inkscape executable, or None if it is not installed."""
        return self.inkscape_path or shutil.which("inkscape")

    def find_gofmt(self) -> Optional[str]:
        """Return the gofmt executable, or None if it is not installed."""
        return self.gofmt_path or shutil.which("gofmt")

    def get_log_file_path(self) -> Optional[Path]:
        """Return the log file path, creating its directory if needed."""
        if self.log_file_path is None:
            return None
        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)
        return self.log_file_path


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
