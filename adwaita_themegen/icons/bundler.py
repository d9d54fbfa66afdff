"""
Collect the catalog's icons from an extracted icon theme.
"""

from pathlib import Path
from typing import AbstractSet, Dict, Optional

from adwaita_themegen.icons.catalog import FORCE_PNG, ICONS
from adwaita_themegen.icons.converter import InkscapeConverter
from adwaita_themegen.models import IconSample
from adwaita_themegen.utils.errors import ConversionError
from adwaita_themegen.utils.logging import get_logger

logger = get_logger(__name__)


def collect_icons(
    theme_dir: Path,
    converter: InkscapeConverter,
    catalog: Optional[Dict[str, str]] = None,
    force_png: Optional[AbstractSet[str]] = None,
) -> Dict[str, IconSample]:
    """
    Read every mapped icon from the extracted "Adwaita" directory.

    Icons without a path are skipped. Icons that cannot be converted or read
    are logged and skipped, the rest of the catalog is still bundled.

    Args:
        theme_dir: The extracted "Adwaita" directory
        converter: Converter used for the force-PNG icons
        catalog: Fyne icon name to relative path (defaults to ICONS)
        force_png: Icons to bundle as PNG (defaults to FORCE_PNG)

    Returns:
        Icons keyed by Fyne icon name
    """
    catalog = ICONS if catalog is None else catalog
    force_png = FORCE_PNG if force_png is None else force_png

    icons: Dict[str, IconSample] = {}
    for name, relative_path in sorted(catalog.items()):
        if not relative_path:
            continue

        icon_path = Path(theme_dir) / relative_path
        if name in force_png:
            try:
                icon_path = converter.svg_to_png(icon_path)
            except ConversionError as e:
                logger.error(f"Error bundling {name} from {icon_path}: {e}")
                continue

        try:
            content = icon_path.read_bytes()
        except OSError as e:
            logger.error(f"Error bundling {name} from {icon_path}: {e}")
            continue

        icons[name] = IconSample(static_name=icon_path.name, content=content)

    logger.info(f"Bundled {len(icons)} icons")
    return icons
