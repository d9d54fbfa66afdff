"""
Format generated Go sources with gofmt and write them to disk.
"""

import subprocess
from pathlib import Path
from typing import Optional, Tuple

from adwaita_themegen.utils.errors import FormatError, OutputWriteError
from adwaita_themegen.utils.logging import get_logger

logger = get_logger(__name__)


def format_go_source(source: str, gofmt: str, timeout: float = 60.0) -> str:
    """
    Pipe a Go source through gofmt.

    Raises:
        FormatError: If gofmt cannot run or rejects the source
    """
    try:
        completed = subprocess.run(
            [gofmt],
            input=source,
            capture_output=True,
            text=True,
            encoding="utf-8",
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise FormatError(f"Failed to run gofmt: {e}")

    if completed.returncode != 0:
        raise FormatError(
            "gofmt rejected the generated source",
            {"stderr": completed.stderr.strip()},
        )
    return completed.stdout


def write_source(
    source: str,
    path: Path,
    gofmt: Optional[str] = None,
    format_output: bool = True,
) -> Tuple[Path, bool]:
    """
    Format and write a generated Go file.

    When formatting is requested but gofmt is not installed, the source is
    written as rendered and a warning is logged.

    Args:
        source: Rendered source
        path: Output file
        gofmt: gofmt executable, None if it is not installed
        format_output: Whether to run gofmt

    Returns:
        The written path and whether the source was formatted

    Raises:
        FormatError: If gofmt rejects the source
        OutputWriteError: If the file cannot be written
    """
    path = Path(path)
    formatted = False

    if format_output:
        if gofmt:
            source = format_go_source(source, gofmt)
            formatted = True
        else:
            logger.warning(f"gofmt not found, writing {path.name} unformatted")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        path.chmod(0o644)
    except OSError as e:
        raise OutputWriteError(f"Failed to write {path}: {e}", {"path": str(path)})

    logger.info(f"Wrote {path}")
    return path, formatted
