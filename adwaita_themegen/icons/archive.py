"""
Extraction of the icon theme tar archive.
"""

import gzip
import io
import tarfile
import zlib
from pathlib import Path

from adwaita_themegen.utils.errors import ArchiveError
from adwaita_themegen.utils.logging import get_logger

logger = get_logger(__name__)


def extract_archive(data: bytes, destination: Path) -> int:
    """
    Extract the regular files of a tar archive.

    Directories, links and special files are ignored; parent directories are
    created as needed. Compressed archives are detected automatically.

    Args:
        data: Raw archive content
        destination: Directory to extract into

    Returns:
        Number of files written

    Raises:
        ArchiveError: If the archive is corrupt or a member would be written
            outside of ``destination``
    """
    destination = Path(destination).resolve()
    count = 0

    try:
        with tarfile.open(fileobj=io.BytesIO(data), mode="r:*") as archive:
            for member in archive:
                if not member.isreg():
                    continue

                target = (destination / member.name).resolve()
                if not target.is_relative_to(destination):
                    raise ArchiveError(
                        f"Archive member escapes the destination: {member.name}",
                        {"member": member.name},
                    )

                source = archive.extractfile(member)
                if source is None:
                    continue
                target.parent.mkdir(parents=True, exist_ok=True)
                with source, open(target, "wb") as out:
                    out.write(source.read())
                count += 1
    except (tarfile.TarError, gzip.BadGzipFile, EOFError, zlib.error) as e:
        raise ArchiveError(f"Invalid icon archive: {e}") from e
    except OSError as e:
        raise ArchiveError(f"Cannot extract icon archive: {e}", {"path": e.filename}) from e

    logger.info(f"Extracted {count} files from icon archive")
    return count
