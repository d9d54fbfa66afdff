"""
HTTP client for the documentation page and the icon archive.

Each resource is retrieved with a single GET. Sources that name an existing
local file are read from disk, which allows offline builds from a saved page
or a previously downloaded archive.
"""

import asyncio
from pathlib import Path
from typing import Optional

import aiohttp

from adwaita_themegen.config import Settings, get_settings
from adwaita_themegen.utils.errors import FetchError
from adwaita_themegen.utils.logging import get_logger

logger = get_logger(__name__)


class SourceClient:
    """Fetch raw input for the generators."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            timeout: Total timeout of one request in seconds (defaults to settings)
            user_agent: User-Agent header (defaults to settings)
            settings: Settings to read defaults from
        """
        self.settings = settings or get_settings()
        self.timeout = timeout or self.settings.http_timeout
        self.user_agent = user_agent or self.settings.user_agent

    @staticmethod
    def _local_path(source: str) -> Optional[Path]:
        if source.startswith(("http://", "https://")):
            return None
        path = Path(source.removeprefix("file://"))
        return path if path.is_file() else None

    async def fetch(self, source: str) -> bytes:
        """
        Retrieve the raw bytes of a source.

        Args:
            source: URL or local file path

        Returns:
            The response body or file content

        Raises:
            FetchError: On transport errors, timeouts or a non-2xx status
        """
        local = self._local_path(source)
        if local is not None:
            logger.info(f"Reading {local}")
            try:
                return local.read_bytes()
            except OSError as e:
                raise FetchError(source, str(e))

        logger.info(f"Downloading {source}")
        try:
            async with aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={"User-Agent": self.user_agent},
            ) as session:
                async with session.get(source) as response:
                    if response.status >= 300:
                        raise FetchError(source, f"HTTP {response.status} {response.reason}", response.status)
                    body = await response.read()
        except aiohttp.ClientError as e:
            raise FetchError(source, str(e) or type(e).__name__)
        except asyncio.TimeoutError:
            raise FetchError(source, f"timed out after {self.timeout}s")

        logger.debug(f"Fetched {len(body)} bytes from {source}", extra={"source": source})
        return body

    async def fetch_text(self, source: str) -> str:
        """Retrieve a source and decode it as UTF-8."""
        data = await self.fetch(source)
        return data.decode("utf-8", errors="replace")
