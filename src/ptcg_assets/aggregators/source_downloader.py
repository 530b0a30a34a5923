"""Immutable downloading of canonical source images."""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

import httpx

from schemas.manifest import SourceManifest

from ..clients.client import check_response
from ..clients.exceptions import APIError, ConnectionError

logger = logging.getLogger(__name__)


def load_manifest(path: Path) -> SourceManifest:
    """Read a source manifest written by a manifest builder."""
    return SourceManifest.model_validate_json(path.read_text(encoding="utf-8"))


@dataclass
class DownloadSummary:
    """Outcome of downloading a source manifest.

    Attributes:
        fetched: Number of files downloaded during this run
        present: Number of files that already existed and were left alone
    """

    fetched: int = 0
    present: int = 0

    @property
    def total(self) -> int:
        return self.fetched + self.present


class SourceDownloader:
    """Downloads source images exactly once.

    A destination that already exists is never fetched again and never
    overwritten. Failed downloads leave no file behind so that a later run
    retries them.

    Example:
        async with SourceDownloader() as downloader:
            summary = await downloader.download_manifest(manifest, Path("."))
    """

    def __init__(self, http_client: httpx.AsyncClient | None = None, timeout: float = 30.0):
        """Initialize the source downloader.

        Args:
            http_client: Optional HTTP client for downloading sources.
                         If not provided, one will be created internally.
            timeout: Request timeout in seconds for an owned client
        """
        self._client = http_client
        self._owns_client = http_client is None
        self.timeout = timeout

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "SourceDownloader":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def download(self, url: str, destination: Path) -> bool:
        """Download a URL to a path unless the path already exists.

        Args:
            url: URL to download from
            destination: Local file path to save to

        Returns:
            True if the file was fetched, False if it was already present

        Raises:
            NotFoundError: If the URL returns 404
            RateLimitError: If the URL returns 429
            APIError: If the URL returns any other non-2xx status
            ConnectionError: If there's a network error
            OSError: If the file cannot be written
        """
        if await asyncio.to_thread(destination.exists):
            logger.debug(f"Already present: {destination} ({url})")
            return False

        client = self._get_client()
        try:
            response = await client.get(url)
        except httpx.RequestError as e:
            await self._discard(destination)
            raise ConnectionError(f"Failed to fetch {url}: {e}", url=url) from e

        try:
            check_response(response)
        except APIError:
            await self._discard(destination)
            raise

        try:
            await asyncio.to_thread(destination.write_bytes, response.content)
        except OSError:
            await self._discard(destination)
            raise

        logger.debug(f"Downloaded {url} to {destination}")
        return True

    async def download_manifest(self, manifest: SourceManifest, root: Path) -> DownloadSummary:
        """Ensure every file in a manifest exists, one download at a time.

        Downloads run sequentially to keep the load on the remote origin
        bounded.

        Args:
            manifest: Mapping of root-relative file path to URL
            root: Directory the manifest paths are relative to

        Returns:
            DownloadSummary with the number of fetched and present files
        """
        summary = DownloadSummary()
        total = len(manifest)

        for index, (file, url) in enumerate(manifest.items(), start=1):
            logger.info(f"[{index}/{total}] {file}")
            if await self.download(url, root / file):
                summary.fetched += 1
            else:
                summary.present += 1

        logger.info(
            f"Sources complete: {summary.fetched} downloaded, "
            f"{summary.present} already present"
        )
        return summary

    async def _discard(self, destination: Path) -> None:
        """Remove a partial download."""
        await asyncio.to_thread(destination.unlink, missing_ok=True)
