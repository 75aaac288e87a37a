"""Episode data retrieval.

Loads the episodes document from a remote URL or a local file and degrades
every failure into an empty collection plus a logged diagnostic.
"""

import json
import logging
from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError

from podcards.episodes.models import EpisodeRecord, EpisodesDocument
from podcards.utils.errors import EpisodeDecodeError, EpisodeFetchError, EpisodeSourceError

logger = logging.getLogger(__name__)


def is_remote_endpoint(endpoint: str) -> bool:
    """Check whether an endpoint is an HTTP(S) URL rather than a local path."""
    return endpoint.startswith(("http://", "https://"))


class EpisodeSource:
    """Fetch episode records from a fixed endpoint.

    The endpoint is either an ``http(s)://`` URL, fetched with httpx, or a
    site-relative path such as ``/episodes.json`` resolved against the
    static directory of the build.

    Example:
        >>> source = EpisodeSource("/episodes.json", base_dir=Path("public"))
        >>> episodes = await source.fetch_episodes()
    """

    def __init__(
        self,
        endpoint: str,
        base_dir: Path | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the episode source.

        Args:
            endpoint: URL or site-relative path of the episodes document
            base_dir: Directory local paths are resolved against (default: cwd)
            timeout: HTTP timeout in seconds (None: no timeout)
            transport: Optional httpx transport, used to substitute the network
        """
        self.endpoint = endpoint
        self.base_dir = base_dir or Path.cwd()
        self.timeout = timeout
        self.transport = transport

    @property
    def local_path(self) -> Path:
        """Filesystem location of a local endpoint."""
        return self.base_dir / self.endpoint.lstrip("/")

    async def fetch_episodes(self) -> list[EpisodeRecord]:
        """Fetch the episode collection.

        Never raises. No retries are attempted.

        Returns:
            Episode records in source order, or an empty list on any failure
        """
        try:
            payload = await self._load_payload()
            document = self._decode(payload)
        except EpisodeSourceError as e:
            logger.error(f"Error loading episodes from {self.endpoint}: {e}")
            return []

        logger.debug(f"Loaded {len(document.episodes)} episode(s) from {self.endpoint}")
        return list(document.episodes)

    async def _load_payload(self) -> str:
        if is_remote_endpoint(self.endpoint):
            return await self._fetch_remote()
        return self._read_local()

    async def _fetch_remote(self) -> str:
        """Fetch the document over HTTP.

        Raises:
            EpisodeFetchError: On transport failure or non-success status
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True, transport=self.transport
            ) as client:
                response = await client.get(self.endpoint)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            raise EpisodeFetchError(
                f"Failed to fetch episodes: {e.response.status_code}"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise EpisodeFetchError(f"Failed to fetch episodes: {e}") from e

    def _read_local(self) -> str:
        """Read the document from disk.

        Raises:
            EpisodeFetchError: If the file is missing or unreadable
        """
        path = self.local_path
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise EpisodeFetchError(f"Failed to read episodes file {path}: {e}") from e

    def _decode(self, payload: str) -> EpisodesDocument:
        """Parse and validate the episodes document.

        Raises:
            EpisodeDecodeError: If the payload is not valid JSON or has the wrong shape
        """
        try:
            data: Any = json.loads(payload)
        except json.JSONDecodeError as e:
            raise EpisodeDecodeError(f"Invalid JSON in episodes document: {e}") from e

        try:
            return EpisodesDocument.model_validate(data)
        except ValidationError as e:
            raise EpisodeDecodeError(f"Unexpected episodes document shape: {e}") from e
