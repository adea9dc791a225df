"""Production registry sources: local file and remote URL."""

import logging
from pathlib import Path

import httpx

from emojidb.integrations.registry_source.abc import RegistrySource

logger = logging.getLogger(__name__)

FETCH_TIMEOUT_SECONDS = 30.0


class LocalRegistrySource(RegistrySource):
    """Reads the registry from a file on disk."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def is_local(self) -> bool:
        return True

    def read_text(self) -> str:
        logger.debug("Reading registry from %s", self._path)
        return self._path.read_text(encoding="utf-8")

    def describe(self) -> str:
        return str(self._path)


class RemoteRegistrySource(RegistrySource):
    """Fetches the registry over HTTP.

    The httpx client can be injected so tests can supply a MockTransport.
    """

    def __init__(self, url: str, client: httpx.Client | None = None) -> None:
        self._url = url
        self._client = client

    @property
    def is_local(self) -> bool:
        return False

    def read_text(self) -> str:
        logger.debug("Fetching registry from %s", self._url)
        if self._client is not None:
            return self._fetch(self._client)
        with httpx.Client(follow_redirects=True, timeout=FETCH_TIMEOUT_SECONDS) as client:
            return self._fetch(client)

    def _fetch(self, client: httpx.Client) -> str:
        response = client.get(self._url)
        response.raise_for_status()
        logger.debug("Fetched %d bytes (status %d)", len(response.content), response.status_code)
        response.encoding = "utf-8"
        return response.text

    def describe(self) -> str:
        return self._url
