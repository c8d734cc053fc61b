"""
Dataset source that fetches the JSON documents over HTTP.

Paths are resolved relative to a base URL, mirroring how the site's page
fetches ``./data/*.json`` relative to its own location.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from pathfinder.storage.source import DatasetLoadError, DatasetSource

logger = logging.getLogger(__name__)


class HttpDatasetSource(DatasetSource):
    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        # A trailing slash keeps the last path segment when joining.
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        # timeout=None disables httpx's default 5s limit on purpose.
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            follow_redirects=True,
            timeout=timeout,
            transport=transport,
        )

    async def fetch_json(self, path: str) -> Any:
        relative = path[2:] if path.startswith("./") else path.lstrip("/")
        logger.debug(f"Fetching {self.base_url}{relative}")
        try:
            response = await self._client.get(relative)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DatasetLoadError(path, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise DatasetLoadError(path, f"{e.__class__.__name__}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise DatasetLoadError(path, f"invalid JSON: {e}") from e

    async def aclose(self) -> None:
        await self._client.aclose()

    def describe(self) -> str:
        return self.base_url
