"""REST client for the remote video store."""

from typing import Any

import httpx

from reel_scheduler.adapters.remote.base import (
    RemoteCollection,
    RemoteSaveResult,
    RemoteStore,
    RemoteStoreError,
)
from reel_scheduler.config import settings
from reel_scheduler.domain.models import CollectionSnapshot
from reel_scheduler.logging import get_logger

logger = get_logger(__name__)


class HttpRemoteStore(RemoteStore):
    """Talks to ``GET/POST {base_url}/videos`` and ``GET {base_url}/health``."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API base URL. Defaults to settings.api_base_url
            timeout: Request timeout in seconds. Defaults to settings.remote_timeout_seconds
            client: Pre-built client (e.g. with an ASGI transport for tests)
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.remote_timeout_seconds
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
            )
        return self._client

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = await self._get_client().request(method, url, **kwargs)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise RemoteStoreError(f"HTTP {e.response.status_code} from {method} {path}") from e
        except httpx.HTTPError as e:
            raise RemoteStoreError(f"{method} {path} failed: {e!r}") from e
        except ValueError as e:
            raise RemoteStoreError(f"Invalid JSON from {method} {path}") from e

        if not isinstance(data, dict):
            raise RemoteStoreError(f"Unexpected response shape from {method} {path}")
        return data

    async def fetch_all(self) -> RemoteCollection:
        data = await self._request("GET", "/videos")
        videos = data.get("videos") or []
        if not isinstance(videos, list):
            raise RemoteStoreError("Remote 'videos' field is not a list")

        logger.debug("remote_fetch_completed", count=len(videos))
        return RemoteCollection(
            videos=videos,
            version=data.get("version"),
            last_updated=data.get("lastUpdated"),
        )

    async def replace_all(self, snapshot: CollectionSnapshot) -> RemoteSaveResult:
        data = await self._request("POST", "/videos", json=snapshot.to_remote_payload())
        return RemoteSaveResult(
            success=bool(data.get("success", False)),
            message=data.get("message"),
            last_updated=data.get("lastUpdated"),
        )

    async def health(self) -> bool:
        response = await self._get_client().get(f"{self.base_url}/health")
        return response.is_success

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
