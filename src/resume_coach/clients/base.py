"""Shared httpx plumbing for the backend service clients."""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)


def error_detail(response: httpx.Response) -> str | None:
    """Return the service's ``detail`` message from an error body, if any."""
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, str) and detail.strip():
            return detail
    return None


class ServiceClient:
    """Base for clients of the résumé backend.

    A fresh ``httpx.AsyncClient`` is opened per call so one instance can be
    awaited from successive event loops.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict = {
            "base_url": self.base_url,
            "timeout": httpx.Timeout(self.timeout),
        }
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    async def _post(self, path: str, **kwargs) -> httpx.Response:
        """POST to ``path`` under the API base URL. Raises httpx.HTTPError."""
        logger.debug("POST %s%s", self.base_url, path)
        async with self._client() as client:
            return await client.post(path, **kwargs)
