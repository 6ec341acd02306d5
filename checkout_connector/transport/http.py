"""httpx-backed transport.

``httpx.Client`` is meant to be long-lived and reused.  A single shared
client is managed by the module; see ``get_http_client`` and
``close_http_client`` for lifecycle hooks.  Redirect following is disabled
on the client because the connector interprets 3xx responses itself.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from checkout_connector.core.config import settings
from checkout_connector.core.errors import TransportError
from checkout_connector.models.http import HttpResponse, PreparedRequest

logger = logging.getLogger(__name__)

# Module-level shared client
_http_client: Optional[httpx.Client] = None


def get_http_client() -> httpx.Client:
    """Return the shared Client.  Creates one if missing."""
    global _http_client  # noqa: PLW0603
    if _http_client is None or _http_client.is_closed:
        _http_client = httpx.Client(
            timeout=httpx.Timeout(settings.http_timeout),
            follow_redirects=False,
            verify=settings.http_verify_ssl,
        )
    return _http_client


def close_http_client() -> None:
    """Close the shared Client gracefully."""
    global _http_client  # noqa: PLW0603
    if _http_client is not None and not _http_client.is_closed:
        _http_client.close()
        _http_client = None
        logger.info("HTTP client closed.")


class HttpTransport:
    """Sends connector requests over httpx.

    Pass *client* to use a caller-managed ``httpx.Client`` (custom proxies,
    mounts, test transports); otherwise the module's shared client is used.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client

    def create_request(self, url: str) -> PreparedRequest:
        return PreparedRequest(url=url)

    def send(self, request: PreparedRequest, payload: bytes) -> HttpResponse:
        client = self._client if self._client is not None else get_http_client()
        try:
            response = client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=payload or None,
            )
        except httpx.InvalidURL as exc:
            raise TransportError(f"Invalid URL '{request.url}': {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"Request error for '{request.url}': {exc}") from exc

        return HttpResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=response.content,
            url=str(response.request.url),
        )
