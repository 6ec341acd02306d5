"""Exceptions raised by the checkout connector.

Every failure of :meth:`BasicConnector.apply` derives from
``ConnectorError`` so callers can catch the whole family at once.
"""

from __future__ import annotations


class ConnectorError(Exception):
    """Base class for connector failures."""


class RemoteRejectionError(ConnectorError):
    """The remote API answered with a 4xx or 5xx status."""

    def __init__(self, status_code: int, url: str | None = None) -> None:
        message = f"Remote API rejected the request with HTTP {status_code}"
        if url:
            message = f"{message} ({url})"
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class MalformedResponseError(ConnectorError):
    """A response could not be interpreted (bad body or missing Location)."""


class RedirectLoopError(ConnectorError):
    """A redirect pointed at a URL already visited during the same call."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Infinite redirect loop detected at {url}")
        self.url = url


class ConfigurationError(ConnectorError):
    """The call cannot be made as configured (e.g. no target URL)."""


class TransportError(ConnectorError):
    """The request could not be delivered to the remote API."""


class DocumentKeyError(KeyError):
    """Lookup of a key that is not present in a document."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key not found in document: {self.key!r}"
