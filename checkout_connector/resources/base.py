"""Capability every connector-addressable resource must provide.

A resource kind does not inherit from anything; it only needs these four
members to be accepted by ``BasicConnector.apply``::

    class Invoice:
        location: str | None = None
        content_type = "application/vnd.example.invoice-v1+json"

        def marshal(self) -> Document: ...
        def parse(self, document: Document) -> None: ...
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from checkout_connector.models.document import Document


@runtime_checkable
class Resource(Protocol):
    """Remote entity with a location, a media type and a document payload."""

    location: str | None

    @property
    def content_type(self) -> str: ...

    def marshal(self) -> Document: ...

    def parse(self, document: Document) -> None: ...
