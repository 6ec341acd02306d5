from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypedDict

import httpx

from checkout_connector.models.document import Document


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class ApplyOptions(TypedDict, total=False):
    """Per-call overrides accepted by ``BasicConnector.apply``.

    ``url`` replaces the resource location as the target, ``data``
    replaces the resource document as the POST payload.
    """

    url: str
    data: Mapping[str, Any] | Document


@dataclass
class PreparedRequest:
    """Request handle created by a transport and filled in by the connector."""

    url: str
    method: str = HttpMethod.GET.value
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpResponse:
    """Status, headers and raw body of a single HTTP exchange."""

    status_code: int
    headers: httpx.Headers
    body: bytes
    url: str

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup; ``None`` when absent."""
        return self.headers.get(name)
