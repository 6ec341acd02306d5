from __future__ import annotations

from typing import Protocol

from checkout_connector.models.http import HttpResponse, PreparedRequest


class Transport(Protocol):
    """Physically delivers a prepared request and returns the raw response.

    Implementations must not follow redirects; the connector does that
    itself so it can apply its own rules and loop detection.
    """

    def create_request(self, url: str) -> PreparedRequest: ...

    def send(self, request: PreparedRequest, payload: bytes) -> HttpResponse: ...
