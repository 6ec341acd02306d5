"""Protocol engine applying HTTP verbs to checkout resources.

One ``apply`` call resolves the target and payload, signs and dispatches
the request, then interprets the response status:

======= =====================================================================
Status  Effect
======= =====================================================================
4xx/5xx ``RemoteRejectionError``; nothing else happens.
200     Body decoded and the resource document replaced.
201     Resource location set from ``Location``.
301     Resource location set from ``Location``; followed when the verb is GET.
302     Followed when the verb is GET.
303     Always followed, as GET.
other   Returned unchanged.
======= =====================================================================

Redirects are followed in a loop (never recursion).  Every redirect target
is recorded; reaching an already-visited target raises
``RedirectLoopError`` before another request is sent.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

import httpx

from checkout_connector.connector.user_agent import UserAgent
from checkout_connector.core.config import settings
from checkout_connector.core.errors import (
    ConfigurationError,
    MalformedResponseError,
    RedirectLoopError,
    RemoteRejectionError,
)
from checkout_connector.core.signing import Sha256Signer, Signer
from checkout_connector.models.document import Document
from checkout_connector.models.http import (
    ApplyOptions,
    HttpMethod,
    HttpResponse,
    PreparedRequest,
)
from checkout_connector.resources.base import Resource
from checkout_connector.transport.base import Transport
from checkout_connector.transport.http import HttpTransport

logger = logging.getLogger(__name__)

# A handler returns the URL to follow next, or None when the call is done.
_Handler = Callable[["BasicConnector", HttpResponse, HttpMethod, Resource], "str | None"]


class BasicConnector:
    """Signs requests with a shared secret and follows redirects safely."""

    def __init__(self, transport: Transport, signer: Signer, secret: str) -> None:
        self._transport = transport
        self._signer = signer
        self._secret = secret
        self.user_agent = UserAgent()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def apply(
        self,
        method: HttpMethod | str,
        resource: Resource,
        options: ApplyOptions | None = None,
    ) -> HttpResponse:
        """Apply *method* to *resource* and return the terminal response.

        Raises:
            ConfigurationError: no URL in *options* nor on the resource.
            RemoteRejectionError: a response carried a 4xx/5xx status.
            MalformedResponseError: a 200 body did not decode, or a
                response to act on had no ``Location`` header.
            RedirectLoopError: a redirect revisited a URL of this call.
            TransportError: the transport could not deliver a request.
        """
        method = HttpMethod(method.upper())
        options = options or {}
        visited: list[str] = []

        while True:
            response = self._send(method, resource, options)
            target = self._handle_response(response, method, resource)
            if target is None:
                return response

            if target in visited:
                raise RedirectLoopError(target)
            visited.append(target)
            logger.debug("Following %s redirect to %s", response.status_code, target)

            method = HttpMethod.GET
            options = {"url": target}

    # ------------------------------------------------------------------
    # Request construction
    # ------------------------------------------------------------------

    def _send(
        self, method: HttpMethod, resource: Resource, options: ApplyOptions
    ) -> HttpResponse:
        url = self._get_url(resource, options)

        payload = b""
        if method is HttpMethod.POST:
            payload = self._get_data(resource, options).encode()

        request = self._create_request(resource, method, payload, url)
        logger.debug("%s %s (%d byte payload)", method.value, url, len(payload))
        return self._transport.send(request, payload)

    @staticmethod
    def _get_url(resource: Resource, options: ApplyOptions) -> str:
        url = options.get("url") or resource.location
        if not url:
            raise ConfigurationError(
                "No URL to request: pass options['url'] or set the resource location."
            )
        return str(url)

    @staticmethod
    def _get_data(resource: Resource, options: ApplyOptions) -> Document:
        data = options.get("data")
        if data is None:
            return resource.marshal()
        return data if isinstance(data, Document) else Document(data)

    def _create_request(
        self,
        resource: Resource,
        method: HttpMethod,
        payload: bytes,
        url: str,
    ) -> PreparedRequest:
        request = self._transport.create_request(url)
        request.method = method.value

        signature = self._signer.sign(payload, self._secret)
        request.headers["Authorization"] = f"Klarna {signature}"
        request.headers["Accept"] = resource.content_type
        request.headers["User-Agent"] = str(self.user_agent)
        if payload:
            request.headers["Content-Type"] = resource.content_type

        return request

    # ------------------------------------------------------------------
    # Response interpretation
    # ------------------------------------------------------------------

    def _handle_response(
        self, response: HttpResponse, method: HttpMethod, resource: Resource
    ) -> str | None:
        self._verify_response(response)
        handler = self._HANDLERS.get(response.status_code)
        if handler is None:
            return None
        return handler(self, response, method, resource)

    @staticmethod
    def _verify_response(response: HttpResponse) -> None:
        if 400 <= response.status_code <= 599:
            raise RemoteRejectionError(response.status_code, response.url)

    @staticmethod
    def _location(response: HttpResponse) -> str:
        location = response.header("Location")
        if not location:
            raise MalformedResponseError(
                f"HTTP {response.status_code} response without a Location header."
            )
        return str(httpx.URL(response.url).join(location))

    def _on_ok(self, response: HttpResponse, method: HttpMethod, resource: Resource) -> None:
        resource.parse(Document.decode(response.body))

    def _on_created(
        self, response: HttpResponse, method: HttpMethod, resource: Resource
    ) -> None:
        resource.location = self._location(response)

    def _on_moved_permanently(
        self, response: HttpResponse, method: HttpMethod, resource: Resource
    ) -> str | None:
        url = self._location(response)
        resource.location = url
        return url if method is HttpMethod.GET else None

    def _on_found(
        self, response: HttpResponse, method: HttpMethod, resource: Resource
    ) -> str | None:
        if method is not HttpMethod.GET:
            return None
        return self._location(response)

    def _on_see_other(
        self, response: HttpResponse, method: HttpMethod, resource: Resource
    ) -> str:
        return self._location(response)

    _HANDLERS: Mapping[int, _Handler] = {
        200: _on_ok,
        201: _on_created,
        301: _on_moved_permanently,
        302: _on_found,
        303: _on_see_other,
    }


def create_connector(
    secret: str | None = None,
    transport: Transport | None = None,
) -> BasicConnector:
    """Build a connector signing with *secret* (default: configured secret).

    Raises:
        ConfigurationError: if no shared secret is given or configured.
    """
    if secret is None:
        secret = settings.shared_secret.get_secret_value()
    if not secret:
        raise ConfigurationError(
            "No shared secret: pass one or set KCO_SHARED_SECRET."
        )
    return BasicConnector(transport or HttpTransport(), Sha256Signer(), secret)
