from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import httpx
import pytest
import respx

from checkout_connector.connector.basic import BasicConnector
from checkout_connector.core.errors import RemoteRejectionError
from checkout_connector.models.document import Document
from checkout_connector.models.http import HttpMethod
from checkout_connector.resources.order import Order
from checkout_connector.services.order.service import OrderService

_BASE = "https://api.example/checkout/orders"
_ORDER = "https://api.example/checkout/orders/ABC123"


# ---------------------------------------------------------------------------
# OrderService unit tests
# ---------------------------------------------------------------------------


class TestOrderService:
    @pytest.fixture
    def connector(self):
        return MagicMock(spec=BasicConnector)

    @pytest.fixture
    def service(self, connector):
        return OrderService(connector)

    def test_create_posts_to_base_uri(self, service, connector):
        with patch("checkout_connector.services.order.service.settings") as mock_settings:
            mock_settings.base_uri = _BASE
            order = service.create({"purchase_country": "SE"})

        method, resource, options = connector.apply.call_args.args
        assert method is HttpMethod.POST
        assert resource is order
        assert options == {"url": _BASE}
        assert order.get_value("purchase_country") == "SE"

    def test_fetch_gets_order_location(self, service, connector):
        order = service.fetch(_ORDER)
        connector.apply.assert_called_once_with(HttpMethod.GET, order)
        assert order.location == _ORDER

    def test_update_sends_given_data(self, service, connector):
        order = Order({"id": "1"}, location=_ORDER)
        result = service.update(order, {"status": "created"})
        connector.apply.assert_called_once_with(
            HttpMethod.POST, order, {"data": {"status": "created"}}
        )
        assert result is order

    def test_connector_errors_propagate(self, service, connector):
        connector.apply.side_effect = RemoteRejectionError(402)
        with pytest.raises(RemoteRejectionError) as exc_info:
            service.fetch(_ORDER)
        assert exc_info.value.status_code == 402


# ---------------------------------------------------------------------------
# End-to-end order flow over the httpx transport
# ---------------------------------------------------------------------------


class TestOrderFlow:
    @respx.mock
    def test_create_fetch_update(self, connector):
        created = respx.post(_BASE).mock(
            return_value=httpx.Response(201, headers={"Location": _ORDER})
        )
        respx.get(_ORDER).mock(
            return_value=httpx.Response(
                200, content=b'{"id":"ABC123","status":"checkout_incomplete"}'
            )
        )
        updated = respx.post(_ORDER).mock(
            return_value=httpx.Response(
                200, content=b'{"id":"ABC123","status":"created"}'
            )
        )
        service = OrderService(connector)

        with patch("checkout_connector.services.order.service.settings") as mock_settings:
            mock_settings.base_uri = _BASE
            order = service.create({"purchase_country": "SE", "purchase_currency": "SEK"})
        assert order.location == _ORDER
        assert json.loads(created.calls.last.request.content)["purchase_currency"] == "SEK"

        order = service.fetch(order.location)
        assert order.get_value("status") == "checkout_incomplete"

        service.update(order, {"status": "created"})
        assert json.loads(updated.calls.last.request.content) == {"status": "created"}
        assert order.marshal() == Document({"id": "ABC123", "status": "created"})
