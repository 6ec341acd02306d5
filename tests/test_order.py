from __future__ import annotations

import pytest

from checkout_connector.core.errors import DocumentKeyError
from checkout_connector.models.document import Document
from checkout_connector.resources.base import Resource
from checkout_connector.resources.order import Order


class TestOrder:
    def test_satisfies_resource_capability(self):
        assert isinstance(Order(), Resource)

    def test_content_type(self):
        assert Order().content_type == "application/vnd.klarna.checkout.aggregated-order-v1+json"

    def test_location_initially_unset(self):
        assert Order().location is None

    def test_location_can_be_given(self):
        order = Order(location="https://api.example/orders/7")
        assert order.location == "https://api.example/orders/7"

    def test_seeded_with_data(self):
        order = Order({"purchase_currency": "SEK"})
        assert order.get_value("purchase_currency") == "SEK"

    def test_seeded_with_document(self):
        doc = Document({"id": "1"})
        assert Order(doc).marshal() is doc

    def test_set_and_get_value(self):
        order = Order()
        order.set_value("locale", "sv-se")
        order.set_value("locale", "fi-fi")
        assert order.get_value("locale") == "fi-fi"

    def test_get_missing_value_raises(self):
        with pytest.raises(DocumentKeyError):
            Order().get_value("id")

    def test_parse_replaces_document_entirely(self):
        order = Order({"old": "value", "id": "1"})
        order.parse(Document({"id": "42", "status": "checkout_complete"}))
        assert order.marshal() == Document({"id": "42", "status": "checkout_complete"})
        with pytest.raises(DocumentKeyError):
            order.get_value("old")

    def test_parse_of_marshal_round_trips(self):
        order = Order({"id": "42", "cart": {"items": [{"reference": "A1", "quantity": 1}]}})
        before = order.marshal().to_dict()
        order.parse(Document.decode(order.marshal().encode()))
        assert order.marshal().to_dict() == before
