from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import JsonValue

from checkout_connector.models.document import Document


class Order:
    """Checkout order resource.

    ``location`` is only ever updated from server responses (201/301) by
    the connector, or set by the caller when addressing an existing order.
    """

    CONTENT_TYPE = "application/vnd.klarna.checkout.aggregated-order-v1+json"

    def __init__(
        self,
        data: Mapping[str, Any] | Document | None = None,
        location: str | None = None,
    ) -> None:
        self.location = location
        self._document = data if isinstance(data, Document) else Document(data)

    def __repr__(self) -> str:
        return f"Order(location={self.location!r}, keys={self._document.keys()!r})"

    @property
    def content_type(self) -> str:
        return self.CONTENT_TYPE

    def marshal(self) -> Document:
        return self._document

    def parse(self, document: Document) -> None:
        """Replace the order state with *document*; nothing is merged."""
        self._document = document

    def get_value(self, key: str) -> JsonValue:
        return self._document.get_value(key)

    def set_value(self, key: str, value: Any) -> None:
        self._document.set_value(key, value)
