from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from checkout_connector.connector.basic import BasicConnector
from checkout_connector.core.config import settings
from checkout_connector.models.http import HttpMethod
from checkout_connector.resources.order import Order

logger = logging.getLogger(__name__)


class OrderService:
    """Checkout order operations on top of a connector.

    Connector errors are not caught here; they reach the caller unchanged.
    """

    def __init__(self, connector: BasicConnector) -> None:
        self._connector = connector

    def create(self, data: Mapping[str, Any]) -> Order:
        """Create a new order from *data* at the configured base URI.

        The returned order holds *data* and the location from the ``201``
        response; fetch it to obtain the server-side representation.
        """
        order = Order(data)
        self._connector.apply(HttpMethod.POST, order, {"url": settings.base_uri})
        logger.info("Created order at %s", order.location)
        return order

    def fetch(self, location: str) -> Order:
        """Return the order stored at *location*, following redirects."""
        order = Order(location=location)
        self._connector.apply(HttpMethod.GET, order)
        return order

    def update(self, order: Order, data: Mapping[str, Any]) -> Order:
        """Send *data* to the order's location.

        On ``200`` the order document is replaced by the response body;
        the order's own document is never sent.
        """
        self._connector.apply(HttpMethod.POST, order, {"data": data})
        logger.info("Updated order at %s", order.location)
        return order
