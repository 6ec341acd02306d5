from __future__ import annotations

import pytest

import checkout_connector.transport.http as http_module
from checkout_connector.connector.basic import BasicConnector, create_connector
from checkout_connector.transport.http import HttpTransport


@pytest.fixture(autouse=True)
def reset_http_client():
    """Give every test a fresh shared httpx client.

    respx intercepts at the transport layer, but a client leaking between
    tests would still carry the previous test's settings.
    """
    http_module._http_client = None
    yield
    http_module.close_http_client()
    http_module._http_client = None


@pytest.fixture
def secret() -> str:
    return "my-shared-secret"


@pytest.fixture
def connector(secret) -> BasicConnector:
    """Connector wired to the real httpx transport; mock traffic with respx."""
    return create_connector(secret, HttpTransport())
