"""
Pytest configuration and fixtures for Softline SDK tests.
"""
from __future__ import annotations

import pytest

from softline_sdk import GatewayConfig, SoftlineClient

BASE_URL = "https://gateway.softline.test"
GATEWAY_DATE = "Sun, 18 Oct 2026 10:00:00 GMT"


# Mock response data
MOCK_RESPONSES = {
    "auth": {
        "token": "abc",
    },
    "payment": {
        "order_id": "order_123",
        "status": "new",
        "payment_url": "https://gateway.softline.test/pay/order_123",
        "amount": "100.00",
        "currency": "RUB",
    },
    "order": {
        "order_id": "order_123",
        "status": "paid",
        "amount": "100.00",
        "currency": "RUB",
    },
    "refund": {
        "order_id": "order_123",
        "status": "refunded",
        "amount": "100.00",
        "currency": "RUB",
    },
}


@pytest.fixture
def base_url() -> str:
    """Test gateway base URL."""
    return BASE_URL


@pytest.fixture
def config(base_url: str) -> GatewayConfig:
    """Gateway configuration pointing at the mocked gateway."""
    return GatewayConfig(
        uri=base_url,
        login="merchant",
        password="s3cret",
        idle_conn_timeout_sec=10,
        request_timeout_sec=5,
    )


@pytest.fixture
def client(config: GatewayConfig) -> SoftlineClient:
    """Create a test client."""
    return SoftlineClient(config)


@pytest.fixture
def token() -> str:
    """Bearer token issued by the mocked gateway."""
    return "jwt-token"


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data."""
    return MOCK_RESPONSES


@pytest.fixture
def mock_auth_response(httpx_mock):
    """Mock login endpoint."""
    httpx_mock.add_response(
        url=f"{BASE_URL}/v1/login_check",
        method="POST",
        json=MOCK_RESPONSES["auth"],
        headers={"date": GATEWAY_DATE},
    )
    return httpx_mock
