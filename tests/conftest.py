"""Pytest configuration and fixtures"""
from typing import Any, Dict

import httpx
import pytest

BASE_URL = "https://pos.test/api"


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def mock_http():
    """Factory for httpx clients backed by a request handler"""
    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def sample_cart() -> Dict[str, Any]:
    """Cart as sent by the POS terminal"""
    return {
        "items": [
            {
                "id": "1",
                "productId": "p1",
                "name": "Gummy",
                "quantity": 2,
                "price": 5.0,
                "total": 10.0,
                "unit": "pcs",
            },
            {
                "id": "2",
                "productId": "p2",
                "name": "Chocolate",
                "quantity": 1,
                "price": 7.5,
                "total": 7.5,
                "weight": 0.25,
                "unit": "kg",
                "sku": "CHOC-250",
            },
        ],
        "discount": {"type": "percentage", "value": 10.0},
        "tax": {"rate": 7.0, "amount": 1.1},
        "customer": {"id": "c-9", "name": "Alice", "phone": "+66 123"},
        "notes": "gift wrap",
        "total": 16.85,
        "lastUpdated": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def sample_payment() -> Dict[str, Any]:
    return {
        "status": "completed",
        "timestamp": "2024-01-01T00:01:00Z",
        "amount": 16.85,
        "method": "cash",
        "transactionId": "tx-42",
    }
