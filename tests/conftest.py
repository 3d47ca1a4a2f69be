"""
Shared fixtures for paysdk tests.
"""
import json
from typing import Any

import pytest


@pytest.fixture
def sample_sku_data() -> dict[str, Any]:
    """Expanded SKU object as returned by the API."""
    return {
        "id": "sku_1",
        "object": "sku",
        "active": True,
        "attributes": {"size": "M", "color": "blue"},
        "currency": "usd",
        "price": 1500,
        "product": "prod_1",
        "livemode": False,
    }


@pytest.fixture
def sample_order_data(sample_sku_data: dict[str, Any]) -> dict[str, Any]:
    """Fully expanded order object."""
    return {
        "id": "order_123",
        "object": "order",
        "amount": 2000,
        "amount_returned": 0,
        "application": None,
        "application_fee": None,
        "charge": "ch_1",
        "created": 1500000000,
        "currency": "usd",
        "customer": {"id": "cus_1", "object": "customer", "email": "jenny@example.com"},
        "email": "jenny@example.com",
        "items": [
            {
                "object": "order_item",
                "amount": 1500,
                "currency": "usd",
                "description": "T-shirt",
                "parent": sample_sku_data,
                "quantity": 1,
                "type": "sku",
            },
            {
                "object": "order_item",
                "amount": 500,
                "currency": "usd",
                "description": "Free shipping",
                "parent": "ship_free",
                "quantity": None,
                "type": "shipping",
            },
            {
                "object": "order_item",
                "amount": 0,
                "currency": "usd",
                "description": "Taxes (included)",
                "parent": None,
                "quantity": None,
                "type": "tax",
            },
        ],
        "livemode": False,
        "metadata": {"source": "web"},
        "returns": {
            "object": "list",
            "data": [],
            "has_more": False,
            "total_count": 0,
            "url": "/v1/order_returns?order=order_123",
        },
        "selected_shipping_method": "ship_free",
        "shipping": {
            "address": {
                "city": "Anytown",
                "country": "US",
                "line1": "1234 Main street",
                "line2": None,
                "postal_code": "123456",
                "state": None,
            },
            "carrier": None,
            "name": "Jenny Rosen",
            "phone": None,
            "tracking_number": None,
        },
        "shipping_methods": [
            {
                "id": "ship_free",
                "amount": 0,
                "currency": "usd",
                "delivery_estimate": {"type": "exact", "date": "2024-06-01"},
                "description": "Free shipping",
            },
            {
                "id": "ship_express",
                "amount": 1200,
                "currency": "usd",
                "delivery_estimate": {
                    "type": "range",
                    "earliest": "2024-05-28",
                    "latest": "2024-05-30",
                },
                "description": "Express",
            },
        ],
        "status": "paid",
        "status_transitions": {
            "canceled": None,
            "fulfiled": None,
            "paid": 1500000100,
            "returned": None,
        },
        "updated": 1500000100,
        "upstream_id": "ignored",
    }


@pytest.fixture
def sample_order_json(sample_order_data: dict[str, Any]) -> str:
    return json.dumps(sample_order_data)
