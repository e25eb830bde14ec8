"""
Pytest configuration and shared fixtures.
"""
import pytest
from typing import Any, Dict, List

from seller_stats.strategies import calculate_bonus_by_profit, calculate_simple_revenue


@pytest.fixture
def sample_sellers() -> List[Dict[str, Any]]:
    """Sellers as they appear in the raw dataset."""
    return [
        {"id": "seller_1", "first_name": "Alexey", "last_name": "Petrov", "start_date": "2024-01-01"},
        {"id": "seller_2", "first_name": "Ivan", "last_name": "Ivanov"},
        {"id": "seller_3", "first_name": "Maria", "last_name": "Sidorova"},
        # No purchase records at all
        {"id": "seller_4", "first_name": "Olga", "last_name": "Smirnova"},
    ]


@pytest.fixture
def sample_products() -> List[Dict[str, Any]]:
    """Product catalog."""
    return [
        {"sku": "SKU_001", "name": "Milk", "purchase_price": 10.0, "category": "Dairy"},
        {"sku": "SKU_002", "name": "Bread", "purchase_price": 5.0},
        {"sku": "SKU_003", "name": "Cheese", "purchase_price": 30.0},
    ]


@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    """
    Purchase records.

    Expected totals:
        seller_1: revenue 168, profit 78, 2 records
        seller_2: revenue 40, profit 20, 1 record (one unknown SKU skipped)
        seller_3: revenue 20, profit -10, 1 record
        seller_4: nothing
    """
    return [
        {
            "receipt_id": "receipt_1",
            "seller_id": "seller_1",
            "items": [
                {"sku": "SKU_001", "sale_price": 20.0, "discount": 0, "quantity": 5},
                {"sku": "SKU_002", "sale_price": 10.0, "discount": 10, "quantity": 2},
            ],
        },
        {
            "receipt_id": "receipt_2",
            "seller_id": "seller_1",
            "items": [
                {"sku": "SKU_003", "sale_price": 50.0, "discount": 0, "quantity": 1},
            ],
        },
        {
            "receipt_id": "receipt_3",
            "seller_id": "seller_2",
            "items": [
                {"sku": "SKU_002", "sale_price": 10.0, "discount": 0, "quantity": 4},
                {"sku": "SKU_999", "sale_price": 99.0, "discount": 0, "quantity": 7},
            ],
        },
        # Unknown seller (should be skipped)
        {
            "receipt_id": "receipt_4",
            "seller_id": "seller_unknown",
            "items": [
                {"sku": "SKU_001", "sale_price": 20.0, "discount": 0, "quantity": 3},
            ],
        },
        {
            "receipt_id": "receipt_5",
            "seller_id": "seller_3",
            "items": [
                {"sku": "SKU_003", "sale_price": 40.0, "discount": 50, "quantity": 1},
            ],
        },
    ]


@pytest.fixture
def sample_data(sample_sellers, sample_products, sample_records) -> Dict[str, Any]:
    """Complete input bundle."""
    return {
        "sellers": sample_sellers,
        "products": sample_products,
        "purchase_records": sample_records,
    }


@pytest.fixture
def default_options() -> Dict[str, Any]:
    """Options dict with the default strategies."""
    return {
        "calculate_revenue": calculate_simple_revenue,
        "calculate_bonus": calculate_bonus_by_profit,
    }
