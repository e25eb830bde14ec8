"""
Seller sales statistics.

Aggregates purchase records into per-seller revenue, profit, sales count,
top products and a rank-based bonus:
- analyzer: analyze() entry point
- models: Input, aggregation and result dataclasses
- strategies: Default revenue and bonus strategies
- validators: Input validation functions
- exceptions: Custom exception hierarchy
- config: Centralized configuration
"""

# Import in dependency order
from seller_stats.exceptions import (
    SalesAnalysisError,
    ValidationError,
    MissingDataError,
    InvalidSellersError,
    InvalidProductsError,
    InvalidPurchaseRecordsError,
    InvalidOptionsError,
    InvalidRevenueStrategyError,
    InvalidBonusStrategyError,
)

from seller_stats.config import config

from seller_stats.models import (
    Seller,
    Product,
    LineItem,
    PurchaseRecord,
    SalesData,
    AnalysisOptions,
    SellerStat,
    ProductStat,
    SellerReport,
    TopProduct,
)

from seller_stats.validators import (
    validate_sales_data,
    validate_options,
)

from seller_stats.strategies import (
    calculate_simple_revenue,
    calculate_bonus_by_profit,
    DEFAULT_OPTIONS,
)

from seller_stats.analyzer import analyze

__all__ = [
    # Exceptions
    "SalesAnalysisError",
    "ValidationError",
    "MissingDataError",
    "InvalidSellersError",
    "InvalidProductsError",
    "InvalidPurchaseRecordsError",
    "InvalidOptionsError",
    "InvalidRevenueStrategyError",
    "InvalidBonusStrategyError",
    # Config
    "config",
    # Models
    "Seller",
    "Product",
    "LineItem",
    "PurchaseRecord",
    "SalesData",
    "AnalysisOptions",
    "SellerStat",
    "ProductStat",
    "SellerReport",
    "TopProduct",
    # Validators
    "validate_sales_data",
    "validate_options",
    # Strategies
    "calculate_simple_revenue",
    "calculate_bonus_by_profit",
    "DEFAULT_OPTIONS",
    # Entry point
    "analyze",
]
