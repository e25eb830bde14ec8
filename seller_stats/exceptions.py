"""
Custom exception hierarchy for sales analysis.

Exception Hierarchy:
    SalesAnalysisError (base)
    └── ValidationError                    - Input validation failed
        ├── MissingDataError               - Input bundle is absent
        ├── InvalidSellersError            - Sellers is not a non-empty sequence
        ├── InvalidProductsError           - Products is not a non-empty sequence
        ├── InvalidPurchaseRecordsError    - Purchase records is not a non-empty sequence
        ├── InvalidOptionsError            - Options is not a structured object
        ├── InvalidRevenueStrategyError    - Revenue strategy is not callable
        └── InvalidBonusStrategyError      - Bonus strategy is not callable
"""
from typing import Any


class SalesAnalysisError(Exception):
    """Base exception for all sales analysis errors."""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ValidationError(SalesAnalysisError):
    """
    Input validation failed.

    Raised before any computation starts, so no partial result exists.
    """

    def __init__(self, field: str, message: str, value: Any = None):
        self.field = field
        self.value = value
        super().__init__(message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.field}: {self.message} (got: {self.value!r})"
        return f"{self.field}: {self.message}"


class MissingDataError(ValidationError):
    """Input bundle was not passed at all."""

    def __init__(self, message: str = "Sales data is required", value: Any = None):
        super().__init__("data", message, value)


class InvalidSellersError(ValidationError):
    """Sellers collection is missing, empty or not a sequence."""

    def __init__(self, message: str = "Must be a non-empty list", value: Any = None):
        super().__init__("sellers", message, value)


class InvalidProductsError(ValidationError):
    """Products collection is missing, empty or not a sequence."""

    def __init__(self, message: str = "Must be a non-empty list", value: Any = None):
        super().__init__("products", message, value)


class InvalidPurchaseRecordsError(ValidationError):
    """Purchase records collection is missing, empty or not a sequence."""

    def __init__(self, message: str = "Must be a non-empty list", value: Any = None):
        super().__init__("purchase_records", message, value)


class InvalidOptionsError(ValidationError):
    """Options argument is not a mapping or AnalysisOptions."""

    def __init__(self, message: str = "Must be a mapping or AnalysisOptions", value: Any = None):
        super().__init__("options", message, value)


class InvalidRevenueStrategyError(ValidationError):
    """Revenue strategy is missing or has the wrong signature."""

    def __init__(self, message: str = "Must be a function", value: Any = None):
        super().__init__("calculate_revenue", message, value)


class InvalidBonusStrategyError(ValidationError):
    """Bonus strategy is missing or has the wrong signature."""

    def __init__(self, message: str = "Must be a function", value: Any = None):
        super().__init__("calculate_bonus", message, value)
