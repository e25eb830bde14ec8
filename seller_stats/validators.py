"""
Input validation for sales analysis.

All validators raise a ValidationError subclass on invalid input. Checks run
in a fixed order and stop at the first failure, so nothing is computed from
a partially valid bundle.
"""
import inspect
from collections.abc import Mapping
from typing import Any, Callable, Type, Union

from seller_stats.exceptions import (
    InvalidBonusStrategyError,
    InvalidOptionsError,
    InvalidProductsError,
    InvalidPurchaseRecordsError,
    InvalidRevenueStrategyError,
    InvalidSellersError,
    MissingDataError,
    ValidationError,
)
from seller_stats.models import AnalysisOptions, SalesData


# Ordered collections accepted for sellers, products and purchase records
SEQUENCE_TYPES = (list, tuple)

# Positional arguments each strategy is called with
REVENUE_STRATEGY_ARITY = 2  # (line_item, product)
BONUS_STRATEGY_ARITY = 3    # (index, total, seller_stat)


def validate_sequence(value: Any, error: Type[ValidationError]) -> Union[list, tuple]:
    """
    Validate a non-empty ordered collection.

    Args:
        value: Collection to validate
        error: ValidationError subclass raised on failure

    Returns:
        The collection unchanged

    Raises:
        ValidationError: If value is not a list/tuple or is empty
    """
    if not isinstance(value, SEQUENCE_TYPES):
        raise error("Must be a list", type(value).__name__)

    if len(value) == 0:
        raise error("Cannot be empty")

    return value


def validate_sales_data(data: Any) -> SalesData:
    """
    Validate the input bundle and parse it into SalesData.

    Args:
        data: Mapping with sellers, products and purchase_records, or SalesData

    Returns:
        SalesData with every element parsed into its model

    Raises:
        MissingDataError: If data is absent or empty
        InvalidSellersError: If sellers is not a non-empty list
        InvalidProductsError: If products is not a non-empty list
        InvalidPurchaseRecordsError: If purchase_records is not a non-empty list
    """
    if data is None:
        raise MissingDataError()

    if isinstance(data, SalesData):
        sellers, products, records = data.sellers, data.products, data.purchase_records
    elif isinstance(data, Mapping):
        if not data:
            raise MissingDataError("Sales data cannot be empty")
        sellers = data.get("sellers")
        products = data.get("products")
        records = data.get("purchase_records")
    else:
        raise MissingDataError("Must be a mapping or SalesData", type(data).__name__)

    validate_sequence(sellers, InvalidSellersError)
    validate_sequence(products, InvalidProductsError)
    validate_sequence(records, InvalidPurchaseRecordsError)

    return SalesData.from_collections(sellers, products, records)


def accepts_positional_args(func: Callable, count: int) -> bool:
    """Check whether func can be called with ``count`` positional arguments."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins expose no signature; trust callable()
        return True

    try:
        signature.bind(*range(count))
    except TypeError:
        return False
    return True


def validate_strategy(
    value: Any,
    arity: int,
    error: Type[ValidationError],
) -> Callable:
    """
    Validate a strategy callable.

    Args:
        value: Strategy to validate
        arity: Number of positional arguments it will be called with
        error: ValidationError subclass raised on failure

    Returns:
        The strategy unchanged

    Raises:
        ValidationError: If value is missing, not callable or has the wrong arity
    """
    if value is None:
        raise error("Strategy is required")

    if not callable(value):
        raise error("Must be a function", type(value).__name__)

    if not accepts_positional_args(value, arity):
        raise error(f"Must accept {arity} positional arguments", getattr(value, "__name__", value))

    return value


def validate_options(options: Any) -> AnalysisOptions:
    """
    Validate the options bundle.

    Args:
        options: Mapping with calculate_revenue and calculate_bonus, or AnalysisOptions

    Returns:
        AnalysisOptions with both strategies

    Raises:
        InvalidOptionsError: If options is not a mapping or AnalysisOptions
        InvalidRevenueStrategyError: If calculate_revenue is invalid
        InvalidBonusStrategyError: If calculate_bonus is invalid
    """
    if isinstance(options, AnalysisOptions):
        calculate_revenue = options.calculate_revenue
        calculate_bonus = options.calculate_bonus
    elif isinstance(options, Mapping):
        calculate_revenue = options.get("calculate_revenue")
        calculate_bonus = options.get("calculate_bonus")
    else:
        raise InvalidOptionsError(value=type(options).__name__)

    return AnalysisOptions(
        calculate_revenue=validate_strategy(
            calculate_revenue, REVENUE_STRATEGY_ARITY, InvalidRevenueStrategyError
        ),
        calculate_bonus=validate_strategy(
            calculate_bonus, BONUS_STRATEGY_ARITY, InvalidBonusStrategyError
        ),
    )
