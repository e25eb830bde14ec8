"""
Sales analysis entry point.

Usage:
    from seller_stats import analyze, DEFAULT_OPTIONS

    rows = analyze(data, DEFAULT_OPTIONS)
    payload = [row.to_dict() for row in rows]
"""
import logging
from typing import Any, List

from seller_stats.aggregation import SkipCounts, build_seller_stats
from seller_stats.models import SellerReport
from seller_stats.observability import Timer, run_context
from seller_stats.ranking import rank_sellers
from seller_stats.validators import validate_options, validate_sales_data

logger = logging.getLogger(__name__)


def analyze(data: Any, options: Any) -> List[SellerReport]:
    """
    Compute per-seller sales statistics.

    Args:
        data: Mapping (or SalesData) with sellers, products and purchase_records;
              elements may be dicts or model instances
        options: Mapping (or AnalysisOptions) with calculate_revenue and
                 calculate_bonus strategies

    Returns:
        One SellerReport per seller, sorted by profit, highest first

    Raises:
        ValidationError: If data or options are invalid (nothing is computed)
    """
    sales_data = validate_sales_data(data)
    strategies = validate_options(options)

    with run_context(), Timer("analyze", logger):
        logger.info(
            "Analyzing sales data",
            extra={
                "sellers": len(sales_data.sellers),
                "products": len(sales_data.products),
                "purchase_records": len(sales_data.purchase_records),
            },
        )

        skipped = SkipCounts()
        stats = build_seller_stats(
            sales_data.sellers,
            sales_data.products,
            sales_data.purchase_records,
            strategies.calculate_revenue,
            skipped,
        )
        if skipped.records or skipped.items:
            logger.info(
                f"Ignored {skipped.records} records with unknown sellers "
                f"and {skipped.items} items with unknown SKUs"
            )

        return rank_sellers(stats, strategies.calculate_bonus)
