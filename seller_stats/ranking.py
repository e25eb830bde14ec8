"""
Ranking of sellers by profit, bonus assignment and result projection.
"""
from typing import Iterable, List

from seller_stats.config import config
from seller_stats.models import BonusStrategy, ProductStat, SellerReport, SellerStat


def sort_by_profit(stats: Iterable[SellerStat]) -> List[SellerStat]:
    """Sort sellers by profit, highest first. Ties keep their input order."""
    return sorted(stats, key=lambda s: s.profit, reverse=True)


def assign_bonuses(ranked: List[SellerStat], calculate_bonus: BonusStrategy) -> None:
    """Store the strategy's bonus on each seller, using its rank in ``ranked``."""
    total = len(ranked)
    for index, seller_stat in enumerate(ranked):
        seller_stat.bonus = calculate_bonus(index, total, seller_stat)


def top_products(seller_stat: SellerStat, limit: int = None) -> List[ProductStat]:
    """
    Get a seller's best selling products.

    Args:
        seller_stat: Aggregated seller stats
        limit: Maximum number of products (defaults to config)

    Returns:
        ProductStats sorted by quantity, highest first; ties keep first-sale order
    """
    if limit is None:
        limit = config.analysis.top_products_limit
    products = sorted(seller_stat.products_sold.values(), key=lambda p: p.quantity, reverse=True)
    return products[:limit]


def rank_sellers(
    stats: Iterable[SellerStat],
    calculate_bonus: BonusStrategy,
    top_limit: int = None,
    digits: int = None,
) -> List[SellerReport]:
    """
    Rank sellers, assign bonuses and project them into report rows.

    Args:
        stats: Fully aggregated seller stats
        calculate_bonus: Bonus strategy called once per seller
        top_limit: Maximum top products per seller (defaults to config)
        digits: Decimal places for money values (defaults to config)

    Returns:
        SellerReport rows in profit-descending order
    """
    if digits is None:
        digits = config.analysis.decimal_places

    ranked = sort_by_profit(stats)
    assign_bonuses(ranked, calculate_bonus)

    return [
        SellerReport.from_stat(seller_stat, top_products(seller_stat, top_limit), digits)
        for seller_stat in ranked
    ]
