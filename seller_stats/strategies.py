"""Default revenue and bonus strategies."""
from seller_stats.config import config
from seller_stats.models import AnalysisOptions, LineItem, Product, SellerStat


def calculate_simple_revenue(item: LineItem, _product: Product) -> float:
    """Revenue of one line item: sale price times quantity, minus the discount."""
    return item.sale_price * item.quantity * item.discount_factor


def calculate_bonus_by_profit(index: int, total: int, seller: SellerStat) -> float:
    """
    Tiered bonus as a share of the seller's profit.

    Tiers are checked in this order, first match wins:
        index 0            - top_rate (15%)
        index in (1, 2)    - podium_rate (10%)
        index total - 1    - nothing
        anything else      - default_rate (5%)

    With three sellers or fewer the last seller also sits on the podium, so the
    podium rate applies to it.

    Args:
        index: Zero-based rank in profit-descending order
        total: Number of ranked sellers
        seller: Aggregated stats of the seller

    Returns:
        Bonus amount (unrounded)
    """
    rates = config.bonus
    if index == 0:
        return seller.profit * rates.top_rate
    elif index in rates.podium_ranks:
        return seller.profit * rates.podium_rate
    elif index == total - 1:
        return 0.0
    else:
        return seller.profit * rates.default_rate


DEFAULT_OPTIONS = AnalysisOptions(
    calculate_revenue=calculate_simple_revenue,
    calculate_bonus=calculate_bonus_by_profit,
)
