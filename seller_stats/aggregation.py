"""
Aggregation of purchase records into per-seller statistics.

Unknown sellers and unknown SKUs are skipped without raising: a purchase
record whose seller is not in the sellers list is ignored entirely, a line
item whose SKU is not in the catalog is ignored within its record.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

from seller_stats.models import (
    LineItem,
    Product,
    PurchaseRecord,
    RevenueStrategy,
    Seller,
    SellerStat,
)

logger = logging.getLogger(__name__)


@dataclass
class SkipCounts:
    """Inputs ignored during aggregation."""
    records: int = 0
    items: int = 0


def calculate_profit(item: LineItem, product: Product) -> float:
    """Profit of one line item: discounted unit price minus cost, times quantity."""
    return (item.discounted_price - product.purchase_price) * item.quantity


def index_by(collection: Sequence, key: str) -> Dict:
    """Build a lookup keyed by an attribute. Later duplicates replace earlier ones."""
    return {getattr(entry, key): entry for entry in collection}


def build_seller_stats(
    sellers: Sequence[Seller],
    products: Sequence[Product],
    purchase_records: Sequence[PurchaseRecord],
    calculate_revenue: RevenueStrategy,
    skipped: SkipCounts = None,
) -> List[SellerStat]:
    """
    Aggregate purchase records into one SellerStat per seller.

    Args:
        sellers: Input sellers; each gets a stat even without purchases
        products: Product catalog
        purchase_records: Receipts, processed in order
        calculate_revenue: Revenue strategy called once per matched line item
        skipped: Optional counter filled with the number of ignored inputs

    Returns:
        One SellerStat per input seller, in input order. Sellers sharing an ID
        each get a row; purchases go to the last of them
    """
    products_index = index_by(products, "sku")
    seller_stats = [SellerStat.from_seller(seller) for seller in sellers]
    stats: Dict[str, SellerStat] = index_by(seller_stats, "id")
    skipped = skipped if skipped is not None else SkipCounts()

    for record in purchase_records:
        seller_stat = stats.get(record.seller_id)
        if seller_stat is None:
            skipped.records += 1
            continue

        seller_stat.sales_count += 1

        for item in record.items:
            product = products_index.get(item.sku)
            if product is None:
                skipped.items += 1
                continue

            revenue = calculate_revenue(item, product)
            profit = calculate_profit(item, product)

            seller_stat.revenue += revenue
            seller_stat.profit += profit
            seller_stat.product_stat(product).add(revenue, profit, item.quantity)

    if skipped.records or skipped.items:
        logger.debug(
            "Skipped unknown references",
            extra={"skipped_records": skipped.records, "skipped_items": skipped.items},
        )

    return seller_stats
