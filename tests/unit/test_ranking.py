"""
Tests for seller_stats.ranking module.
"""
from unittest.mock import MagicMock

import pytest

from seller_stats.models import Product, ProductStat, SellerStat
from seller_stats.ranking import assign_bonuses, rank_sellers, sort_by_profit, top_products
from seller_stats.strategies import calculate_bonus_by_profit


def _stat(seller_id: str, profit: float, **kwargs) -> SellerStat:
    return SellerStat(seller_id, f"Seller {seller_id}", profit=profit, **kwargs)


def _with_products(quantities) -> SellerStat:
    stat = _stat("s1", 0.0)
    for i, qty in enumerate(quantities):
        sku = f"SKU_{i:03d}"
        stat.products_sold[sku] = ProductStat(Product(sku, f"Product {i}"), quantity=qty)
    return stat


class TestSortByProfit:
    """Tests for sort_by_profit."""

    def test_descending(self):
        stats = [_stat("a", 10), _stat("b", 100), _stat("c", 50)]
        assert [s.id for s in sort_by_profit(stats)] == ["b", "c", "a"]

    def test_ties_keep_input_order(self):
        stats = [_stat("a", 10), _stat("b", 50), _stat("c", 10), _stat("d", 50)]
        assert [s.id for s in sort_by_profit(stats)] == ["b", "d", "a", "c"]


class TestAssignBonuses:
    """Tests for assign_bonuses."""

    def test_strategy_receives_rank_and_total(self):
        ranked = [_stat("a", 100), _stat("b", 50)]
        strategy = MagicMock(side_effect=[1.0, 2.0])

        assign_bonuses(ranked, strategy)

        assert strategy.call_count == 2
        assert strategy.call_args_list[0].args == (0, 2, ranked[0])
        assert strategy.call_args_list[1].args == (1, 2, ranked[1])
        assert [s.bonus for s in ranked] == [1.0, 2.0]


class TestTopProducts:
    """Tests for top_products."""

    def test_sorted_by_quantity(self):
        stat = _with_products([1, 5, 3])
        assert [p.quantity for p in top_products(stat)] == [5, 3, 1]

    def test_truncated_to_ten(self):
        stat = _with_products(range(1, 16))
        result = top_products(stat)
        assert len(result) == 10
        assert result[0].quantity == 15
        assert result[-1].quantity == 6

    def test_custom_limit(self):
        stat = _with_products([1, 2, 3])
        assert len(top_products(stat, limit=2)) == 2

    def test_ties_keep_first_sale_order(self):
        stat = _with_products([2, 2, 2])
        assert [p.product.sku for p in top_products(stat)] == ["SKU_000", "SKU_001", "SKU_002"]

    def test_no_products(self):
        assert top_products(_stat("s1", 0)) == []


class TestRankSellers:
    """Tests for rank_sellers."""

    def test_bonuses_three_sellers(self):
        """Third and last seller still gets the podium rate."""
        stats = [_stat("c", 10), _stat("a", 100), _stat("b", 50)]
        rows = rank_sellers(stats, calculate_bonus_by_profit)

        assert [r.seller_id for r in rows] == ["a", "b", "c"]
        assert [r.bonus for r in rows] == [15.0, 5.0, 1.0]

    def test_bonuses_four_sellers(self):
        """With four sellers the last one gets nothing."""
        stats = [_stat("a", 100), _stat("b", 50), _stat("c", 10), _stat("d", 5)]
        rows = rank_sellers(stats, calculate_bonus_by_profit)
        assert [r.bonus for r in rows] == [15.0, 5.0, 1.0, 0]

    def test_bonuses_many_sellers(self):
        stats = [_stat(str(i), 100.0 - i) for i in range(6)]
        rows = rank_sellers(stats, calculate_bonus_by_profit)
        assert [r.bonus for r in rows] == [15.0, 9.9, 9.8, 4.85, 4.8, 0]

    def test_rounding(self):
        stats = [_stat("a", 10.0 / 3, revenue=20.0 / 3, sales_count=2)]
        row = rank_sellers(stats, calculate_bonus_by_profit)[0]
        assert row.revenue == 6.67
        assert row.profit == 3.33
        assert row.bonus == 0.5
        assert row.sales_count == 2

    def test_custom_digits(self):
        stats = [_stat("a", 10.0 / 3)]
        row = rank_sellers(stats, lambda i, t, s: 0.0, digits=1)[0]
        assert row.profit == 3.3

    def test_top_limit_passed_through(self):
        stat = _with_products(range(1, 6))
        row = rank_sellers([stat], lambda i, t, s: 0.0, top_limit=3)[0]
        assert [p.quantity for p in row.top_products] == [5, 4, 3]

    def test_bonus_rounded_from_strategy(self):
        stats = [_stat("a", 1.0)]
        row = rank_sellers(stats, lambda i, t, s: 1.23456)[0]
        assert row.bonus == pytest.approx(1.23)
