"""
Unit tests for the revenue and bonus strategies.
"""

from decimal import Decimal

import pytest

from app.models import LineItem, Product, SellerStats
from app.money import round2, to_decimal
from app.strategies import calculate_bonus_by_profit, calculate_simple_revenue

PRODUCT = Product(sku="SKU_001", purchase_price=Decimal("60"))


def stats(profit):
    return SellerStats(id="seller_1", name="Ivan Petrov", profit=Decimal(str(profit)))


class TestSimpleRevenue:
    def test_discounted_revenue(self):
        line = LineItem(sku="SKU_001", quantity=2, sale_price=Decimal("100"), discount=Decimal("10"))
        assert calculate_simple_revenue(line, PRODUCT) == Decimal("180")

    def test_no_discount(self):
        line = LineItem(sku="SKU_001", quantity=3, sale_price=Decimal("19.99"))
        assert calculate_simple_revenue(line, PRODUCT) == Decimal("59.97")

    def test_full_discount(self):
        line = LineItem(sku="SKU_001", quantity=5, sale_price=Decimal("10"), discount=Decimal("100"))
        assert calculate_simple_revenue(line, PRODUCT) == 0

    def test_result_is_not_rounded(self):
        line = LineItem(sku="SKU_001", quantity=1, sale_price=Decimal("0.99"), discount=Decimal("15"))
        assert calculate_simple_revenue(line, PRODUCT) == Decimal("0.8415")


class TestBonusByProfit:
    @pytest.mark.parametrize("rank,profit,expected", [
        (0, 500, "75"),
        (1, 300, "30"),
        (2, 300, "30"),
        (3, 100, "5"),
        (4, 50, "0"),
    ])
    def test_tiers_for_five_sellers(self, rank, profit, expected):
        assert calculate_bonus_by_profit(rank, 5, stats(profit)) == Decimal(expected)

    def test_lone_seller_gets_top_tier(self):
        assert calculate_bonus_by_profit(0, 1, stats(200)) == Decimal("30")

    def test_second_of_two_is_podium_not_last(self):
        # rank 1 matches the podium branch before the last-place check
        assert calculate_bonus_by_profit(1, 2, stats(100)) == Decimal("10")

    def test_third_of_three_is_podium(self):
        assert calculate_bonus_by_profit(2, 3, stats(100)) == Decimal("10")

    def test_middle_rank(self):
        assert calculate_bonus_by_profit(5, 10, stats(100)) == Decimal("5")


class TestMoney:
    def test_round_half_up(self):
        assert round2(Decimal("0.125")) == Decimal("0.13")
        assert round2(Decimal("-0.125")) == Decimal("-0.13")

    def test_float_goes_through_str(self):
        assert to_decimal(0.1) == Decimal("0.1")
        assert round2(1.005) == Decimal("1.01")

    @pytest.mark.parametrize("value", ["1.0", None, True])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(TypeError):
            to_decimal(value)
