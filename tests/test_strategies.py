import pytest

from sales_analytics.models import PurchaseItem, SellerSummary
from sales_analytics.money import round_money
from sales_analytics.strategies import calculate_bonus_by_profit, calculate_simple_revenue


def summary(profit):
    return SellerSummary(seller_id="S-1", name="A B", revenue=0, profit=profit, sales_count=1)


class TestSimpleRevenue:
    def test_no_discount(self):
        item = PurchaseItem(sku="X", sale_price=12.5, quantity=4)
        assert calculate_simple_revenue(item, None) == 50

    def test_with_discount(self):
        item = PurchaseItem(sku="X", sale_price=200, quantity=3, discount=25)
        assert calculate_simple_revenue(item, None) == 450

    def test_full_discount(self):
        item = PurchaseItem(sku="X", sale_price=200, quantity=3, discount=100)
        assert calculate_simple_revenue(item, None) == 0

    def test_discount_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            PurchaseItem(sku="X", sale_price=1, quantity=1, discount=120)


class TestBonusByProfit:
    @pytest.mark.parametrize("index, total, expected", [
        (0, 10, 150),
        (1, 10, 100),
        (2, 10, 100),
        (3, 10, 50),
        (8, 10, 50),
        (9, 10, 0),
        # small groups: earlier tiers win over "last place"
        (0, 1, 150),
        (1, 2, 100),
        (2, 3, 100),
        (3, 4, 0),
    ])
    def test_tiers(self, index, total, expected):
        assert round_money(calculate_bonus_by_profit(index, total, summary(1000))) == expected

    def test_negative_profit_scales_too(self):
        assert round_money(calculate_bonus_by_profit(0, 5, summary(-200))) == -30


class TestRoundMoney:
    @pytest.mark.parametrize("value, expected", [
        (1.234, 1.23),
        (0.125, 0.13),
        (-0.125, -0.13),
        (2.5, 2.5),
        (1.005, 1.0),  # binary value sits just below the half
    ])
    def test_half_away_from_zero(self, value, expected):
        assert round_money(value) == expected
