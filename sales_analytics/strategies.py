from typing import Callable, Optional

from sales_analytics.models import Product, PurchaseItem, SellerSummary


def calculate_simple_revenue(item: PurchaseItem, _product: Optional[Product]) -> float:
    """Net revenue of one line item after its percentage discount."""
    discount = item.discount or 0
    return item.sale_price * item.quantity * (1 - discount / 100)


# First matching predicate wins; order matters when there are 3 sellers or fewer.
_BONUS_TIERS: list[tuple[Callable[[int, int], bool], float]] = [
    (lambda index, total: index == 0,          0.15),
    (lambda index, total: index in (1, 2),     0.10),
    (lambda index, total: index == total - 1,  0.0),
]
_DEFAULT_BONUS_RATE = 0.05


def calculate_bonus_by_profit(index: int, total: int, seller: SellerSummary) -> float:
    for matches, rate in _BONUS_TIERS:
        if matches(index, total):
            return seller.profit * rate if rate else 0.0
    return seller.profit * _DEFAULT_BONUS_RATE
