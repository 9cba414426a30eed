from dataclasses import dataclass
from typing import Callable, Optional

from pydantic import BaseModel, Field


# ── Input models ─────────────────────────────────────────────────────────────

class Seller(BaseModel):
    id: str
    first_name: str
    last_name: str

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Product(BaseModel):
    sku: str
    purchase_price: float
    name: Optional[str] = None
    category: Optional[str] = None
    sale_price: Optional[float] = None  # catalogue price, not used for profit


class PurchaseItem(BaseModel):
    sku: str
    sale_price: float
    quantity: int
    discount: Optional[float] = Field(default=None, ge=0, le=100)  # percent


class PurchaseRecord(BaseModel):
    seller_id: str
    total_amount: Optional[float] = None  # gross revenue of the whole receipt
    items: list[PurchaseItem] = Field(default_factory=list)
    receipt_id: Optional[str] = None
    date: Optional[str] = None
    customer_id: Optional[str] = None


class SalesData(BaseModel):
    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[PurchaseRecord]


# ── Response models ──────────────────────────────────────────────────────────

class SellerSummary(BaseModel):
    """Unrounded per-seller totals handed to the bonus strategy."""
    seller_id: str
    name: str
    revenue: float
    profit: float
    sales_count: int


class TopProduct(BaseModel):
    sku: str
    quantity: int


class ReportRow(BaseModel):
    seller_id: str
    name: str
    revenue: float
    profit: float
    sales_count: int
    top_products: list[TopProduct]
    bonus: float


# ── Strategies ───────────────────────────────────────────────────────────────

RevenueStrategy = Callable[[PurchaseItem, Optional[Product]], float]
BonusStrategy = Callable[[int, int, SellerSummary], float]


@dataclass(frozen=True)
class AnalysisOptions:
    calculate_revenue: RevenueStrategy
    calculate_bonus: BonusStrategy

    @classmethod
    def default(cls) -> "AnalysisOptions":
        from sales_analytics.strategies import (
            calculate_bonus_by_profit,
            calculate_simple_revenue,
        )
        return cls(
            calculate_revenue=calculate_simple_revenue,
            calculate_bonus=calculate_bonus_by_profit,
        )
