import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from sales_analytics.errors import (
    InvalidCollectionError,
    MissingInputError,
    MissingStrategyError,
)
from sales_analytics.models import (
    AnalysisOptions,
    Product,
    ReportRow,
    SalesData,
    SellerSummary,
    TopProduct,
)
from sales_analytics.money import round_money

logger = logging.getLogger(__name__)

TOP_PRODUCTS_LIMIT = 10
_COLLECTIONS = ("sellers", "products", "purchase_records")


@dataclass
class _SellerStats:
    seller_id: str
    name: str
    # sku -> units sold, in first-seen order
    products_sold: dict[str, int] = field(default_factory=dict)
    sales_count: int = 0
    revenue: float = 0.0
    profit: float = 0.0

    def summary(self) -> SellerSummary:
        return SellerSummary(
            seller_id=self.seller_id,
            name=self.name,
            revenue=self.revenue,
            profit=self.profit,
            sales_count=self.sales_count,
        )

    def top_products(self, limit: int) -> list[TopProduct]:
        # sorted() is stable, so equal quantities keep first-seen order
        ranked = sorted(self.products_sold.items(), key=lambda kv: kv[1], reverse=True)
        return [TopProduct(sku=sku, quantity=qty) for sku, qty in ranked[:limit]]


# ── 1. Validation ────────────────────────────────────────────────────────────

def _validate_data(data: Union[SalesData, Mapping, None]) -> SalesData:
    if data is None:
        raise MissingInputError()

    collections = {}
    for name in _COLLECTIONS:
        value = data.get(name) if isinstance(data, Mapping) else getattr(data, name, None)
        if not isinstance(value, (list, tuple)) or len(value) == 0:
            raise InvalidCollectionError(name)
        collections[name] = list(value)

    if isinstance(data, SalesData):
        return data
    return SalesData.model_validate(collections)


def _validate_options(options: Union[AnalysisOptions, Mapping, None]) -> AnalysisOptions:
    def _get(name: str) -> Any:
        if options is None:
            return None
        if isinstance(options, Mapping):
            return options.get(name)
        return getattr(options, name, None)

    calculate_revenue = _get("calculate_revenue")
    calculate_bonus = _get("calculate_bonus")
    missing = [
        name for name, fn in (("calculate_revenue", calculate_revenue),
                              ("calculate_bonus", calculate_bonus))
        if not callable(fn)
    ]
    if missing:
        raise MissingStrategyError(missing)
    return AnalysisOptions(calculate_revenue=calculate_revenue, calculate_bonus=calculate_bonus)


# ── Entry point ──────────────────────────────────────────────────────────────

def analyze_sales_data(
    data: Union[SalesData, Mapping, None],
    options: Union[AnalysisOptions, Mapping, None],
    top_products_limit: int = TOP_PRODUCTS_LIMIT,
) -> list[ReportRow]:
    """
    Rank sellers by profit and compute revenue, top products and bonus for each.

    Seller revenue is the sum of each receipt's ``total_amount``; profit is
    built item by item from ``options.calculate_revenue`` minus purchase cost.
    Receipts of unknown sellers are skipped and items of unknown products are
    costed at zero.
    """
    sales = _validate_data(data)
    strategies = _validate_options(options)

    # ── 2. Indexes ───────────────────────────────────────────────────────────
    stats = [
        _SellerStats(seller_id=s.id, name=s.display_name)
        for s in sales.sellers
    ]
    seller_index = {s.seller_id: s for s in stats}
    product_index: dict[str, Product] = {p.sku: p for p in sales.products}

    # ── 3. Aggregation ───────────────────────────────────────────────────────
    skipped_records = 0
    unknown_skus: set[str] = set()

    for record in sales.purchase_records:
        seller = seller_index.get(record.seller_id)
        if seller is None:
            skipped_records += 1
            continue

        seller.sales_count += 1
        seller.revenue += record.total_amount or 0

        for item in record.items:
            product: Optional[Product] = product_index.get(item.sku)
            if product is None:
                unknown_skus.add(item.sku)
                cost = 0.0
            else:
                cost = product.purchase_price * item.quantity
            item_revenue = strategies.calculate_revenue(item, product)
            seller.profit += item_revenue - cost
            seller.products_sold[item.sku] = seller.products_sold.get(item.sku, 0) + item.quantity

    if skipped_records:
        logger.debug("Skipped %d purchase records of unknown sellers", skipped_records)
    if unknown_skus:
        logger.debug("Costed %d unknown skus at zero: %s", len(unknown_skus), sorted(unknown_skus))

    # ── 4. Ranking & bonus ───────────────────────────────────────────────────
    ranked = sorted(stats, key=lambda s: s.profit, reverse=True)
    total = len(ranked)
    bonuses = [
        strategies.calculate_bonus(index, total, seller.summary())
        for index, seller in enumerate(ranked)
    ]

    # ── 5. Report ────────────────────────────────────────────────────────────
    report = [
        ReportRow(
            seller_id=seller.seller_id,
            name=seller.name,
            revenue=round_money(seller.revenue),
            profit=round_money(seller.profit),
            sales_count=seller.sales_count,
            top_products=seller.top_products(top_products_limit),
            bonus=round_money(bonus),
        )
        for seller, bonus in zip(ranked, bonuses)
    ]

    logger.info(
        "Analysed %d purchase records for %d sellers (%d skipped)",
        len(sales.purchase_records), total, skipped_records,
    )
    return report
