"""
Deterministic demo-data generator.

Produces:
  - 5 sellers
  - 20 products across 4 categories (cost at 55-80 % of list price)
  - 300 receipts spread over 2023, each with 1-4 line items
    - ~40 % of items carry a discount of 5-20 %
    - total_amount is the discounted item total, rounded to 2 dp
"""

import random
from datetime import date, timedelta

from sales_analytics.models import Product, PurchaseItem, PurchaseRecord, Seller
from sales_analytics.store import DataStore

SEED = 42
START = date(2023, 1, 1)
DAYS = 365

_SELLERS = [
    ("seller_1", "Alexey", "Petrov"),
    ("seller_2", "Ivan", "Smirnov"),
    ("seller_3", "Anna", "Kuznetsova"),
    ("seller_4", "Maria", "Sokolova"),
    ("seller_5", "Dmitry", "Volkov"),
]

_CATEGORIES = ["Electronics", "Home", "Garden", "Toys"]


def seed(store: DataStore, seed_value: int = SEED) -> None:
    rng = random.Random(seed_value)

    # ── sellers ──────────────────────────────────────────────────────────────
    for seller_id, first_name, last_name in _SELLERS:
        store.add_seller(Seller(id=seller_id, first_name=first_name, last_name=last_name))

    # ── products ─────────────────────────────────────────────────────────────
    products: list[Product] = []
    for n in range(1, 21):
        sale_price = round(rng.uniform(5, 500), 2)
        products.append(Product(
            sku=f"SKU_{n:03d}",
            name=f"Product {n}",
            category=rng.choice(_CATEGORIES),
            sale_price=sale_price,
            purchase_price=round(sale_price * rng.uniform(0.55, 0.80), 2),
        ))
    for p in products:
        store.add_product(p)

    # ── receipts ─────────────────────────────────────────────────────────────
    seller_ids = [s[0] for s in _SELLERS]
    for n in range(1, 301):
        items: list[PurchaseItem] = []
        for product in rng.sample(products, rng.randint(1, 4)):
            discount = rng.choice([5, 10, 15, 20]) if rng.random() < 0.4 else None
            items.append(PurchaseItem(
                sku=product.sku,
                sale_price=product.sale_price,
                quantity=rng.randint(1, 10),
                discount=discount,
            ))

        total = sum(
            i.sale_price * i.quantity * (1 - (i.discount or 0) / 100) for i in items
        )
        store.add_purchase_record(PurchaseRecord(
            receipt_id=f"receipt_{n}",
            date=str(START + timedelta(days=rng.randint(0, DAYS - 1))),
            seller_id=rng.choice(seller_ids),
            customer_id=f"customer_{rng.randint(1, 100)}",
            total_amount=round(total, 2),
            items=items,
        ))
