"""
Deterministic demo-data generator.

Produces:
  - 5 sellers
  - 30 catalog products (purchase price 50 - 2 000)
  - 200 purchase records with 1-5 line items each
    - sale price = purchase price marked up 10 % - 60 %
    - discount 0 / 5 / 10 / 15 / 20 %
    - ~3 % of records reference a seller that is not in the list
    - ~2 % of line items reference a SKU that is not in the catalog
"""

import random
from decimal import Decimal

from app.models import LineItem, Product, PurchaseRecord, Seller
from app.store import DataStore

SEED = 42
N_PRODUCTS = 30
N_RECORDS  = 200

SELLERS = [
    ("seller_1", "Alexey", "Petrov"),
    ("seller_2", "Ivan", "Smirnov"),
    ("seller_3", "Maria", "Ivanova"),
    ("seller_4", "Olga", "Kuznetsova"),
    ("seller_5", "Dmitry", "Sokolov"),
]

CATEGORIES = ["Electronics", "Home", "Garden", "Toys", "Sports"]
DISCOUNTS  = [0, 0, 0, 5, 10, 15, 20]


def _money(value: float) -> Decimal:
    return Decimal(str(round(value, 2)))


def seed(store: DataStore) -> None:
    rng = random.Random(SEED)

    # ── sellers ──────────────────────────────────────────────────────────────
    for seller_id, first, last in SELLERS:
        store.add_seller(Seller(id=seller_id, first_name=first, last_name=last))

    # ── catalog ──────────────────────────────────────────────────────────────
    for n in range(1, N_PRODUCTS + 1):
        store.add_product(Product(
            sku=f"SKU_{n:03d}",
            purchase_price=_money(rng.uniform(50, 2_000)),
            name=f"Product {n}",
            category=rng.choice(CATEGORIES),
        ))

    products = store.list_products()
    seller_ids = [s[0] for s in SELLERS]

    # ── purchase records ─────────────────────────────────────────────────────
    for n in range(1, N_RECORDS + 1):
        # a few records for sellers that left the company
        seller_id = "seller_99" if rng.random() < 0.03 else rng.choice(seller_ids)

        items = []
        for _ in range(rng.randint(1, 5)):
            product = rng.choice(products)
            sku = "SKU_999" if rng.random() < 0.02 else product.sku
            items.append(LineItem(
                sku=sku,
                quantity=rng.randint(1, 10),
                sale_price=_money(float(product.purchase_price) * rng.uniform(1.10, 1.60)),
                discount=Decimal(rng.choice(DISCOUNTS)),
            ))

        store.add_purchase_record(PurchaseRecord(
            receipt_id=f"receipt_{n:04d}",
            seller_id=seller_id,
            items=items,
        ))
