from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


# ── Input models ─────────────────────────────────────────────────────────────

class Seller(BaseModel):
    # ids and SKUs may arrive as numbers; joins use their string form
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    first_name: str
    last_name: str


class Product(BaseModel):
    # catalog rows carry more than the analyzer needs (name, category, ...);
    # keep them so custom revenue strategies can read them
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    sku: str
    purchase_price: Decimal


class LineItem(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    sku: str
    quantity: int
    sale_price: Decimal
    discount: Decimal = Decimal("0")  # percent, 0-100


class PurchaseRecord(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    seller_id: str
    items: list[LineItem]


class SalesDataset(BaseModel):
    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[PurchaseRecord]


# ── Working state ────────────────────────────────────────────────────────────

class SellerStats(BaseModel):
    """Running totals for one seller during a single analysis pass."""

    id: str
    name: str
    revenue: Decimal = Decimal("0.00")
    profit: Decimal = Decimal("0.00")
    sales_count: int = 0
    # sku → cumulative quantity, in first-sold order
    products_sold: dict[str, int] = Field(default_factory=dict)


# ── Response models ──────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    sku: str
    quantity: int


class SellerReport(BaseModel):
    seller_id: str
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    top_products: list[TopProduct]
    bonus: Decimal
