import logging
from collections.abc import Mapping
from decimal import Decimal

from pydantic import ValidationError

from app.errors import InvalidInputError, InvalidStrategyError
from app.models import (
    Product,
    SalesDataset,
    SellerReport,
    SellerStats,
    TopProduct,
)
from app.money import round2, to_decimal
from app.strategies import DEFAULT_STRATEGIES, Strategies

logger = logging.getLogger(__name__)

_COLLECTIONS = ("sellers", "products", "purchase_records")
_STRATEGY_KEYS = {
    "calculate_revenue": ("calculate_revenue", "calculateRevenue"),
    "calculate_bonus":   ("calculate_bonus", "calculateBonus"),
}

TOP_PRODUCTS_LIMIT = 10


def _validate_data(data) -> SalesDataset:
    if data is None:
        raise InvalidInputError("No sales data supplied")

    for field in _COLLECTIONS:
        if isinstance(data, SalesDataset):
            value = getattr(data, field)
        elif isinstance(data, Mapping):
            value = data.get(field)
        else:
            raise InvalidInputError(
                f"Sales data must be a mapping or SalesDataset, got {type(data).__name__}"
            )
        if not isinstance(value, (list, tuple)) or len(value) == 0:
            raise InvalidInputError(f"'{field}' must be a non-empty list")

    if isinstance(data, SalesDataset):
        return data
    try:
        return SalesDataset.model_validate({f: list(data[f]) for f in _COLLECTIONS})
    except ValidationError as exc:
        raise InvalidInputError(f"Malformed sales data: {exc.error_count()} invalid field(s)") from exc


def _resolve_strategies(strategies) -> Strategies:
    if isinstance(strategies, Strategies):
        resolved = strategies
    elif strategies is None or isinstance(strategies, (str, bytes, int, float, list, tuple)):
        raise InvalidStrategyError("Strategies must be a mapping or an object with strategy functions")
    else:
        found = {}
        for name, keys in _STRATEGY_KEYS.items():
            for key in keys:
                if isinstance(strategies, Mapping):
                    fn = strategies.get(key)
                else:
                    fn = getattr(strategies, key, None)
                if fn is not None:
                    break
            found[name] = fn
        resolved = Strategies(**found)

    for name in _STRATEGY_KEYS:
        if not callable(getattr(resolved, name)):
            raise InvalidStrategyError(f"Strategy '{name}' is missing or not callable")
    return resolved


def _top_products(stats: SellerStats, limit: int) -> list[TopProduct]:
    # sorted() is stable: equal quantities keep first-sold order
    ranked = sorted(stats.products_sold.items(), key=lambda kv: kv[1], reverse=True)
    return [TopProduct(sku=sku, quantity=qty) for sku, qty in ranked[:limit]]


def analyze_sales_data(
    data,
    strategies=DEFAULT_STRATEGIES,
    *,
    top_products_limit: int = TOP_PRODUCTS_LIMIT,
) -> list[SellerReport]:
    if top_products_limit < 0:
        raise ValueError(f"top_products_limit must be >= 0, got {top_products_limit}")
    dataset = _validate_data(data)
    calc = _resolve_strategies(strategies)

    # ── 1. Accumulators and indexes ──────────────────────────────────────────
    seller_stats = [
        SellerStats(id=s.id, name=f"{s.first_name} {s.last_name}")
        for s in dataset.sellers
    ]
    seller_index: dict[str, SellerStats] = {s.id: s for s in seller_stats}
    product_index: dict[str, Product] = {p.sku: p for p in dataset.products}

    # ── 2. Single pass over purchase records (order matters: we round as we go)
    skipped_records = skipped_items = 0
    for record in dataset.purchase_records:
        seller = seller_index.get(record.seller_id)
        if seller is None:
            skipped_records += 1
            logger.debug("Skipping record for unknown seller %r", record.seller_id)
            continue

        seller.sales_count += 1
        record_revenue = Decimal("0.00")

        for item in record.items:
            product = product_index.get(item.sku)
            if product is None:
                skipped_items += 1
                logger.debug("Skipping item with unknown sku %r (seller %s)", item.sku, seller.id)
                continue

            cost = product.purchase_price * item.quantity
            revenue = to_decimal(calc.calculate_revenue(item, product))
            profit = revenue - cost

            seller.profit = round2(seller.profit + profit)
            record_revenue = round2(record_revenue + revenue)
            seller.products_sold[item.sku] = seller.products_sold.get(item.sku, 0) + item.quantity

        seller.revenue = round2(seller.revenue + record_revenue)

    # ── 3. Rank by profit (stable) ───────────────────────────────────────────
    seller_stats.sort(key=lambda s: s.profit, reverse=True)
    total = len(seller_stats)

    # ── 4. Bonus, top products and report rows ───────────────────────────────
    reports = [
        SellerReport(
            seller_id=stats.id,
            name=stats.name,
            revenue=round2(stats.revenue),
            profit=round2(stats.profit),
            sales_count=stats.sales_count,
            top_products=_top_products(stats, top_products_limit),
            bonus=round2(calc.calculate_bonus(rank, total, stats)),
        )
        for rank, stats in enumerate(seller_stats)
    ]

    logger.info(
        "Analyzed %d purchase records for %d sellers (%d records, %d items skipped)",
        len(dataset.purchase_records), total, skipped_records, skipped_items,
    )
    return reports
