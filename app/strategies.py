from decimal import Decimal
from typing import Callable, NamedTuple

from app.models import LineItem, Product, SellerStats

_TOP_RATE    = Decimal("0.15")
_PODIUM_RATE = Decimal("0.10")
_BASE_RATE   = Decimal("0.05")
_HUNDRED     = Decimal("100")


def calculate_simple_revenue(item: LineItem, product: Product) -> Decimal:
    """Revenue of one line item: sale price times quantity, less the discount percent.

    ``product`` is unused here but is part of the strategy contract.
    """
    full_price = item.sale_price * item.quantity
    return full_price * (1 - item.discount / _HUNDRED)


def calculate_bonus_by_profit(rank: int, total_sellers: int, seller: SellerStats) -> Decimal:
    """Bonus for the seller at ``rank`` (0-based, profit descending).

    Branches are checked in order and the first match wins, so a lone seller
    (rank 0 is also the last place) gets the top-tier bonus.
    """
    profit = seller.profit
    if rank == 0:
        return profit * _TOP_RATE
    if rank in (1, 2):
        return profit * _PODIUM_RATE
    if rank == total_sellers - 1:
        return Decimal("0")
    return profit * _BASE_RATE


RevenueFn = Callable[[LineItem, Product], object]
BonusFn = Callable[[int, int, SellerStats], object]


class Strategies(NamedTuple):
    calculate_revenue: RevenueFn
    calculate_bonus: BonusFn


DEFAULT_STRATEGIES = Strategies(
    calculate_revenue=calculate_simple_revenue,
    calculate_bonus=calculate_bonus_by_profit,
)
