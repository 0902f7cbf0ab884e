from decimal import Decimal, ROUND_HALF_UP

TWO_DP = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """Coerce a strategy result to Decimal. Floats go through str() so 0.1 stays 0.1."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a number, got {type(value).__name__}")
    return Decimal(str(value))


def round2(amount) -> Decimal:
    return to_decimal(amount).quantize(TWO_DP, rounding=ROUND_HALF_UP)
