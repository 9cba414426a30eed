from decimal import Decimal, ROUND_HALF_UP

_TWO_DP = Decimal("0.01")


def round_money(value: float) -> float:
    """Round to 2 dp, half away from zero, on the exact binary value of ``value``."""
    return float(Decimal(value).quantize(_TWO_DP, rounding=ROUND_HALF_UP))
