from decimal import ROUND_HALF_UP, Decimal


CENT = Decimal('0.01')
ZERO = Decimal('0.00')


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Quantize an amount to two decimal places. Floats go through str first."""
    if isinstance(value, float):
        value = str(value)
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
