"""
Money helpers.

Amounts are Decimals with exactly two fraction digits everywhere in the
service. They cross the HTTP boundary as text ("100.00"), never as floats.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Optional, Union

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

MoneyLike = Union[Decimal, str, int]


def to_money(value: MoneyLike) -> Decimal:
    """Parse and quantize a value to 2 decimal places."""
    if isinstance(value, float):
        # floats carry binary noise; go through their shortest repr
        value = repr(value)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}")
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def optional_money(value: Optional[MoneyLike]) -> Optional[Decimal]:
    """Like to_money, but None and blank text mean 'not given'."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return to_money(value)


def money_sum(values: Iterable[Decimal]) -> Decimal:
    return to_money(sum(values, ZERO))


def format_money(value: Decimal) -> str:
    return f"{to_money(value):.2f}"
