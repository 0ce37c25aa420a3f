"""Utilities for working with monetary values in minibank."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from .exceptions import InvalidAmountError

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

AmountLike = Union[Decimal, int, float, str]


def to_decimal(value: AmountLike) -> Decimal:
    """Convert ``value`` to a :class:`~decimal.Decimal` with two decimal places."""

    if isinstance(value, bool):
        raise TypeError("Booleans are not valid amounts.")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidAmountError(f"Cannot interpret {value!r} as an amount.") from exc
    else:
        raise TypeError(f"Unsupported amount type: {type(value)!r}")

    if not result.is_finite():
        raise InvalidAmountError(f"Amount must be a finite number, got {value!r}.")
    try:
        return result.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise InvalidAmountError(f"Amount {value!r} is too large to represent in cents.") from exc


def require_positive(amount: Decimal) -> Decimal:
    """Ensure ``amount`` is strictly greater than zero."""

    if amount <= ZERO:
        raise InvalidAmountError(f"Amount must be greater than zero, got {amount}.")
    return amount


def format_amount(amount: Decimal, *, symbol: str = "") -> str:
    """Return ``amount`` with two decimals and an optional currency ``symbol``.

    ``format_amount(Decimal("1234.5"))`` gives ``"1234.50"`` and
    ``format_amount(Decimal("3"), symbol="$")`` gives ``"$3.00"``.
    """

    return f"{symbol}{amount.quantize(CENT, rounding=ROUND_HALF_UP):.2f}"
