"""Domain models used by the minibank package."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from .money import to_decimal


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TransactionType(str, Enum):
    """Enumerates the supported types of account transactions."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"

    @property
    def verb(self) -> str:
        """Past-tense verb used in the transaction log."""

        return "Deposited" if self is TransactionType.DEPOSIT else "Withdrew"


class AccountKind(str, Enum):
    """The three account variants and the fixed policy attached to each.

    The kind decides the interest rate applied to the current balance and
    which primitive :meth:`~minibank.account.Account.execute_transaction`
    routes to.
    """

    SAVINGS = "savings"
    CHECKING = "checking"
    LOAN = "loan"

    @property
    def interest_rate(self) -> Decimal:
        return _INTEREST_RATES[self]

    @property
    def transaction_type(self) -> TransactionType:
        return _ROUTING[self]

    @property
    def label(self) -> str:
        return self.value.title()


_INTEREST_RATES = {
    AccountKind.SAVINGS: Decimal("0.02"),
    AccountKind.CHECKING: Decimal("0.01"),
    AccountKind.LOAN: Decimal("0.05"),
}

_ROUTING = {
    AccountKind.SAVINGS: TransactionType.DEPOSIT,
    AccountKind.CHECKING: TransactionType.WITHDRAWAL,
    AccountKind.LOAN: TransactionType.DEPOSIT,
}


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represents a single ledger entry for an :class:`~minibank.account.Account`."""

    amount: Decimal
    type: TransactionType
    balance_after: Decimal
    timestamp: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))
        object.__setattr__(self, "balance_after", to_decimal(self.balance_after))

    @property
    def description(self) -> str:
        """Log line for this entry, e.g. ``"Deposited 500.00"``."""

        return f"{self.type.verb} {self.amount}"

    def __str__(self) -> str:
        return self.description


__all__ = ["AccountKind", "Transaction", "TransactionType"]
