"""Account object encapsulating the bookkeeping rules of minibank."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, TextIO, Tuple

from .exceptions import InsufficientFundsError
from .models import AccountKind, Transaction, TransactionType
from .money import ZERO, AmountLike, require_positive, to_decimal
from .statements import print_lines, transaction_history_lines


class Account:
    """A bank account of one :class:`~minibank.models.AccountKind`.

    The account number and holder name are fixed at creation. The balance
    starts at zero and only changes through :meth:`deposit` and
    :meth:`withdraw`, each of which appends to the transaction log.
    """

    __slots__ = (
        "_account_number",
        "_holder_name",
        "_kind",
        "_balance",
        "_transactions",
    )

    def __init__(self, account_number: str, holder_name: str, kind: AccountKind) -> None:
        if not account_number:
            raise ValueError("account_number must not be empty")
        self._account_number = account_number
        self._holder_name = holder_name
        self._kind = AccountKind(kind)
        self._balance: Decimal = ZERO
        self._transactions: list[Transaction] = []

    @classmethod
    def savings(cls, account_number: str, holder_name: str) -> "Account":
        return cls(account_number, holder_name, AccountKind.SAVINGS)

    @classmethod
    def checking(cls, account_number: str, holder_name: str) -> "Account":
        return cls(account_number, holder_name, AccountKind.CHECKING)

    @classmethod
    def loan(cls, account_number: str, holder_name: str) -> "Account":
        return cls(account_number, holder_name, AccountKind.LOAN)

    def __repr__(self) -> str:
        return (
            f"Account({self._account_number!r}, {self._holder_name!r}, "
            f"kind={self._kind.value!r}, balance={self._balance})"
        )

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @property
    def kind(self) -> AccountKind:
        return self._kind

    @property
    def balance(self) -> Decimal:
        """Return the current account balance."""

        return self._balance

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """Return an immutable view of the transaction records."""

        return tuple(self._transactions)

    def transaction_history(self) -> Tuple[str, ...]:
        """Return the transaction log lines in insertion order."""

        return tuple(transaction.description for transaction in self._transactions)

    def deposit(self, amount: AmountLike) -> Transaction:
        """Add money to the account.

        Raises :class:`~minibank.exceptions.InvalidAmountError` when
        ``amount`` is not greater than zero.
        """

        value = require_positive(to_decimal(amount))
        self._balance += value
        return self._log_transaction(value, TransactionType.DEPOSIT)

    def withdraw(self, amount: AmountLike) -> Transaction:
        """Remove money from the account if sufficient funds are available."""

        value = require_positive(to_decimal(amount))
        self._ensure_sufficient_funds(value)
        self._balance -= value
        return self._log_transaction(value, TransactionType.WITHDRAWAL)

    def execute_transaction(self, amount: AmountLike) -> Transaction:
        """Run the transaction this account kind is bound to.

        Savings and loan accounts deposit, checking accounts withdraw.
        """

        if self._kind.transaction_type is TransactionType.DEPOSIT:
            return self.deposit(amount)
        return self.withdraw(amount)

    def calculate_interest(self) -> Decimal:
        """Return the interest on the current balance at the kind's rate.

        The product is exact; rounding is left to display formatting.
        """

        return self._balance * self._kind.interest_rate

    def last_transaction(self) -> Optional[Transaction]:
        return self._transactions[-1] if self._transactions else None

    def print_transactions(self, stream: TextIO | None = None) -> None:
        """Write the transaction history block to ``stream`` (stdout by default)."""

        print_lines(transaction_history_lines(self), stream)

    def _log_transaction(self, amount: Decimal, transaction_type: TransactionType) -> Transaction:
        transaction = Transaction(
            amount=amount,
            type=transaction_type,
            balance_after=self._balance,
        )
        self._transactions.append(transaction)
        return transaction

    def _ensure_sufficient_funds(self, amount: Decimal) -> None:
        if self._balance < amount:
            raise InsufficientFundsError(
                f"Account '{self._account_number}' has insufficient funds for {amount}."
            )


__all__ = ["Account"]
