"""Sample session: three accounts, a few transactions, printed results."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from .account import Account
from .bank import Bank
from .config import Settings
from .exceptions import InsufficientFundsError
from .models import AccountKind, TransactionType
from .money import AmountLike
from .statements import print_summary

SAMPLE_ACCOUNTS = (
    (AccountKind.SAVINGS, "SA001", "John Doe"),
    (AccountKind.CHECKING, "CA001", "Jane Smith"),
    (AccountKind.LOAN, "LA001", "Michael Johnson"),
)

SAMPLE_OPERATIONS = {
    "SA001": (500, 200),
    "CA001": (1000, 500),
    "LA001": (2000, 1000),
}


def _attempt(operation: Callable[[AmountLike], object], amount: AmountLike, out: TextIO) -> None:
    try:
        operation(amount)
    except InsufficientFundsError:
        print("Insufficient funds.", file=out)


def build_sample_bank(settings: Settings | None = None) -> Bank:
    """Return a bank with the three sample accounts registered and empty."""

    bank = Bank.from_settings(settings or Settings())
    for kind, number, holder in SAMPLE_ACCOUNTS:
        bank.open_account(kind, number, holder)
    return bank


def run(stream: TextIO | None = None, settings: Settings | None = None) -> Bank:
    out = stream if stream is not None else sys.stdout
    settings = settings or Settings()
    bank = build_sample_bank(settings)

    for number, (deposit, withdrawal) in SAMPLE_OPERATIONS.items():
        account: Account = bank.get_account(number)
        routes_to_deposit = account.kind.transaction_type is TransactionType.DEPOSIT
        _attempt(account.execute_transaction if routes_to_deposit else account.deposit, deposit, out)
        _attempt(account.withdraw if routes_to_deposit else account.execute_transaction, withdrawal, out)

    for account in bank.accounts:
        account.print_transactions(out)
        print(file=out)

    print_summary(bank.accounts, out, symbol=settings.currency_symbol)
    return bank


def main() -> int:
    run(settings=Settings.from_env())
    return 0


__all__ = ["SAMPLE_ACCOUNTS", "SAMPLE_OPERATIONS", "build_sample_bank", "main", "run"]
