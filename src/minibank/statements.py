"""Plain-text statements for accounts and banks.

The ``*_lines`` helpers are pure and return lists of strings; the
``print_*`` helpers only write those lines to a stream.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, List, TextIO

from .money import format_amount

if TYPE_CHECKING:  # pragma: no cover
    from .account import Account


def transaction_history_header(account: "Account") -> str:
    return (
        f"{account.kind.label} Account Transaction History for Account Number: "
        f"{account.account_number}"
    )


def transaction_history_lines(account: "Account") -> List[str]:
    """Return the header followed by every log line of ``account``."""

    return [transaction_history_header(account), *account.transaction_history()]


def balance_lines(accounts: Iterable["Account"], *, symbol: str = "") -> List[str]:
    lines = ["Account Balances:"]
    for account in accounts:
        lines.append(
            f"{account.kind.label} Account Balance: {format_amount(account.balance, symbol=symbol)}"
        )
    return lines


def interest_lines(accounts: Iterable["Account"], *, symbol: str = "") -> List[str]:
    lines = ["Account Interests:"]
    for account in accounts:
        interest = account.calculate_interest()
        lines.append(f"{account.kind.label} Account Interest: {format_amount(interest, symbol=symbol)}")
    return lines


def summary_lines(accounts: Iterable["Account"], *, symbol: str = "") -> List[str]:
    """Return the balances block, a blank line, then the interests block."""

    accounts = list(accounts)
    return [
        *balance_lines(accounts, symbol=symbol),
        "",
        *interest_lines(accounts, symbol=symbol),
    ]


def print_lines(lines: Iterable[str], stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    for line in lines:
        print(line, file=out)


def print_summary(accounts: Iterable["Account"], stream: TextIO | None = None, *, symbol: str = "") -> None:
    print_lines(summary_lines(accounts, symbol=symbol), stream)


__all__ = [
    "balance_lines",
    "interest_lines",
    "print_lines",
    "print_summary",
    "summary_lines",
    "transaction_history_header",
    "transaction_history_lines",
]
