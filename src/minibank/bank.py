"""Registry of accounts keyed by account number."""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterator, Optional, Tuple

from .account import Account
from .config import Settings
from .exceptions import AccountNotFoundError, DuplicateAccountError
from .models import AccountKind
from .money import ZERO
from .ops import StructuredLogger


class Bank:
    """Own a set of accounts and look them up by number.

    Account numbers are unique: registering a number twice raises
    :class:`~minibank.exceptions.DuplicateAccountError` and keeps the
    first account. Accounts are never removed.
    """

    __slots__ = ("_accounts", "_logger")

    def __init__(self, *, logger: StructuredLogger | None = None) -> None:
        self._accounts: Dict[str, Account] = {}
        self._logger = logger or StructuredLogger()

    @classmethod
    def from_settings(cls, settings: Settings) -> "Bank":
        return cls(logger=StructuredLogger(path=settings.log_path))

    @property
    def logger(self) -> StructuredLogger:
        return self._logger

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def add_account(self, account: Account) -> Account:
        number = account.account_number
        if number in self._accounts:
            raise DuplicateAccountError(f"Account '{number}' already exists.")
        self._accounts[number] = account
        self._logger.log(
            "account_added",
            account=number,
            kind=account.kind.value,
            holder=account.holder_name,
        )
        return account

    def open_account(self, kind: AccountKind, account_number: str, holder_name: str) -> Account:
        """Create an account of ``kind`` and register it in one step."""

        if account_number in self._accounts:
            raise DuplicateAccountError(f"Account '{account_number}' already exists.")
        account = Account(account_number, holder_name, kind)
        self._logger.log("account_opened", account=account_number, kind=account.kind.value)
        return self.add_account(account)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def get_account(self, account_number: str) -> Account:
        try:
            return self._accounts[account_number]
        except KeyError as exc:
            self._logger.log("account_lookup_failed", account=account_number)
            raise AccountNotFoundError(f"Account '{account_number}' does not exist.") from exc

    def find_account(self, account_number: str) -> Optional[Account]:
        """Return the account for ``account_number`` or ``None``."""

        return self._accounts.get(account_number)

    def has_account(self, account_number: str) -> bool:
        return account_number in self._accounts

    def list_accounts(self) -> Tuple[str, ...]:
        return tuple(sorted(self._accounts))

    @property
    def accounts(self) -> Tuple[Account, ...]:
        """Registered accounts in registration order."""

        return tuple(self._accounts.values())

    def __contains__(self, account_number: object) -> bool:
        return account_number in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(tuple(self._accounts.values()))

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------
    def summary(self) -> Dict[str, Decimal]:
        return {number: self._accounts[number].balance for number in sorted(self._accounts)}

    def total_balance(self) -> Decimal:
        return sum((account.balance for account in self._accounts.values()), ZERO)


__all__ = ["Bank"]
