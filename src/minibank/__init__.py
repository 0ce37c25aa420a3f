"""minibank package: savings, checking and loan accounts under a bank registry."""

from .account import Account
from .bank import Bank
from .config import Settings
from .exceptions import (
    AccountNotFoundError,
    BankError,
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidAmountError,
)
from .exporting import SnapshotExporter
from .models import AccountKind, Transaction, TransactionType
from .ops import StructuredLogger

__all__ = [
    "Account",
    "AccountKind",
    "AccountNotFoundError",
    "Bank",
    "BankError",
    "DuplicateAccountError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "Settings",
    "SnapshotExporter",
    "StructuredLogger",
    "Transaction",
    "TransactionType",
]
