"""Custom exception hierarchy for the minibank package."""

from __future__ import annotations


class BankError(Exception):
    """Base class for all minibank specific errors."""


class InvalidAmountError(BankError, ValueError):
    """Raised when an amount is not a positive, finite number."""


class InsufficientFundsError(BankError):
    """Raised when a withdrawal would result in a negative balance."""


class DuplicateAccountError(BankError):
    """Raised when registering an account number that is already taken."""


class AccountNotFoundError(BankError, LookupError):
    """Raised when an account lookup fails."""
