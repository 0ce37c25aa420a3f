"""Convert minibank objects to JSON friendly dictionaries."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Dict

from .models import Transaction

if TYPE_CHECKING:  # pragma: no cover
    from .account import Account
    from .bank import Bank


class SnapshotExporter:
    """Build plain-data snapshots of accounts and banks."""

    def account_snapshot(self, account: "Account") -> Dict[str, object]:
        return {
            "account_number": account.account_number,
            "holder": account.holder_name,
            "kind": account.kind.value,
            "interest_rate": str(account.kind.interest_rate),
            "balance": str(account.balance),
            "interest": str(account.calculate_interest()),
            "transactions": [self._serialise_transaction(tx) for tx in account.transactions],
        }

    def bank_snapshot(self, bank: "Bank") -> Dict[str, object]:
        return {
            "accounts": [self.account_snapshot(account) for account in bank.accounts],
            "total_balance": str(bank.total_balance()),
        }

    def to_json(self, payload: Dict[str, object]) -> str:
        return json.dumps(payload, sort_keys=True)

    def _serialise_transaction(self, transaction: Transaction) -> Dict[str, object]:
        return {
            "timestamp": transaction.timestamp.isoformat(),
            "type": transaction.type.value,
            "amount": str(transaction.amount),
            "balance_after": str(transaction.balance_after),
            "description": transaction.description,
        }


__all__ = ["SnapshotExporter"]
