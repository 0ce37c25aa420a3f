import json

from minibank.account import Account
from minibank.bank import Bank
from minibank.exporting import SnapshotExporter


def test_account_snapshot() -> None:
    account = Account.savings("SA001", "John Doe")
    account.deposit(500)
    account.withdraw(200)

    snapshot = SnapshotExporter().account_snapshot(account)

    assert snapshot["account_number"] == "SA001"
    assert snapshot["holder"] == "John Doe"
    assert snapshot["kind"] == "savings"
    assert snapshot["interest_rate"] == "0.02"
    assert snapshot["balance"] == "300.00"
    assert snapshot["interest"] == "6.0000"
    assert [tx["description"] for tx in snapshot["transactions"]] == [
        "Deposited 500.00",
        "Withdrew 200.00",
    ]
    assert snapshot["transactions"][1]["balance_after"] == "300.00"


def test_bank_snapshot_serialises_to_json() -> None:
    bank = Bank()
    bank.add_account(Account.checking("CA001", "Jane Smith")).deposit(40)
    bank.add_account(Account.loan("LA001", "Michael Johnson")).deposit(60)
    exporter = SnapshotExporter()

    payload = json.loads(exporter.to_json(exporter.bank_snapshot(bank)))

    assert payload["total_balance"] == "100.00"
    assert [item["account_number"] for item in payload["accounts"]] == ["CA001", "LA001"]
