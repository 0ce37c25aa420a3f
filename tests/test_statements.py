import io

from minibank.account import Account
from minibank.statements import (
    balance_lines,
    interest_lines,
    print_summary,
    summary_lines,
    transaction_history_header,
    transaction_history_lines,
)


def _sample_accounts() -> list[Account]:
    savings = Account.savings("SA001", "John Doe")
    savings.deposit(500)
    savings.withdraw(200)
    checking = Account.checking("CA001", "Jane Smith")
    checking.deposit(1000)
    checking.withdraw(500)
    loan = Account.loan("LA001", "Michael Johnson")
    loan.deposit(2000)
    loan.withdraw(1000)
    return [savings, checking, loan]


def test_history_header_names_kind_and_number() -> None:
    account = Account.checking("CA001", "Jane Smith")

    assert transaction_history_header(account) == (
        "Checking Account Transaction History for Account Number: CA001"
    )
    assert transaction_history_lines(account) == [transaction_history_header(account)]


def test_history_lines_follow_insertion_order() -> None:
    savings = _sample_accounts()[0]

    assert transaction_history_lines(savings) == [
        "Savings Account Transaction History for Account Number: SA001",
        "Deposited 500.00",
        "Withdrew 200.00",
    ]


def test_balance_and_interest_blocks() -> None:
    accounts = _sample_accounts()

    assert balance_lines(accounts) == [
        "Account Balances:",
        "Savings Account Balance: 300.00",
        "Checking Account Balance: 500.00",
        "Loan Account Balance: 1000.00",
    ]
    assert interest_lines(accounts, symbol="$") == [
        "Account Interests:",
        "Savings Account Interest: $6.00",
        "Checking Account Interest: $5.00",
        "Loan Account Interest: $50.00",
    ]


def test_summary_lines_accept_generators() -> None:
    lines = summary_lines(account for account in _sample_accounts())

    assert lines[0] == "Account Balances:"
    assert lines[4] == ""
    assert lines[5] == "Account Interests:"
    assert len(lines) == 9


def test_print_summary_writes_to_stream() -> None:
    buffer = io.StringIO()

    print_summary(_sample_accounts(), buffer)

    assert buffer.getvalue().splitlines() == summary_lines(_sample_accounts())
