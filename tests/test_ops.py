import json

from minibank.ops import StructuredLogger


def test_log_keeps_entries_in_memory() -> None:
    logger = StructuredLogger()

    entry = logger.log("account_added", account="SA001")

    assert entry["event"] == "account_added"
    assert entry["account"] == "SA001"
    assert "timestamp" in entry
    assert logger.tail() == (entry,)
    assert len(logger) == 1


def test_tail_and_events_filtering() -> None:
    logger = StructuredLogger()
    for number in ("SA001", "CA001", "LA001"):
        logger.log("account_added", account=number)
    logger.log("account_lookup_failed", account="ZZ999")

    assert [entry["account"] for entry in logger.tail(2)] == ["LA001", "ZZ999"]
    assert logger.tail(0) == ()
    assert len(logger.events("account_added")) == 3
    assert logger.events("unknown") == ()


def test_log_appends_json_lines(tmp_path) -> None:
    path = tmp_path / "nested" / "events.jsonl"
    logger = StructuredLogger(path=path)

    logger.log("account_added", account="SA001")
    logger.log("account_added", account="CA001")

    records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [record["account"] for record in records] == ["SA001", "CA001"]
