"""Tests for the logger factory and the audit trail."""

import json
import logging
from datetime import datetime


from transaction_analyzer.utils.logging import AuditLogger, get_logger


def read_entries(log_dir):
    log_file = log_dir / f"audit_{datetime.now().strftime('%Y-%m-%d')}.jsonl"
    with open(log_file, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f]


class TestGetLogger:
    """Tests for get_logger."""

    def test_sets_level_and_single_handler(self):
        logger = get_logger("test.levels", "warning")
        get_logger("test.levels", "DEBUG")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1


class TestAuditLogger:
    """Tests for the JSONL audit logger."""

    def test_creates_log_dir(self, tmp_path):
        log_dir = tmp_path / "nested" / "logs"
        AuditLogger(log_dir, source="cli")

        assert log_dir.is_dir()

    def test_transaction_added_entry(self, tmp_path):
        audit = AuditLogger(tmp_path, source="tools")
        audit.log_transaction_added("11", 42.5, "credit")

        entries = read_entries(tmp_path)
        assert len(entries) == 1
        entry = entries[0]
        assert entry["event"] == "transaction_added"
        assert entry["transaction_id"] == "11"
        assert entry["amount"] == 42.5
        assert entry["type"] == "credit"
        assert entry["source"] == "tools"
        datetime.fromisoformat(entry["timestamp"])

    def test_transaction_rejected_entry(self, tmp_path):
        audit = AuditLogger(tmp_path, source="cli")
        audit.log_transaction_rejected("invalid_amount", "amount", "bad amount")

        entry = read_entries(tmp_path)[0]
        assert entry["event"] == "transaction_rejected"
        assert entry["error"] == "invalid_amount"
        assert entry["field"] == "amount"
        assert entry["message"] == "bad amount"
        assert entry["source"] == "cli"
        assert "timestamp" in entry

    def test_entries_append_one_per_line(self, tmp_path):
        audit = AuditLogger(tmp_path, source="cli")
        audit.log_transaction_added("1", 10, "debit")
        audit.log_transaction_rejected("invalid_type", "type", "nope")

        events = [e["event"] for e in read_entries(tmp_path)]
        assert events == ["transaction_added", "transaction_rejected"]

    def test_level_applies_to_audit_logger(self, tmp_path):
        AuditLogger(tmp_path, source="leveled", level="ERROR")

        assert logging.getLogger("audit.leveled").level == logging.ERROR


class TestAddTransactionAudit:
    """The add_transaction tool writes real audit entries."""

    def test_tool_writes_audit_file(self, tmp_path, monkeypatch):
        from transaction_analyzer.analyzer import TransactionAnalyzer
        from transaction_analyzer.config import settings
        from transaction_analyzer.tools.transactions import add_transaction
        from transaction_analyzer.utils.session import (
            reset_current_analyzer,
            set_current_analyzer,
        )

        monkeypatch.setattr(settings, "log_dir", tmp_path)
        token = set_current_analyzer(TransactionAnalyzer())
        try:
            add_transaction.invoke({
                "date": "2019-04-01",
                "amount": -1.0,
                "transaction_type": "debit",
                "description": "Bad",
                "merchant_name": "Nowhere",
                "card_type": "Visa",
            })
            add_transaction.invoke({
                "date": "2019-04-01",
                "amount": 3.0,
                "transaction_type": "debit",
                "description": "Tea",
                "merchant_name": "Cafe",
                "card_type": "Visa",
            })
        finally:
            reset_current_analyzer(token)

        entries = read_entries(tmp_path)
        assert [e["event"] for e in entries] == ["transaction_rejected", "transaction_added"]
        assert entries[0]["error"] == "invalid_amount"
        assert entries[1]["transaction_id"] == "1"
        assert all(e["source"] == "tools" for e in entries)
