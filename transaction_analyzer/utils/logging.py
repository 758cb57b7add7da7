"""Logger factory and JSONL audit trail for store mutations."""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any


def get_logger(name: str, level: str = "INFO") -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, level.upper()))
    return logger


class AuditLogger:
    """Audit logger recording accepted and rejected transaction appends."""

    def __init__(
        self, log_dir: Path | None = None, source: str = "cli", level: str = "INFO"
    ):
        self.log_dir = log_dir or Path("logs")
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.source = source
        self._logger = get_logger(f"audit.{source}", level)

    def _get_log_file(self) -> Path:
        """Get the current audit log file path."""
        date_str = datetime.now().strftime("%Y-%m-%d")
        return self.log_dir / f"audit_{date_str}.jsonl"

    def _write_entry(self, entry: dict):
        """Write an audit entry to the log file."""
        entry["timestamp"] = datetime.now().isoformat()
        entry["source"] = self.source

        with open(self._get_log_file(), "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, default=str) + "\n")

    def log_transaction_added(self, transaction_id: str, amount: Any, transaction_type: str):
        """Log a transaction accepted into the store."""
        entry = {
            "event": "transaction_added",
            "transaction_id": transaction_id,
            "amount": amount,
            "type": transaction_type,
        }
        self._write_entry(entry)
        self._logger.info(f"Transaction {transaction_id} added")

    def log_transaction_rejected(self, error_kind: str, field: str, message: str):
        """Log a candidate transaction that failed validation."""
        entry = {
            "event": "transaction_rejected",
            "error": error_kind,
            "field": field,
            "message": message,
        }
        self._write_entry(entry)
        self._logger.warning(f"Transaction rejected ({error_kind}): {message}")
