"""JSON file loading for transaction records."""

import json
from pathlib import Path

from transaction_analyzer.analyzer import TransactionAnalyzer
from transaction_analyzer.config import settings
from transaction_analyzer.models.transaction import Transaction
from transaction_analyzer.utils.logging import get_logger


logger = get_logger("storage", settings.log_level)


def load_transactions(path: Path | str) -> list[Transaction]:
    """Load transactions from a JSON array file.

    Records are taken as they appear in the file and are not validated.

    Args:
        path: Path to the transactions file

    Returns:
        Transactions in file order

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the top-level JSON value is not an array of objects
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of transactions")

    transactions = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise ValueError(f"Record {index} in {path} is not a JSON object")
        transactions.append(Transaction.from_record(record))

    logger.info(f"Loaded {len(transactions)} transactions from {path}")
    return transactions


def load_analyzer(path: Path | str | None = None) -> TransactionAnalyzer:
    """Build an analyzer from a transactions file, defaulting to the configured one."""
    return TransactionAnalyzer(load_transactions(path or settings.transactions_file))
