"""Models module - Pydantic data models."""

from .transaction import (
    REQUIRED_FIELDS,
    TRANSACTION_TYPES,
    PeriodFilter,
    Transaction,
    TransactionType,
    parse_date,
)

__all__ = [
    "REQUIRED_FIELDS",
    "TRANSACTION_TYPES",
    "PeriodFilter",
    "Transaction",
    "TransactionType",
    "parse_date",
]
