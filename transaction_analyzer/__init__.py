"""In-memory financial transaction store and query engine."""

from .analyzer import TransactionAnalyzer
from .errors import (
    InvalidAmountError,
    InvalidTypeError,
    MissingFieldError,
    TransactionValidationError,
)
from .models import PeriodFilter, Transaction

__all__ = [
    "TransactionAnalyzer",
    "Transaction",
    "PeriodFilter",
    "TransactionValidationError",
    "MissingFieldError",
    "InvalidTypeError",
    "InvalidAmountError",
]
