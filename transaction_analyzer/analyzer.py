"""In-memory transaction store and its query engine."""

import math
from collections import Counter
from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal
from numbers import Real
from typing import Any, Literal

from transaction_analyzer.config import settings
from transaction_analyzer.errors import (
    InvalidAmountError,
    InvalidTypeError,
    MissingFieldError,
    TransactionValidationError,
)
from transaction_analyzer.models.transaction import (
    REQUIRED_FIELDS,
    TRANSACTION_TYPES,
    PeriodFilter,
    Transaction,
    is_missing,
    lookup_field,
    parse_date,
)
from transaction_analyzer.utils.logging import get_logger


logger = get_logger("analyzer", settings.log_level)

DominantType = Literal["debit", "credit", "equal"]


def _sum_amounts(transactions: Iterable[Transaction]) -> float:
    return sum((t.amount for t in transactions), 0)


def _copies(transactions: Iterable[Transaction]) -> list[Transaction]:
    return [t.model_copy() for t in transactions]


def _busiest_month(transactions: Iterable[Transaction]) -> int:
    counts: Counter[int] = Counter()
    for txn in transactions:
        txn_date = txn.parsed_date
        if txn_date is not None:
            counts[txn_date.month] += 1

    # Scan months in ascending order; only a strictly higher count replaces
    # the current best, so ties keep the lower month.
    best_month, best_count = 1, 0
    for month in sorted(counts):
        if counts[month] > best_count:
            best_month, best_count = month, counts[month]
    return best_month


def _validate_candidate(candidate: Mapping[str, Any]) -> dict[str, Any]:
    """Check a candidate record and return its values keyed by field name.

    Raises:
        MissingFieldError: the first required field absent from the candidate
        InvalidTypeError: type is not debit or credit
        InvalidAmountError: amount is not a number or is negative
    """
    values = {}
    for name in REQUIRED_FIELDS:
        value = lookup_field(candidate, name)
        if is_missing(value):
            raise MissingFieldError(name)
        values[name] = value

    if values["type"] not in TRANSACTION_TYPES:
        raise InvalidTypeError(values["type"])

    amount = values["amount"]
    if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
        raise InvalidAmountError(amount)
    # Amounts are stored as floats
    try:
        as_float = float(amount)
    except (OverflowError, ValueError):
        raise InvalidAmountError(amount) from None
    if not math.isfinite(as_float) or as_float < 0:
        raise InvalidAmountError(amount)
    values["amount"] = as_float

    return values


class TransactionAnalyzer:
    """Ordered transaction store answering derived queries.

    The initial records are taken as-is; only ``append`` validates. Every
    query returns fresh containers of copied records, so callers never hold
    a handle to the store's internal list.
    """

    def __init__(self, transactions: Iterable[Transaction | Mapping[str, Any]] = ()):
        self._transactions: list[Transaction] = [
            t.model_copy() if isinstance(t, Transaction) else Transaction.from_record(t)
            for t in transactions
        ]

    def __len__(self) -> int:
        return len(self._transactions)

    def __repr__(self) -> str:
        return f"TransactionAnalyzer(transactions={len(self._transactions)})"

    def unique_types(self) -> list[str]:
        """Distinct transaction types in order of first appearance."""
        return list(dict.fromkeys(t.type for t in self._transactions))

    def total_amount(self) -> float:
        """Sum of all transaction amounts, 0 for an empty store."""
        return _sum_amounts(self._transactions)

    def total_amount_by_period(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> float:
        """Sum of amounts whose date matches every provided criterion.

        Args:
            year: Optional calendar year
            month: Optional month number (1-12)
            day: Optional day of the month

        Returns:
            The matching total; the grand total when no criterion is given
        """
        period = PeriodFilter(year=year, month=month, day=day)
        return _sum_amounts(
            t for t in self._transactions if period.matches(t.parsed_date)
        )

    def transactions_by_type(self, transaction_type: str) -> list[Transaction]:
        return _copies(t for t in self._transactions if t.type == transaction_type)

    def transactions_in_date_range(
        self, start: str | date, end: str | date
    ) -> list[Transaction]:
        """Transactions dated between start and end, both inclusive."""
        start_date, end_date = parse_date(start), parse_date(end)
        if start_date is None or end_date is None:
            return []
        return _copies(
            t
            for t in self._transactions
            if t.parsed_date is not None and start_date <= t.parsed_date <= end_date
        )

    def transactions_by_merchant(self, merchant_name: str) -> list[Transaction]:
        return _copies(
            t for t in self._transactions if t.merchant_name == merchant_name
        )

    def average_amount(self) -> float:
        """Mean transaction amount, 0 for an empty store."""
        if not self._transactions:
            return 0
        return self.total_amount() / len(self._transactions)

    def transactions_by_amount_range(
        self, min_amount: float, max_amount: float
    ) -> list[Transaction]:
        """Transactions with min_amount <= amount <= max_amount."""
        return _copies(
            t for t in self._transactions if min_amount <= t.amount <= max_amount
        )

    def total_debit_amount(self) -> float:
        return _sum_amounts(t for t in self._transactions if t.type == "debit")

    def month_with_most_transactions(self) -> int:
        """Month number (1-12) with the most transactions.

        Ties resolve to the lower month number. An empty store yields 1.
        """
        return _busiest_month(self._transactions)

    def month_with_most_debit_transactions(self) -> int:
        """Like month_with_most_transactions, counting debits only."""
        return _busiest_month(t for t in self._transactions if t.type == "debit")

    def dominant_type(self) -> DominantType:
        """Type with strictly more transactions, or "equal" on a tie."""
        counts = Counter(t.type for t in self._transactions)
        if counts["debit"] > counts["credit"]:
            return "debit"
        if counts["credit"] > counts["debit"]:
            return "credit"
        return "equal"

    def transactions_before_date(self, cutoff: str | date) -> list[Transaction]:
        """Transactions dated strictly before the cutoff."""
        cutoff_date = parse_date(cutoff)
        if cutoff_date is None:
            return []
        return _copies(
            t
            for t in self._transactions
            if t.parsed_date is not None and t.parsed_date < cutoff_date
        )

    def find_by_id(self, transaction_id: str) -> Transaction | None:
        """First transaction with the given id, or None."""
        for txn in self._transactions:
            if txn.id == transaction_id:
                return txn.model_copy()
        return None

    def descriptions(self) -> list[str]:
        return [t.description for t in self._transactions]

    def append(self, candidate: Transaction | Mapping[str, Any]) -> None:
        """Validate a candidate transaction and add it to the end of the store.

        Args:
            candidate: A Transaction or a mapping keyed by field names or
                transaction-file keys

        Raises:
            MissingFieldError: a required field is absent
            InvalidTypeError: type is not debit or credit
            InvalidAmountError: amount is not a non-negative number

        The store is left unchanged when validation fails. Id uniqueness and
        date validity are not checked.
        """
        if isinstance(candidate, Transaction):
            candidate = {
                name: value
                for name, value in candidate.__dict__.items()
                if name in REQUIRED_FIELDS
            }

        try:
            values = _validate_candidate(candidate)
        except TransactionValidationError as e:
            logger.warning(f"Rejected transaction: {e}")
            raise

        self._transactions.append(Transaction.model_construct(**values))
        logger.info(f"Added transaction {values['id']} ({len(self._transactions)} total)")

    def all_transactions(self) -> list[Transaction]:
        """Copy of every transaction in insertion order."""
        return _copies(self._transactions)

    def next_id(self) -> str:
        """Suggest an id one above the highest numeric id, ignoring non-numeric ones."""
        numeric_ids = [
            int(t.id) for t in self._transactions
            if isinstance(t.id, str) and t.id.strip().isdigit()
        ]
        return str(max(numeric_ids, default=0) + 1)
