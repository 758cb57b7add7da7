"""Transaction query tools for a tool-calling host."""

import calendar
from typing import Any

from langchain_core.tools import tool

from transaction_analyzer.analyzer import TransactionAnalyzer
from transaction_analyzer.config import settings
from transaction_analyzer.errors import TransactionValidationError
from transaction_analyzer.utils.logging import AuditLogger
from transaction_analyzer.utils.session import get_current_analyzer


@tool
def get_summary() -> dict[str, Any]:
    """Get aggregate figures for all stored transactions.

    Returns:
        Dictionary with count, totals, average, transaction types and the
        dominant type (by count)
    """
    analyzer = get_current_analyzer()
    total = analyzer.total_amount()
    debit_total = analyzer.total_debit_amount()

    return {
        "count": len(analyzer),
        "total_amount": total,
        "total_debit_amount": debit_total,
        "total_credit_amount": total - debit_total,
        "average_amount": analyzer.average_amount(),
        "types": analyzer.unique_types(),
        "dominant_type": analyzer.dominant_type(),
    }


@tool
def get_transactions(
    transaction_type: str | None = None,
    merchant_name: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
    min_amount: float | None = None,
    max_amount: float | None = None,
    before_date: str | None = None,
    limit: int = 10,
) -> dict[str, Any]:
    """Search stored transactions with optional filters combined with AND.

    Args:
        transaction_type: Optional type filter (debit or credit)
        merchant_name: Optional exact merchant name
        start_date: Optional range start (YYYY-MM-DD, inclusive); needs end_date
        end_date: Optional range end (YYYY-MM-DD, inclusive); needs start_date
        min_amount: Optional minimum amount (inclusive)
        max_amount: Optional maximum amount (inclusive)
        before_date: Optional cutoff (YYYY-MM-DD, exclusive)
        limit: Maximum number of results to return (default 10)

    Returns:
        Dictionary with:
        - transactions: List of matching transactions
        - count: Number of matches found
        - message: Human-readable summary
    """
    view = get_current_analyzer()
    if transaction_type is not None:
        view = TransactionAnalyzer(view.transactions_by_type(transaction_type))
    if merchant_name is not None:
        view = TransactionAnalyzer(view.transactions_by_merchant(merchant_name))
    if start_date is not None or end_date is not None:
        if start_date is None or end_date is None:
            return {
                "transactions": [],
                "count": 0,
                "message": "Both start_date and end_date are required for a date range.",
            }
        view = TransactionAnalyzer(view.transactions_in_date_range(start_date, end_date))
    if min_amount is not None or max_amount is not None:
        view = TransactionAnalyzer(
            view.transactions_by_amount_range(
                min_amount if min_amount is not None else 0,
                max_amount if max_amount is not None else float("inf"),
            )
        )
    if before_date is not None:
        view = TransactionAnalyzer(view.transactions_before_date(before_date))
    matches = view.all_transactions()

    total_count = len(matches)
    if total_count == 0:
        return {
            "transactions": [],
            "count": 0,
            "message": "No matching transactions found.",
        }

    txn_dicts = [txn.to_display_dict() for txn in matches[:limit]]

    if total_count == 1:
        message = "Found 1 matching transaction."
    elif total_count > limit:
        message = f"Found {total_count} matching transactions. Showing top {limit}."
    else:
        message = f"Found {total_count} matching transactions."

    return {
        "transactions": txn_dicts,
        "count": total_count,
        "total_shown": len(txn_dicts),
        "message": message,
    }


@tool
def get_transaction_by_id(transaction_id: str) -> dict[str, Any]:
    """Get a specific transaction by ID.

    Args:
        transaction_id: The transaction ID

    Returns:
        Transaction details or a not-found message
    """
    analyzer = get_current_analyzer()
    txn = analyzer.find_by_id(transaction_id)

    if txn is None:
        return {
            "found": False,
            "message": f"Transaction {transaction_id} not found.",
        }

    return {
        "found": True,
        "transaction": txn.to_display_dict(),
        "raw_amount": txn.amount,
    }


@tool
def get_monthly_activity(
    year: int | None = None,
    month: int | None = None,
    day: int | None = None,
) -> dict[str, Any]:
    """Get the busiest months and the total spent in a period.

    Args:
        year: Optional year for the period total
        month: Optional month (1-12) for the period total
        day: Optional day of month for the period total

    Returns:
        Dictionary with the period total and the months with the most
        transactions overall and the most debit transactions
    """
    analyzer = get_current_analyzer()
    busiest = analyzer.month_with_most_transactions()
    busiest_debit = analyzer.month_with_most_debit_transactions()

    return {
        "period": {"year": year, "month": month, "day": day},
        "period_total": analyzer.total_amount_by_period(year, month, day),
        "busiest_month": busiest,
        "busiest_month_name": calendar.month_name[busiest],
        "busiest_debit_month": busiest_debit,
        "busiest_debit_month_name": calendar.month_name[busiest_debit],
    }


@tool
def add_transaction(
    date: str,
    amount: float,
    transaction_type: str,
    description: str,
    merchant_name: str,
    card_type: str,
    transaction_id: str | None = None,
) -> dict[str, Any]:
    """Add a new transaction to the store.

    Args:
        date: Transaction date (YYYY-MM-DD)
        amount: Non-negative amount
        transaction_type: debit or credit
        description: Free-text description
        merchant_name: Merchant name
        card_type: Card type
        transaction_id: Optional ID; the next numeric ID is used when omitted

    Returns:
        Dictionary with success flag, and the new ID or the validation error
    """
    analyzer = get_current_analyzer()
    audit = AuditLogger(settings.log_dir, source="tools", level=settings.log_level)
    new_id = transaction_id or analyzer.next_id()

    try:
        analyzer.append({
            "id": new_id,
            "date": date,
            "amount": amount,
            "type": transaction_type,
            "description": description,
            "merchant_name": merchant_name,
            "card_type": card_type,
        })
    except TransactionValidationError as e:
        audit.log_transaction_rejected(e.kind, e.field, str(e))
        return {
            "success": False,
            "error": e.kind,
            "field": e.field,
            "message": str(e),
        }

    audit.log_transaction_added(new_id, amount, transaction_type)
    return {
        "success": True,
        "transaction_id": new_id,
        "count": len(analyzer),
        "message": f"Transaction {new_id} added.",
    }
