"""Tools module - LangChain tools over the transaction analyzer."""

from .transactions import (
    add_transaction,
    get_monthly_activity,
    get_summary,
    get_transaction_by_id,
    get_transactions,
)

__all__ = [
    "add_transaction",
    "get_monthly_activity",
    "get_summary",
    "get_transaction_by_id",
    "get_transactions",
]
