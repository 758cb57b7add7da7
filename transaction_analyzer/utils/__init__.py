"""Utilities module - Logging and audit trail."""

from .logging import get_logger, AuditLogger

__all__ = [
    "get_logger",
    "AuditLogger",
]
