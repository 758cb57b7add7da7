"""Data module - transaction file loading."""

from .storage import load_analyzer, load_transactions

__all__ = ["load_analyzer", "load_transactions"]
