"""Input loading for the report pipeline."""

from .loader import load_transactions, parse_transactions

__all__ = ["load_transactions", "parse_transactions"]
