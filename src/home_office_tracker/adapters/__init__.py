"""Adapters - I/O implementations of ports."""

from .sqlite_store import SqliteDayStore, StoreError

__all__ = [
    "SqliteDayStore",
    "StoreError",
]
