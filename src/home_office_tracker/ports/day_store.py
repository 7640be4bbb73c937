"""Day storage interface."""

from datetime import date
from typing import Protocol


class DayStore(Protocol):
    """Interface for persisting the set of home office days."""

    def add(self, day: date) -> bool:
        """Store a day. Returns False if it was already stored."""
        ...

    def remove(self, day: date) -> bool:
        """Delete a day. Returns False if it was not stored."""
        ...

    def all(self) -> list[date]:
        """All stored days in ascending order."""
        ...

    def close(self) -> None:
        ...
