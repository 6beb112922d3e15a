"""
Base class for line items — scheduled cash events evaluated against every
simulated date.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from engine.bank import Bank


def in_window(day: date, start: Optional[date], end: Optional[date]) -> bool:
    """start <= day <= end, with None meaning unbounded."""
    if start is not None and day < start:
        return False
    if end is not None and day > end:
        return False
    return True


class LineItem:
    """Interface: describe() for display, process() to act on a date."""

    def description(self) -> str:
        raise NotImplementedError

    def process(self, day: date, bank: "Bank") -> None:
        raise NotImplementedError
