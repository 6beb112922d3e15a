"""
Base class for ledgered accounts — just the interface, no implementations.
"""

from __future__ import annotations

from datetime import date
from typing import List, Protocol

from core.money import USD

from .transaction import Transaction


class Outbox(Protocol):
    """Anything that can fan a message out downstream (engine.process.ProcessList)."""

    def dispatch(self, msg) -> None: ...


class Account:
    """
    Interface shared by every account variant.

    validate() is the side-effect-free pre-check the bank runs before either
    leg of a transfer; append() posts and may still raise.
    """

    name: str
    ledger: List[Transaction]

    def current_balance(self) -> USD:
        raise NotImplementedError

    def validate(self, tx: Transaction) -> bool:
        raise NotImplementedError

    def append(self, tx: Transaction) -> None:
        raise NotImplementedError

    def update(self, day: date, outbox: Outbox) -> None:
        """Per-day hook, run after the day's line items. Most accounts do nothing."""
