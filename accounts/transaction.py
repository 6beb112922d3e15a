from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from core.money import USD, format_usd


class TransactionType(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    # payments received from micro-loans
    MONTHLY_PAYMENT = "MONTHLYPAYMENT"


@dataclass(frozen=True)
class Transaction:
    """A posted ledger entry. Amount is never negative; kind carries the sign."""
    date: date
    type: TransactionType
    description: str
    amount: USD

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"Transaction amount must be non-negative, got {self.amount}.")

    @property
    def signed_amount(self) -> USD:
        return -self.amount if self.type is TransactionType.WITHDRAWAL else self.amount

    def __str__(self) -> str:
        return f"[{self.date:%Y/%m/%d}] {self.type.value} - {self.description} - {format_usd(self.amount)}"
