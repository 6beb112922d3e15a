"""
Fixed-amount line items: monthly postings, monthly transfers and one-time postings.

Monthly items fire when the calendar day equals day_of_month, so a
day_of_month of 29–31 skips the months that are too short.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Optional

from accounts.transaction import Transaction, TransactionType
from core.money import USD, format_usd

from .base import LineItem, in_window

if TYPE_CHECKING:
    from engine.bank import Bank


@dataclass
class MonthlyTransaction(LineItem):
    account: str
    name: str
    type: TransactionType
    amount: USD
    day_of_month: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def description(self) -> str:
        return f"{self.name:>20}\t{format_usd(self.amount)}"

    def process(self, day: date, bank: "Bank") -> None:
        if day.day != self.day_of_month or not in_window(day, self.start_date, self.end_date):
            return
        bank.append(self.account, Transaction(day, self.type, self.name, self.amount))


@dataclass
class MonthlyTransfer(LineItem):
    from_account: str
    to_account: str
    amount: USD
    day_of_month: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def description(self) -> str:
        return f"TRANSFER {self.from_account} to {self.to_account}\t{format_usd(self.amount)}"

    def process(self, day: date, bank: "Bank") -> None:
        if day.day != self.day_of_month or not in_window(day, self.start_date, self.end_date):
            return
        bank.transfer(day, self.from_account, self.to_account, self.amount)


@dataclass
class OneTimeTransaction(LineItem):
    account: str
    name: str
    type: TransactionType
    amount: USD
    date: date

    def description(self) -> str:
        return f"{self.name:>20}\t{format_usd(self.amount)}"

    def process(self, day: date, bank: "Bank") -> None:
        if day != self.date:
            return
        bank.append(self.account, Transaction(day, self.type, self.name, self.amount))
