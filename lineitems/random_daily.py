from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Dict, Optional

from accounts.transaction import Transaction, TransactionType
from core.money import USD, format_usd
from distributions.sampler import BetaParams, RandomSource

from .base import LineItem, in_window

if TYPE_CHECKING:
    from engine.bank import Bank

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


@dataclass
class DailyRandomTransaction(LineItem):
    """
    Discretionary spending: on each day, fire with the weekday's probability
    and post base + β·(max − base), β drawn from a Beta distribution.

    percentages maps date.weekday() (Monday = 0) to a probability in [0, 1];
    weekdays that are missing never fire.
    """

    account: str
    name: str
    type: TransactionType
    base_amount: USD
    max_amount: USD
    beta: BetaParams
    rng: RandomSource
    percentages: Dict[int, float] = field(default_factory=dict)
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def __post_init__(self) -> None:
        for weekday, p in self.percentages.items():
            if not 0 <= weekday <= 6:
                raise ValueError(f"{self.name}: weekday {weekday} is not in 0..6.")
            if not 0.0 <= p <= 1.0:
                raise ValueError(f"{self.name}: probability {p} for {WEEKDAYS[weekday]} is not in [0, 1].")
        if self.max_amount < self.base_amount:
            raise ValueError(f"{self.name}: max_amount is below base_amount.")

    def description(self) -> str:
        return f"{self.name:>20}\t{format_usd(self.base_amount)} - {format_usd(self.max_amount)}"

    def process(self, day: date, bank: "Bank") -> None:
        if not in_window(day, self.start_date, self.end_date):
            return
        p = self.percentages.get(day.weekday())
        if p is None or self.rng.uniform() >= p:
            return
        amount = self.base_amount + int(self.beta.draw(self.rng) * (self.max_amount - self.base_amount))
        bank.append(self.account, Transaction(day, self.type, self.name, amount))
