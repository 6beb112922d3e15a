"""
Scenario file schema (pydantic).

A scenario is what the embedding program would otherwise build in memory:
a date range, a seed, the accounts and the line items. Amounts are given in
dollars and converted to cents when the bank is built.

  {
    "start_date": "2018-01-01",
    "end_date": "2018-12-31",
    "seed": 7,
    "accounts": [{"kind": "bank", "name": "Checking", "initial": 500}],
    "line_items": [{"kind": "monthly", "account": "Checking", "name": "Salary",
                    "type": "DEPOSIT", "amount": 7000, "day_of_month": 1}]
  }
"""

from __future__ import annotations

import datetime as dt
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from accounts.transaction import TransactionType
from lineitems.random_daily import WEEKDAYS

DayOfMonth = Annotated[int, Field(ge=1, le=31)]
Amount = Annotated[float, Field(ge=0)]


class _Spec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


# ----- accounts -----

class BankAccountSpec(_Spec):
    kind: Literal["bank"] = "bank"
    name: str
    initial: Amount = 0.0


class LoanAccountSpec(_Spec):
    kind: Literal["loan"] = "loan"
    name: str
    principal: Amount
    apr: Annotated[float, Field(ge=0)]
    years: Annotated[int, Field(ge=1)]
    payments: Annotated[int, Field(ge=0)] = 0

    @model_validator(mode="after")
    def _payments_within_term(self) -> "LoanAccountSpec":
        if self.payments >= self.years * 12:
            raise ValueError(f"{self.name}: payments ({self.payments}) must be below the term ({self.years * 12}).")
        return self


class BetaSpec(_Spec):
    alpha: Annotated[float, Field(gt=0)]
    beta: Annotated[float, Field(gt=0)]


class Peer2PeerAccountSpec(_Spec):
    kind: Literal["peer2peer"] = "peer2peer"
    name: str
    initial: Amount = 0.0
    per_investment: Annotated[float, Field(gt=0)] = 25.0
    rate: Optional[BetaSpec] = None
    start: Optional[BetaSpec] = None
    pay_day: Optional[BetaSpec] = None


AccountSpec = Annotated[
    Union[BankAccountSpec, LoanAccountSpec, Peer2PeerAccountSpec],
    Field(discriminator="kind"),
]


# ----- line items -----

class _Windowed(_Spec):
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None

    @model_validator(mode="after")
    def _window_order(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date is before start_date.")
        return self


class MonthlySpec(_Windowed):
    kind: Literal["monthly"] = "monthly"
    account: str
    name: str
    type: TransactionType
    amount: Amount
    day_of_month: DayOfMonth


class TransferSpec(_Windowed):
    kind: Literal["transfer"] = "transfer"
    from_account: str
    to_account: str
    amount: Amount
    day_of_month: DayOfMonth


class OneTimeSpec(_Spec):
    kind: Literal["one_time"] = "one_time"
    account: str
    name: str
    type: TransactionType
    amount: Amount
    date: dt.date


class DailyRandomSpec(_Windowed):
    kind: Literal["daily_random"] = "daily_random"
    account: str
    name: str
    type: TransactionType
    base_amount: Amount
    max_amount: Amount
    beta: BetaSpec
    percentages: Dict[str, Annotated[float, Field(ge=0, le=1)]]

    @field_validator("percentages")
    @classmethod
    def _known_weekdays(cls, v: Dict[str, float]) -> Dict[str, float]:
        unknown = [k for k in v if k.lower() not in WEEKDAYS]
        if unknown:
            raise ValueError(f"Unknown weekdays: {unknown}")
        return {k.lower(): p for k, p in v.items()}

    @model_validator(mode="after")
    def _amount_range(self) -> "DailyRandomSpec":
        if self.max_amount < self.base_amount:
            raise ValueError(f"{self.name}: max_amount is below base_amount.")
        return self


class LoanPaymentSpec(_Windowed):
    kind: Literal["loan_payment"] = "loan_payment"
    from_account: str
    to_account: str
    day_of_month: DayOfMonth


LineItemSpec = Annotated[
    Union[MonthlySpec, TransferSpec, OneTimeSpec, DailyRandomSpec, LoanPaymentSpec],
    Field(discriminator="kind"),
]


class ScenarioSpec(_Spec):
    name: str = "scenario"
    start_date: dt.date
    end_date: dt.date
    seed: int = 7
    accounts: List[AccountSpec] = Field(default_factory=list)
    line_items: List[LineItemSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def _consistent(self) -> "ScenarioSpec":
        if self.end_date < self.start_date:
            raise ValueError("end_date is before start_date.")
        names = [a.name for a in self.accounts]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"Duplicate account names: {dupes}")
        return self

    def account_kinds(self) -> Dict[str, str]:
        return {a.name: a.kind for a in self.accounts}
