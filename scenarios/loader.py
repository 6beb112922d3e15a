from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from accounts import BankAccount, LoanAccount, Peer2PeerAccount
from accounts.base import Account
from core.exceptions import ScenarioError
from core.money import dollars
from distributions.sampler import BetaParams, LendingDistributions, RandomSource
from engine.bank import Bank
from lineitems import (
    DailyRandomTransaction,
    LineItem,
    LoanPayment,
    MonthlyTransaction,
    MonthlyTransfer,
    OneTimeTransaction,
    WEEKDAYS,
)

from .schema import (
    BankAccountSpec,
    BetaSpec,
    DailyRandomSpec,
    LoanAccountSpec,
    LoanPaymentSpec,
    MonthlySpec,
    OneTimeSpec,
    Peer2PeerAccountSpec,
    ScenarioSpec,
    TransferSpec,
)


def load_scenario(path: Union[str, Path]) -> ScenarioSpec:
    """Read and validate a JSON scenario file."""
    try:
        return ScenarioSpec.model_validate_json(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValidationError) as exc:
        raise ScenarioError(f"{path}: {exc}") from exc


def _beta(spec: Optional[BetaSpec], default: BetaParams) -> BetaParams:
    return default if spec is None else BetaParams(spec.alpha, spec.beta)


def build_account(spec, opened, rng: RandomSource) -> Account:
    if isinstance(spec, BankAccountSpec):
        return BankAccount(spec.name, opened, dollars(spec.initial))
    if isinstance(spec, LoanAccountSpec):
        return LoanAccount(spec.name, dollars(spec.principal), spec.apr, spec.years, spec.payments)
    if isinstance(spec, Peer2PeerAccountSpec):
        defaults = LendingDistributions()
        distributions = LendingDistributions(
            rate=_beta(spec.rate, defaults.rate),
            start=_beta(spec.start, defaults.start),
            pay_day=_beta(spec.pay_day, defaults.pay_day),
        )
        return Peer2PeerAccount(
            spec.name, opened, dollars(spec.initial), dollars(spec.per_investment),
            rng=rng, distributions=distributions,
        )
    raise TypeError(f"Unsupported account spec: {type(spec).__name__}")


def build_line_item(spec, rng: RandomSource) -> LineItem:
    if isinstance(spec, MonthlySpec):
        return MonthlyTransaction(
            account=spec.account, name=spec.name, type=spec.type, amount=dollars(spec.amount),
            day_of_month=spec.day_of_month, start_date=spec.start_date, end_date=spec.end_date,
        )
    if isinstance(spec, TransferSpec):
        return MonthlyTransfer(
            from_account=spec.from_account, to_account=spec.to_account, amount=dollars(spec.amount),
            day_of_month=spec.day_of_month, start_date=spec.start_date, end_date=spec.end_date,
        )
    if isinstance(spec, OneTimeSpec):
        return OneTimeTransaction(
            account=spec.account, name=spec.name, type=spec.type, amount=dollars(spec.amount), date=spec.date,
        )
    if isinstance(spec, DailyRandomSpec):
        return DailyRandomTransaction(
            account=spec.account, name=spec.name, type=spec.type,
            base_amount=dollars(spec.base_amount), max_amount=dollars(spec.max_amount),
            beta=BetaParams(spec.beta.alpha, spec.beta.beta), rng=rng,
            percentages={WEEKDAYS.index(day): p for day, p in spec.percentages.items()},
            start_date=spec.start_date, end_date=spec.end_date,
        )
    if isinstance(spec, LoanPaymentSpec):
        return LoanPayment(
            from_account=spec.from_account, to_account=spec.to_account, day_of_month=spec.day_of_month,
            start_date=spec.start_date, end_date=spec.end_date,
        )
    raise TypeError(f"Unsupported line item spec: {type(spec).__name__}")


def build_bank(spec: ScenarioSpec, rng: RandomSource) -> Bank:
    """
    Instantiate the scenario's accounts (opened on its start date) and line
    items. Every random draw in the run comes from rng.
    """
    bank = Bank()
    for account_spec in spec.accounts:
        bank.add_account(build_account(account_spec, spec.start_date, rng))
    for item_spec in spec.line_items:
        bank.add_line_item(build_line_item(item_spec, rng))
    return bank
