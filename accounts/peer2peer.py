"""
Peer-to-peer lending account — an investor that keeps its cash deployed in
36-month micro-loans ("notes").

Each simulated day (update):
  1. broadcast the monthly snapshot on the 1st, then the daily snapshot
  2. originate notes while cash exceeds the note size (capped per day)
  3. tick the notes whose pay day is today
  4. double the note size once interest income outgrows it

Interest is pre-amortized at origination: a note pays the same principal
and the same interest every month, so a tick is a constant-time update.

At any quiescent point:
  account_value == deposits − withdrawals + interest
  available_cash + outstanding_principal == account_value
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from operator import attrgetter
from typing import Dict, List, Optional

from core.exceptions import InsufficientFundsError, UnknownTransactionTypeError
from core.messages import AccountInfo, Message, MessageType
from core.money import USD, format_usd
from core.utils import add_days, add_months, random_future_business_day
from distributions.sampler import LendingDistributions, RandomSource

from .base import Account, Outbox
from .events import simulate_payment_day
from .transaction import Transaction, TransactionType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LendingTerms:
    """Note terms and origination limits."""
    term_months: int = 36
    compounding_years: int = 3
    rate_floor: float = 1.08
    rate_spread: float = 0.12
    max_daily_originations: int = 85
    charge_off_rate: float = 0.005
    start_window_days: int = 7
    pay_window_days: int = 60
    growth_multiple: int = 4


@dataclass
class MicroLoan:
    id: int
    start_date: date
    due_date: date
    pay_day: date
    total_rate: float
    monthly_principal: USD
    monthly_interest: USD
    outstanding_principal: USD
    total_paid: USD = 0
    payments_made: int = 0

    @property
    def is_active(self) -> bool:
        return self.outstanding_principal > 0

    def process(self, day: date, account: "Peer2PeerAccount") -> None:
        if not self.is_active or day != self.pay_day:
            return

        payment = simulate_payment_day(
            outstanding_principal=self.outstanding_principal,
            scheduled_principal=self.monthly_principal,
            interest=self.monthly_interest,
            final_installment=self.payments_made + 1 >= account.terms.term_months,
            charge_off_rate=account.terms.charge_off_rate,
            rng=account.rng,
        )
        if payment.charged_off:
            account.append(Transaction(
                day, TransactionType.MONTHLY_PAYMENT, f"Charge-off for loan #{self.id}", self.outstanding_principal
            ))
        else:
            account.append(Transaction(
                day, TransactionType.MONTHLY_PAYMENT, f"Payment on loan #{self.id}", payment.cash
            ))

        self.total_paid += payment.cash
        self.outstanding_principal -= payment.principal
        self.payments_made += 1
        account.receive_payment(payment.principal, payment.interest, payment.reported_cash)

        if self.is_active:
            self.due_date = add_months(day, 1)
            self.pay_day = add_days(day, int(account.distributions.pay_day.draw(account.rng) * account.terms.pay_window_days))


class Peer2PeerAccount(Account):
    def __init__(
        self,
        name: str,
        opened: date,
        initial: USD,
        per_investment: USD,
        *,
        rng: RandomSource,
        distributions: Optional[LendingDistributions] = None,
        terms: Optional[LendingTerms] = None,
    ):
        self.name = name
        self.rng = rng
        self.distributions = distributions or LendingDistributions()
        self.terms = terms or LendingTerms()

        self.account_value: USD = initial
        self.available_cash: USD = initial
        self.per_investment: USD = per_investment
        self.deposits: USD = initial
        self.withdrawals: USD = 0
        self.invested: USD = 0
        self.interest: USD = 0
        self.outstanding_principal: USD = 0

        self.monthly_cashflow: USD = 0
        self.monthly_interest: USD = 0
        self.daily_cashflow: USD = 0
        self.daily_interest: USD = 0

        self.ledger: List[Transaction] = [
            Transaction(opened, TransactionType.DEPOSIT, "Initial deposit", initial)
        ]
        self.loans: List[MicroLoan] = []
        self._due: Dict[date, List[MicroLoan]] = defaultdict(list)

    def current_balance(self) -> USD:
        return self.available_cash

    @property
    def active_loans(self) -> int:
        return sum(1 for loan in self.loans if loan.is_active)

    def append(self, tx: Transaction) -> None:
        if tx.type is TransactionType.DEPOSIT:
            self.ledger.append(tx)
            self.account_value += tx.amount
            self.available_cash += tx.amount
            self.deposits += tx.amount
        elif tx.type is TransactionType.WITHDRAWAL:
            if tx.amount > self.available_cash:
                raise InsufficientFundsError(
                    f"{self.name}: withdrawal of {format_usd(tx.amount)} exceeds "
                    f"available cash {format_usd(self.available_cash)}"
                )
            self.ledger.append(tx)
            self.available_cash -= tx.amount
            self.account_value -= tx.amount
            self.withdrawals += tx.amount
        elif tx.type is TransactionType.MONTHLY_PAYMENT:
            # balances move in receive_payment()
            self.ledger.append(tx)
        else:
            raise UnknownTransactionTypeError(f"{self.name}: cannot post {tx.type.value}")

    def validate(self, tx: Transaction) -> bool:
        if tx.type is TransactionType.DEPOSIT:
            return True
        return tx.type is TransactionType.WITHDRAWAL and self.available_cash > tx.amount

    def receive_payment(self, principal: USD, interest: USD, cashflow: Optional[USD] = None) -> None:
        """
        Roll a note's principal and interest back into the account.

        cashflow is what the reports see; it defaults to principal + interest.
        A charge-off returns the whole residual but reports one installment.
        """
        if cashflow is None:
            cashflow = principal + interest
        self.interest += interest
        self.account_value += interest
        self.available_cash += principal + interest
        self.outstanding_principal -= principal
        self.monthly_cashflow += cashflow
        self.monthly_interest += interest
        self.daily_cashflow += cashflow
        self.daily_interest += interest

    # ------------------------------------------------------------------
    # Daily tick
    # ------------------------------------------------------------------

    def update(self, day: date, outbox: Outbox) -> None:
        self._broadcast(day, outbox)
        self._originate(day)

        starting_value = self.account_value
        for loan in sorted(self._due.pop(day, []), key=attrgetter("id")):
            try:
                loan.process(day, self)
            except Exception:
                logger.exception("%s: loan #%d failed to process on %s", self.name, loan.id, day)
                continue
            # a pay day redrawn onto today is never reached: the note drops out
            if loan.is_active and loan.pay_day > day:
                self._due[loan.pay_day].append(loan)

        if self.account_value - starting_value > self.per_investment * self.terms.growth_multiple:
            self.per_investment *= 2
            logger.info("%s: note size raised to %s on %s", self.name, format_usd(self.per_investment), day)

    def _broadcast(self, day: date, outbox: Outbox) -> None:
        if day.day == 1:
            outbox.dispatch(Message(
                MessageType.MONTHLY_ACCOUNT_INFO,
                AccountInfo(day, self.available_cash, self.account_value, self.monthly_cashflow, self.monthly_interest),
            ))
            self.monthly_cashflow = 0
            self.monthly_interest = 0

        outbox.dispatch(Message(
            MessageType.DAILY_ACCOUNT_INFO,
            AccountInfo(day, self.available_cash, self.account_value, self.daily_cashflow, self.daily_interest),
        ))
        self.daily_cashflow = 0
        self.daily_interest = 0

    def _originate(self, day: date) -> None:
        t = self.terms
        originated = 0
        while self.available_cash > self.per_investment and originated < t.max_daily_originations:
            rate = t.rate_floor + self.distributions.rate.draw(self.rng) * t.rate_spread
            total_rate = rate ** t.compounding_years
            principal_payment = int(self.per_investment / t.term_months)
            interest_payment = int((self.per_investment * total_rate - self.per_investment) / t.term_months)

            start = random_future_business_day(day, self.distributions.start.draw(self.rng), t.start_window_days)
            loan = MicroLoan(
                id=len(self.loans),
                start_date=start,
                due_date=add_months(start, 1),
                pay_day=add_days(start, int(self.distributions.pay_day.draw(self.rng) * t.pay_window_days)),
                total_rate=total_rate,
                monthly_principal=principal_payment,
                monthly_interest=interest_payment,
                outstanding_principal=self.per_investment,
            )
            self.loans.append(loan)
            self._due[loan.pay_day].append(loan)

            self.outstanding_principal += self.per_investment
            self.available_cash -= self.per_investment
            self.invested += self.per_investment
            originated += 1

    def __str__(self) -> str:
        return (
            f"{self.name}\t{format_usd(self.available_cash)}\n"
            f"\t- Account Value:\t{format_usd(self.account_value)}\n"
            f"\t- Deposits:\t\t{format_usd(self.deposits)}\n"
            f"\t- Invested:\t\t{format_usd(self.invested)}\n"
            f"\t- Loans:\t\t{len(self.loans)}\n"
            f"\t- Per Loan:\t\t{format_usd(self.per_investment)}\n"
            f"\t- Outstanding:\t\t{format_usd(self.outstanding_principal)}\n"
        )
