"""
Borrower-side amortizing loan.

Payment math (P principal, r = APR/1200, n = 12·years):
  c    = r·P / (1 − (1+r)^−n)                      level monthly payment
  I(i) = (P·r − c)·((1+r)^i − 1)/r + c·i            cumulative interest after i payments
  principal(i) = c·i − I(i)

The schedule is tracked by `period`, the number of the payment due next
(starts at 1). Payments 1..n−1 follow the closed-form split above; the last
payment settles whatever remaining balance is left, so that

  principal_paid + interest_paid + remaining_balance == c·n

holds after every accepted payment.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from core.exceptions import LoanPaidOffError, UnknownTransactionTypeError
from core.money import USD, format_usd, round_cents, to_dollars

from .base import Account
from .transaction import Transaction, TransactionType

logger = logging.getLogger(__name__)


def level_payment(balance: float, monthly_rate: float, n_months: int) -> float:
    """Standard fully-amortizing level payment (PMT) with near-zero rate guard."""
    if n_months <= 0:
        return float(balance)
    if abs(monthly_rate) < 1e-12:
        return float(balance) / n_months
    return float(balance) * monthly_rate / (1 - (1 + monthly_rate) ** -n_months)


def cumulative_split(balance: float, monthly_rate: float, payment: float, i: int) -> Tuple[float, float]:
    """(interest, principal) paid in total after i level payments, in dollars."""
    if abs(monthly_rate) < 1e-12:
        return 0.0, payment * i
    interest = (balance * monthly_rate - payment) * ((1 + monthly_rate) ** i - 1) / monthly_rate + payment * i
    return interest, payment * i - interest


class LoanAccount(Account):
    """Loan from the borrower's point of view. Deposits are repayments."""

    def __init__(self, name: str, principal: USD, apr: float, years: int, payments: int = 0):
        self.name = name
        self.loan_amount: USD = principal
        self.interest_rate = apr
        self.monthly_rate = apr / 100.0 / 12.0
        self.periods = years * 12

        c = level_payment(to_dollars(principal), self.monthly_rate, self.periods)
        self.monthly_payment: USD = round_cents(c)
        self.remaining_balance: USD = round_cents(c * self.periods)
        self.principal_paid: USD = 0
        self.interest_paid: USD = 0
        self.period = 1
        self.ledger: List[Transaction] = []

        # loan already part-way through its term
        if payments > 0:
            self.remaining_balance -= self.monthly_payment * payments
            self._settle_through(payments)
            self.period += payments
        logger.debug("%s opened: %s over %d periods at %.3f%%", name, format_usd(principal), self.periods, apr)

    @property
    def months_paid(self) -> int:
        return self.period - 1

    @property
    def total_scheduled(self) -> USD:
        return self.monthly_payment * self.periods

    @property
    def is_paid_off(self) -> bool:
        return self.remaining_balance <= 0

    def _settle_through(self, i: int) -> None:
        interest, principal = cumulative_split(
            to_dollars(self.loan_amount), self.monthly_rate, to_dollars(self.monthly_payment), i
        )
        self.interest_paid = round_cents(interest)
        self.principal_paid = round_cents(principal)

    def current_balance(self) -> USD:
        return self.remaining_balance

    def append(self, tx: Transaction) -> None:
        logger.debug("%s %s", self.name, tx)
        if self.remaining_balance <= 0:
            raise LoanPaidOffError(f"{self.name}: loan has been paid off")
        if tx.type is not TransactionType.DEPOSIT:
            raise UnknownTransactionTypeError(f"{self.name}: cannot post {tx.type.value}")

        if self.period < self.periods:
            self.ledger.append(tx)
            self.remaining_balance -= self.monthly_payment
            self._settle_through(self.period)
        else:
            # final payment or residual payoff
            self.ledger.append(tx)
            self.remaining_balance -= tx.amount
            self.principal_paid += tx.amount
        self.period += 1

    def validate(self, tx: Transaction) -> bool:
        if tx.type is not TransactionType.DEPOSIT:
            return False
        return self.period < self.periods or self.remaining_balance > 0

    def __str__(self) -> str:
        return (
            f"{self.name}\t{format_usd(self.remaining_balance)}\n"
            f"\t- Loan Amount:\t\t{format_usd(self.loan_amount)}\n"
            f"\t- Periods:\t\t{self.periods}\n"
            f"\t- APR:\t\t\t{self.interest_rate:.3f}%\n"
            f"\t- Monthly Payment:\t{format_usd(self.monthly_payment)}\n"
            f"\t- Principal Paid:\t{format_usd(self.principal_paid)}\n"
            f"\t- Interest Paid:\t{format_usd(self.interest_paid)}\n"
        )
