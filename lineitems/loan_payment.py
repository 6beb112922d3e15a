from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Optional

from accounts.loan import LoanAccount
from core.exceptions import AccountDoesNotExistError, InvalidTransferError

from .base import LineItem, in_window

if TYPE_CHECKING:
    from engine.bank import Bank


@dataclass
class LoanPayment(LineItem):
    """Monthly transfer of a loan's installment; the last one clears the residual."""

    from_account: str
    to_account: str
    day_of_month: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def description(self) -> str:
        return f"LOAN PAYMENT {self.from_account} to {self.to_account}"

    def _get_loan(self, bank: "Bank") -> LoanAccount:
        account = bank.accounts.get(self.to_account)
        if account is None:
            raise AccountDoesNotExistError(f"Account {self.to_account!r} does not exist")
        if not isinstance(account, LoanAccount):
            raise InvalidTransferError(f"Account {self.to_account!r} is not a loan")
        return account

    def process(self, day: date, bank: "Bank") -> None:
        if day.day != self.day_of_month or not in_window(day, self.start_date, self.end_date):
            return

        loan = self._get_loan(bank)
        if loan.period >= loan.periods and loan.remaining_balance > 0:
            bank.transfer(day, self.from_account, self.to_account, loan.remaining_balance)
        elif loan.period < loan.periods:
            bank.transfer(day, self.from_account, self.to_account, loan.monthly_payment)
