from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from core.exceptions import InsufficientFundsError, UnknownTransactionTypeError
from core.money import USD, format_usd

from .base import Account
from .transaction import Transaction, TransactionType

logger = logging.getLogger(__name__)


class BankAccount(Account):
    """Plain checking account: a balance and the ledger that produced it."""

    def __init__(self, name: str, opened: date, initial: USD = 0):
        self.name = name
        self.balance: USD = initial
        self.ledger: List[Transaction] = [
            Transaction(opened, TransactionType.DEPOSIT, "Initial deposit", initial)
        ]

    def current_balance(self) -> USD:
        return self.balance

    def append(self, tx: Transaction) -> None:
        logger.debug("%s %s", self.name, tx)
        if tx.type is TransactionType.DEPOSIT:
            self.ledger.append(tx)
            self.balance += tx.amount
        elif tx.type is TransactionType.WITHDRAWAL:
            if tx.amount > self.balance:
                raise InsufficientFundsError(
                    f"{self.name}: withdrawal of {format_usd(tx.amount)} exceeds balance {format_usd(self.balance)}"
                )
            self.ledger.append(tx)
            self.balance -= tx.amount
        else:
            raise UnknownTransactionTypeError(f"{self.name}: cannot post {tx.type.value}")

    def validate(self, tx: Transaction) -> bool:
        # strict: a withdrawal of the whole balance does not validate
        if tx.type is TransactionType.DEPOSIT:
            return True
        return tx.type is TransactionType.WITHDRAWAL and self.balance > tx.amount

    def ledger_balance(self, until: Optional[date] = None) -> USD:
        """Signed sum over the ledger, optionally up to and including a date."""
        return sum(tx.signed_amount for tx in self.ledger if until is None or tx.date <= until)

    def __str__(self) -> str:
        return f"{self.name}\t{format_usd(self.balance)}"
