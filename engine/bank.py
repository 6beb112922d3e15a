"""
Bank — holds the accounts and line items and runs one simulated day at a time.

For each DATE:
  1. every line item, in declaration order, gets process(day, bank);
     failures are logged and the day goes on
  2. every account gets update(day, outbox) and may broadcast downstream

Transfers validate both legs before posting either. They are not atomic
across arbitrary account types: validation is the pre-commit check.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Iterable, List, Optional

from accounts.base import Account, Outbox
from accounts.transaction import Transaction, TransactionType
from core.exceptions import (
    AccountAlreadyExistsError,
    AccountDoesNotExistError,
    InsufficientFundsError,
    InvalidTransferError,
    SimulationError,
)
from core.messages import Message, MessageType
from core.money import USD, format_usd
from lineitems.base import LineItem

from .process import Process

logger = logging.getLogger(__name__)


class Bank:
    def __init__(
        self,
        accounts: Optional[Iterable[Account]] = None,
        line_items: Optional[Iterable[LineItem]] = None,
    ):
        self.accounts: Dict[str, Account] = {}
        self.line_items: List[LineItem] = []
        for account in accounts or []:
            self.add_account(account)
        for item in line_items or []:
            self.add_line_item(item)

    def add_account(self, account: Account) -> None:
        if account.name in self.accounts:
            raise AccountAlreadyExistsError(f"Account {account.name!r} already exists")
        self.accounts[account.name] = account

    def add_line_item(self, item: LineItem) -> None:
        self.line_items.append(item)

    def get(self, name: str) -> Account:
        try:
            return self.accounts[name]
        except KeyError:
            raise AccountDoesNotExistError(f"Account {name!r} does not exist") from None

    def append(self, account: str, tx: Transaction) -> None:
        self.get(account).append(tx)

    def transfer(self, day: date, from_account: str, to_account: str, amount: USD) -> None:
        source = self.get(from_account)
        target = self.get(to_account)

        if source.current_balance() < amount:
            raise InsufficientFundsError(
                f"{from_account}: {format_usd(source.current_balance())} available, "
                f"transfer needs {format_usd(amount)}"
            )

        desc = f"Transfer from '{from_account}' to '{to_account}'"
        withdrawal = Transaction(day, TransactionType.WITHDRAWAL, desc, amount)
        deposit = Transaction(day, TransactionType.DEPOSIT, desc, amount)

        if not source.validate(withdrawal) or not target.validate(deposit):
            raise InvalidTransferError(f"{desc} of {format_usd(amount)} failed validation")

        source.append(withdrawal)
        target.append(deposit)

    # ------------------------------------------------------------------
    # Daily processing
    # ------------------------------------------------------------------

    def process_day(self, day: date, outbox: Outbox) -> None:
        for item in self.line_items:
            try:
                item.process(day, self)
            except SimulationError as exc:
                logger.warning("%s: %s failed: %s", day, type(item).__name__, exc)
            except Exception:
                logger.exception("%s: %s crashed", day, type(item).__name__)

        for account in self.accounts.values():
            account.update(day, outbox)

    def handle(self, proc: Process, msg: Message) -> None:
        if msg.type is MessageType.DATE:
            self.process_day(msg.value, proc.children)

    def __str__(self) -> str:
        return "\n".join(str(a) for a in self.accounts.values())
