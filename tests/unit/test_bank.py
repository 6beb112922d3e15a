"""Unit tests for the bank"""

import logging
from datetime import date

import pytest

from accounts import BankAccount, Transaction, TransactionType
from accounts.base import Account
from core.exceptions import (
    AccountAlreadyExistsError,
    AccountDoesNotExistError,
    InsufficientFundsError,
    InvalidTransferError,
)
from core.messages import Message, MessageType
from core.money import dollars
from engine.bank import Bank
from engine.process import Process
from lineitems import LineItem, MonthlyTransaction

from conftest import Collector

DAY = date(2018, 1, 1)


@pytest.fixture
def bank() -> Bank:
    return Bank([BankAccount("A", DAY, dollars(100)), BankAccount("B", DAY, 0)])


class Failing(LineItem):
    def description(self) -> str:
        return "failing"

    def process(self, day, bank) -> None:
        bank.append("Nowhere", Transaction(day, TransactionType.DEPOSIT, "x", 1))


class Tracking(Account):
    """Account that records when its update runs"""

    def __init__(self, name, events):
        self.name = name
        self.events = events

    def current_balance(self):
        return 0

    def update(self, day, outbox) -> None:
        self.events.append(("update", day))


class Marking(LineItem):
    def __init__(self, events):
        self.events = events

    def description(self) -> str:
        return "marking"

    def process(self, day, bank) -> None:
        self.events.append(("item", day))


def test_transfer_of_whole_balance_is_rejected(bank):
    """Test moving all $100 fails and leaves both balances untouched"""
    with pytest.raises(InvalidTransferError):
        bank.transfer(DAY, "A", "B", dollars(100))

    assert bank.get("A").current_balance() == dollars(100)
    assert bank.get("B").current_balance() == 0
    assert len(bank.get("A").ledger) == 1
    assert len(bank.get("B").ledger) == 1


def test_transfer_moves_money(bank):
    bank.transfer(DAY, "A", "B", dollars(99))

    assert bank.get("A").current_balance() == dollars(1)
    assert bank.get("B").current_balance() == dollars(99)
    assert bank.get("A").ledger[-1].description == "Transfer from 'A' to 'B'"


def test_transfer_round_trip_restores_balances(bank):
    bank.append("B", Transaction(DAY, TransactionType.DEPOSIT, "Seed", dollars(5)))
    bank.transfer(DAY, "A", "B", dollars(60))
    bank.transfer(DAY, "B", "A", dollars(60))

    assert bank.get("A").current_balance() == dollars(100)
    assert bank.get("B").current_balance() == dollars(5)
    assert bank.get("A").ledger_balance() == dollars(100)


def test_round_trip_of_whole_balance_fails_validation(bank):
    """Test the return leg of a full round trip trips the strict rule"""
    bank.transfer(DAY, "A", "B", dollars(60))
    with pytest.raises(InvalidTransferError):
        bank.transfer(DAY, "B", "A", dollars(60))


def test_transfer_more_than_balance(bank):
    with pytest.raises(InsufficientFundsError):
        bank.transfer(DAY, "A", "B", dollars(150))


def test_unknown_account(bank):
    with pytest.raises(AccountDoesNotExistError):
        bank.get("C")
    with pytest.raises(AccountDoesNotExistError):
        bank.transfer(DAY, "A", "C", 1)


def test_duplicate_account(bank):
    with pytest.raises(AccountAlreadyExistsError):
        bank.add_account(BankAccount("A", DAY))


def test_process_day_logs_failure_and_continues(bank, caplog):
    bank.add_line_item(Failing())
    bank.add_line_item(MonthlyTransaction("A", "Salary", TransactionType.DEPOSIT, dollars(10), 1))

    with caplog.at_level(logging.WARNING, logger="engine.bank"):
        bank.process_day(DAY, Collector())

    assert "Failing failed" in caplog.text
    assert bank.get("A").current_balance() == dollars(110)


def test_line_items_run_before_account_updates():
    events = []
    bank = Bank([Tracking("T", events)], [Marking(events)])

    bank.process_day(DAY, Collector())

    assert events == [("item", DAY), ("update", DAY)]


def test_handle_acts_on_dates_only(bank):
    bank.add_line_item(MonthlyTransaction("A", "Salary", TransactionType.DEPOSIT, dollars(10), 1))
    proc = Process("Bank Process", bank)

    bank.handle(proc, Message(MessageType.START))
    assert bank.get("A").current_balance() == dollars(100)

    bank.handle(proc, Message(MessageType.DATE, DAY))
    assert bank.get("A").current_balance() == dollars(110)


def test_str_lists_accounts(bank):
    assert str(bank) == "A\t$100.00\nB\t$0.00"
