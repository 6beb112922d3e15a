"""Pytest fixtures for testing"""

import logging
import threading
from datetime import date
from typing import List

import pytest

from accounts import BankAccount, Peer2PeerAccount
from core.messages import Message
from core.money import dollars
from distributions.sampler import make_rng


class ScriptedRandom:
    """Random source returning fixed draws, for exact assertions"""

    def __init__(self, uniform: float = 0.5, beta: float = 0.5):
        self.uniform_value = uniform
        self.beta_value = beta
        self.calls: List[str] = []

    def uniform(self) -> float:
        self.calls.append("uniform")
        return self.uniform_value

    def beta(self, a: float, b: float) -> float:
        self.calls.append(f"beta({a},{b})")
        return self.beta_value


class Collector(list):
    """Outbox that keeps every dispatched message"""

    def dispatch(self, msg: Message) -> None:
        self.append(msg)


class Recorder:
    """Process handler that records what it sees"""

    def __init__(self):
        self.seen: List[Message] = []
        self.lock = threading.Lock()

    def handle(self, proc, msg: Message) -> None:
        with self.lock:
            self.seen.append(msg)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop the stdout handler setup_logging() installs"""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def start_date() -> date:
    return date(2018, 1, 1)  # a Monday


@pytest.fixture
def scripted_rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def rng():
    return make_rng(42)


@pytest.fixture
def outbox() -> Collector:
    return Collector()


@pytest.fixture
def checking(start_date: date) -> BankAccount:
    """Checking account opened with $500"""
    return BankAccount("Checking", start_date, dollars(500))


@pytest.fixture
def investor(start_date: date, scripted_rng: ScriptedRandom) -> Peer2PeerAccount:
    """Investor with $100,000 and $25 notes, scripted draws"""
    return Peer2PeerAccount("Investment", start_date, dollars(100_000), dollars(25), rng=scripted_rng)
