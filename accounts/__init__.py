"""
Accounts — ledgered balances with per-variant posting rules.
"""

from .base import Account
from .basic import BankAccount
from .loan import LoanAccount
from .peer2peer import LendingTerms, MicroLoan, Peer2PeerAccount
from .transaction import Transaction, TransactionType

__all__ = [
    "Account",
    "BankAccount",
    "LoanAccount",
    "Peer2PeerAccount",
    "MicroLoan",
    "LendingTerms",
    "Transaction",
    "TransactionType",
]
