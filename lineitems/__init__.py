"""
Line items — scheduled cashflow rules applied to the bank each simulated day.
"""

from .base import LineItem, in_window
from .loan_payment import LoanPayment
from .random_daily import WEEKDAYS, DailyRandomTransaction
from .scheduled import MonthlyTransaction, MonthlyTransfer, OneTimeTransaction

__all__ = [
    "LineItem",
    "in_window",
    "MonthlyTransaction",
    "MonthlyTransfer",
    "OneTimeTransaction",
    "DailyRandomTransaction",
    "LoanPayment",
    "WEEKDAYS",
]
