"""
Core package — money, calendar helpers, errors, configuration and logging.
No business logic lives here.
"""

from .config import SimulationConfig
from .exceptions import (
    AccountAlreadyExistsError,
    AccountDoesNotExistError,
    InsufficientFundsError,
    InvalidTransferError,
    LoanPaidOffError,
    ScenarioError,
    SimulationError,
    UnknownTransactionTypeError,
)
from .money import USD, dollars, format_usd, round_cents, to_dollars
from .utils import add_days, add_months, day_range, random_future_business_day, to_date

__all__ = [
    "SimulationConfig",
    "SimulationError",
    "AccountDoesNotExistError",
    "InsufficientFundsError",
    "AccountAlreadyExistsError",
    "UnknownTransactionTypeError",
    "InvalidTransferError",
    "LoanPaidOffError",
    "ScenarioError",
    "USD",
    "dollars",
    "format_usd",
    "round_cents",
    "to_dollars",
    "add_days",
    "add_months",
    "day_range",
    "random_future_business_day",
    "to_date",
]
