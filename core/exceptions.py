"""Simulation error taxonomy"""


class SimulationError(Exception):
    """Base exception for ledger and scheduling failures"""

    pass


class AccountDoesNotExistError(SimulationError):
    """Referenced account is not held by the bank"""

    pass


class InsufficientFundsError(SimulationError):
    """Withdrawal exceeds the funds available"""

    pass


class AccountAlreadyExistsError(SimulationError):
    """Account name is already taken"""

    pass


class UnknownTransactionTypeError(SimulationError):
    """Account cannot post this kind of transaction"""

    pass


class InvalidTransferError(SimulationError):
    """Transfer failed validation on one of its two legs"""

    pass


class LoanPaidOffError(SimulationError):
    """Loan has no remaining balance"""

    pass


class ScenarioError(SimulationError):
    """Scenario definition is inconsistent"""

    pass
