"""Unit tests for the basic and loan account variants"""

from datetime import date

import pytest

from accounts import BankAccount, LoanAccount, Transaction, TransactionType
from accounts.loan import cumulative_split, level_payment
from core.exceptions import InsufficientFundsError, LoanPaidOffError, UnknownTransactionTypeError
from core.money import dollars

DAY = date(2018, 1, 1)


def deposit(amount: int, desc: str = "Deposit") -> Transaction:
    return Transaction(DAY, TransactionType.DEPOSIT, desc, amount)


def withdrawal(amount: int, desc: str = "Withdrawal") -> Transaction:
    return Transaction(DAY, TransactionType.WITHDRAWAL, desc, amount)


def test_transaction_rejects_negative_amount():
    with pytest.raises(ValueError):
        deposit(-1)


def test_transaction_str():
    assert str(withdrawal(dollars(60), "Water")) == "[2018/01/01] WITHDRAWAL - Water - $60.00"


# ----- basic account -----

def test_solo_deposit_and_withdrawal(checking):
    """Test $500 + $100 - $50 = $550 with the opening entry in the ledger"""
    checking.append(deposit(dollars(100)))
    checking.append(withdrawal(dollars(50)))

    assert checking.current_balance() == dollars(550)
    assert len(checking.ledger) == 3
    assert checking.ledger[0].description == "Initial deposit"


def test_insufficient_funds_leaves_ledger_unchanged():
    account = BankAccount("Small", DAY, dollars(10))

    with pytest.raises(InsufficientFundsError):
        account.append(withdrawal(dollars(20)))

    assert account.balance == dollars(10)
    assert len(account.ledger) == 1


def test_withdrawal_of_whole_balance_posts_but_does_not_validate(checking):
    """Test append accepts an exact-balance withdrawal while validate is strict"""
    tx = withdrawal(dollars(500))
    assert checking.validate(tx) is False
    assert checking.validate(withdrawal(dollars(499))) is True
    assert checking.validate(deposit(dollars(1_000_000))) is True

    checking.append(tx)
    assert checking.balance == 0


def test_basic_account_rejects_monthly_payment(checking):
    tx = Transaction(DAY, TransactionType.MONTHLY_PAYMENT, "Note", 100)
    with pytest.raises(UnknownTransactionTypeError):
        checking.append(tx)
    assert checking.validate(tx) is False


def test_balance_equals_signed_ledger_sum(checking):
    for amount in (dollars(100), dollars(250)):
        checking.append(deposit(amount))
    for amount in (dollars(75), dollars(12.34)):
        checking.append(withdrawal(amount))

    assert checking.balance == checking.ledger_balance()
    assert checking.balance == dollars(500 + 100 + 250 - 75 - 12.34)


def test_basic_account_str(checking):
    assert str(checking) == "Checking\t$500.00"


# ----- amortization helpers -----

def test_level_payment_matches_closed_form():
    assert level_payment(10_000, 0.005, 60) == pytest.approx(193.328, abs=1e-3)


def test_level_payment_zero_rate():
    assert level_payment(1200, 0.0, 12) == pytest.approx(100.0)
    assert cumulative_split(1200, 0.0, 100.0, 3) == (0.0, 300.0)


def test_cumulative_split_first_payment():
    """Test first payment interest is one month on the full principal"""
    interest, principal = cumulative_split(10_000, 0.005, 193.33, 1)
    assert interest == pytest.approx(50.0)
    assert principal == pytest.approx(143.33)


# ----- loan account -----

@pytest.fixture
def car_loan() -> LoanAccount:
    """$10,000 at 6% APR over 5 years"""
    return LoanAccount("Car", dollars(10_000), 6.0, 5)


def assert_schedule_holds(loan: LoanAccount) -> None:
    total = loan.principal_paid + loan.interest_paid + loan.remaining_balance
    assert abs(total - loan.monthly_payment * loan.periods) <= loan.periods


def test_loan_terms(car_loan):
    assert car_loan.periods == 60
    assert car_loan.monthly_rate == pytest.approx(0.005)
    assert car_loan.monthly_payment == 19333
    assert car_loan.months_paid == 0
    assert_schedule_holds(car_loan)


def test_loan_pays_off_after_sixty_payments(car_loan):
    """Test 60 payments of $193.33 clear the loan and the 61st is refused"""
    for _ in range(60):
        assert car_loan.validate(deposit(car_loan.monthly_payment))
        car_loan.append(deposit(car_loan.monthly_payment))
        assert_schedule_holds(car_loan)

    assert car_loan.remaining_balance <= 0
    assert car_loan.is_paid_off
    assert car_loan.months_paid == 60
    assert car_loan.validate(deposit(car_loan.monthly_payment)) is False
    with pytest.raises(LoanPaidOffError):
        car_loan.append(deposit(car_loan.monthly_payment))


def test_loan_remaining_balance_strictly_decreases(car_loan):
    previous = car_loan.remaining_balance
    for _ in range(59):
        car_loan.append(deposit(car_loan.monthly_payment))
        assert car_loan.remaining_balance < previous
        previous = car_loan.remaining_balance


def test_loan_final_payment_settles_residual(car_loan):
    for _ in range(59):
        car_loan.append(deposit(car_loan.monthly_payment))
    residual = car_loan.remaining_balance

    car_loan.append(deposit(residual))

    assert car_loan.remaining_balance == 0
    assert_schedule_holds(car_loan)


def test_loan_interest_and_principal_after_first_payment(car_loan):
    car_loan.append(deposit(car_loan.monthly_payment))
    assert car_loan.interest_paid == dollars(50)
    assert car_loan.principal_paid == dollars(143.33)


def test_loan_part_way_through_term():
    """Test a loan opened after 12 payments precomputes its cumulative split"""
    loan = LoanAccount("Mortgage", dollars(10_000), 6.0, 5, payments=12)

    assert loan.months_paid == 12
    assert loan.interest_paid > 0
    assert loan.principal_paid > 0
    assert_schedule_holds(loan)


def test_loan_rejects_withdrawals(car_loan):
    with pytest.raises(UnknownTransactionTypeError):
        car_loan.append(withdrawal(100))
    assert car_loan.validate(withdrawal(100)) is False


def test_loan_str(car_loan):
    text = str(car_loan)
    assert text.startswith("Car\t$11,599.68")
    assert "Monthly Payment:\t$193.33" in text
