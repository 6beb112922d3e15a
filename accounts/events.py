"""
Micro-loan payment-day simulation — one random draw decides whether a
note pays its installment or is charged off.

A charge-off here is a recovery, not a loss: the residual principal comes
back together with the interest installment, and the note closes. The
cashflow it reports is still one scheduled installment.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.money import USD
from distributions.sampler import RandomSource


@dataclass
class MicroLoanPayment:
    """Result of simulating one note on its pay day."""
    charged_off: bool
    principal: USD
    interest: USD
    reported_principal: USD

    @property
    def cash(self) -> USD:
        return self.principal + self.interest

    @property
    def reported_cash(self) -> USD:
        """Cashflow as it goes into the daily and monthly reports."""
        return self.reported_principal + self.interest


def simulate_payment_day(
    *,
    outstanding_principal: USD,
    scheduled_principal: USD,
    interest: USD,
    final_installment: bool,
    charge_off_rate: float,
    rng: RandomSource,
) -> MicroLoanPayment:
    """
    Decide the cash a note returns on its pay day.

    Parameters
    ----------
    outstanding_principal : USD
        Principal still owed on the note
    scheduled_principal : USD
        Constant principal installment
    interest : USD
        Constant interest installment
    final_installment : bool
        Last scheduled installment; it absorbs the truncation remainder
    charge_off_rate : float
        Probability of a charge-off on any pay day
    rng : RandomSource
        Random number generator
    """
    if rng.uniform() < charge_off_rate:
        return MicroLoanPayment(
            charged_off=True,
            principal=outstanding_principal,
            interest=interest,
            reported_principal=scheduled_principal,
        )

    if final_installment:
        principal = outstanding_principal
    else:
        principal = min(scheduled_principal, outstanding_principal)
    return MicroLoanPayment(charged_off=False, principal=principal, interest=interest, reported_principal=principal)
