"""
Built-in household scenario: a salaried checking account feeding a
peer-to-peer lending account.
"""

from __future__ import annotations

from datetime import date

from core.utils import add_months, to_date

from .schema import (
    BankAccountSpec,
    BetaSpec,
    DailyRandomSpec,
    MonthlySpec,
    Peer2PeerAccountSpec,
    ScenarioSpec,
    TransferSpec,
)

# (name, amount, day of month)
MONTHLY_BILLS = (
    ("BCBS", 630, 17),
    ("Mortgage", 1154, 2),
    ("Water", 60, 20),
    ("Electricity", 115, 10),
    ("Internet", 40, 12),
    ("Phones", 100, 8),
)

RESTAURANT_ODDS = {
    "monday": 0.25,
    "tuesday": 0.25,
    "wednesday": 0.25,
    "thursday": 0.25,
    "friday": 0.75,
    "saturday": 0.50,
    "sunday": 0.75,
}


def household_scenario(start: date = date(2018, 1, 1), years: int = 31, seed: int = 7) -> ScenarioSpec:
    start = to_date(start)
    end = add_months(start, 12 * years)
    window = {"start_date": start, "end_date": end}

    line_items = [
        MonthlySpec(account="Checking", name="Salary", type="DEPOSIT", amount=7000, day_of_month=1, **window),
        MonthlySpec(account="Checking", name="Salary", type="DEPOSIT", amount=7000, day_of_month=15, **window),
    ]
    line_items += [
        MonthlySpec(account="Checking", name=name, type="WITHDRAWAL", amount=amount, day_of_month=day, **window)
        for name, amount, day in MONTHLY_BILLS
    ]
    line_items += [
        DailyRandomSpec(
            account="Checking", name="Restaurant Food", type="WITHDRAWAL",
            base_amount=25, max_amount=60, beta=BetaSpec(alpha=1, beta=4),
            percentages=RESTAURANT_ODDS, **window,
        ),
        TransferSpec(from_account="Checking", to_account="Investment", amount=2000, day_of_month=2, **window),
        TransferSpec(from_account="Checking", to_account="Investment", amount=2000, day_of_month=17, **window),
    ]

    return ScenarioSpec(
        name="household",
        start_date=start,
        end_date=end,
        seed=seed,
        accounts=[
            BankAccountSpec(name="Checking", initial=500),
            Peer2PeerAccountSpec(name="Investment", initial=8000 + 40000 + 30000 + 2e6, per_investment=25),
        ],
        line_items=line_items,
    )
