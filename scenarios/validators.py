"""
Consistency checks for a scenario before it is run.

Catches problems early:
- Line items pointing at accounts that do not exist
- Loan payments aimed at something other than a loan
- Monthly items on days some months do not have
- Line items whose window never overlaps the run
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .schema import (
    DailyRandomSpec,
    LoanPaymentSpec,
    MonthlySpec,
    OneTimeSpec,
    ScenarioSpec,
    TransferSpec,
)


@dataclass
class ValidationResult:
    """Problems found in one scenario; errors block the run, warnings do not."""
    scenario: str = "scenario"
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def error(self, label: str, message: str) -> None:
        self.errors.append(f"{label} {message}")

    def warn(self, label: str, message: str) -> None:
        self.warnings.append(f"{label} {message}")

    def summary(self) -> str:
        lines = [f"Scenario {self.scenario!r}:"]
        for title, marker, entries in (("ERRORS", "✗", self.errors), ("WARNINGS", "⚠", self.warnings)):
            if entries:
                lines.append(f"{title} ({len(entries)}):")
                lines.extend(f"  {marker} {entry}" for entry in entries)
        if self.is_valid and not self.warnings:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _label(index: int, item) -> str:
    name = getattr(item, "name", None)
    return f"line item #{index} ({item.kind}{': ' + name if name else ''})"


def validate_scenario(spec: ScenarioSpec) -> ValidationResult:
    """
    Run all consistency checks on a scenario.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult(scenario=spec.name)
    kinds = spec.account_kinds()

    if not spec.accounts:
        result.warn("Scenario", "has no accounts.")
    if not any(kind == "peer2peer" for kind in kinds.values()):
        result.warn("Scenario", "has no peer2peer account: the daily and monthly reports will be empty.")

    for i, item in enumerate(spec.line_items):
        label = _label(i, item)

        # --- Account references ---
        if isinstance(item, (MonthlySpec, OneTimeSpec, DailyRandomSpec)):
            refs = [item.account]
        else:
            refs = [item.from_account, item.to_account]
        for ref in refs:
            if ref not in kinds:
                result.error(label, f"references unknown account {ref!r}.")

        if isinstance(item, LoanPaymentSpec) and kinds.get(item.to_account, "loan") != "loan":
            result.error(label, f"pays {item.to_account!r}, which is not a loan account.")

        if isinstance(item, (TransferSpec, LoanPaymentSpec)) and item.from_account == item.to_account:
            result.warn(label, f"transfers {item.from_account!r} to itself.")

        # --- Day of month ---
        day_of_month = getattr(item, "day_of_month", None)
        if day_of_month is not None and day_of_month > 28:
            result.warn(label, f"runs on day {day_of_month}; months without that day are skipped.")

        # --- Windows ---
        if isinstance(item, OneTimeSpec):
            if not spec.start_date <= item.date <= spec.end_date:
                result.warn(label, f"on {item.date} falls outside the run.")
        else:
            start, end = item.start_date, item.end_date
            if (start and start > spec.end_date) or (end and end < spec.start_date):
                result.warn(label, "window never overlaps the run.")

    return result
