"""
Simulation runner — wires the process tree and drives one run to completion.

  Date Process ──▶ Bank Process ──┬──▶ Monthly Output (monthly.csv)
                                  └──▶ Daily Output   (daily.csv)

The date generator emits one DATE per day, the bank applies line items and
account updates, and the investor accounts broadcast snapshots the sinks
turn into CSV rows. Both files are truncated when the run starts; failing
to open either aborts the run before any process starts.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from core.config import SimulationConfig
from core.logging_config import log_run_summary
from reports.sinks import DailyOutput, MonthlyOutput

from .bank import Bank
from .dates import DayGenerator
from .process import Engine, Process

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    daily_path: Path
    monthly_path: Path
    days: int
    daily_rows: int
    monthly_rows: int
    bank: Bank


def run_simulation(
    bank: Bank,
    config: SimulationConfig,
    *,
    name: str = "simulation",
    timeout: Optional[float] = None,
) -> SimulationResult:
    """
    Run the bank over [config.start_date, config.end_date] and write both reports.

    Parameters
    ----------
    bank : Bank
        Accounts and line items; mutated in place by the run
    config : SimulationConfig
        Date range, output locations, inbox size
    name : str
        Label used in the run log
    timeout : float, optional
        Per-worker join timeout; the run is cancelled if a worker is still
        alive afterwards
    """
    daily_path = config.daily_path
    monthly_path = config.monthly_path
    daily_path.parent.mkdir(parents=True, exist_ok=True)
    monthly_path.parent.mkdir(parents=True, exist_ok=True)

    generator = DayGenerator(config.start_date, config.end_date)
    logger.info(
        "Starting %s: %s to %s (%d days, %d accounts, %d line items)",
        name, config.start_date, config.end_date, generator.days, len(bank.accounts), len(bank.line_items),
    )

    started = time.perf_counter()
    with open(daily_path, "w", encoding="utf-8", newline="") as daily_file, \
            open(monthly_path, "w", encoding="utf-8", newline="") as monthly_file:
        daily = DailyOutput(daily_file)
        monthly = MonthlyOutput(monthly_file)

        cancel = threading.Event()
        size = config.inbox_size
        tree = Process("Date Process", generator, [
            Process("Bank Process", bank, [
                Process("Monthly Output", monthly, cancel=cancel, inbox_size=size),
                Process("Daily Output", daily, cancel=cancel, inbox_size=size),
            ], cancel=cancel, inbox_size=size),
        ], cancel=cancel, inbox_size=size)

        engine = Engine([tree], cancel)
        engine.start()
        if not engine.wait(timeout):
            logger.error("%s: workers still running after %ss, cancelling", name, timeout)
            engine.stop()
            engine.wait()

    duration_ms = (time.perf_counter() - started) * 1000
    log_run_summary(name, generator.days, duration_ms, daily_rows=daily.rows, monthly_rows=monthly.rows)

    return SimulationResult(
        daily_path=daily_path,
        monthly_path=monthly_path,
        days=generator.days,
        daily_rows=daily.rows,
        monthly_rows=monthly.rows,
        bank=bank,
    )
