"""
cashflow-sim — run a cashflow scenario and write daily.csv / monthly.csv.

Run: cashflow-sim --years 2 --output-dir out/
     cashflow-sim --scenario my_household.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from core.config import SimulationConfig
from core.exceptions import ScenarioError
from core.logging_config import setup_logging
from core.utils import add_months, to_date
from distributions.sampler import make_rng
from engine.runner import run_simulation
from reports.metrics import load_report, summarize_report
from scenarios import build_bank, household_scenario, load_scenario, validate_scenario

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cashflow-sim", description=__doc__.strip().splitlines()[0])
    parser.add_argument("--scenario", help="JSON scenario file (default: built-in household)")
    parser.add_argument("--start", help="first simulated day, YYYY-MM-DD")
    span = parser.add_mutually_exclusive_group()
    span.add_argument("--end", help="last simulated day, YYYY-MM-DD")
    span.add_argument("--years", type=int, help="simulate this many years from the start")
    parser.add_argument("--seed", type=int, help="random seed (overrides the scenario's)")
    parser.add_argument("--output-dir", default=".", help="where daily.csv and monthly.csv go")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--plain-logs", action="store_true", help="human-readable logs instead of JSON")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level.upper(), json_output=not args.plain_logs)

    try:
        start_arg = to_date(args.start) if args.start else None
        end_arg = to_date(args.end) if args.end else None
    except ValueError as exc:
        logger.error("Invalid date: %s", exc)
        return 2

    try:
        if args.scenario:
            spec = load_scenario(args.scenario)
        else:
            spec = household_scenario(**({"start": start_arg} if start_arg else {}))
    except ScenarioError as exc:
        logger.error("Could not load scenario: %s", exc)
        return 2

    start = start_arg or spec.start_date
    if end_arg:
        end = end_arg
    elif args.years:
        end = add_months(start, 12 * args.years)
    else:
        end = spec.end_date
    seed = spec.seed if args.seed is None else args.seed

    result = validate_scenario(spec)
    print(result.summary())
    if not result.is_valid:
        return 2

    try:
        config = SimulationConfig(
            start_date=start, end_date=end, seed=seed, output_dir=args.output_dir, log_level=args.log_level.upper(),
        )
    except ValueError as exc:
        logger.error("Invalid run configuration: %s", exc)
        return 2
    bank = build_bank(spec.model_copy(update={"start_date": start}), make_rng(config.seed))
    outcome = run_simulation(bank, config, name=spec.name)

    print()
    print(bank)
    summary = summarize_report(load_report(outcome.daily_path))
    print()
    for key, value in summary.items():
        print(f"{key:>16}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
