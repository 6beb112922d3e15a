"""
Report analysis — load a daily/monthly CSV back and summarize it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Union

import pandas as pd

from core.utils import require_columns

REPORT_COLUMNS = ["date", "available", "value", "cashflow", "interest"]


def load_report(path: Union[str, Path]) -> pd.DataFrame:
    """Read a report CSV with the date column parsed."""
    df = pd.read_csv(path)
    require_columns(df, REPORT_COLUMNS)
    df["date"] = pd.to_datetime(df["date"], format="%Y-%m-%d")
    return df


def summarize_report(df: pd.DataFrame) -> Dict:
    """
    Headline numbers for one report.

    Returns
    -------
    dict with first_date, last_date, rows, final_available, final_value,
    total_cashflow, total_interest (dollars)
    """
    require_columns(df, REPORT_COLUMNS)
    if df.empty:
        return {"rows": 0}

    ordered = df.sort_values("date")
    last = ordered.iloc[-1]
    return {
        "first_date": ordered["date"].iloc[0].date(),
        "last_date": last["date"].date(),
        "rows": int(len(ordered)),
        "final_available": float(last["available"]),
        "final_value": float(last["value"]),
        "total_cashflow": round(float(ordered["cashflow"].sum()), 2),
        "total_interest": round(float(ordered["interest"].sum()), 2),
    }


def aggregate_by_period(df: pd.DataFrame, freq: str = "MS") -> pd.DataFrame:
    """
    Roll rows up to calendar periods: flows are summed, balances take the
    last observation of the period.
    """
    require_columns(df, REPORT_COLUMNS)
    indexed = df.drop(columns="date").set_index(pd.to_datetime(df["date"])).sort_index()
    grouped = indexed.resample(freq)
    out = pd.DataFrame({
        "available": grouped["available"].last(),
        "value": grouped["value"].last(),
        "cashflow": grouped["cashflow"].sum(),
        "interest": grouped["interest"].sum(),
    })
    out.index.name = "date"
    return out.reset_index()
