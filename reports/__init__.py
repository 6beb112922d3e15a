"""
Reports — CSV sinks fed by the bank process and helpers to read them back.
"""

from .metrics import REPORT_COLUMNS, aggregate_by_period, load_report, summarize_report
from .sinks import HEADER, DailyOutput, MonthlyOutput, format_row

__all__ = [
    "HEADER",
    "REPORT_COLUMNS",
    "format_row",
    "DailyOutput",
    "MonthlyOutput",
    "load_report",
    "summarize_report",
    "aggregate_by_period",
]
