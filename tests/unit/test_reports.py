"""Unit tests for report sinks and report analysis"""

import io
from datetime import date

import pandas as pd
import pytest

from core.messages import AccountInfo, Message, MessageType
from reports import (
    HEADER,
    DailyOutput,
    MonthlyOutput,
    aggregate_by_period,
    format_row,
    load_report,
    summarize_report,
)


def info(day: date, available=0, value=0, cashflow=0, interest=0) -> AccountInfo:
    return AccountInfo(day, available, value, cashflow, interest)


def test_format_row():
    row = format_row(info(date(2018, 1, 2), 10_000_000, 10_000_000, 6900, 3300))
    assert row == "2018-01-02,100000.00,100000.00,69.00,33.00\n"


def test_daily_sink_writes_header_and_its_rows_only():
    stream = io.StringIO()
    sink = DailyOutput(stream)

    sink.handle(None, Message(MessageType.START))
    sink.handle(None, Message(MessageType.DAILY_ACCOUNT_INFO, info(date(2018, 1, 1), 100)))
    sink.handle(None, Message(MessageType.MONTHLY_ACCOUNT_INFO, info(date(2018, 1, 1), 100)))
    sink.handle(None, Message(MessageType.STOP))

    assert stream.getvalue() == HEADER + "2018-01-01,1.00,0.00,0.00,0.00\n"
    assert sink.rows == 1


def test_monthly_sink_ignores_daily_rows():
    stream = io.StringIO()
    sink = MonthlyOutput(stream)

    sink.handle(None, Message(MessageType.DAILY_ACCOUNT_INFO, info(date(2018, 1, 1))))

    assert stream.getvalue() == ""
    assert sink.rows == 0


@pytest.fixture
def report_path(tmp_path):
    path = tmp_path / "daily.csv"
    path.write_text(
        HEADER
        + "2018-01-30,100.00,200.00,1.00,0.50\n"
        + "2018-01-31,90.00,210.00,2.00,0.50\n"
        + "2018-02-01,80.00,220.00,3.00,1.00\n"
    )
    return path


def test_load_report_parses_dates(report_path):
    df = load_report(report_path)
    assert list(df.columns) == ["date", "available", "value", "cashflow", "interest"]
    assert df["date"].iloc[0] == pd.Timestamp("2018-01-30")


def test_load_report_rejects_wrong_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("day,cash\n2018-01-01,1\n")
    with pytest.raises(ValueError):
        load_report(path)


def test_summarize_report(report_path):
    summary = summarize_report(load_report(report_path))

    assert summary["rows"] == 3
    assert summary["first_date"] == date(2018, 1, 30)
    assert summary["last_date"] == date(2018, 2, 1)
    assert summary["final_available"] == 80.0
    assert summary["final_value"] == 220.0
    assert summary["total_cashflow"] == 6.0
    assert summary["total_interest"] == 2.0


def test_summarize_empty_report():
    df = pd.DataFrame(columns=["date", "available", "value", "cashflow", "interest"])
    assert summarize_report(df) == {"rows": 0}


def test_aggregate_by_month(report_path):
    monthly = aggregate_by_period(load_report(report_path))

    assert list(monthly["date"]) == [pd.Timestamp("2018-01-01"), pd.Timestamp("2018-02-01")]
    assert list(monthly["available"]) == [90.0, 80.0]
    assert list(monthly["cashflow"]) == [3.0, 3.0]
    assert list(monthly["interest"]) == [1.0, 1.0]
