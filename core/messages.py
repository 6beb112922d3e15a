"""
Message value types exchanged between processes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any

from .money import USD


class MessageType(str, Enum):
    START = "START"
    STOP = "STOP"
    DATE = "Date"
    DAILY_ACCOUNT_INFO = "DailyAccountInfo"
    MONTHLY_ACCOUNT_INFO = "MonthlyAccountInfo"

    @property
    def is_control(self) -> bool:
        return self in (MessageType.START, MessageType.STOP)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Message:
    type: MessageType
    value: Any = None
    forward: bool = False
    timestamp: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class AccountInfo:
    """Snapshot an investor account broadcasts for the report sinks."""
    date: date
    available_cash: USD
    account_value: USD
    cashflow: USD
    interest: USD
