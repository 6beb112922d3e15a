"""
CSV report sinks. Each one owns its output stream exclusively.

  START                 → header
  <its message type>    → one row: date,available,value,cashflow,interest
  STOP                  → nothing (the runner closes the stream)
"""

from __future__ import annotations

from typing import TextIO

from core.messages import AccountInfo, Message, MessageType

HEADER = "date,available,value,cashflow,interest\n"


def format_row(info: AccountInfo) -> str:
    return "%s,%.2f,%.2f,%.2f,%.2f\n" % (
        info.date.strftime("%Y-%m-%d"),
        info.available_cash / 100,
        info.account_value / 100,
        info.cashflow / 100,
        info.interest / 100,
    )


class AccountInfoOutput:
    message_type: MessageType

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.rows = 0

    def handle(self, proc, msg: Message) -> None:
        if msg.type is MessageType.START:
            self.stream.write(HEADER)
        elif msg.type is self.message_type:
            self.stream.write(format_row(msg.value))
            self.rows += 1


class DailyOutput(AccountInfoOutput):
    """Writes a row for each simulated day."""
    message_type = MessageType.DAILY_ACCOUNT_INFO


class MonthlyOutput(AccountInfoOutput):
    """Writes a row on the first of each month."""
    message_type = MessageType.MONTHLY_ACCOUNT_INFO
