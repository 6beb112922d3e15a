from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from core.messages import Message, MessageType
from core.utils import count_days, day_range, to_date

from .process import Process, State

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayGenerator:
    """
    Root handler: on START, send one DATE message per calendar day from
    start_date to end_date inclusive, then stop itself so the tree drains.

    DATE messages are not forwarded; the bank decides what goes further.
    """

    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", to_date(self.start_date))
        object.__setattr__(self, "end_date", to_date(self.end_date))

    @property
    def days(self) -> int:
        return count_days(self.start_date, self.end_date)

    def handle(self, proc: Process, msg: Message) -> None:
        if msg.type is not MessageType.START:
            logger.warning("%s: unknown message type %s", proc.name, msg.type.value)
            return

        for day in day_range(self.start_date, self.end_date):
            if proc.cancel.is_set():
                break
            proc.children.dispatch(Message(MessageType.DATE, day, forward=False))
        proc.set_state(State.KILLED)
