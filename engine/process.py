"""
Message-passing process runtime.

A process is a named node with a bounded inbox, a list of children and a
handler. Each node runs on its own worker thread:

  WAITING --START--> RUNNING --STOP--> KILLED
  WAITING --STOP--> KILLED
  any     --cancel--> KILLED

START and STOP are passed to the children before the handler sees them;
other messages go to the handler while RUNNING and are re-sent to the
children only when msg.forward is set. A node that exits sends STOP
downstream (once), so shutdown drains through the tree.

Handlers are serial within a node and never see a message concurrently.
Handler exceptions are logged at the node and do not stop the worker.
"""

from __future__ import annotations

import logging
import queue
import threading
from enum import Enum
from typing import Iterable, List, Optional, Protocol

from core.messages import Message, MessageType

logger = logging.getLogger(__name__)

# how often a blocked worker or sender re-checks cancellation
POLL_INTERVAL = 0.05


class State(str, Enum):
    WAITING = "WAITING"
    RUNNING = "RUNNING"
    KILLED = "KILLED"


class Handler(Protocol):
    def handle(self, proc: "Process", msg: Message) -> None: ...


class ProcessList(List["Process"]):
    def dispatch(self, msg: Message) -> None:
        """Send a message to every process in order."""
        for p in self:
            p.send(msg)


class Process:
    def __init__(
        self,
        name: str,
        handler: Handler,
        children: Optional[Iterable["Process"]] = None,
        *,
        cancel: Optional[threading.Event] = None,
        inbox_size: int = 2,
    ):
        self.name = name
        self.handler = handler
        self.children = ProcessList(children or [])
        self.state = State.WAITING
        self.cancel = cancel or threading.Event()
        self._inbox: "queue.Queue[Message]" = queue.Queue(maxsize=inbox_size)
        self._state_changes: "queue.SimpleQueue[State]" = queue.SimpleQueue()
        self._stop_sent = False
        self._thread: Optional[threading.Thread] = None

    def __repr__(self) -> str:
        return f"Process({self.name!r}, state={self.state.value})"

    def set_state(self, state: State) -> None:
        """Request a state change; the worker applies it before its next message."""
        self._state_changes.put(state)

    def send(self, msg: Message) -> None:
        """Enqueue, blocking while the inbox is full. Dropped once the node is dead."""
        while self.state is not State.KILLED:
            try:
                self._inbox.put(msg, timeout=POLL_INTERVAL)
                return
            except queue.Full:
                if self.cancel.is_set():
                    break
        logger.debug("%s: dropped %s after shutdown", self.name, msg.type.value)

    def start(self, threads: Optional[List[threading.Thread]] = None) -> List[threading.Thread]:
        """Start children depth-first, then this node's worker."""
        threads = threads if threads is not None else []
        for child in self.children:
            child.cancel = self.cancel
            child.start(threads)
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        threads.append(self._thread)
        self._thread.start()
        return threads

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        logger.debug("%s: worker started", self.name)
        while self.state is not State.KILLED:
            if self.cancel.is_set():
                self.state = State.KILLED
                break
            try:
                self.state = self._state_changes.get_nowait()
                continue
            except queue.Empty:
                pass
            try:
                msg = self._inbox.get(timeout=POLL_INTERVAL)
            except queue.Empty:
                continue
            self._receive(msg)
        self._send_stop()
        logger.debug("%s: worker exited", self.name)

    def _receive(self, msg: Message) -> None:
        if msg.type is MessageType.START:
            self.state = State.RUNNING
            self.children.dispatch(msg)
        elif msg.type is MessageType.STOP:
            self.state = State.KILLED
            self._send_stop(msg)

        if self.state is State.RUNNING:
            try:
                self.handler.handle(self, msg)
            except Exception:
                logger.exception("%s: handler failed on %s", self.name, msg.type.value)

        if msg.forward and not msg.type.is_control:
            self.children.dispatch(msg)

    def _send_stop(self, msg: Optional[Message] = None) -> None:
        if self._stop_sent:
            return
        self._stop_sent = True
        self.children.dispatch(msg or Message(MessageType.STOP, forward=True))


class Engine:
    """Owns the root processes: starts them, waits on them, stops them."""

    def __init__(self, processes: Iterable[Process], cancel: Optional[threading.Event] = None):
        self.cancel = cancel or threading.Event()
        self.processes = ProcessList(processes)
        self._threads: List[threading.Thread] = []

    def start(self) -> None:
        for p in self.processes:
            p.cancel = self.cancel
            p.start(self._threads)
        self.processes.dispatch(Message(MessageType.START, forward=True))

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Join every worker; True when all of them have exited."""
        for t in self._threads:
            t.join(timeout)
        return not any(t.is_alive() for t in self._threads)

    def stop(self) -> None:
        self.processes.dispatch(Message(MessageType.STOP, forward=True))
        self.cancel.set()
