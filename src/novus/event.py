"""Event wrapper and FIFO queue for deferred actions."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator

from .action import Action
from .board import CandidateBoard


@dataclass(frozen=True)
class Event:
    action: Action
    source: str = ""

    def evaluate(self, candidates: CandidateBoard) -> bool:
        return self.action.apply(candidates)


class EventQueue:
    """Events pushed during a read-only scan, drained afterwards."""

    def __init__(self) -> None:
        self._events: Deque[Event] = deque()

    def push_back(self, event: Event) -> None:
        self._events.append(event)

    def pop_front(self) -> Event | None:
        if not self._events:
            return None
        return self._events.popleft()

    def drain(self) -> Iterator[Event]:
        while self._events:
            yield self._events.popleft()

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)


__all__ = ["Event", "EventQueue"]
