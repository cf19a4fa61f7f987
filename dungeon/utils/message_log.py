"""Bounded message log shown in the GUI panel."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator

from dungeon.core.models import WHITE, Color


@dataclass(frozen=True, slots=True)
class Message:
    """A single line of game text."""

    text: str
    color: Color = WHITE


class MessageLog:
    """Append-only ring buffer; the oldest message is evicted on overflow."""

    __slots__ = ("_buffer",)

    def __init__(self, capacity: int = 6) -> None:
        self._buffer: deque[Message] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._buffer.maxlen or 0

    def add(self, text: str, color: Color = WHITE) -> None:
        self._buffer.append(Message(text, color))

    def latest(self, count: int | None = None) -> list[Message]:
        """Return the *count* most recent messages, oldest first."""
        items = list(self._buffer)
        if count is None:
            return items
        return items[-count:] if count > 0 else []

    def __iter__(self) -> Iterator[Message]:
        return iter(list(self._buffer))

    def __len__(self) -> int:
        return len(self._buffer)

    def clear(self) -> None:
        self._buffer.clear()
