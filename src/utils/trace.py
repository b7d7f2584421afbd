"""
Trace ring buffer

Fixed-size ring of timestamped (tag, value) entries for post-mortem timing
analysis of the decode/display handshake. Cheap enough to call from the tick.

Tags used by the engine:
    R  frame published, value = display duration in ms
    r  publish acknowledged (standby promoted)
    T  tick promoted standby, value = new active slot
    E  fatal decode error, value = active slot (trace is frozen after it)
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol


class TextSink(Protocol):
    def write(self, text: str) -> None: ...


@dataclass(frozen=True)
class TraceEntry:
    timestamp_us: int
    rotation: int
    tag: str
    value: int

    def format(self) -> str:
        ms, us = divmod(self.timestamp_us, 1000)
        sec, ms = divmod(ms, 1000)
        return "%3d.%03d.%03d %6d %c %d" % (sec, ms, us, self.rotation, self.tag, self.value)


class Trace:
    """
    Ring buffer of the last SIZE trace entries.

    Args:
        size: Number of entries kept (oldest are overwritten)
        rotation_counter: Callable returning the current rotation count,
            recorded with every entry
    """

    SIZE = 1 << 6

    def __init__(self, size: int = SIZE, rotation_counter: Optional[Callable[[], int]] = None):
        self.size = size
        self.rotation_counter = rotation_counter or (lambda: 0)
        self._entries: List[Optional[TraceEntry]] = [None] * size
        self._index = 0
        self._count = 0
        self._stopped = False
        self._origin_ns = time.monotonic_ns()

    @property
    def stopped(self) -> bool:
        return self._stopped

    def __len__(self) -> int:
        return self._count

    def start(self) -> None:
        """Clear the buffer and resume recording."""
        self._entries = [None] * self.size
        self._index = 0
        self._count = 0
        self._stopped = False
        self._origin_ns = time.monotonic_ns()

    def stop(self) -> None:
        """Freeze the buffer (entries are kept for dump)."""
        self._stopped = True

    def log(self, tag: str, value: int) -> None:
        if self._stopped:
            return
        entry = TraceEntry(
            timestamp_us=(time.monotonic_ns() - self._origin_ns) // 1000,
            rotation=self.rotation_counter(),
            tag=tag[:1],
            value=int(value),
        )
        self._entries[self._index] = entry
        self._index = 0 if self._index == self.size - 1 else self._index + 1
        self._count = min(self._count + 1, self.size)

    def entries(self) -> List[TraceEntry]:
        """Entries newest first."""
        result = []
        i = self._index
        for _ in range(self._count):
            i = self.size - 1 if i == 0 else i - 1
            entry = self._entries[i]
            if entry is not None:
                result.append(entry)
        return result

    def dump(self, sink: TextSink) -> None:
        """Write a formatted table of all entries (newest first) to sink."""
        sink.write("\n Time in us RotCnt T Value\n")
        sink.write("----------------------------------\n")
        for entry in self.entries():
            sink.write(entry.format() + "\n")


_trace = Trace()

def get_trace() -> Trace:
    return _trace
