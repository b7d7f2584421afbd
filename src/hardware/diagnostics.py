# hardware/diagnostics.py
"""
Diagnostics channel
===================
Text output used for fatal-error reports and trace dumps (a serial /
Bluetooth console on the device, stderr on a host).
"""

from __future__ import annotations

import sys
from typing import List, Optional, Protocol, TextIO


class DiagnosticsSink(Protocol):
    """Minimal contract: accept text, never raise."""

    def write(self, text: str) -> None:
        ...


class StreamDiagnostics(DiagnosticsSink):
    """Writes to a text stream (stderr by default) and flushes."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def write(self, text: str) -> None:
        stream = self._stream or sys.stderr
        stream.write(text)
        stream.flush()


class MemoryDiagnostics(DiagnosticsSink):
    """Collects written text in memory."""

    def __init__(self):
        self.chunks: List[str] = []

    def write(self, text: str) -> None:
        self.chunks.append(text)

    @property
    def text(self) -> str:
        return "".join(self.chunks)
