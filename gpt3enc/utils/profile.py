"""Utilities for timing code."""

from __future__ import annotations

import time
from typing import Optional, Type
from types import TracebackType


class Profile:
    """Context manager that times a block of code and reports its throughput."""

    def __init__(self, label: str = "") -> None:
        """Initialize the profile."""
        self.label = label
        self.start: float = 0
        self.end: float = 0
        self.duration: float = 0

    def __enter__(self) -> Profile:
        """Start timing."""
        self.start = time.monotonic()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        """Stop timing. Exceptions propagate."""
        self.end = time.monotonic()
        self.duration = self.end - self.start

    @property
    def seconds(self) -> float:
        """The profiled duration in seconds."""
        return self.duration

    @property
    def milliseconds(self) -> float:
        """The profiled duration in milliseconds."""
        return self.seconds * 1000.0

    def megabytes_per_second(self, num_bytes: int) -> float:
        """Throughput for `num_bytes` of input processed during the profiled block."""
        if self.duration <= 0:
            return float("inf")
        return num_bytes / 1024 / 1024 / self.duration

    def report(self, num_bytes: Optional[int] = None) -> str:
        """One-line summary of the duration, and throughput when the input size is known."""
        line = f"{self.label:<18}: {self.milliseconds:>8,.1f} ms"
        if num_bytes is not None:
            line += f" ({self.megabytes_per_second(num_bytes):.2f} MB/s)"
        return line
