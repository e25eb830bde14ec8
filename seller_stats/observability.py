"""
Run tracking for analyses: run IDs and timing.

Usage:
    from seller_stats.observability import Timer, run_context

    with run_context() as run_id, Timer("analyze", logger):
        ...

The timing record carries ``run_id`` and ``duration_ms`` as extras, so any
formatter configured by the host application can pick them up.
"""
import logging
import time
import uuid
from contextvars import ContextVar
from typing import Optional

from seller_stats.config import config

# Context variable for the current analysis run ID
_run_id: ContextVar[Optional[str]] = ContextVar("run_id", default=None)


def get_run_id() -> Optional[str]:
    """Get the current run ID from context."""
    return _run_id.get()


def generate_run_id() -> str:
    return uuid.uuid4().hex[:8]


class run_context:
    """Context manager binding an analysis run ID."""

    def __init__(self, run_id: Optional[str] = None):
        self.run_id = run_id or generate_run_id()
        self.token = None

    def __enter__(self):
        self.token = _run_id.set(self.run_id)
        return self.run_id

    def __exit__(self, *args):
        _run_id.reset(self.token)


class Timer:
    """
    Times one analysis step and logs its duration.

    Runs slower than ``warn_threshold_ms`` (default from
    ``config.logging.slow_threshold_ms``) are logged at WARNING, the rest at DEBUG.
    """

    def __init__(
        self,
        name: str,
        logger: Optional[logging.Logger] = None,
        warn_threshold_ms: Optional[float] = None,
    ):
        self.name = name
        self.logger = logger
        self.warn_threshold_ms = (
            config.logging.slow_threshold_ms if warn_threshold_ms is None else warn_threshold_ms
        )
        self.elapsed_ms: float = 0
        self._start: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000

        if self.logger:
            slow = self.elapsed_ms > self.warn_threshold_ms
            self.logger.log(
                logging.WARNING if slow else logging.DEBUG,
                f"{self.name} {'slow' if slow else 'completed'}",
                extra={"run_id": get_run_id(), "duration_ms": round(self.elapsed_ms, 2)},
            )
