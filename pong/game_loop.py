"""Fixed-interval driving loop for the physics step."""

from __future__ import annotations

import logging
from typing import Callable

from .config import FRAME_INTERVAL

logger = logging.getLogger(__name__)


class FrameLoop:
    """Cancellable scheduled task: wait one interval, then run one step.

    ``advance`` feeds elapsed wall time in; time only decides when a step
    fires and never scales it. A cancel takes effect at the top of the next
    cycle, so the wait already in flight still completes and its step runs.
    """

    def __init__(self, step: Callable[[], object], interval: float = FRAME_INTERVAL):
        if interval <= 0:
            raise ValueError(f"Frame interval must be positive, got {interval}")
        self._step = step
        self.interval = interval
        self.active = False
        self._cancel_requested = False
        self._waited = 0.0
        self.steps = 0

    @property
    def cancel_pending(self) -> bool:
        return self._cancel_requested

    def start(self) -> None:
        if self.active:
            # Resumed before the in-flight cycle finished: keep the same task
            self._cancel_requested = False
            return
        self.active = True
        self._cancel_requested = False
        self._waited = 0.0
        logger.debug("Frame loop started")

    def cancel(self) -> None:
        if self.active:
            self._cancel_requested = True

    def advance(self, elapsed: float) -> int:
        """Accumulate ``elapsed`` seconds and return how many steps ran."""
        if not self.active:
            return 0
        ran = 0
        self._waited += elapsed
        while self._waited >= self.interval:
            self._waited -= self.interval
            self._step()
            ran += 1
            self.steps += 1
            # Top of the next cycle
            if self._cancel_requested:
                self._stop()
                break
        return ran

    def _stop(self) -> None:
        self.active = False
        self._cancel_requested = False
        self._waited = 0.0
        logger.debug(f"Frame loop stopped after {self.steps} steps")
