"""
Settle waits used between an interaction and reading the output.

The application exposes no "transliteration finished" signal, so a strategy
either sleeps for a fixed interval or polls the output until it stops
changing. Both share the same upper bound.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable

from playwright.sync_api import Page

from translitqa.types.configuration import TimingConfig

logger = logging.getLogger(__name__)


class SettleWait(ABC):
    @abstractmethod
    def settle(
        self,
        page: Page,
        read_output: Callable[[], str],
        max_ms: int,
        allow_empty: bool = False,
    ) -> None:
        """Block until the output is considered settled, at most ``max_ms``."""
        pass


class FixedDelay(SettleWait):
    """Unconditional delay of ``max_ms``."""

    def settle(self, page, read_output, max_ms, allow_empty=False):
        if max_ms > 0:
            page.wait_for_timeout(max_ms)


class StableOutputWait(SettleWait):
    """
    Poll the output until it has held the same value for ``stable_for_ms``.

    An empty reading only counts as settled when ``allow_empty`` is set, since
    the output panel is blank until the app's debounce fires.
    """

    def __init__(self, poll_interval_ms: int = 250, stable_for_ms: int = 750):
        if poll_interval_ms <= 0:
            raise ValueError("poll_interval_ms must be positive")
        self.poll_interval_ms = poll_interval_ms
        self.stable_for_ms = stable_for_ms

    def settle(self, page, read_output, max_ms, allow_empty=False):
        elapsed = 0
        last = read_output()
        unchanged_ms = 0

        while elapsed < max_ms:
            step = min(self.poll_interval_ms, max_ms - elapsed)
            page.wait_for_timeout(step)
            elapsed += step

            current = read_output()
            if current == last:
                unchanged_ms += step
            else:
                last = current
                unchanged_ms = 0

            if unchanged_ms >= self.stable_for_ms and (current or allow_empty):
                logger.debug(f"Output settled after {elapsed}ms")
                return

        logger.debug(f"Output not settled within {max_ms}ms")


def create_settle_wait(timing: TimingConfig) -> SettleWait:
    if timing.settle_mode == "fixed":
        return FixedDelay()
    if timing.settle_mode == "stable":
        return StableOutputWait(timing.poll_interval_ms, timing.stable_for_ms)
    raise ValueError(
        f"Unknown settle mode: {timing.settle_mode}. Valid options: fixed, stable"
    )
