"""
Browser protocols, one per kind of case.

Each strategy drives the page and returns an Observation: what was read back
plus the check the VerdictEngine should apply. Playwright errors are not
caught here; they fail the case being run.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from translitqa.core.interaction.surfaces import UISurfaces
from translitqa.core.interaction.waits import FixedDelay, SettleWait
from translitqa.core.verdict import (
    NO_CLEAR_BUTTON,
    AccuracyCheck,
    Check,
    ClearCheck,
    LivenessCheck,
    NoProtocolCheck,
)
from translitqa.types.configuration import TimingConfig
from translitqa.types.test_case import Category, TestCase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Observation:
    actual_output: str
    check: Check


class InteractionStrategy(ABC):
    """Base class for the per-case browser protocols."""

    name = "base"

    def __init__(self, timing: TimingConfig, settle_wait: SettleWait = None):
        self.timing = timing
        self.settle_wait = settle_wait or FixedDelay()

    @abstractmethod
    def run(self, surfaces: UISurfaces, case: TestCase) -> Observation:
        pass

    def _settle(self, surfaces: UISurfaces, max_ms: int, allow_empty: bool = False) -> None:
        self.settle_wait.settle(surfaces.page, surfaces.read_output, max_ms, allow_empty)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class AccuracyStrategy(InteractionStrategy):
    """Fill the input in one go and compare the output with the expected text."""

    name = "accuracy"

    def run(self, surfaces, case):
        input_box = surfaces.input_box
        input_box.wait_for(state="visible")
        input_box.clear()
        input_box.fill(case.input)

        self._settle(surfaces, self.timing.accuracy_settle_ms)

        actual = surfaces.read_output()
        return Observation(actual, AccuracyCheck(actual, case.expected_output))


class RealTimeUpdateStrategy(InteractionStrategy):
    """Type the input key by key and check the output updates while typing."""

    name = "realtime"

    def run(self, surfaces, case):
        input_box = surfaces.input_box
        input_box.clear()
        input_box.press_sequentially(case.input, delay=self.timing.typing_delay_ms)

        self._settle(surfaces, self.timing.realtime_settle_ms)

        actual = surfaces.read_output()
        return Observation(actual, LivenessCheck(actual))


class ClearFunctionStrategy(InteractionStrategy):
    """Fill the input, trigger the clear control, and check both fields empty."""

    name = "clear"

    def run(self, surfaces, case):
        input_box = surfaces.input_box
        input_box.clear()
        input_box.fill(case.input)

        self._settle(surfaces, self.timing.clear_fill_settle_ms)

        note = ""
        clear_button = surfaces.clear_button
        if clear_button.is_visible():
            clear_button.click()
        else:
            logger.debug(f"{case.case_id}: no clear button, clearing input directly")
            input_box.clear()
            note = NO_CLEAR_BUTTON

        self._settle(surfaces, self.timing.clear_action_settle_ms, allow_empty=True)

        input_value = surfaces.read_input()
        actual = surfaces.read_output()
        return Observation(actual, ClearCheck(input_value, actual, note))


class NoProtocolStrategy(InteractionStrategy):
    """UI case matching no known protocol: reset the input and record a failure."""

    name = "none"

    def run(self, surfaces, case):
        surfaces.input_box.clear()
        logger.warning(f"{case.case_id}: no UI interaction protocol for this id")
        return Observation("", NoProtocolCheck(case.case_id))


def select_strategy_class(case: TestCase, clear_exception_case_id: str) -> type:
    """
    Pick the protocol for a case.

    ``clear_exception_case_id`` is a Pos_UI case that exercises the clear
    control rather than live typing.
    """
    if case.category in (Category.POSITIVE, Category.NEGATIVE):
        return AccuracyStrategy

    case_id = case.case_id
    if "Pos_UI" in case_id and case_id != clear_exception_case_id:
        return RealTimeUpdateStrategy
    if "Neg_UI" in case_id or case_id == clear_exception_case_id:
        return ClearFunctionStrategy
    return NoProtocolStrategy


def select_strategy(
    case: TestCase,
    timing: TimingConfig,
    settle_wait: SettleWait = None,
    clear_exception_case_id: str = "Pos_UI_0002",
) -> InteractionStrategy:
    strategy_class = select_strategy_class(case, clear_exception_case_id)
    return strategy_class(timing, settle_wait)
