"""
Verdict policy for every interaction protocol.

Strategies only observe; they hand back one of the check types below and the
VerdictEngine decides PASS/FAIL and the remark.
"""

from dataclasses import dataclass
from typing import Union

from translitqa.types.test_case import Status

OUTPUT_DIFFERS = "Output differs from expected"
NO_OUTPUT = "No output generated"
REALTIME_FAILED = "Real-time update failed"
NO_CLEAR_BUTTON = "No explicit Clear button found, used browser clear event"
NO_PROTOCOL = "No UI interaction protocol matches this case id"


@dataclass(frozen=True)
class AccuracyCheck:
    actual_output: str
    expected_output: str


@dataclass(frozen=True)
class LivenessCheck:
    actual_output: str


@dataclass(frozen=True)
class ClearCheck:
    input_value: str
    output_text: str
    note: str = ""


@dataclass(frozen=True)
class NoProtocolCheck:
    case_id: str


Check = Union[AccuracyCheck, LivenessCheck, ClearCheck, NoProtocolCheck]


@dataclass(frozen=True)
class Verdict:
    status: Status
    remark: str = ""

    @property
    def passed(self) -> bool:
        return self.status is Status.PASS


class VerdictEngine:
    """
    Derives a Verdict from a tagged check.

    Accuracy is strict, case-sensitive equality after trimming the expected
    value. Transliteration output can legitimately vary, so near-misses are
    reported as FAIL; this is a known limitation of the exact-match policy.
    """

    def evaluate(self, check: Check) -> Verdict:
        if isinstance(check, AccuracyCheck):
            return self._accuracy(check)
        if isinstance(check, LivenessCheck):
            return self._liveness(check)
        if isinstance(check, ClearCheck):
            return self._cleared(check)
        if isinstance(check, NoProtocolCheck):
            return Verdict(Status.FAIL, NO_PROTOCOL)
        raise TypeError(f"Unsupported check type: {type(check).__name__}")

    @staticmethod
    def _accuracy(check: AccuracyCheck) -> Verdict:
        if check.actual_output == check.expected_output.strip():
            return Verdict(Status.PASS)
        if check.actual_output:
            return Verdict(Status.FAIL, OUTPUT_DIFFERS)
        return Verdict(Status.FAIL, NO_OUTPUT)

    @staticmethod
    def _liveness(check: LivenessCheck) -> Verdict:
        if check.actual_output:
            return Verdict(Status.PASS)
        return Verdict(Status.FAIL, REALTIME_FAILED)

    @staticmethod
    def _cleared(check: ClearCheck) -> Verdict:
        if check.input_value == "" and check.output_text == "":
            return Verdict(Status.PASS, check.note)
        return Verdict(
            Status.FAIL,
            f"Fields not cleared. Input: '{check.input_value}', "
            f"Output: '{check.output_text}'",
        )
