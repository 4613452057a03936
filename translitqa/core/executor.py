"""
Runs a single case end to end: interact, judge, record.
"""

import logging

from playwright.sync_api import Page

from translitqa.core.components.writers.result_sink import CsvResultSink
from translitqa.core.interaction.strategies import select_strategy
from translitqa.core.interaction.surfaces import UISurfaces
from translitqa.core.interaction.waits import SettleWait, create_settle_wait
from translitqa.core.verdict import VerdictEngine
from translitqa.types.configuration import SuiteRuntimeConfig
from translitqa.types.test_case import ResultRecord, TestCase

logger = logging.getLogger(__name__)


class CaseExecutor:
    """
    Executes cases against a page and appends one result row per case.

    The executor holds no per-case state, so one instance can serve every
    worker in a process; the sink serialises the writes.
    """

    def __init__(
        self,
        sink: CsvResultSink,
        config: SuiteRuntimeConfig,
        verdict_engine: VerdictEngine = None,
        settle_wait: SettleWait = None,
    ):
        self.sink = sink
        self.config = config
        self.verdict_engine = verdict_engine or VerdictEngine()
        self.settle_wait = settle_wait or create_settle_wait(config.timing)

    def execute(self, page: Page, case: TestCase) -> ResultRecord:
        """
        Run ``case`` on ``page`` and record the outcome.

        Browser and sink errors propagate to the caller; a FAIL verdict does not.
        """
        strategy = select_strategy(
            case,
            self.config.timing,
            self.settle_wait,
            self.config.clear_exception_case_id,
        )
        logger.debug(f"{case.case_id}: running {strategy.name} protocol")

        observation = strategy.run(UISurfaces(page, self.config.selectors), case)
        verdict = self.verdict_engine.evaluate(observation.check)
        record = ResultRecord.from_case(case, observation.actual_output, verdict)

        logger.info(
            f"Test: {case.case_id} | Input: {case.input} | "
            f"Expected: {case.expected_output} | Actual: {record.actual_output} | "
            f"{record.status.value}"
        )

        self.sink.append(record)
        return record
