"""Configuration modules for dependency injection."""

from pathlib import Path

from injector import Module, provider, singleton

from translitqa import load_runtime_config
from translitqa.core.components.transform.classifier import (
    CaseClassifier,
    NamingConventionClassifier,
)
from translitqa.core.components.writers.result_sink import CsvResultSink
from translitqa.core.executor import CaseExecutor
from translitqa.core.interaction.waits import SettleWait, create_settle_wait
from translitqa.core.verdict import VerdictEngine
from translitqa.types.configuration import SuiteRuntimeConfig


class SuiteModule(Module):
    """Wires the case pipeline for one runtime stage.

    The result sink is a singleton so every executor in the process shares
    the same lock and header state.
    """

    def __init__(self, stage: str = None, config: SuiteRuntimeConfig = None):
        self._stage = stage
        self._config = config

    @singleton
    @provider
    def provide_runtime_config(self) -> SuiteRuntimeConfig:
        if self._config is not None:
            return self._config
        return load_runtime_config(self._stage)

    @singleton
    @provider
    def provide_classifier(self) -> CaseClassifier:
        return NamingConventionClassifier()

    @singleton
    @provider
    def provide_settle_wait(self, config: SuiteRuntimeConfig) -> SettleWait:
        return create_settle_wait(config.timing)

    @singleton
    @provider
    def provide_verdict_engine(self) -> VerdictEngine:
        return VerdictEngine()

    @singleton
    @provider
    def provide_result_sink(self, config: SuiteRuntimeConfig) -> CsvResultSink:
        return CsvResultSink(Path(config.paths.results_file))

    @singleton
    @provider
    def provide_case_executor(
        self,
        sink: CsvResultSink,
        config: SuiteRuntimeConfig,
        verdict_engine: VerdictEngine,
        settle_wait: SettleWait,
    ) -> CaseExecutor:
        return CaseExecutor(
            sink=sink,
            config=config,
            verdict_engine=verdict_engine,
            settle_wait=settle_wait,
        )
