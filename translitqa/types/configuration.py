from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional


@dataclass(frozen=True)
class SelectorConfig:
    """Locators for the surfaces of the application under test."""
    input_selector: str = "textarea"
    output_selector: str = "div.bg-slate-50"
    clear_button_selector: str = "button"
    clear_button_pattern: str = r"clear|x"


@dataclass(frozen=True)
class TimingConfig:
    # All values in milliseconds.
    accuracy_settle_ms: int = 3000
    typing_delay_ms: int = 100
    realtime_settle_ms: int = 2000
    clear_fill_settle_ms: int = 1000
    clear_action_settle_ms: int = 1000

    settle_mode: str = "fixed"  # "fixed" or "stable"
    poll_interval_ms: int = 250
    stable_for_ms: int = 750


@dataclass(frozen=True)
class PathsConfig:
    cases_file: str = "test_cases.csv"
    results_file: str = "test_execution_results.csv"


@dataclass(frozen=True)
class BrowserConfig:
    headless: bool = True
    default_timeout_ms: Optional[int] = None  # None keeps Playwright's default
    viewport_width: int = 1280
    viewport_height: int = 720


@dataclass(frozen=True)
class SuiteRuntimeConfig:
    base_url: str = "https://www.swifttranslator.com/"
    clear_exception_case_id: str = "Pos_UI_0002"
    strict_verdicts: bool = False

    selectors: SelectorConfig = field(default_factory=SelectorConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    browser: BrowserConfig = field(default_factory=BrowserConfig)

    log_level: int = logging.INFO
    environment_stage: str = "default"

    def with_overrides(
        self,
        base_url: Optional[str] = None,
        cases_file: Optional[str] = None,
        results_file: Optional[str] = None,
        strict_verdicts: Optional[bool] = None,
        headless: Optional[bool] = None,
    ) -> "SuiteRuntimeConfig":
        """Return a copy with any non-None value replaced."""
        paths = self.paths
        if cases_file is not None:
            paths = replace(paths, cases_file=cases_file)
        if results_file is not None:
            paths = replace(paths, results_file=results_file)

        browser = self.browser
        if headless is not None:
            browser = replace(browser, headless=headless)

        return replace(
            self,
            base_url=base_url if base_url is not None else self.base_url,
            strict_verdicts=(
                strict_verdicts if strict_verdicts is not None else self.strict_verdicts
            ),
            paths=paths,
            browser=browser,
        )
