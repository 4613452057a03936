"""
Fixtures for the Playwright-driven case suite.
"""

import pytest

from translitqa.core.components.writers.result_sink import CsvResultSink
from translitqa.core.executor import CaseExecutor
from translitqa.di import get_injector
from translitqa.types.configuration import SuiteRuntimeConfig


@pytest.fixture(scope="session")
def suite_injector():
    return get_injector()


@pytest.fixture(scope="session")
def runtime_config(suite_injector) -> SuiteRuntimeConfig:
    return suite_injector.get(SuiteRuntimeConfig)


@pytest.fixture(scope="session")
def result_sink(suite_injector) -> CsvResultSink:
    """Process-wide sink; the header is created before any case runs."""
    sink = suite_injector.get(CsvResultSink)
    sink.ensure_header()
    return sink


@pytest.fixture(scope="session")
def case_executor(suite_injector, result_sink) -> CaseExecutor:
    return suite_injector.get(CaseExecutor)


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args):
    return {
        **browser_type_launch_args,
        "args": [
            "--no-sandbox",
            "--disable-dev-shm-usage",
            "--disable-gpu",
            "--disable-extensions",
            "--disable-background-timer-throttling",
            "--disable-renderer-backgrounding",
            "--disable-backgrounding-occluded-windows",
        ],
    }


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args, runtime_config):
    return {
        **browser_context_args,
        "viewport": {
            "width": runtime_config.browser.viewport_width,
            "height": runtime_config.browser.viewport_height,
        },
        "ignore_https_errors": True,
    }


@pytest.fixture
def app_page(page, runtime_config):
    """A fresh page already on the application's root URL."""
    if runtime_config.browser.default_timeout_ms is not None:
        page.set_default_timeout(runtime_config.browser.default_timeout_ms)
    page.goto(runtime_config.base_url)
    return page
