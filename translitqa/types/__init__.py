from translitqa.types.configuration import (
    BrowserConfig,
    PathsConfig,
    SelectorConfig,
    SuiteRuntimeConfig,
    TimingConfig,
)
from translitqa.types.test_case import Category, ResultRecord, Status, TestCase

__all__ = [
    "BrowserConfig",
    "PathsConfig",
    "SelectorConfig",
    "SuiteRuntimeConfig",
    "TimingConfig",
    "Category",
    "ResultRecord",
    "Status",
    "TestCase",
]
