"""Dependency injection for the case pipeline."""

from .container import (
    create_injector,
    get_injector,
    get_runtime_config,
    reset_injector,
)
from .modules import SuiteModule

__all__ = [
    "create_injector",
    "get_injector",
    "get_runtime_config",
    "reset_injector",
    "SuiteModule",
]
