"""Dependency injection container."""

from typing import Optional

from injector import Injector

from translitqa.types.configuration import SuiteRuntimeConfig
from .modules import SuiteModule


_injector: Optional[Injector] = None


def create_injector(
    stage: Optional[str] = None, config: Optional[SuiteRuntimeConfig] = None
) -> Injector:
    """Create a new injector.

    Args:
        stage: Runtime stage name. If None, reads from TRANSLITQA_ENV_STAGE
        config: Explicit runtime config; takes precedence over ``stage``

    Returns:
        Configured Injector instance
    """
    return Injector([SuiteModule(stage=stage, config=config)])


def get_injector(
    stage: Optional[str] = None,
    config: Optional[SuiteRuntimeConfig] = None,
    force_new: bool = False,
) -> Injector:
    """Get the process-wide injector instance.

    The cached injector keeps one results sink per process, which is what
    guards header initialisation and appends.

    Args:
        stage: Runtime stage name. If None, reads from TRANSLITQA_ENV_STAGE
        config: Explicit runtime config; takes precedence over ``stage``
        force_new: If True, creates a new injector instead of using cached one

    Returns:
        Configured Injector instance
    """
    global _injector

    if force_new or _injector is None:
        _injector = create_injector(stage, config)

    return _injector


def reset_injector() -> None:
    """Drop the cached injector."""
    global _injector
    _injector = None


def get_runtime_config(force_new: bool = False) -> SuiteRuntimeConfig:
    return get_injector(force_new=force_new).get(SuiteRuntimeConfig)
