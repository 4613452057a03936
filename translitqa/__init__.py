import logging
import os

from rich.logging import RichHandler

from translitqa.types.configuration import (
    SuiteRuntimeConfig,
    TimingConfig,
)

# Stage-based configuration dictionary
STAGE_CONFIGS = {
    "default": SuiteRuntimeConfig(
        environment_stage="default",
        log_level=logging.INFO,
        timing=TimingConfig(),
    ),
    "fast": SuiteRuntimeConfig(
        environment_stage="fast",
        log_level=logging.INFO,
        timing=TimingConfig(settle_mode="stable", poll_interval_ms=200, stable_for_ms=600),
    ),
    "unit-test": SuiteRuntimeConfig(
        environment_stage="unit-test",
        log_level=logging.WARNING,  # Less verbose for tests
        timing=TimingConfig(
            accuracy_settle_ms=0,
            typing_delay_ms=0,
            realtime_settle_ms=0,
            clear_fill_settle_ms=0,
            clear_action_settle_ms=0,
        ),
    ),
}


def _env_flag(name: str):
    value = os.environ.get(name)
    if value is None:
        return None
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_runtime_config(stage: str = None) -> SuiteRuntimeConfig:
    """Select the stage config and apply environment overrides."""
    stage = stage or os.environ.get("TRANSLITQA_ENV_STAGE", "default")
    if stage not in STAGE_CONFIGS:
        raise ValueError(
            f"Unknown stage: {stage}. Valid options: {', '.join(STAGE_CONFIGS)}"
        )

    return STAGE_CONFIGS[stage].with_overrides(
        base_url=os.environ.get("TRANSLITQA_BASE_URL"),
        cases_file=os.environ.get("TRANSLITQA_CASES_FILE"),
        results_file=os.environ.get("TRANSLITQA_RESULTS_FILE"),
        strict_verdicts=_env_flag("TRANSLITQA_STRICT"),
        headless=_env_flag("HEADLESS"),
    )


# Selected once at import for the log level; an unknown stage only errors
# when a config is actually requested for it.
_stage = os.environ.get("TRANSLITQA_ENV_STAGE", "default")
runtime_config = load_runtime_config(_stage if _stage in STAGE_CONFIGS else "default")


FORMAT = "%(message)s"
logging.basicConfig(
    level=runtime_config.log_level,
    format=FORMAT,
    datefmt="[%X]",
    handlers=[RichHandler()],
)
