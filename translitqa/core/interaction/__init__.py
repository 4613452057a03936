"""Browser interaction: page surfaces, settle waits and per-case protocols."""

from translitqa.core.interaction.strategies import (
    AccuracyStrategy,
    ClearFunctionStrategy,
    InteractionStrategy,
    NoProtocolStrategy,
    Observation,
    RealTimeUpdateStrategy,
    select_strategy,
    select_strategy_class,
)
from translitqa.core.interaction.surfaces import UISurfaces
from translitqa.core.interaction.waits import (
    FixedDelay,
    SettleWait,
    StableOutputWait,
    create_settle_wait,
)

__all__ = [
    "AccuracyStrategy",
    "ClearFunctionStrategy",
    "InteractionStrategy",
    "NoProtocolStrategy",
    "Observation",
    "RealTimeUpdateStrategy",
    "select_strategy",
    "select_strategy_class",
    "UISurfaces",
    "FixedDelay",
    "SettleWait",
    "StableOutputWait",
    "create_settle_wait",
]
