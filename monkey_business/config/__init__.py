"""Configuration layer: constants and typed config dataclasses."""

from monkey_business.config.constants import (
    BOREDNESS_FACTOR,
    BOUNDED_ROUNDS,
    RELIEF_ROUNDS,
    TALLY_FLUSH_THRESHOLD,
    TOP_ACTIVE_MONKEYS,
)
from monkey_business.config.types import (
    PRESETS,
    GrowthPolicyMode,
    RunConfig,
    SimulationResult,
)

__all__ = [
    "BOREDNESS_FACTOR",
    "BOUNDED_ROUNDS",
    "GrowthPolicyMode",
    "PRESETS",
    "RELIEF_ROUNDS",
    "RunConfig",
    "SimulationResult",
    "TALLY_FLUSH_THRESHOLD",
    "TOP_ACTIVE_MONKEYS",
]
