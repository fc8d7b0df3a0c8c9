"""Configuration dataclasses and result containers for simulation runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from monkey_business.config.constants import (
    BOREDNESS_FACTOR,
    BOUNDED_ROUNDS,
    RELIEF_ROUNDS,
)

__all__ = [
    "GrowthPolicyMode",
    "PRESETS",
    "RunConfig",
    "SimulationResult",
]


class GrowthPolicyMode(Enum):
    """Post-transform worry reduction applied for a whole run."""

    RELIEF = "relief"
    MODULUS = "modulus"


@dataclass(frozen=True)
class RunConfig:
    """Run parameters for one simulation."""

    rounds: int = RELIEF_ROUNDS
    policy: GrowthPolicyMode = GrowthPolicyMode.RELIEF
    boredness_factor: int = BOREDNESS_FACTOR

    def __post_init__(self) -> None:
        if isinstance(self.rounds, bool) or not isinstance(self.rounds, int):
            raise ValueError("rounds must be an integer")
        if self.rounds < 1:
            raise ValueError("rounds must be >= 1")
        if self.boredness_factor < 1:
            raise ValueError("boredness_factor must be >= 1")
        if not isinstance(self.policy, GrowthPolicyMode):
            raise ValueError("policy must be a GrowthPolicyMode")


PRESETS: dict[str, RunConfig] = {
    "relief": RunConfig(rounds=RELIEF_ROUNDS, policy=GrowthPolicyMode.RELIEF),
    "modulus": RunConfig(rounds=BOUNDED_ROUNDS, policy=GrowthPolicyMode.MODULUS),
}
"""The two canonical runs: short with relief, long with the modulus bound."""


@dataclass(frozen=True)
class SimulationResult:
    """Top-level result for one simulation run."""

    score: int
    rounds: int
    policy: GrowthPolicyMode
    tallies: dict[int, int] = field(default_factory=dict)

    def to_summary(self) -> dict[str, object]:
        """Return a JSON-serialisable summary."""
        return {
            "score": self.score,
            "rounds": self.rounds,
            "policy": self.policy.value,
            "tallies": {str(monkey_id): count for monkey_id, count in self.tallies.items()},
        }
