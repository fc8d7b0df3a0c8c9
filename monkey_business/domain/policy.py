"""Growth-management policies applied after every transform.

Two policies exist and exactly one is chosen per run:

- ``ReliefPolicy`` floor-divides by a small boredness factor.
- ``ModulusBoundPolicy`` reduces modulo the least common multiple of every
  routing divisor, which keeps each ``value % divisor`` unchanged while
  bounding magnitude.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from monkey_business.config.constants import BOREDNESS_FACTOR
from monkey_business.config.types import GrowthPolicyMode
from monkey_business.domain.worry import WorryLevel


class GrowthPolicy(Protocol):
    """Reduction step applied to each freshly transformed worry level."""

    mode: GrowthPolicyMode

    def reduce(self, level: WorryLevel) -> WorryLevel: ...


@dataclass(frozen=True)
class ReliefPolicy:
    """Floor-divide by ``boredness_factor`` after each inspection."""

    boredness_factor: int = BOREDNESS_FACTOR
    mode: GrowthPolicyMode = field(default=GrowthPolicyMode.RELIEF, init=False)

    def __post_init__(self) -> None:
        if self.boredness_factor < 1:
            raise ValueError("boredness_factor must be >= 1")

    def reduce(self, level: WorryLevel) -> WorryLevel:
        # Exact integer floor division; no float round-trip.
        return WorryLevel(level.value // self.boredness_factor)


@dataclass(frozen=True)
class ModulusBoundPolicy:
    """Reduce modulo a fixed bound that every routing divisor divides."""

    modulus: int
    mode: GrowthPolicyMode = field(default=GrowthPolicyMode.MODULUS, init=False)

    def __post_init__(self) -> None:
        if self.modulus < 1:
            raise ValueError("modulus must be >= 1")

    @classmethod
    def from_divisors(cls, divisors: Iterable[int]) -> ModulusBoundPolicy:
        """Build the bound as the LCM of all routing divisors."""
        values = list(divisors)
        if not values:
            raise ValueError("at least one divisor is required")
        if any(d < 1 for d in values):
            raise ValueError("divisors must be >= 1")
        return cls(modulus=math.lcm(*values))

    def reduce(self, level: WorryLevel) -> WorryLevel:
        return level.modulo(self.modulus)


def build_policy(
    mode: GrowthPolicyMode,
    divisors: Iterable[int],
    boredness_factor: int = BOREDNESS_FACTOR,
) -> GrowthPolicy:
    """Select and construct the policy for one run."""
    if mode is GrowthPolicyMode.RELIEF:
        return ReliefPolicy(boredness_factor=boredness_factor)
    if mode is GrowthPolicyMode.MODULUS:
        return ModulusBoundPolicy.from_divisors(divisors)
    raise ValueError(f"unknown growth policy: {mode!r}")
