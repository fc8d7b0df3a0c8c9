"""Worry levels: the arbitrary-precision value carried by every item.

Python integers never overflow, so multiplication by ``old`` is exact for as
long as the caller lets values grow. Growth is tamed only through
``WorryLevel.reduce`` with a policy from ``monkey_business.domain.policy``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from monkey_business.domain.errors import WorryUnderflowError

if TYPE_CHECKING:
    from monkey_business.domain.policy import GrowthPolicy


class Operator(Enum):
    """Arithmetic operators a transform rule may apply."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"


@dataclass(frozen=True)
class WorryLevel:
    """A non-negative integer worry level."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"worry level must be an int, got {type(self.value).__name__}")
        if self.value < 0:
            raise WorryUnderflowError(f"worry level must be >= 0, got {self.value}")

    def apply(self, op: Operator, rhs: WorryLevel) -> WorryLevel:
        """Return ``self OP rhs``; subtraction below zero raises."""
        if op is Operator.ADD:
            return WorryLevel(self.value + rhs.value)
        if op is Operator.MULTIPLY:
            return WorryLevel(self.value * rhs.value)
        if op is Operator.SUBTRACT:
            if rhs.value > self.value:
                raise WorryUnderflowError(f"{self.value} - {rhs.value} would be negative")
            return WorryLevel(self.value - rhs.value)
        raise ValueError(f"unsupported operator: {op!r}")

    def modulo(self, modulus: int) -> WorryLevel:
        if modulus < 1:
            raise ValueError("modulus must be >= 1")
        return WorryLevel(self.value % modulus)

    def reduce(self, policy: GrowthPolicy) -> WorryLevel:
        """Apply the run's growth-management policy."""
        return policy.reduce(self)

    def is_divisible_by(self, divisor: int) -> bool:
        return self.value % divisor == 0
