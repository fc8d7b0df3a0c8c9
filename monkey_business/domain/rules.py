"""Per-monkey transform rules and routing tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from monkey_business.domain.worry import Operator, WorryLevel

OLD: Final = "old"
"""Operand marker meaning "use the inspected value as both operands"."""

# Either a fixed non-negative constant or the OLD marker
Operand = int | str


@dataclass(frozen=True)
class TransformRule:
    """Maps one worry level to ``value OP operand``."""

    operator: Operator
    operand: Operand

    def __post_init__(self) -> None:
        if not isinstance(self.operator, Operator):
            raise ValueError(f"operator must be an Operator, got {self.operator!r}")
        if isinstance(self.operand, str):
            if self.operand != OLD:
                raise ValueError(f"operand marker must be {OLD!r}, got {self.operand!r}")
        elif isinstance(self.operand, bool) or not isinstance(self.operand, int):
            raise ValueError(f"operand must be an int or {OLD!r}")
        elif self.operand < 0:
            raise ValueError("operand must be >= 0")

    @classmethod
    def from_symbols(cls, symbol: str, raw_operand: str) -> TransformRule:
        """Build a rule from ``"*"`` / ``"19"`` style tokens."""
        try:
            operator = Operator(symbol)
        except ValueError as exc:
            valid = ", ".join(op.value for op in Operator)
            raise ValueError(f"operator must be one of {valid}, got {symbol!r}") from exc
        token = raw_operand.strip()
        if token == OLD:
            return cls(operator=operator, operand=OLD)
        try:
            operand = int(token)
        except ValueError as exc:
            raise ValueError(f"operand must be an integer or {OLD!r}, got {token!r}") from exc
        return cls(operator=operator, operand=operand)

    @property
    def is_self_referential(self) -> bool:
        return self.operand == OLD

    def evaluate(self, value: WorryLevel) -> WorryLevel:
        rhs = value if self.is_self_referential else WorryLevel(int(self.operand))
        return value.apply(self.operator, rhs)


@dataclass(frozen=True)
class RoutingTest:
    """Divisibility predicate with one destination per outcome."""

    divisor: int
    if_true: int
    if_false: int

    def __post_init__(self) -> None:
        if isinstance(self.divisor, bool) or not isinstance(self.divisor, int):
            raise ValueError("divisor must be an integer")
        if self.divisor < 1:
            raise ValueError("divisor must be >= 1")
        if self.if_true < 0 or self.if_false < 0:
            raise ValueError("destination monkey ids must be >= 0")

    @property
    def destinations(self) -> tuple[int, int]:
        return (self.if_true, self.if_false)

    def evaluate(self, value: WorryLevel) -> int:
        """Return the destination monkey id for ``value``."""
        return self.if_true if value.is_divisible_by(self.divisor) else self.if_false
