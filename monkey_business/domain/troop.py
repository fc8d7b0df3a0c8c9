"""Monkey definitions and troop construction with up-front validation.

Every configuration defect (missing rule or test, duplicate or gapped ids,
routing to an unknown monkey) is rejected here so that no round can ever
discover one mid-flight.
"""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from monkey_business.domain.errors import MonkeyDefinitionError, RoutingError
from monkey_business.domain.monkey import Monkey
from monkey_business.domain.rules import RoutingTest, TransformRule
from monkey_business.domain.worry import WorryLevel


@dataclass(frozen=True)
class MonkeyDefinition:
    """Parsed, not yet validated, description of one monkey."""

    monkey_id: int
    starting_items: tuple[int, ...]
    rule: TransformRule | None
    test: RoutingTest | None


def _to_monkey(definition: MonkeyDefinition) -> Monkey:
    """Check one definition in isolation and build its monkey."""
    rule, test = definition.rule, definition.test
    if definition.monkey_id < 0:
        raise MonkeyDefinitionError(f"monkey id must be >= 0, got {definition.monkey_id}")
    if rule is None:
        raise MonkeyDefinitionError(f"monkey {definition.monkey_id} has no transform rule")
    if test is None:
        raise MonkeyDefinitionError(f"monkey {definition.monkey_id} has no routing test")
    if any(item < 0 for item in definition.starting_items):
        raise MonkeyDefinitionError(
            f"monkey {definition.monkey_id} starts with a negative worry level"
        )
    return Monkey(
        monkey_id=definition.monkey_id,
        rule=rule,
        test=test,
        items=deque(WorryLevel(item) for item in definition.starting_items),
    )


def check_routes(troop: Sequence[Monkey]) -> None:
    """Raise RoutingError if any monkey throws to an id outside the troop."""
    for monkey in troop:
        for destination in monkey.test.destinations:
            if destination >= len(troop):
                raise RoutingError(
                    f"monkey {monkey.monkey_id} routes to unknown monkey {destination}"
                )


def build_troop(definitions: Iterable[MonkeyDefinition]) -> list[Monkey]:
    """Validate definitions and return monkeys indexed by their id.

    Raises:
        MonkeyDefinitionError: empty input, missing rule/test, duplicate ids,
            or ids that are not exactly ``0..N-1``.
        RoutingError: a routing test targets an id outside the troop.
    """
    ordered = sorted(definitions, key=lambda d: d.monkey_id)
    if not ordered:
        raise MonkeyDefinitionError("at least one monkey definition is required")
    troop = [_to_monkey(definition) for definition in ordered]

    counts = Counter(d.monkey_id for d in ordered)
    duplicates = sorted(monkey_id for monkey_id, n in counts.items() if n > 1)
    if duplicates:
        raise MonkeyDefinitionError(f"duplicate monkey ids: {duplicates}")
    ids = [d.monkey_id for d in ordered]
    if ids != list(range(len(ordered))):
        raise MonkeyDefinitionError(f"monkey ids must be dense 0..{len(ordered) - 1}, got {ids}")

    check_routes(troop)
    return troop


def troop_divisors(troop: Sequence[Monkey]) -> list[int]:
    """Routing divisors of every monkey, in id order."""
    return [monkey.test.divisor for monkey in troop]
