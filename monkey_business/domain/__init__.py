"""Domain layer: worry levels, rules, policies, monkeys, and troop validation."""

from monkey_business.domain.errors import (
    MonkeyDefinitionError,
    RoutingError,
    WorryUnderflowError,
)
from monkey_business.domain.monkey import Monkey
from monkey_business.domain.policy import (
    GrowthPolicy,
    ModulusBoundPolicy,
    ReliefPolicy,
    build_policy,
)
from monkey_business.domain.rules import OLD, RoutingTest, TransformRule
from monkey_business.domain.troop import (
    MonkeyDefinition,
    build_troop,
    check_routes,
    troop_divisors,
)
from monkey_business.domain.worry import Operator, WorryLevel

__all__ = [
    "GrowthPolicy",
    "ModulusBoundPolicy",
    "Monkey",
    "MonkeyDefinition",
    "MonkeyDefinitionError",
    "OLD",
    "Operator",
    "ReliefPolicy",
    "RoutingError",
    "RoutingTest",
    "TransformRule",
    "WorryLevel",
    "WorryUnderflowError",
    "build_policy",
    "build_troop",
    "check_routes",
    "troop_divisors",
]
