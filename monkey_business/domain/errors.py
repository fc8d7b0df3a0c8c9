"""Exception types raised by the domain layer."""

from __future__ import annotations


class MonkeyDefinitionError(ValueError):
    """A monkey definition is malformed, duplicated, or not densely numbered."""


class RoutingError(ValueError):
    """A routing test names a destination monkey that does not exist."""


class WorryUnderflowError(ArithmeticError):
    """An arithmetic step would drive a worry level below zero."""
