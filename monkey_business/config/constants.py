"""Centralized domain constants for monkey-business simulations.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

BOREDNESS_FACTOR = 3
"""Relief-policy divisor applied after every inspection."""

RELIEF_ROUNDS = 20
"""Number of rounds for the relief-policy preset run."""

BOUNDED_ROUNDS = 10_000
"""Number of rounds for the modulus-bound preset run."""

TOP_ACTIVE_MONKEYS = 2
"""Number of most-active monkeys whose tallies multiply into the score."""

TALLY_FLUSH_THRESHOLD = 8_192
"""Flush tally log rows to Parquet once this in-memory row count is reached."""
