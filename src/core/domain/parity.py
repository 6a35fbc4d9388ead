"""Parity values shared by the domain and the CLI.

Kept as a small enum in the domain layer so that rendering code never has to
re-derive the "even"/"odd" wording from a raw boolean.
"""

from __future__ import annotations

from enum import Enum


class Parity(str, Enum):
    """Whether an integer is evenly divisible by two."""

    EVEN = "even"
    ODD = "odd"

    @classmethod
    def from_flag(cls, iseven: bool) -> "Parity":
        """Derive a parity value from the service's `iseven` flag."""

        return cls.EVEN if iseven else cls.ODD
