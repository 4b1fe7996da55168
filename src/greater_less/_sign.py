"""Bound signs."""

from __future__ import annotations

from enum import Enum


class Sign(Enum):
    """Direction in which a bound is open.

    `NONE` marks an operand that behaves as an exact value. It only appears on
    plain numbers coerced into bounds so that mixed operations can be evaluated uniformly.
    """

    GREATER_THAN = ">"
    LESS_THAN = "<"
    NONE = ""

    @classmethod
    def from_symbol(cls, symbol: str | None) -> Sign:
        """Return the sign for a `>`/`<` character, or `NONE` for an empty or missing one."""
        if not symbol:
            return cls.NONE
        return cls(symbol)

    @property
    def is_signed(self) -> bool:
        """Whether this sign actually opens the bound in some direction."""
        return self is not Sign.NONE

    def inverted(self) -> Sign:
        """Return the opposite sign. `NONE` has no opposite and is returned unchanged."""
        if self is Sign.GREATER_THAN:
            return Sign.LESS_THAN
        if self is Sign.LESS_THAN:
            return Sign.GREATER_THAN
        return self
