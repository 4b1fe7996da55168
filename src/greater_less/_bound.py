"""The bound value type."""

from __future__ import annotations

import math
from numbers import Real
from typing import TYPE_CHECKING, Any, Final, TypeGuard

from ._errors import IncompatibleBoundsError, UnsupportedTypeError
from ._sign import Sign

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

# Signs that may sit on the larger/smaller side of a comparison.
_ABOVE: Final = frozenset({Sign.NONE, Sign.GREATER_THAN})
_BELOW: Final = frozenset({Sign.NONE, Sign.LESS_THAN})


def is_number(value: Any) -> TypeGuard[Real]:
    """Return True for real numbers that can stand in for a bound's value (booleans excluded)."""
    return isinstance(value, Real) and not isinstance(value, bool)


class Bound:
    """A number known only to be greater than or less than `value`.

    Bounds compare and combine with plain numbers as if they were `value`, while
    keeping track of the direction in which they are open:

    - Equality holds only between bounds with the same sign and value; a bound
      never equals a plain number.
    - Ordering is conservative. A relation is true only when the values satisfy it
      and both signs point the compatible way, otherwise it is false.
    - `+`, `-`, `*` and `/` with a number return a new bound, inverting the sign
      where the operation flips the order. Two signed bounds cannot be combined.
    - `float()`, `abs()`, `round()` and the other forwarded operations act on
      `value` and return plain numbers without the sign.

    Attributes:
        sign: The direction in which the bound is open.
        value: The limit of the bound.

    """

    __slots__ = ("sign", "value")

    sign: Sign
    value: float

    def __init__(self, sign: Sign, value: float) -> None:
        if not isinstance(sign, Sign):
            msg = f"Bound sign must be a Sign, got {type(sign).__name__}."
            raise TypeError(msg)
        if not is_number(value):
            raise UnsupportedTypeError(value)
        object.__setattr__(self, "sign", sign)
        object.__setattr__(self, "value", float(value))

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"cannot assign to field {name!r} of an immutable Bound"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"cannot delete field {name!r} of an immutable Bound"
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[type[Bound], tuple[Sign, float]]:
        return (type(self), (self.sign, self.value))

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        from ._pydantic import bound_core_schema  # noqa: PLC0415

        return bound_core_schema(source_type, handler)

    # Equality and ordering

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Bound):
            return self.sign is other.sign and self.value == other.value
        if is_number(other):
            return False
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return NotImplemented
        return not equal

    def __hash__(self) -> int:
        return hash((self.sign, self.value))

    def __gt__(self, other: object) -> bool:
        other_bound = _coerce(other)
        if other_bound is None:
            return NotImplemented
        if not self.sign.is_signed and not other_bound.sign.is_signed:
            return self.value > other_bound.value
        return self.value >= other_bound.value and self.sign in _ABOVE and other_bound.sign in _BELOW

    def __lt__(self, other: object) -> bool:
        other_bound = _coerce(other)
        if other_bound is None:
            return NotImplemented
        return other_bound > self

    def __ge__(self, other: object) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self == other or self > other

    def __le__(self, other: object) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self == other or self < other

    # Arithmetic

    def __mul__(self, other: object) -> Bound:
        other_bound = _coerce(other)
        if other_bound is None:
            return NotImplemented
        bound, factor = _split(self, other_bound)
        sign = bound.sign if factor > 0 else bound.sign.inverted()
        return Bound(sign, bound.value * factor)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Bound:
        other_bound = _coerce(other)
        if other_bound is None:
            return NotImplemented
        return _divide(self, other_bound)

    def __rtruediv__(self, other: object) -> Bound:
        other_bound = _coerce(other)
        if other_bound is None:
            return NotImplemented
        return _divide(other_bound, self)

    def __add__(self, other: object) -> Bound:
        other_bound = _coerce(other)
        if other_bound is None:
            return NotImplemented
        bound, addend = _split(self, other_bound)
        return Bound(bound.sign, bound.value + addend)

    __radd__ = __add__

    def __sub__(self, other: object) -> Bound:
        other_bound = _coerce(other)
        if other_bound is None:
            return NotImplemented
        return self + (-other_bound)

    def __rsub__(self, other: object) -> Bound:
        other_bound = _coerce(other)
        if other_bound is None:
            return NotImplemented
        return other_bound + (-self)

    def __neg__(self) -> Bound:
        return Bound(self.sign.inverted(), -self.value)

    def __pos__(self) -> Bound:
        return self

    # Forwarded to the value; the results are plain numbers

    def __float__(self) -> float:
        return self.value

    def __int__(self) -> int:
        return int(self.value)

    def __bool__(self) -> bool:
        return bool(self.value)

    def __abs__(self) -> float:
        return abs(self.value)

    def __round__(self, ndigits: int | None = None) -> float:
        return round(self.value, ndigits)

    def __trunc__(self) -> int:
        return math.trunc(self.value)

    def __floor__(self) -> int:
        return math.floor(self.value)

    def __ceil__(self) -> int:
        return math.ceil(self.value)

    def __pow__(self, other: object) -> float:
        other_value = _raw(other)
        if other_value is None:
            return NotImplemented
        return self.value**other_value

    def __rpow__(self, other: object) -> float:
        other_value = _raw(other)
        if other_value is None:
            return NotImplemented
        return other_value**self.value

    def __floordiv__(self, other: object) -> float:
        other_value = _raw(other)
        if other_value is None:
            return NotImplemented
        return self.value // other_value

    def __rfloordiv__(self, other: object) -> float:
        other_value = _raw(other)
        if other_value is None:
            return NotImplemented
        return other_value // self.value

    def __mod__(self, other: object) -> float:
        other_value = _raw(other)
        if other_value is None:
            return NotImplemented
        return self.value % other_value

    def __rmod__(self, other: object) -> float:
        other_value = _raw(other)
        if other_value is None:
            return NotImplemented
        return other_value % self.value

    def __divmod__(self, other: object) -> tuple[float, float]:
        other_value = _raw(other)
        if other_value is None:
            return NotImplemented
        return divmod(self.value, other_value)

    def __rdivmod__(self, other: object) -> tuple[float, float]:
        other_value = _raw(other)
        if other_value is None:
            return NotImplemented
        return divmod(other_value, self.value)

    def is_integer(self) -> bool:
        """Return True if the value is integral."""
        return self.value.is_integer()

    def as_integer_ratio(self) -> tuple[int, int]:
        """Return the value as a pair of integers whose ratio is exactly the value."""
        return self.value.as_integer_ratio()

    # Rendering

    def __str__(self) -> str:
        if not self.sign.is_signed:
            return str(self.value)
        return f"{self.sign.value} {self.value}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        formatted = format(self.value, format_spec)
        if not self.sign.is_signed:
            return formatted
        return f"{self.sign.value} {formatted}"


def raw_value(number: Bound | float) -> float:
    """Return the plain value behind a bound, or the number itself as a float."""
    if isinstance(number, Bound):
        return number.value
    if is_number(number):
        return float(number)
    raise UnsupportedTypeError(number)


def _coerce(other: object) -> Bound | None:
    """Return `other` as a bound, wrapping plain numbers with `Sign.NONE`."""
    if isinstance(other, Bound):
        return other
    if is_number(other):
        return Bound(Sign.NONE, other)
    return None


def _raw(other: object) -> float | None:
    if isinstance(other, Bound):
        return other.value
    if is_number(other):
        return float(other)
    return None


def _check_compatible(left: Bound, right: Bound) -> None:
    if left.sign.is_signed and right.sign.is_signed:
        raise IncompatibleBoundsError(left, right)


def _split(left: Bound, right: Bound) -> tuple[Bound, float]:
    """Separate the operands of a commutative operation into the bound and a plain number."""
    _check_compatible(left, right)
    if right.sign.is_signed:
        return right, left.value
    return left, right.value


def _divide(numerator: Bound, denominator: Bound) -> Bound:
    _check_compatible(numerator, denominator)
    if denominator.sign.is_signed:
        # A bound in the denominator flips the order for a positive numerator.
        sign = denominator.sign.inverted() if numerator.value > 0 else denominator.sign
    else:
        sign = numerator.sign if denominator.value > 0 else numerator.sign.inverted()
    return Bound(sign, numerator.value / denominator.value)
