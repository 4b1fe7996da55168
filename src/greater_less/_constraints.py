"""Conversion between bounds and `annotated_types` constraints."""

from __future__ import annotations

import annotated_types

from ._bound import Bound, is_number
from ._errors import UnsupportedTypeError
from ._sign import Sign


def to_constraint(bound: Bound) -> annotated_types.Gt | annotated_types.Lt:
    """Return the exclusive constraint a bound expresses.

    ``> 3.45`` becomes ``Gt(3.45)`` and ``< 3.45`` becomes ``Lt(3.45)``, which can be
    placed in `Annotated` metadata or compared against pydantic field metadata.

    Raises:
        ValueError: If the bound has no sign.

    """
    if bound.sign is Sign.GREATER_THAN:
        return annotated_types.Gt(bound.value)
    if bound.sign is Sign.LESS_THAN:
        return annotated_types.Lt(bound.value)
    msg = f"Bound {bound} has no sign and does not express a constraint."
    raise ValueError(msg)


def from_constraint(constraint: annotated_types.BaseMetadata) -> Bound:
    """Create a bound from an exclusive `Gt` or `Lt` constraint.

    Raises:
        UnsupportedTypeError: If the constraint is not `Gt`/`Lt` or its limit is not a real number.

    """
    if isinstance(constraint, annotated_types.Gt):
        sign, limit = Sign.GREATER_THAN, constraint.gt
    elif isinstance(constraint, annotated_types.Lt):
        sign, limit = Sign.LESS_THAN, constraint.lt
    else:
        raise UnsupportedTypeError(constraint)

    if not is_number(limit):
        raise UnsupportedTypeError(limit)
    return Bound(sign, float(limit))
