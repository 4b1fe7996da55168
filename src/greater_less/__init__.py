"""Top-level package for greater-less."""

from __future__ import annotations

__all__ = [
    "GREATER_LESS",
    "Bound",
    "BoundOrFloat",
    "GreaterLessError",
    "IncompatibleBoundsError",
    "InvalidFormatError",
    "Sign",
    "UnsupportedTypeError",
    "construct",
    "from_constraint",
    "parse",
    "parse_number",
    "raw_value",
    "to_bound",
    "to_constraint",
]

from ._bound import Bound, raw_value
from ._constraints import from_constraint, to_constraint
from ._errors import GreaterLessError, IncompatibleBoundsError, InvalidFormatError, UnsupportedTypeError
from ._hook import parse_number
from ._parser import GREATER_LESS, construct, parse, to_bound
from ._pydantic import BoundOrFloat
from ._sign import Sign
