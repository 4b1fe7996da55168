"""Parsing text and numbers into bounds."""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Final

from ._bound import Bound, is_number
from ._errors import InvalidFormatError, UnsupportedTypeError
from ._sign import Sign

logger = logging.getLogger(__name__)

GREATER_LESS: Final = re.compile(r"^\s*(?P<sign>[<>])\s?")
"""Prefix marking text as a bound: optional whitespace, `<` or `>`, and at most one blank."""

_SIGN_MARKER: Final = re.compile(r"[<>]\s?")
_FLOAT_PREFIX: Final = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def lenient_float(text: str) -> float:
    """Convert text to a float, reading as much of a leading number as possible.

    Only decimal literals are read: ``"inf"``, ``"nan"`` and text without a
    leading number convert to ``0.0``, and ``"1_000"`` reads as ``1.0``.
    """
    match = _FLOAT_PREFIX.match(text.strip())
    if match is None:
        logger.debug("No number in %r, falling back to 0.0", text)
        return 0.0
    return float(match.group())


def construct(content: Any, *, coerce: bool = False) -> Bound | float:
    """Create a bound from text or a number, or fall back to a plain float.

    Args:
        content: Text such as ``"> 3.45"`` or ``"<0.01"``, a real number, or a bound.
        coerce: Always return a bound. Text or numbers without a sign get `Sign.NONE`.

    Returns:
        A `Bound` when the text starts with a sign or `coerce` is set, a float otherwise.

    Raises:
        UnsupportedTypeError: If `content` is neither text nor a real number.

    """
    if isinstance(content, Bound):
        return content
    if isinstance(content, str):
        match = GREATER_LESS.match(content)
        if match is not None:
            return Bound(Sign.from_symbol(match.group("sign")), lenient_float(content[match.end() :]))
        if coerce:
            return Bound(Sign.NONE, lenient_float(content))
        return lenient_float(content)
    if is_number(content):
        if coerce:
            return Bound(Sign.NONE, float(content))
        return float(content)
    raise UnsupportedTypeError(content)


def to_bound(content: Any) -> Bound:
    """Create a bound from text or a number, coercing unsigned input to `Sign.NONE`."""
    result = construct(content, coerce=True)
    assert isinstance(result, Bound), "Coerced construction must produce a bound."
    return result


def parse(text: str) -> Bound:
    """Strictly parse text of the form ``"<sign> <number>"`` into a bound.

    The rightmost sign marker in the text must be preceded only by whitespace, and
    everything after it must be a finite number.

    Raises:
        UnsupportedTypeError: If `text` is not a string.
        InvalidFormatError: If the text is not a signed finite number.

    """
    if not isinstance(text, str):
        raise UnsupportedTypeError(text)

    markers = list(_SIGN_MARKER.finditer(text))
    if not markers:
        raise InvalidFormatError(text, "missing '>' or '<' sign")
    marker = markers[-1]
    if text[: marker.start()].strip():
        raise InvalidFormatError(text, "sign must come first")

    remainder = text[marker.end() :]
    try:
        number = float(remainder)
    except ValueError:
        raise InvalidFormatError(text, f"{remainder!r} is not a number") from None
    if not math.isfinite(number):
        raise InvalidFormatError(text, f"{remainder!r} is not a finite number")

    return to_bound(text)
