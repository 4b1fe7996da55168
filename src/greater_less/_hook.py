"""Optional integration for generic text-to-number conversion.

Code that turns arbitrary readings into numbers can call `parse_number` in place of
`float` to get a `Bound` for texts such as ``"<0.01"`` and a float for everything else.
"""

from __future__ import annotations

import logging

from ._bound import Bound
from ._errors import UnsupportedTypeError
from ._parser import GREATER_LESS, construct

logger = logging.getLogger(__name__)


def parse_number(text: str) -> Bound | float:
    """Convert text to a bound if it starts with `>` or `<`, or to a float otherwise.

    Raises:
        UnsupportedTypeError: If `text` is not a string.
        ValueError: If unsigned text is not a number, as raised by `float`.

    """
    if not isinstance(text, str):
        raise UnsupportedTypeError(text)
    if GREATER_LESS.match(text) is None:
        return float(text)
    logger.debug("Parsing %r as a bound", text)
    return construct(text)
