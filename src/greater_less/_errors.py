"""Exceptions raised by greater-less."""

from __future__ import annotations

from typing import Any


class GreaterLessError(Exception):
    """Base class for all greater-less errors."""


class UnsupportedTypeError(GreaterLessError, TypeError):
    """Raised when a bound is requested from a value that is neither text nor a number."""

    def __init__(self, value: Any) -> None:
        self.value = value
        msg = f"Can't handle {type(value).__name__}!"
        super().__init__(msg)


class InvalidFormatError(GreaterLessError, ValueError):
    """Raised when text does not follow the `<sign> <number>` format."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        msg = f"Invalid bound {text!r}: {reason}"
        super().__init__(msg)


class IncompatibleBoundsError(GreaterLessError, TypeError):
    """Raised when arithmetic is attempted between two signed bounds."""

    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        msg = f"Can't combine bounds {left} and {right}: both operands are open-ended."
        super().__init__(msg)
