"""Exceptions raised for misuse of the combinators.

Failures reported by user code travel as `Failure` values and never show up
here. These exceptions only signal that a combinator was handed something it
cannot route, which is a bug in the calling code.
"""

from __future__ import annotations

__all__ = [
    'CombineInputError',
    'NotAResultError',
    'RailwayError',
]


class RailwayError(Exception):
    """Base class for all railway_result exceptions."""


class NotAResultError(RailwayError, TypeError):
    """A combinator received a value that is neither Success nor Failure."""

    def __init__(self, value: object, *, operation: str | None = None) -> None:
        self.value = value
        self.operation = operation
        where = f' in {operation}()' if operation else ''
        super().__init__(f'Expected Success or Failure{where}, got {type(value).__name__}: {value!r}')


class CombineInputError(RailwayError, TypeError):
    """combine() was given an element it cannot fold.

    Raised with the offending position (an index for ordered input, a key
    for named input).
    """

    def __init__(self, position: int | str, value: object) -> None:
        self.position = position
        self.value = value
        super().__init__(
            f'combine() element at {position!r} is not a Result: {type(value).__name__}: {value!r}'
        )
