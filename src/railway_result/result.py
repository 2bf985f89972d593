"""Result[T, E]: a Success or a Failure, plus the combinators that route them.

Every combinator is a plain function taking the transform first and the
Result last, so it can be called directly or partially applied and used as
a pipeline step:

    ```python
    from railway_result import failure, flat_map, map, success

    def parse(raw: str) -> Result[int, str]:
        return success(int(raw)) if raw.isdigit() else failure(f'not a number: {raw}')

    doubled = map(lambda n: n * 2, parse('21'))
    # Success(value=42)

    step = flat_map(parse)
    step(success('x'))
    # Failure(error='not a number: x')
    ```

Combinators never catch exceptions raised by transforms. A failure is data;
an exception is a bug in the transform and propagates as such.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import Any, ClassVar, Final, Literal, TypeIs, overload

import msgspec

from railway_result.errors import NotAResultError

__all__ = [
    'Failure',
    'Result',
    'Success',
    'failure',
    'flat_map',
    'flat_map_error',
    'is_failure',
    'is_result',
    'is_success',
    'map',
    'map_error',
    'success',
    'unwrap',
]

# Marks an omitted Result argument, selecting the curried call shape.
_MISSING: Final[Any] = object()


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result carrying a value of type T.

    Examples:
        >>> Success(42)
        Success(value=42)
        >>> Success(42).tag
        'success'
    """

    tag: ClassVar[Literal['success']] = 'success'

    value: T


class Failure[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result carrying an error payload of type E.

    The payload is opaque to the library: a string, an exception instance or
    any structured value is routed through pipelines untouched.

    Examples:
        >>> Failure('boom')
        Failure(error='boom')
        >>> Failure('boom').tag
        'failure'
    """

    tag: ClassVar[Literal['failure']] = 'failure'

    error: E


type Result[T, E] = Success[T] | Failure[E]


def success[T](value: T) -> Success[T]:
    """Wrap value in a Success. Any value is accepted, None included."""
    return Success(value)


def failure[E](value: E) -> Failure[E]:
    """Wrap value in a Failure. Any value is accepted, None included."""
    return Failure(value)


def is_result(value: object) -> TypeIs[Success[Any] | Failure[Any]]:
    """Return True if value is a Success or a Failure."""
    return isinstance(value, Success | Failure)


def is_success[T](result: Result[T, Any]) -> TypeIs[Success[T]]:
    """Return True if result is a Success, narrowing its type."""
    return isinstance(result, Success)


def is_failure[E](result: Result[Any, E]) -> TypeIs[Failure[E]]:
    """Return True if result is a Failure, narrowing its type."""
    return isinstance(result, Failure)


def _ensure_result(value: object, operation: str) -> Success[Any] | Failure[Any]:
    if not isinstance(value, Success | Failure):
        raise NotAResultError(value, operation=operation)
    return value


@overload
def flat_map[T, U, E, F](
    transform: Callable[[T], Result[U, F]],
    result: Result[T, E],
    /,
) -> Result[U, E | F]: ...


@overload
def flat_map[T, U, E, F](
    transform: Callable[[T], Result[U, F]],
    /,
) -> Callable[[Result[T, E]], Result[U, E | F]]: ...


def flat_map(transform: Callable[[Any], Any], result: Any = _MISSING, /) -> Any:
    """Chain a Result-returning transform onto the success value.

    On Success, returns transform(value) verbatim. On Failure, returns the
    input unchanged and never calls transform.

    Args:
        transform: Function from the success value to a new Result.
        result: The Result to chain from. Omit it to get a unary function
            awaiting the Result.

    Returns:
        The chained Result, or a function producing it when result is omitted.

    Examples:
        >>> flat_map(lambda x: Success(x + 1), Success(1))
        Success(value=2)
        >>> flat_map(lambda x: Success(x + 1))(Failure('e'))
        Failure(error='e')
    """
    if result is _MISSING:
        return partial(flat_map, transform)
    checked = _ensure_result(result, 'flat_map')
    if isinstance(checked, Success):
        return transform(checked.value)
    return checked


@overload
def flat_map_error[T, E, U, F](
    transform: Callable[[E], Result[U, F]],
    result: Result[T, E],
    /,
) -> Result[T | U, F]: ...


@overload
def flat_map_error[T, E, U, F](
    transform: Callable[[E], Result[U, F]],
    /,
) -> Callable[[Result[T, E]], Result[T | U, F]]: ...


def flat_map_error(transform: Callable[[Any], Any], result: Any = _MISSING, /) -> Any:
    """Chain a Result-returning transform onto the failure payload.

    Mirror of flat_map: on Failure, returns transform(error) verbatim; on
    Success, returns the input unchanged and never calls transform. Useful
    for recovery (returning a Success) or for re-classifying an error.

    Args:
        transform: Function from the failure payload to a new Result.
        result: The Result to chain from. Omit it for the curried form.

    Returns:
        The chained Result, or a function producing it when result is omitted.
    """
    if result is _MISSING:
        return partial(flat_map_error, transform)
    checked = _ensure_result(result, 'flat_map_error')
    if isinstance(checked, Failure):
        return transform(checked.error)
    return checked


@overload
def map[T, U, E](  # noqa: A001
    transform: Callable[[T], U],
    result: Result[T, E],
    /,
) -> Result[U, E]: ...


@overload
def map[T, U, E](  # noqa: A001
    transform: Callable[[T], U],
    /,
) -> Callable[[Result[T, E]], Result[U, E]]: ...


def map(transform: Callable[[Any], Any], result: Any = _MISSING, /) -> Any:  # noqa: A001
    """Transform the success value, leaving failures untouched.

    Equivalent to ``flat_map(lambda v: success(transform(v)), result)``.

    Examples:
        >>> map(str, Success(5))
        Success(value='5')
        >>> map(str)(Failure('e'))
        Failure(error='e')
    """
    lifted = flat_map(lambda value: Success(transform(value)))
    if result is _MISSING:
        return lifted
    return lifted(result)


@overload
def map_error[T, E, F](
    transform: Callable[[E], F],
    result: Result[T, E],
    /,
) -> Result[T, F]: ...


@overload
def map_error[T, E, F](
    transform: Callable[[E], F],
    /,
) -> Callable[[Result[T, E]], Result[T, F]]: ...


def map_error(transform: Callable[[Any], Any], result: Any = _MISSING, /) -> Any:
    """Transform the failure payload, leaving successes untouched.

    Equivalent to ``flat_map_error(lambda e: failure(transform(e)), result)``.

    Examples:
        >>> map_error(str.upper, Failure('boom'))
        Failure(error='BOOM')
    """
    lifted = flat_map_error(lambda error: Failure(transform(error)))
    if result is _MISSING:
        return lifted
    return lifted(result)


def unwrap[T, E, U, F](
    *,
    success: Callable[[T], U] | None = None,
    failure: Callable[[E], F] | None = None,
) -> Callable[[Result[T, E]], T | U | E | F]:
    """Build a function collapsing a Result into a plain value.

    Each side uses its projection when one is given and the raw payload
    otherwise, so ``unwrap()`` is plain extraction. A projection returning
    None also falls back to the raw payload. Typically the last step
    of a pipeline handing off to code that does not distinguish outcomes.

    Args:
        success: Optional projection applied to a success value.
        failure: Optional projection applied to a failure payload.

    Returns:
        A function from Result to the projected payload.

    Examples:
        >>> unwrap()(Success(1))
        1
        >>> unwrap(failure=lambda e: f'err:{e}')(Failure('x'))
        'err:x'
    """

    def _unwrap(result: Result[T, E]) -> T | U | E | F:
        checked = _ensure_result(result, 'unwrap')
        if isinstance(checked, Success):
            projected = success(checked.value) if success is not None else None
            return checked.value if projected is None else projected
        projected = failure(checked.error) if failure is not None else None
        return checked.error if projected is None else projected

    return _unwrap
