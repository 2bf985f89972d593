"""combine(): merge several Results into one.

Four input shapes are accepted, told apart once at the boundary by
classify() and routed to a dedicated fold:

    ```python
    combine(success(1), success(2))              # Success(value=(1, 2))
    combine({'a': success(1), 'b': failure('e')})  # Failure(error='e')

    parse_both = combine(parse_int, parse_int)
    parse_both(('1', '2'))                       # Success(value=(1, 2))

    parse_form = combine({'age': parse_int, 'name': parse_name})
    parse_form({'age': '42', 'name': 'Ada'})     # Success(value={'age': 42, 'name': 'Ada'})
    ```

Whatever the shape, the outcome is either every success payload (a tuple in
input order, or a dict with the input's keys in the input's order) or the
first Failure by position.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from enum import Enum
from typing import Any

from railway_result._logging import get_logger
from railway_result.errors import CombineInputError
from railway_result.result import Failure, Result, Success, map

__all__ = [
    'CombineShape',
    'classify',
    'combine',
    'combine_iter',
    'combine_map',
]

log = get_logger('combine')


class CombineShape(Enum):
    """The input shapes combine() understands."""

    ORDERED_RESULTS = 'ordered_results'
    ORDERED_FUNCTIONS = 'ordered_functions'
    NAMED_RESULTS = 'named_results'
    NAMED_FUNCTIONS = 'named_functions'


def classify(args: Sequence[Any]) -> CombineShape:
    """Classify combine() positional arguments.

    A single Mapping argument is a named shape, any other argument list an
    ordered one. The shape is a function shape when the first element (the
    first value, for a mapping) is callable and, for the ordered form, more
    than one argument is given. A lone callable is folded as a Result and
    rejected with CombineInputError. Only the first element is
    inspected; mixing Results and functions in one call is not supported.
    """
    if len(args) == 1 and isinstance(args[0], Mapping):
        first = next(iter(args[0].values()), None)
        return CombineShape.NAMED_FUNCTIONS if callable(first) else CombineShape.NAMED_RESULTS
    if len(args) > 1 and callable(args[0]):
        return CombineShape.ORDERED_FUNCTIONS
    return CombineShape.ORDERED_RESULTS


def _fold[T, E](pairs: Iterable[tuple[int | str, Result[T, E]]]) -> Result[tuple[T, ...], E]:
    """Accumulate success payloads in order, stopping at the first Failure.

    pairs is consumed lazily, so nothing after the first Failure is pulled.
    """
    successes: list[T] = []
    for position, result in pairs:
        if isinstance(result, Failure):
            return result
        if not isinstance(result, Success):
            raise CombineInputError(position, result)
        successes.append(result.value)
    return Success(tuple(successes))


def combine_iter[T, E](results: Iterable[Result[T, E]]) -> Result[tuple[T, ...], E]:
    """Fold Results into a Result holding the tuple of their successes.

    Returns the first Failure (by iteration order) if there is one. results
    is consumed lazily and not advanced past that Failure.

    Examples:
        >>> combine_iter([Success(1), Success(2)])
        Success(value=(1, 2))
        >>> combine_iter([Success(1), Failure('e'), Failure('f')])
        Failure(error='e')
    """
    return _fold(enumerate(results))


def combine_map[T, E](results: Mapping[str, Result[T, E]]) -> Result[dict[str, T], E]:
    """Fold a mapping of Results into a Result holding a dict of their successes.

    Keys keep their order. Returns the first Failure in key order if there is one.
    """
    keys = list(results)
    return map(lambda values: dict(zip(keys, values, strict=True)), _fold(results.items()))


def _combine_ordered_functions(
    functions: Sequence[Callable[..., Result[Any, Any]]],
) -> Callable[..., Result[tuple[Any, ...], Any]]:
    def combined(args: Sequence[Any] | None = None) -> Result[tuple[Any, ...], Any]:
        if args is None:
            produced = (fn() for fn in functions)
        else:
            produced = (fn(arg) for fn, arg in zip(functions, args, strict=True))
        return _fold(enumerate(produced))

    return combined


def _combine_named_functions(
    functions: Mapping[str, Callable[..., Result[Any, Any]]],
) -> Callable[..., Result[dict[str, Any], Any]]:
    keys = list(functions)

    def combined(arg: Mapping[str, Any] | None = None) -> Result[dict[str, Any], Any]:
        if arg is None:
            produced = ((key, fn()) for key, fn in functions.items())
        else:
            produced = ((key, fn(arg[key])) for key, fn in functions.items())
        return map(lambda values: dict(zip(keys, values, strict=True)), _fold(produced))

    return combined


def combine(*args: Any) -> Any:
    """Combine Results, or functions returning Results, into a single one.

    Accepted shapes, in priority order:

    1. Functions ``combine(f, g, ...)``: returns ``combined(args=None)``
       calling ``f(args[0])``, ``g(args[1])``, ... (or ``f()``, ``g()``, ...
       when called without argument) and combining what they return.
    2. Results ``combine(r1, r2, ...)``: Success of the tuple of payloads, or
       the first Failure.
    3. A mapping of functions ``combine({'a': f, 'b': g})``: returns
       ``combined(arg=None)`` calling ``f(arg['a'])``, ``g(arg['b'])``, ...
    4. A mapping of Results ``combine({'a': r1, 'b': r2})``: Success of a
       dict with the same keys, or the first Failure in key order.

    Evaluation stops at the first Failure: in the function shapes, later
    functions are not called.

    Raises:
        CombineInputError: If an element being folded is not a Result.

    Examples:
        >>> combine(Success(1), Success(2), Success(3))
        Success(value=(1, 2, 3))
        >>> combine({'a': Success(1), 'b': Failure('e')})
        Failure(error='e')
    """
    shape = classify(args)
    named = shape in (CombineShape.NAMED_RESULTS, CombineShape.NAMED_FUNCTIONS)
    log.debug('combine', shape=shape.value, size=len(args[0]) if named else len(args))

    match shape:
        case CombineShape.ORDERED_FUNCTIONS:
            return _combine_ordered_functions(args)
        case CombineShape.ORDERED_RESULTS:
            return combine_iter(args)
        case CombineShape.NAMED_FUNCTIONS:
            return _combine_named_functions(args[0])
        case CombineShape.NAMED_RESULTS:
            return combine_map(args[0])
