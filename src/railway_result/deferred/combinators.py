"""Deferred counterparts of the Result combinators.

Each function here takes the same arguments as its synchronous namesake in
railway_result.result, except that the Result may also be pending. It
resolves the input, delegates to the synchronous combinator and hands back
a new DeferredResult, so

    await deferred.map(f, DeferredResult.from_result(r)) == map(f, r)

for every Result r. The curried call shape works the same way:
``deferred.map(f)`` returns a function awaiting the (pending) Result.

map_async, map_error_async, flat_map_async and flat_map_error_async take
transforms that return awaitables themselves.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine
from functools import partial
from typing import Any, Final, overload

from railway_result import result as _core
from railway_result.deferred.result import DeferredResult, resolve
from railway_result.errors import NotAResultError
from railway_result.result import Failure, Result, Success

__all__ = [
    'flat_map',
    'flat_map_async',
    'flat_map_error',
    'flat_map_error_async',
    'map',
    'map_async',
    'map_error',
    'map_error_async',
    'unwrap',
]

type Pending[T, E] = Result[T, E] | Awaitable[Result[T, E]]

# Marks an omitted Result argument, selecting the curried call shape.
_MISSING: Final[Any] = object()


def _lift(
    operation: Callable[[Callable[[Any], Any], Any], Any],
    transform: Callable[[Any], Any],
    pending: Any,
) -> DeferredResult[Any, Any]:
    """Resolve pending, then apply a synchronous combinator to it."""

    async def _lifted() -> Any:
        return operation(transform, await resolve(pending))

    return DeferredResult(_lifted())


def _checked(value: object, operation: str) -> Success[Any] | Failure[Any]:
    if not _core.is_result(value):
        raise NotAResultError(value, operation=operation)
    return value


@overload
def map[T, U, E](transform: Callable[[T], U], pending: Pending[T, E], /) -> DeferredResult[U, E]: ...  # noqa: A001


@overload
def map[T, U, E](  # noqa: A001
    transform: Callable[[T], U], /
) -> Callable[[Pending[T, E]], DeferredResult[U, E]]: ...


def map(transform: Callable[[Any], Any], pending: Any = _MISSING, /) -> Any:  # noqa: A001
    """Deferred map(): transform the success value once it resolves."""
    if pending is _MISSING:
        return partial(map, transform)
    return _lift(_core.map, transform, pending)


@overload
def flat_map[T, U, E, F](
    transform: Callable[[T], Result[U, F]], pending: Pending[T, E], /
) -> DeferredResult[U, E | F]: ...


@overload
def flat_map[T, U, E, F](
    transform: Callable[[T], Result[U, F]], /
) -> Callable[[Pending[T, E]], DeferredResult[U, E | F]]: ...


def flat_map(transform: Callable[[Any], Any], pending: Any = _MISSING, /) -> Any:
    """Deferred flat_map(): chain a Result-returning transform."""
    if pending is _MISSING:
        return partial(flat_map, transform)
    return _lift(_core.flat_map, transform, pending)


@overload
def map_error[T, E, F](transform: Callable[[E], F], pending: Pending[T, E], /) -> DeferredResult[T, F]: ...


@overload
def map_error[T, E, F](transform: Callable[[E], F], /) -> Callable[[Pending[T, E]], DeferredResult[T, F]]: ...


def map_error(transform: Callable[[Any], Any], pending: Any = _MISSING, /) -> Any:
    """Deferred map_error(): transform the failure payload once it resolves."""
    if pending is _MISSING:
        return partial(map_error, transform)
    return _lift(_core.map_error, transform, pending)


@overload
def flat_map_error[T, E, U, F](
    transform: Callable[[E], Result[U, F]], pending: Pending[T, E], /
) -> DeferredResult[T | U, F]: ...


@overload
def flat_map_error[T, E, U, F](
    transform: Callable[[E], Result[U, F]], /
) -> Callable[[Pending[T, E]], DeferredResult[T | U, F]]: ...


def flat_map_error(transform: Callable[[Any], Any], pending: Any = _MISSING, /) -> Any:
    """Deferred flat_map_error(): chain a Result-returning transform on failure."""
    if pending is _MISSING:
        return partial(flat_map_error, transform)
    return _lift(_core.flat_map_error, transform, pending)


@overload
def map_async[T, U, E](
    transform: Callable[[T], Awaitable[U]], pending: Pending[T, E], /
) -> DeferredResult[U, E]: ...


@overload
def map_async[T, U, E](
    transform: Callable[[T], Awaitable[U]], /
) -> Callable[[Pending[T, E]], DeferredResult[U, E]]: ...


def map_async(transform: Callable[[Any], Awaitable[Any]], pending: Any = _MISSING, /) -> Any:
    """Transform the success value with an async function.

    On Success, awaits transform(value) and wraps it in Success. On Failure,
    resolves to the original Failure without calling transform.

    Example:
        ```python
        async def double(x: int) -> int:
            return x * 2

        assert await map_async(double, DeferredResult.from_success(5)) == Success(10)
        ```
    """
    if pending is _MISSING:
        return partial(map_async, transform)

    async def _mapped() -> Result[Any, Any]:
        result = _checked(await resolve(pending), 'map_async')
        if isinstance(result, Success):
            return Success(await transform(result.value))
        return result

    return DeferredResult(_mapped())


@overload
def map_error_async[T, E, F](
    transform: Callable[[E], Awaitable[F]], pending: Pending[T, E], /
) -> DeferredResult[T, F]: ...


@overload
def map_error_async[T, E, F](
    transform: Callable[[E], Awaitable[F]], /
) -> Callable[[Pending[T, E]], DeferredResult[T, F]]: ...


def map_error_async(transform: Callable[[Any], Awaitable[Any]], pending: Any = _MISSING, /) -> Any:
    """Transform the failure payload with an async function.

    Mirror of map_async: a Success resolves unchanged and transform is never
    called.
    """
    if pending is _MISSING:
        return partial(map_error_async, transform)

    async def _mapped() -> Result[Any, Any]:
        result = _checked(await resolve(pending), 'map_error_async')
        if isinstance(result, Failure):
            return Failure(await transform(result.error))
        return result

    return DeferredResult(_mapped())


@overload
def flat_map_async[T, U, E, F](
    transform: Callable[[T], Pending[U, F]], pending: Pending[T, E], /
) -> DeferredResult[U, E | F]: ...


@overload
def flat_map_async[T, U, E, F](
    transform: Callable[[T], Pending[U, F]], /
) -> Callable[[Pending[T, E]], DeferredResult[U, E | F]]: ...


def flat_map_async(transform: Callable[[Any], Any], pending: Any = _MISSING, /) -> Any:
    """Chain a transform returning a Result or a pending Result.

    Example:
        ```python
        async def fetch_details(id: int) -> Result[dict, str]:
            return Success({'id': id})

        details = await flat_map_async(fetch_details, DeferredResult.from_success(1))
        ```
    """
    if pending is _MISSING:
        return partial(flat_map_async, transform)

    async def _chained() -> Result[Any, Any]:
        result = _checked(await resolve(pending), 'flat_map_async')
        if isinstance(result, Success):
            return await resolve(transform(result.value))
        return result

    return DeferredResult(_chained())


@overload
def flat_map_error_async[T, E, U, F](
    transform: Callable[[E], Pending[U, F]], pending: Pending[T, E], /
) -> DeferredResult[T | U, F]: ...


@overload
def flat_map_error_async[T, E, U, F](
    transform: Callable[[E], Pending[U, F]], /
) -> Callable[[Pending[T, E]], DeferredResult[T | U, F]]: ...


def flat_map_error_async(transform: Callable[[Any], Any], pending: Any = _MISSING, /) -> Any:
    """Recover from a failure with a transform returning a (pending) Result."""
    if pending is _MISSING:
        return partial(flat_map_error_async, transform)

    async def _recovered() -> Result[Any, Any]:
        result = _checked(await resolve(pending), 'flat_map_error_async')
        if isinstance(result, Failure):
            return await resolve(transform(result.error))
        return result

    return DeferredResult(_recovered())


def unwrap[T, E, U, F](
    *,
    success: Callable[[T], U] | None = None,
    failure: Callable[[E], F] | None = None,
) -> Callable[[Pending[T, E]], Coroutine[Any, Any, T | U | E | F]]:
    """Deferred unwrap(): collapse a pending Result into a plain value.

    Returns a function from a (pending) Result to a coroutine producing the
    projected payload.

    Example:
        ```python
        label = unwrap(success=lambda op: f'op is {op}', failure=lambda e: f'{e} is nan')
        assert await label(compare(1, 2)) == 'op is <'
        ```
    """
    project = _core.unwrap(success=success, failure=failure)

    def _unwrap(pending: Pending[T, E]) -> Coroutine[Any, Any, T | U | E | F]:
        async def _unwrapped() -> T | U | E | F:
            return project(await resolve(pending))

        return _unwrapped()

    return _unwrap
