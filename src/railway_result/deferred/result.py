"""DeferredResult: an awaitable that resolves to a Result.

Anything awaitable that produces a Success or a Failure is a deferred result
as far as the deferred combinators are concerned: a coroutine, an
asyncio.Future, an anyio-driven awaitable, or a DeferredResult. The class
below only adds constructors and fluent methods on top of an awaitable.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, str]:
        ...

    name = await (
        DeferredResult(fetch_user(1))
        .flat_map(validate_user)
        .map(lambda user: user.name)
    )
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

from railway_result.errors import NotAResultError
from railway_result.result import Failure, Result, Success

__all__ = ['DeferredResult', 'is_pending', 'resolve']


def is_pending(value: object) -> bool:
    """Return True if value is awaitable (and therefore not yet a Result)."""
    return inspect.isawaitable(value)


async def resolve[T, E](value: Result[T, E] | Awaitable[Result[T, E]]) -> Result[T, E]:
    """Await value if it is pending, return it as is if it is already a Result.

    Raises:
        NotAResultError: If value is neither a Result nor awaitable.
    """
    if isinstance(value, Success | Failure):
        return value
    if inspect.isawaitable(value):
        return await value
    raise NotAResultError(value, operation='resolve')


class DeferredResult[T, E]:
    """Awaitable wrapper around a computation producing a Result[T, E].

    Every method returns a new DeferredResult (or, for unwrap, a coroutine)
    and nothing runs until the outermost value is awaited.

    Note:
        A DeferredResult wrapping a coroutine object is single-shot: the
        coroutine can only be awaited once, and so can the wrapper. Wrap a
        Task or Future to await the same value several times.

    Example:
        ```python
        async def example():
            result = await DeferredResult.from_success(5).map(lambda x: x * 2)
            assert result == Success(10)
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        return self._awaitable.__await__()

    @classmethod
    def from_result(cls, result: Result[T, E]) -> DeferredResult[T, E]:
        """Create a DeferredResult resolving to an existing Result."""

        async def _result() -> Result[T, E]:
            return result

        return cls(_result())

    @classmethod
    def from_success(cls, value: T) -> DeferredResult[T, E]:
        """Create a DeferredResult resolving to Success(value)."""
        return cls.from_result(Success(value))

    @classmethod
    def from_failure(cls, error: E) -> DeferredResult[T, E]:
        """Create a DeferredResult resolving to Failure(error)."""
        return cls.from_result(Failure(error))

    def map[U](self, f: Callable[[T], U]) -> DeferredResult[U, E]:
        """Apply a sync function to the success value."""
        from railway_result.deferred.combinators import map as _map

        return _map(f, self)

    def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> DeferredResult[U, E]:
        """Apply an async function to the success value."""
        from railway_result.deferred.combinators import map_async

        return map_async(f, self)

    def map_error[F](self, f: Callable[[E], F]) -> DeferredResult[T, F]:
        """Apply a sync function to the failure payload."""
        from railway_result.deferred.combinators import map_error

        return map_error(f, self)

    def map_error_async[F](self, f: Callable[[E], Awaitable[F]]) -> DeferredResult[T, F]:
        """Apply an async function to the failure payload."""
        from railway_result.deferred.combinators import map_error_async

        return map_error_async(f, self)

    def flat_map[U, F](self, f: Callable[[T], Result[U, F]]) -> DeferredResult[U, E | F]:
        """Chain a function returning a Result onto the success value."""
        from railway_result.deferred.combinators import flat_map

        return flat_map(f, self)

    def flat_map_async[U, F](
        self, f: Callable[[T], Awaitable[Result[U, F]]]
    ) -> DeferredResult[U, E | F]:
        """Chain a function returning a pending Result onto the success value."""
        from railway_result.deferred.combinators import flat_map_async

        return flat_map_async(f, self)

    def flat_map_error[U, F](self, f: Callable[[E], Result[U, F]]) -> DeferredResult[T | U, F]:
        """Chain a function returning a Result onto the failure payload."""
        from railway_result.deferred.combinators import flat_map_error

        return flat_map_error(f, self)

    def flat_map_error_async[U, F](
        self, f: Callable[[E], Awaitable[Result[U, F]]]
    ) -> DeferredResult[T | U, F]:
        """Chain a function returning a pending Result onto the failure payload."""
        from railway_result.deferred.combinators import flat_map_error_async

        return flat_map_error_async(f, self)

    def unwrap[U, F](
        self,
        *,
        success: Callable[[T], U] | None = None,
        failure: Callable[[E], F] | None = None,
    ) -> Coroutine[Any, Any, T | U | E | F]:
        """Collapse into a plain value, see railway_result.unwrap()."""
        from railway_result.deferred.combinators import unwrap

        return unwrap(success=success, failure=failure)(self)

    def __repr__(self) -> str:
        return f'DeferredResult({self._awaitable!r})'
