"""Deferred combine(): combine Results that may still be pending.

Accepts the same four shapes as railway_result.combine(), with elements
that are Results, awaitables resolving to Results, or (in the function
shapes) functions returning either. Every element is settled first and the
settled Results are then folded by the synchronous combine.

How elements are settled follows the configured CombineStrategy:

* SEQUENTIAL awaits them one after another in input order.
* CONCURRENT awaits them in an anyio task group, optionally bounded by an
  aiologic.CapacityLimiter.

Settled Results are stored by input position before folding, so the Failure
reported is always the earliest by position or key order, whichever input
happens to finish first.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

import aiologic
import anyio

from railway_result._logging import get_logger
from railway_result.combine import CombineShape, classify, combine_iter, combine_map
from railway_result.config import CombineStrategy, get_config
from railway_result.deferred.result import DeferredResult
from railway_result.result import Result

__all__ = ['combine', 'settle_all']

log = get_logger('deferred.combine')


async def _settle(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


def _discard(values: Iterable[Any]) -> None:
    """Close coroutines that will never be awaited."""
    for value in values:
        if inspect.iscoroutine(value):
            value.close()


async def settle_all(values: Sequence[Any]) -> list[Any]:
    """Await every pending element of values, keeping input order.

    Elements that are not awaitable are returned as they are; validating
    them is left to the fold. If settling raises, coroutine inputs that were
    not awaited are closed before the exception propagates.
    """
    config = get_config()
    log.debug(
        'settling deferred combine inputs',
        strategy=config.combine_strategy.value,
        concurrency=config.concurrency,
        size=len(values),
    )

    if config.combine_strategy is CombineStrategy.SEQUENTIAL:
        settled_in_order: list[Any] = []
        try:
            for value in values:
                settled_in_order.append(await _settle(value))
        except BaseException:
            _discard(values[len(settled_in_order) + 1 :])
            raise
        return settled_in_order

    settled: list[Any] = [None] * len(values)
    limiter = aiologic.CapacityLimiter(config.concurrency) if config.concurrency is not None else None

    async with anyio.create_task_group() as tg:

        async def settle_one(i: int, value: Any) -> None:
            try:
                if limiter is None:
                    settled[i] = await _settle(value)
                    return
                async with limiter:
                    settled[i] = await _settle(value)
            except BaseException:
                _discard([value])
                raise

        for i, value in enumerate(values):
            tg.start_soon(settle_one, i, value)

    return settled


async def _combine_ordered(values: Sequence[Any]) -> Result[tuple[Any, ...], Any]:
    combined = combine_iter(await settle_all(values))
    log.debug('deferred combine resolved', shape='ordered', outcome=combined.tag)
    return combined


async def _combine_named(values: Mapping[str, Any]) -> Result[dict[str, Any], Any]:
    keys = list(values)
    settled = await settle_all([values[key] for key in keys])
    combined = combine_map(dict(zip(keys, settled, strict=True)))
    log.debug('deferred combine resolved', shape='named', outcome=combined.tag)
    return combined


def _combine_ordered_functions(
    functions: Sequence[Callable[..., Any]],
) -> Callable[..., DeferredResult[tuple[Any, ...], Any]]:
    def combined(args: Sequence[Any] | None = None) -> DeferredResult[tuple[Any, ...], Any]:
        if args is None:
            produced = [fn() for fn in functions]
        else:
            produced = [fn(arg) for fn, arg in zip(functions, args, strict=True)]
        return DeferredResult(_combine_ordered(produced))

    return combined


def _combine_named_functions(
    functions: Mapping[str, Callable[..., Any]],
) -> Callable[..., DeferredResult[dict[str, Any], Any]]:
    def combined(arg: Mapping[str, Any] | None = None) -> DeferredResult[dict[str, Any], Any]:
        if arg is None:
            produced = {key: fn() for key, fn in functions.items()}
        else:
            produced = {key: fn(arg[key]) for key, fn in functions.items()}
        return DeferredResult(_combine_named(produced))

    return combined


def combine(*args: Any) -> Any:
    """Combine Results, pending Results, or functions returning either.

    Shapes and outcomes are those of railway_result.combine(), but the
    Result shapes return a DeferredResult and the function shapes return a
    function producing a DeferredResult. Unlike the synchronous version,
    function shapes call every function before anything is awaited, because
    their pending Results cannot be inspected before they settle.

    Example:
        ```python
        combined = combine(fetch_user(1), Success('guest'), fetch_settings(1))
        assert await combined == Success((user, 'guest', settings))

        load = combine({'user': fetch_user, 'settings': fetch_settings})
        assert await load({'user': 1, 'settings': 1}) == Success({'user': user, 'settings': settings})
        ```
    """
    shape = classify(args)
    log.debug('deferred combine', shape=shape.value)

    match shape:
        case CombineShape.ORDERED_FUNCTIONS:
            return _combine_ordered_functions(args)
        case CombineShape.ORDERED_RESULTS:
            return DeferredResult(_combine_ordered(args))
        case CombineShape.NAMED_FUNCTIONS:
            return _combine_named_functions(args[0])
        case CombineShape.NAMED_RESULTS:
            return DeferredResult(_combine_named(args[0]))