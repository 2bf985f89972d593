"""Deferred results: the Result combinators lifted over awaitables.

Every function accepts a Result or anything awaitable resolving to one and
returns a new DeferredResult, so synchronous and asynchronous pipelines
read the same:

    ```python
    from railway_result import deferred

    greeting = await deferred.map(lambda user: f'hello {user.name}', fetch_user(1))
    both = await deferred.combine(fetch_user(1), fetch_user(2))
    ```
"""

from railway_result.deferred.combinators import (
    flat_map,
    flat_map_async,
    flat_map_error,
    flat_map_error_async,
    map,
    map_async,
    map_error,
    map_error_async,
    unwrap,
)
from railway_result.deferred.combine import combine, settle_all
from railway_result.deferred.result import DeferredResult, is_pending, resolve

__all__ = [
    'DeferredResult',
    'combine',
    'flat_map',
    'flat_map_async',
    'flat_map_error',
    'flat_map_error_async',
    'is_pending',
    'map',
    'map_async',
    'map_error',
    'map_error_async',
    'resolve',
    'settle_all',
    'unwrap',
]
