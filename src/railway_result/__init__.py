"""railway-result: railway-oriented Result combinators for Python 3.13+.

Flat imports (preferred):
    from railway_result import Result, Success, Failure, success, failure
    from railway_result import map, flat_map, map_error, flat_map_error, unwrap, combine
    from railway_result import deferred, DeferredResult

Submodule imports (for organization):
    from railway_result.result import Success, Failure
    from railway_result.combine import combine, CombineShape
    from railway_result.deferred import DeferredResult, map_async
    from railway_result.config import init, CombineStrategy
"""

# Deferred layer
from railway_result import deferred

# Combination
from railway_result.combine import CombineShape, combine, combine_iter, combine_map

# Configuration
from railway_result.config import CombineStrategy, RailwayConfig, get_config, init
from railway_result.deferred import DeferredResult

# Errors
from railway_result.errors import CombineInputError, NotAResultError, RailwayError

# Result type and combinators
from railway_result.result import (
    Failure,
    Result,
    Success,
    failure,
    flat_map,
    flat_map_error,
    is_failure,
    is_result,
    is_success,
    map,
    map_error,
    success,
    unwrap,
)

__all__ = [
    # Errors
    'CombineInputError',
    # Combination
    'CombineShape',
    # Configuration
    'CombineStrategy',
    # Deferred layer
    'DeferredResult',
    # Result type
    'Failure',
    'NotAResultError',
    'RailwayConfig',
    'RailwayError',
    'Result',
    'Success',
    'combine',
    'combine_iter',
    'combine_map',
    'deferred',
    'failure',
    'flat_map',
    'flat_map_error',
    'get_config',
    'init',
    'is_failure',
    'is_result',
    'is_success',
    'map',
    'map_error',
    'success',
    'unwrap',
]

__version__ = '1.0.0'
