"""Process-wide configuration: CombineStrategy, RailwayConfig and init().

Only the deferred layer reads the configuration, to decide how
deferred.combine() resolves its pending inputs. The synchronous core has no
configurable behavior.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from railway_result._logging import configure_logging, get_logger

__all__ = [
    'CombineStrategy',
    'RailwayConfig',
    'get_config',
    'init',
    'reset',
]

STRATEGY_ENV = 'RAILWAY_COMBINE_STRATEGY'
CONCURRENCY_ENV = 'RAILWAY_CONCURRENCY'

MAX_CONCURRENCY = 1024

log = get_logger('config')


class CombineStrategy(Enum):
    """How deferred.combine() resolves its pending inputs.

    Both strategies report the failure of the earliest input by position,
    never the one that happened to complete first.
    """

    SEQUENTIAL = 'sequential'
    CONCURRENT = 'concurrent'


@dataclass(frozen=True)
class RailwayConfig:
    """Configuration for railway_result.

    Attributes:
        combine_strategy: Resolution strategy for deferred.combine().
        concurrency: Maximum inputs awaited at once under CONCURRENT.
            None means unbounded.
        log_level: Logging level passed to configure_logging(). None = silent.
    """

    combine_strategy: CombineStrategy = CombineStrategy.SEQUENTIAL
    concurrency: int | None = None
    log_level: str | None = None


_config: RailwayConfig | None = None


def _detect_strategy() -> CombineStrategy:
    """Read the strategy from RAILWAY_COMBINE_STRATEGY, defaulting to SEQUENTIAL."""
    raw = os.environ.get(STRATEGY_ENV, '').strip().lower()
    if not raw:
        return CombineStrategy.SEQUENTIAL
    try:
        return CombineStrategy(raw)
    except ValueError:
        log.warning('unknown combine strategy, defaulting to sequential', env=STRATEGY_ENV, value=raw)
        return CombineStrategy.SEQUENTIAL


def _detect_concurrency() -> int | None:
    """Read the concurrency limit from RAILWAY_CONCURRENCY (unset = unbounded)."""
    raw = os.environ.get(CONCURRENCY_ENV, '').strip()
    if not raw:
        return None
    try:
        return _clamp_concurrency(int(raw))
    except ValueError:
        log.warning('invalid concurrency, ignoring', env=CONCURRENCY_ENV, value=raw)
        return None


def _clamp_concurrency(concurrency: int) -> int:
    return max(1, min(MAX_CONCURRENCY, concurrency))


def init(
    combine_strategy: CombineStrategy | str | None = None,
    concurrency: int | None = None,
    log_level: str | None = None,
) -> RailwayConfig:
    """Set the process-wide configuration.

    Args:
        combine_strategy: CombineStrategy or its string value
            ("sequential", "concurrent"). Read from the environment if None.
        concurrency: Limit on simultaneously awaited inputs under the
            concurrent strategy, clamped to [1, 1024]. Read from the
            environment if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The RailwayConfig that was set.

    Example:
        ```python
        from railway_result.config import CombineStrategy, init

        init(combine_strategy=CombineStrategy.CONCURRENT, concurrency=8)
        init(combine_strategy='sequential', log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    if combine_strategy is None:
        resolved_strategy = _detect_strategy()
    elif isinstance(combine_strategy, str):
        resolved_strategy = CombineStrategy(combine_strategy.lower())
    else:
        resolved_strategy = combine_strategy

    resolved_concurrency = _detect_concurrency() if concurrency is None else _clamp_concurrency(concurrency)

    _config = RailwayConfig(
        combine_strategy=resolved_strategy,
        concurrency=resolved_concurrency,
        log_level=log_level,
    )

    if log_level is not None:
        configure_logging(log_level)

    return _config


def get_config() -> RailwayConfig:
    """Get the active configuration.

    When init() has not been called, the configuration is detected from the
    environment on first use and kept.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = RailwayConfig(
            combine_strategy=_detect_strategy(),
            concurrency=_detect_concurrency(),
        )
    return _config


def reset() -> None:
    """Forget the active configuration so the next get_config() re-detects it."""
    global _config  # noqa: PLW0603

    _config = None
