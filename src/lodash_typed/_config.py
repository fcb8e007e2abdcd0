"""Library configuration: Config, init, and resource detection."""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

import psutil

from lodash_typed._logging import configure_logging, get_logger

__all__ = [
    'DEFAULT_MIN_PARALLEL_SIZE',
    'Config',
    'get_config',
    'init',
    'reset',
]

DEFAULT_MIN_PARALLEL_SIZE = 1024

_ENV_MAX_WORKERS = 'LODASH_TYPED_MAX_WORKERS'
_ENV_MIN_PARALLEL_SIZE = 'LODASH_TYPED_MIN_PARALLEL_SIZE'
_ENV_LOG_LEVEL = 'LODASH_TYPED_LOG_LEVEL'

logger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Configuration for lodash_typed.

    Attributes:
        max_workers: Thread pool size for the parallel functions.
        min_parallel_size: Inputs shorter than this run sequentially in the
            calling thread instead of being fanned out.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    max_workers: int = 4
    min_parallel_size: int = DEFAULT_MIN_PARALLEL_SIZE
    log_level: str | None = None


# Active configuration (set by init() or lazily by get_config())
_config: Config | None = None


def _env_int(name: str) -> int | None:
    """Read a positive integer from the environment, ignoring bad values."""
    raw = os.environ.get(name, '').strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning('config.env_ignored', variable=name, value=raw)
        return None
    return value if value >= 0 else None


def _detect_max_workers() -> int:
    """Detect a worker count from local system resources.

    Uses physical CPU cores, capped by container CPU limits (cgroups).
    """
    try:
        physical_cores = psutil.cpu_count(logical=False)
        if physical_cores is None:
            physical_cores = psutil.cpu_count(logical=True) or 4

        container_limit = _detect_container_cpu_limit()
        if container_limit is not None:
            physical_cores = min(physical_cores, container_limit)

        return max(1, min(256, physical_cores))
    except (OSError, RuntimeError):
        return 4


def _detect_container_cpu_limit() -> int | None:
    """Detect CPU limit in containerized environments."""
    # cgroups v2
    try:
        content = pathlib.Path('/sys/fs/cgroup/cpu.max').read_text().strip()
        quota, period = content.split()
        if quota != 'max':
            return max(1, int(quota) // int(period))
    except (FileNotFoundError, ValueError, PermissionError):
        pass

    # cgroups v1
    try:
        quota_v1 = int(pathlib.Path('/sys/fs/cgroup/cpu/cpu.cfs_quota_us').read_text().strip())
        period_v1 = int(pathlib.Path('/sys/fs/cgroup/cpu/cpu.cfs_period_us').read_text().strip())
        if quota_v1 > 0:
            return max(1, quota_v1 // period_v1)
    except (FileNotFoundError, ValueError, PermissionError):
        pass

    return None


def init(
    max_workers: int | None = None,
    min_parallel_size: int | None = None,
    log_level: str | None = None,
) -> Config:
    """Initialize lodash_typed with the given configuration.

    Unset arguments fall back to ``LODASH_TYPED_*`` environment variables and
    then to detected or built-in defaults.

    Args:
        max_workers: Thread pool size for parallel functions. Auto-detected if None.
        min_parallel_size: Smallest input that is fanned out to the pool.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The Config that was set.

    Example:
        ```python
        import lodash_typed

        lodash_typed.init(max_workers=8, log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    if max_workers is None:
        max_workers = _env_int(_ENV_MAX_WORKERS) or _detect_max_workers()
    resolved_workers = max(1, min(256, max_workers))

    if min_parallel_size is None:
        min_parallel_size = _env_int(_ENV_MIN_PARALLEL_SIZE)
    resolved_min_size = DEFAULT_MIN_PARALLEL_SIZE if min_parallel_size is None else max(0, min_parallel_size)

    if log_level is None:
        log_level = os.environ.get(_ENV_LOG_LEVEL) or None

    _config = Config(
        max_workers=resolved_workers,
        min_parallel_size=resolved_min_size,
        log_level=log_level,
    )

    if log_level is not None:
        configure_logging(log_level)

    logger.info(
        'config.initialized',
        max_workers=_config.max_workers,
        min_parallel_size=_config.min_parallel_size,
        log_level=_config.log_level,
    )
    return _config


def get_config() -> Config:
    """Get the active configuration, initializing defaults on first use.

    Example:
        ```python
        from lodash_typed import get_config, init

        init(max_workers=8)
        get_config().max_workers  # 8
        ```
    """
    if _config is None:
        return init()
    return _config


def reset() -> None:
    """Drop the active configuration so the next get_config() re-initializes."""
    global _config  # noqa: PLW0603
    _config = None
