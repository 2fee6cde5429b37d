"""Library configuration: BagConfig, init() and get_config()."""

from __future__ import annotations

import os
from dataclasses import dataclass

from asyncbag._logging import configure_logging, get_logger

__all__ = [
    'BagConfig',
    'get_config',
    'init',
]

logger = get_logger(__name__)

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class BagConfig:
    """Configuration for bag resolution.

    Attributes:
        capture: Exception types captured as per-entry failures. Anything
            outside this set propagates out of the resolution call.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON (True) or colored console output (False).
    """

    capture: tuple[type[BaseException], ...] = (Exception,)
    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: BagConfig | None = None

# Environment-derived fallback, built on first use
_env_config: BagConfig | None = None


def _detect_json_logs() -> bool:
    raw = os.environ.get('ASYNCBAG_JSON_LOGS', '').strip().lower()
    if not raw or raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logger.warning('unknown_env_value', var='ASYNCBAG_JSON_LOGS', value=raw, default=True)
    return True


def _config_from_env() -> BagConfig:
    """Build a config from ASYNCBAG_* environment variables.

    Priority for each field: environment variable, then the BagConfig default.
    """
    log_level = os.environ.get('ASYNCBAG_LOG_LEVEL') or None
    return BagConfig(log_level=log_level, json_logs=_detect_json_logs())


def init(
    capture: tuple[type[BaseException], ...] | None = None,
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> BagConfig:
    """Set the process-wide configuration.

    Unset arguments fall back to the environment, then to the defaults.

    Args:
        capture: Exception types captured as per-entry failures.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging alone.
        json_logs: JSON (True) or console (False) log rendering.

    Returns:
        The BagConfig that was set.

    Example:
        ```python
        from asyncbag import init

        init(log_level='DEBUG', json_logs=False)
        init(capture=(ValueError, OSError))
        ```
    """
    global _config  # noqa: PLW0603

    env = _config_from_env()
    _config = BagConfig(
        capture=capture if capture is not None else env.capture,
        log_level=log_level if log_level is not None else env.log_level,
        json_logs=json_logs if json_logs is not None else env.json_logs,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> BagConfig:
    """Get the current configuration.

    Returns the config set by init(), or one derived from the environment
    if init() has not been called. The environment is read once.
    """
    global _env_config  # noqa: PLW0603

    if _config is not None:
        return _config
    if _env_config is None:
        _env_config = _config_from_env()
    return _env_config


def _reset() -> None:
    """Forget the config set by init() and the cached environment config. Test helper."""
    global _config, _env_config  # noqa: PLW0603
    _config = None
    _env_config = None
