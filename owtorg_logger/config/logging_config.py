# owtorg_logger/config/logging_config.py
from dataclasses import dataclass
from .env_config import get_env
from .config_types import EnvLogLevel
from owtorg_logger.api_error import ConfigurationError

_default_log_level_env_key = "OWTORG_LOG_LEVEL"
_default_log_level = EnvLogLevel.WARNING


@dataclass(frozen=True)
class LoggingConfig:
    """Configuration for the library's own diagnostics."""

    log_level: EnvLogLevel

    @property
    def level_value(self) -> str:
        """Get string value of log level."""
        return self.log_level.value

    @property
    def level_int(self) -> int:
        """Get numeric log level."""
        return self.log_level.level


def load_logging_config(
    log_level_env_key: str = _default_log_level_env_key,
) -> LoggingConfig:
    """
    Load diagnostics configuration from environment.

    Args:
        log_level_env_key: Environment variable name

    Returns:
        LoggingConfig instance

    Raises:
        ConfigurationError: If the level is set but invalid
    """
    raw = get_env(log_level_env_key) or _default_log_level.value

    try:
        return LoggingConfig(log_level=EnvLogLevel(raw.strip().upper()))

    except ValueError as exc:
        valid_levels = ", ".join(level.value for level in EnvLogLevel)

        raise ConfigurationError(
            f"Invalid logging configuration. "
            f"{log_level_env_key} must be one of [{valid_levels}]"
        ) from exc


__all__ = [
    "_default_log_level_env_key",
    "LoggingConfig",
    "load_logging_config",
]
