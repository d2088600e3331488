# owtorg_logger/config/stack_config.py
"""
Stack configuration with validation.

Describes which backends a stack is assembled from and how each backend is
pointed at its medium. Only the registry helpers consume this; loggers built
by hand are configured through init callbacks instead.
"""

from pathlib import Path
from typing import Any, List
from pydantic import BaseModel, Field, ValidationError, field_validator
from .config_types import EnvLogBackends, EnvStream
from .env_config import read_env_overrides
from owtorg_logger.api_error import ConfigurationError

DEFAULT_LOG_PATH = "./owtorg-logger"
DEFAULT_SYSTEM_LOGGER_NAME = "owtorg_logger.system"

_default_backends_env_key = "OWTORG_LOG_BACKENDS"
_default_file_env_key = "OWTORG_LOG_FILE"
_default_stream_env_key = "OWTORG_LOG_STREAM"
_default_system_logger_env_key = "OWTORG_SYSTEM_LOGGER"


class StackConfig(BaseModel):
    """
    Backend selection for a stack built by the registry.

    Backend names are kept as plain strings so that backends registered at
    runtime can be selected alongside the built-in ones.
    """

    backends: List[str] = Field(
        default_factory=lambda: [EnvLogBackends.STREAM.value],
        min_length=1,
        description="Registry names, in dispatch order",
    )
    file_path: Path = Field(default=Path(DEFAULT_LOG_PATH))
    stream: EnvStream = Field(default=EnvStream.STDOUT)
    system_logger_name: str = Field(
        default=DEFAULT_SYSTEM_LOGGER_NAME, min_length=1
    )

    model_config = {"frozen": True}

    @field_validator("backends", mode="before")
    @classmethod
    def split_backends(cls, v: Any) -> Any:
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, (list, tuple)):
            names = [str(name).strip().lower() for name in v]
            if any(not name for name in names):
                raise ValueError("backend names must not be empty")
            return names
        return v

    @field_validator("file_path")
    @classmethod
    def validate_file_path(cls, v: Path) -> Path:
        """A directory can never be opened for append."""
        if v.is_dir():
            raise ValueError(f"file_path points at a directory: {v}")
        return v


def load_stack_config(
    backends_env_key: str = _default_backends_env_key,
    file_env_key: str = _default_file_env_key,
    stream_env_key: str = _default_stream_env_key,
    system_logger_env_key: str = _default_system_logger_env_key,
) -> StackConfig:
    """
    Load stack configuration from environment.

    Unset variables fall back to the model defaults.

    Environment variables:
    - OWTORG_LOG_BACKENDS: comma-separated backend names (default: stream)
    - OWTORG_LOG_FILE: file backend target (default: ./owtorg-logger)
    - OWTORG_LOG_STREAM: stdout or stderr (default: stdout)
    - OWTORG_SYSTEM_LOGGER: stdlib logger name for the system backend

    Returns:
        Validated StackConfig instance

    Raises:
        ConfigurationError: If any value fails validation
    """
    overrides = read_env_overrides(
        {
            "backends": backends_env_key,
            "file_path": file_env_key,
            "stream": stream_env_key,
            "system_logger_name": system_logger_env_key,
        }
    )
    if "stream" in overrides:
        overrides["stream"] = overrides["stream"].lower()

    try:
        return StackConfig(**overrides)

    except ValidationError as e:
        # Convert Pydantic errors to ConfigurationError with better messages
        errors: List[str] = []
        for error in e.errors():
            field = ".".join(str(x) for x in error["loc"])
            msg = error["msg"]
            errors.append(f"{field}: {msg}")

        raise ConfigurationError(
            "Stack configuration validation failed:\n"
            + "\n".join(f"  - {err}" for err in errors)
        ) from e


__all__ = [
    "DEFAULT_LOG_PATH",
    "DEFAULT_SYSTEM_LOGGER_NAME",
    "StackConfig",
    "load_stack_config",
]
