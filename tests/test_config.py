import logging
from pathlib import Path

import pytest

from owtorg_logger import ConfigurationError
from owtorg_logger.config import (
    DEFAULT_LOG_PATH,
    EnvLogLevel,
    EnvStream,
    StackConfig,
    configure_structlog,
    get_logger,
    is_configured,
    load_logging_config,
    load_stack_config,
    read_env_overrides,
)


def test_stack_config_defaults() -> None:
    config = load_stack_config()

    assert config.backends == ["stream"]
    assert config.file_path == Path(DEFAULT_LOG_PATH)
    assert config.stream == EnvStream.STDOUT
    assert config.system_logger_name == "owtorg_logger.system"


def test_stack_config_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("OWTORG_LOG_BACKENDS", " Stream , FILE,system")
    monkeypatch.setenv("OWTORG_LOG_FILE", str(tmp_path / "x.log"))
    monkeypatch.setenv("OWTORG_LOG_STREAM", "STDERR")
    monkeypatch.setenv("OWTORG_SYSTEM_LOGGER", "my.app")

    config = load_stack_config()

    assert config.backends == ["stream", "file", "system"]
    assert config.file_path == tmp_path / "x.log"
    assert config.stream == EnvStream.STDERR
    assert config.system_logger_name == "my.app"


def test_invalid_stream_is_a_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OWTORG_LOG_STREAM", "stdlog")

    with pytest.raises(ConfigurationError, match="stream"):
        load_stack_config()


def test_empty_backend_name_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OWTORG_LOG_BACKENDS", "stream,,file")

    with pytest.raises(ConfigurationError, match="backends"):
        load_stack_config()


def test_directory_file_path_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        StackConfig(file_path=tmp_path)


def test_stack_config_is_frozen() -> None:
    config = StackConfig()

    with pytest.raises(ValueError):
        config.stream = EnvStream.STDERR  # type: ignore[misc]


def test_logging_config_defaults_to_warning() -> None:
    assert load_logging_config().log_level == EnvLogLevel.WARNING


def test_logging_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OWTORG_LOG_LEVEL", "debug")

    config = load_logging_config()

    assert config.level_value == "DEBUG"
    assert config.level_int == logging.DEBUG


def test_invalid_logging_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OWTORG_LOG_LEVEL", "LOUD")

    with pytest.raises(ConfigurationError, match="OWTORG_LOG_LEVEL"):
        load_logging_config()


def test_read_env_overrides_skips_unset_and_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OWTORG_LOG_FILE", "  app.log ")
    monkeypatch.setenv("OWTORG_LOG_STREAM", "   ")

    overrides = read_env_overrides(
        {
            "file_path": "OWTORG_LOG_FILE",
            "stream": "OWTORG_LOG_STREAM",
            "backends": "OWTORG_LOG_BACKENDS",
        }
    )

    assert overrides == {"file_path": "app.log"}


def test_configure_structlog_is_idempotent_for_same_level() -> None:
    configure_structlog(logging.INFO)
    configure_structlog(logging.INFO)

    assert is_configured()


def test_configure_structlog_rejects_conflicting_level() -> None:
    configure_structlog(logging.INFO)

    with pytest.raises(RuntimeError):
        configure_structlog(logging.DEBUG)


def test_explicit_configuration_replaces_implicit_default() -> None:
    assert not is_configured()
    get_logger("owtorg_logger.tests")
    assert is_configured()

    configure_structlog(logging.DEBUG)

    with pytest.raises(RuntimeError):
        configure_structlog(logging.ERROR)


def test_invalid_level_falls_back_for_diagnostics(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OWTORG_LOG_LEVEL", "verbose")

    log = get_logger("owtorg_logger.tests")
    log.debug("ignored")

    assert is_configured()
    # the explicit path still reports the bad value
    with pytest.raises(ConfigurationError):
        load_logging_config()
