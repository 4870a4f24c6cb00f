import pytest

from taskman.config import Settings, get_settings
from taskman.core.parser import CommandParser
from taskman.errors import ConfigurationError


def test_defaults() -> None:
    settings = Settings()
    assert settings.max_line == 100
    assert settings.max_args == 25
    assert settings.prompt == "taskman> "


def test_environment_overrides_limits(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKMAN_MAX_ARGS", "3")
    monkeypatch.setenv("TASKMAN_MAX_LINE", "20")
    parser = CommandParser.from_settings(get_settings())
    assert parser.max_args == 3
    assert parser.max_line == 20


def test_invalid_settings_raise_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKMAN_MAX_ARGS", "1")
    with pytest.raises(ConfigurationError):
        get_settings()


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKMAN_LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


def test_unknown_log_level_raises_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKMAN_LOG_LEVEL", "FOO")
    with pytest.raises(ConfigurationError):
        get_settings()
