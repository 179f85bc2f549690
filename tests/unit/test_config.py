import pytest

from stublogger import LogLevel, StubLogger, StubLoggerConfig, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("STUB_LOGGER_MIN_LEVEL", raising=False)
    monkeypatch.delenv("STUB_LOGGER_SHOW_EVENTS", raising=False)
    yield


def test_load_config_defaults():
    cfg = load_config()

    assert cfg.min_level is LogLevel.TRACE
    assert cfg.show_events is True


def test_load_config_parses_optional_fields(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("STUB_LOGGER_MIN_LEVEL", "Warning")
    monkeypatch.setenv("STUB_LOGGER_SHOW_EVENTS", "off")

    cfg = load_config()
    assert cfg.min_level is LogLevel.WARNING
    assert cfg.show_events is False


def test_load_config_rejects_unknown_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("STUB_LOGGER_MIN_LEVEL", "loud")

    with pytest.raises(ValueError, match="STUB_LOGGER_MIN_LEVEL must be a log level name"):
        load_config()


@pytest.mark.parametrize("raw", ["maybe", "2"])
def test_load_config_rejects_bad_boolean(monkeypatch: pytest.MonkeyPatch, raw: str):
    monkeypatch.setenv("STUB_LOGGER_SHOW_EVENTS", raw)

    with pytest.raises(ValueError, match="STUB_LOGGER_SHOW_EVENTS must be a boolean"):
        load_config()


def test_config_accepts_level_names():
    assert StubLoggerConfig(min_level="error").min_level is LogLevel.ERROR


def test_stub_from_config_applies_defaults():
    sut = StubLogger.from_config(StubLoggerConfig(min_level=LogLevel.ERROR, show_events=False))

    assert sut.min_level is LogLevel.ERROR
    assert not sut.is_enabled(LogLevel.WARNING)
    assert sut.is_enabled(LogLevel.CRITICAL)
