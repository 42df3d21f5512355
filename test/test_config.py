import logging

import pytest

from compofun import config
from compofun.errors import ConfigError
from compofun.logger import LOGGER_NAME, setup_logger


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(config.EnvVar.LOG_LEVEL, raising=False)
    monkeypatch.delenv(config.EnvVar.MAX_WORKERS, raising=False)
    assert config.log_level() == 'WARNING'
    assert config.max_workers() is None


@pytest.mark.parametrize(
    ('raw', 'expected'),
    (
        pytest.param('4', 4, id='Number'),
        pytest.param(' 8 ', 8, id='Padded'),
        pytest.param('', None, id='Empty'),
    ),
)
def test_max_workers(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None):
    monkeypatch.setenv(config.EnvVar.MAX_WORKERS, raw)
    assert config.max_workers() == expected


@pytest.mark.parametrize('raw', ['many', '0', '-3'])
def test_max_workers_invalid(monkeypatch: pytest.MonkeyPatch, raw: str):
    monkeypatch.setenv(config.EnvVar.MAX_WORKERS, raw)
    with pytest.raises(ConfigError):
        config.max_workers()


def test_log_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(config.EnvVar.LOG_LEVEL, 'debug')
    assert config.log_level() == 'DEBUG'
    monkeypatch.setenv(config.EnvVar.LOG_LEVEL, 'chatty')
    with pytest.raises(ValueError):
        config.log_level()


def test_setup_logger_rejects_unknown_level():
    with pytest.raises(ConfigError):
        setup_logger('bogus')


def test_setup_logger(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(config.EnvVar.LOG_LEVEL, 'INFO')
    log = setup_logger()
    try:
        assert log.name == LOGGER_NAME
        assert log.level == logging.INFO
        handlers = len(log.handlers)
        assert setup_logger('DEBUG').level == logging.DEBUG
        assert len(log.handlers) == handlers
    finally:
        for handler in [h for h in log.handlers if isinstance(h, logging.StreamHandler)]:
            log.removeHandler(handler)
        log.setLevel(logging.NOTSET)
        log.propagate = True
