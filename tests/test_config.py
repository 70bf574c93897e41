import logging

from utils.config import get_default_env_file, get_log_level
from utils.logging_utils import setup_logging


def test_config_defaults(monkeypatch):
    monkeypatch.delenv('ENVSYNC_ENV_FILE', raising=False)
    monkeypatch.delenv('ENVSYNC_LOG_LEVEL', raising=False)

    assert get_default_env_file() == '.env'
    assert get_log_level() == 'WARNING'


def test_config_from_environment(monkeypatch):
    """Environment variables override the defaults."""
    monkeypatch.setenv('ENVSYNC_ENV_FILE', 'config/.env')
    monkeypatch.setenv('ENVSYNC_LOG_LEVEL', 'debug')

    assert get_default_env_file() == 'config/.env'
    assert get_log_level() == 'DEBUG'


def test_setup_logging_level():
    root_logger = setup_logging('DEBUG')
    assert root_logger.level == logging.DEBUG

    # unknown names fall back to WARNING
    root_logger = setup_logging('NOISY')
    assert root_logger.level == logging.WARNING
