"""
Tests for Settings.
"""

import logging
import os

import pytest

from file_manager.config.settings import DEFAULT_CHUNK_SIZE, Settings
from file_manager.exceptions import ConfigurationError

ENV_KEYS = (
    "FM_USERNAME",
    "FM_START_DIR",
    "FM_LOG_LEVEL",
    "FM_CHUNK_SIZE",
    "FM_BROTLI_QUALITY",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    """Test defaults."""
    settings = Settings()
    assert settings.username == "Anonymous"
    assert settings.start_dir == os.path.abspath(os.path.expanduser("~"))
    assert settings.log_level == logging.WARNING
    assert settings.chunk_size == DEFAULT_CHUNK_SIZE
    assert settings.brotli_quality == 11


def test_username_from_env(clean_env):
    """Test username from env."""
    clean_env.setenv("FM_USERNAME", "alice")
    assert Settings().username == "alice"


def test_explicit_username_wins_over_env(clean_env):
    """Test explicit username wins over env."""
    clean_env.setenv("FM_USERNAME", "alice")
    assert Settings(username="bob").username == "bob"


def test_start_dir_must_exist(clean_env, temp_directory):
    """Test start dir must exist."""
    clean_env.setenv("FM_START_DIR", os.path.join(temp_directory, "missing"))
    with pytest.raises(ConfigurationError, match="not a directory"):
        Settings()


def test_log_level(clean_env):
    """Test log level."""
    clean_env.setenv("FM_LOG_LEVEL", "debug")
    assert Settings().log_level == logging.DEBUG


def test_unknown_log_level(clean_env):
    """Test unknown log level."""
    clean_env.setenv("FM_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigurationError, match="FM_LOG_LEVEL"):
        Settings()


@pytest.mark.parametrize(
    "key,value",
    [
        ("FM_CHUNK_SIZE", "abc"),
        ("FM_CHUNK_SIZE", "0"),
        ("FM_BROTLI_QUALITY", "12"),
    ],
)
def test_invalid_integers(clean_env, key, value):
    """Test invalid integers."""
    clean_env.setenv(key, value)
    with pytest.raises(ConfigurationError, match=key):
        Settings()
