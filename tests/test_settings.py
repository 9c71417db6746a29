"""
Tests for Settings.from_env and load_env.
"""

import os
from pathlib import Path

import pytest

from degiro_core import ConfigurationError, Settings
from degiro_core.settings import BASE_URL, DEFAULT_TIMEOUT, load_env


def test_from_env_reads_credentials_and_defaults():
    s = Settings.from_env({"DEGIRO_USER": "jdoe", "DEGIRO_PASS": "secret"})
    assert s.username == "jdoe"
    assert s.password == "secret"
    assert s.base_url == BASE_URL
    assert s.session_path == Path("session.txt")
    assert s.timeout == DEFAULT_TIMEOUT


def test_from_env_overrides():
    s = Settings.from_env(
        {
            "DEGIRO_USER": "jdoe",
            "DEGIRO_PASS": "secret",
            "DEGIRO_BASE_URL": "https://example.test/",
            "DEGIRO_SESSION_PATH": "/tmp/s.txt",
            "DEGIRO_TIMEOUT": "2.5",
        }
    )
    assert s.base_url == "https://example.test"
    assert s.session_path == Path("/tmp/s.txt")
    assert s.timeout == 2.5


@pytest.mark.parametrize("env", [{}, {"DEGIRO_USER": "jdoe"}, {"DEGIRO_PASS": "secret"}])
def test_from_env_missing_credentials(env):
    with pytest.raises(ConfigurationError):
        Settings.from_env(env)


def test_from_env_bad_timeout():
    with pytest.raises(ConfigurationError):
        Settings.from_env({"DEGIRO_USER": "u", "DEGIRO_PASS": "p", "DEGIRO_TIMEOUT": "soon"})


def test_repr_hides_password():
    assert "secret" not in repr(Settings(username="u", password="secret"))


def test_load_env_reads_dotenv_file(tmp_path, monkeypatch):
    monkeypatch.delenv("DEGIRO_USER", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("DEGIRO_USER=from_file\n", encoding="utf-8")
    assert load_env(env_file) is True
    assert os.environ["DEGIRO_USER"] == "from_file"
    monkeypatch.delenv("DEGIRO_USER", raising=False)
