"""Tests for environment configuration."""

import importlib
import uuid

import pytest

from nameuuid.config import env


@pytest.fixture
def reload_env(monkeypatch):
  """Reload the env module under patched variables, then restore it."""
  yield lambda: importlib.reload(env)
  monkeypatch.undo()
  importlib.reload(env)


class TestEnv:
  """Tests for environment-driven settings."""

  def test_defaults(self, monkeypatch, reload_env):
    """Test default values when no variables are set."""
    for name in ("NAMEUUID_LOG_LEVEL", "NAMEUUID_NAMESPACE", "NAMEUUID_NAME_ENCODING"):
      monkeypatch.delenv(name, raising=False)

    module = reload_env()

    assert module.LOG_LEVEL == "WARNING"
    assert module.NAMESPACE == uuid.UUID("3f1c9b2e-7d4a-4e6b-9a2f-5c8d1e0b7a64")
    assert module.NAME_ENCODING == "utf-8"

  def test_overrides(self, monkeypatch, reload_env):
    """Test that variables override the defaults."""
    monkeypatch.setenv("NAMEUUID_LOG_LEVEL", "debug")
    monkeypatch.setenv("NAMEUUID_NAMESPACE", "6ba7b811-9dad-11d1-80b4-00c04fd430c8")
    monkeypatch.setenv("NAMEUUID_NAME_ENCODING", "utf-16")

    module = reload_env()

    assert module.LOG_LEVEL == "DEBUG"
    assert module.NAMESPACE == uuid.NAMESPACE_URL
    assert module.NAME_ENCODING == "utf-16"

  def test_invalid_namespace(self, monkeypatch, reload_env):
    """Test that a malformed namespace fails at import."""
    monkeypatch.setenv("NAMEUUID_NAMESPACE", "not-a-uuid")

    with pytest.raises(ValueError):
      reload_env()

  def test_unknown_log_level(self, monkeypatch, reload_env):
    """Test that an unknown log level fails when the logger is configured."""
    from nameuuid import logger as logger_module

    monkeypatch.setenv("NAMEUUID_LOG_LEVEL", "verbose")
    module = reload_env()

    assert module.LOG_LEVEL == "VERBOSE"
    try:
      with pytest.raises(ValueError):
        importlib.reload(logger_module)
    finally:
      monkeypatch.undo()
      importlib.reload(env)
      importlib.reload(logger_module)
