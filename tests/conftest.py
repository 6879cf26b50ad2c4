"""
tests/conftest.py
=================
Shared pytest fixtures — every test runs with a fresh Config singleton,
a throwaway user data directory and no FATURA_* / DEFAULT_* overrides
leaking in from the developer's environment.
"""
import logging

import pytest

from core.config import Config


_ENV_KEYS = (
    "DEFAULT_AMOUNT_LANGUAGE",
    "DEFAULT_CURRENCY",
    "LOG_LEVEL",
    "LOG_DIR",
    "LOG_TO_FILE",
    "FATURA_CONFIG_FILE",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("FATURA_HOME", str(tmp_path / "home"))
    monkeypatch.setenv("FATURA_CONFIG_FILE", str(tmp_path / "missing_settings.json"))
    Config.clear_all_instances()
    yield tmp_path
    Config.clear_all_instances()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """LoggingConfig.setup_logging() replaces root handlers; put them back."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """Write a JSON settings file and point Config at it."""
    import json

    def _f(data):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        monkeypatch.setenv("FATURA_CONFIG_FILE", str(path))
        Config.clear_all_instances()
        return path
    return _f
