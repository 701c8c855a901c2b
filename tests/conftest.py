"""Shared fixtures for path_relativizer tests."""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep user config, environment and cwd defaults out of the tests."""
    for key in list(os.environ):
        if key.startswith("PATH_RELATIVIZER_"):
            monkeypatch.delenv(key)

    user_dir = tmp_path / "user-config"
    monkeypatch.setattr(
        "path_relativizer.config.platformdirs.user_config_dir",
        lambda *args, **kwargs: str(user_dir),
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    factory = logging.getLogRecordFactory()
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.setLogRecordFactory(factory)
