import logging

import pytest

import layoutfix.cli as cli_mod


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point ~ at a temp dir so user config and default log file stay out of the real home."""
    monkeypatch.setenv("HOME", str(tmp_path))
    yield tmp_path


@pytest.fixture(autouse=True)
def reset_cli_logger():
    """setup_logging() caches a module-level logger; drop it between tests."""
    cli_mod.logger = None
    yield
    log = logging.getLogger("layoutfix")
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    log.setLevel(logging.NOTSET)
    cli_mod.logger = None
