"""Shared pytest configuration and fixtures for all tests."""

import importlib
import logging
from collections.abc import Callable
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: end-to-end tests through the CLI")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    return _run_cmd


@pytest.fixture
def write_corpus(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes {relative path: content} under tmp_path/<subdir>."""

    def _write(files: dict[str, str | bytes], subdir: str = "docs") -> Path:
        root = tmp_path / subdir
        root.mkdir(exist_ok=True)
        for rel_path, content in files.items():
            target = root / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8")
        return root

    return _write


@pytest.fixture(autouse=True)
def _clean_ci_env(monkeypatch):
    """CI=true changes the default output format; tests opt in explicitly."""
    monkeypatch.delenv("CI", raising=False)


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch):
    """Each test starts without docval handlers; handlers it installs are closed afterwards."""
    # docval.utils re-exports the function under the module's name
    module = importlib.import_module("docval.utils.configure_logging")
    monkeypatch.setattr(module, "_CONFIGURED", False)
    logger = logging.getLogger("docval")
    saved = list(logger.handlers)
    logger.handlers[:] = []
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved
