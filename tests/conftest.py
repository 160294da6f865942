"""Shared fixtures for resolve_dependency_path tests."""

import logging
import os

import pytest

PROJECT_ROOT = os.path.abspath("/proj")


@pytest.fixture
def project_root():
    """Absolute project root used for pure (no disk access) resolution."""
    return PROJECT_ROOT


@pytest.fixture
def js_file(project_root):
    """Referencing JavaScript file at the project root."""
    return os.path.join(project_root, "foo.js")


@pytest.fixture
def project_dir(tmp_path):
    """Real project directory for tests that touch the filesystem."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def write_config(project_dir):
    """Factory writing an alias config file into the project directory."""

    def _write(content: str, name: str = "aliases.yaml"):
        path = project_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after tests that install handlers."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
