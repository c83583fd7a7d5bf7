"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clean_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test outside any sanitized shell and away from stray config files."""
    for name in (
        "SANITIZED",
        "SANITIZED_OS",
        "SANITIZE_CONFIG",
        "SANITIZE_LOG_LEVEL",
        "SANITIZE_LOG_FILE",
        "SANITIZE_LOG_FILE_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def restore_logging():
    """Put the root logger back the way it was after the test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    # Handlers from setup_logging may point at a stream CliRunner has closed
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def config_file(tmp_path: Path):
    """Factory: write a .sanitize.yml with the given content and return its path."""

    def _write(content: str, name: str = ".sanitize.yml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
