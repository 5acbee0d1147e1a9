"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config, data and log
directories.
"""

from __future__ import annotations

import io
import logging
import logging.handlers
from unittest.mock import patch

import pytest
from rich.console import Console

from todoqueue_cli.adapters import JsonSnapshotRepository
from todoqueue_cli.services.config_service import get_config_service
from todoqueue_cli.services.directory_service import Directory


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs lookups at *tmp_path* and reset cached singletons."""
    from todoqueue_cli.utils import logger as logger_module

    get_config_service.cache_clear()
    with patch(
        "todoqueue_cli.services.config_service.user_config_dir",
        return_value=str(tmp_path / "config"),
    ), patch(
        "todoqueue_cli.services.config_service.user_data_dir",
        return_value=str(tmp_path / "data"),
    ), patch(
        "todoqueue_cli.utils.logger.user_log_dir",
        return_value=str(tmp_path / "logs"),
    ), patch.object(logger_module, "_logger", None):
        yield

    app_logger = logging.getLogger("todoqueue_cli")
    for handler in list(app_logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            app_logger.removeHandler(handler)
            handler.close()
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Console and input helpers
# ---------------------------------------------------------------------------


class ScriptedPrompt:
    """Stand-in for ``Prompt.ask`` that replays a fixed list of answers.

    Raises EOFError once the answers run out, like ``input()`` at end of file.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.calls: list[tuple[str, bool]] = []

    def __call__(self, message: str, password: bool = False) -> str:
        self.calls.append((message, password))
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture()
def console() -> Console:
    """Plain-text console writing into an in-memory buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture()
def output(console):
    """Return a callable giving everything printed to *console* so far."""
    return lambda: console.file.getvalue()


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "todo_data.json"


@pytest.fixture()
def directory(data_file) -> Directory:
    """Empty directory backed by a JSON snapshot in *tmp_path*."""
    return Directory(JsonSnapshotRepository(data_file))


@pytest.fixture()
def scripted_prompt():
    """Factory for ScriptedPrompt instances."""
    return ScriptedPrompt
