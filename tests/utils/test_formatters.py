"""Unit tests for the session output formatters."""

from datetime import datetime

from todoqueue_cli.models import Task
from todoqueue_cli.utils.ui.formatters import (
    format_error,
    format_menu,
    format_success,
    format_task_table,
)


def _task(description, priority=False):
    return Task(
        description=description,
        created_at=datetime(2026, 10, 19, 8, 15, 0),
        is_priority=priority,
    )


def test_task_table_numbers_rows(console, output):
    format_task_table([_task("call bank", True), _task("buy milk")], console=console)
    text = output()
    assert "Your Tasks" in text
    assert "2026-10-19 08:15:00" in text
    assert text.index("call bank") < text.index("buy milk")


def test_task_table_empty(console, output):
    format_task_table([], console=console)
    assert "No tasks in the queue!" in output()


def test_menu_lists_options(console, output):
    format_menu("LOGIN MENU", [("1", "Login"), ("2", "Register")], console=console)
    text = output()
    assert "--- LOGIN MENU ---" in text
    assert "1. Login" in text
    assert "2. Register" in text


def test_messages_escape_markup(console, output):
    format_success("saved [red]ok[/red]", console=console)
    format_error("bad [b]input[/b]", console=console)
    text = output()
    assert "saved [red]ok[/red]" in text
    assert "bad [b]input[/b]" in text
