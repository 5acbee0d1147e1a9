"""Output formatters for the interactive session."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from todoqueue_cli.models import Task
from todoqueue_cli.models.task import TIMESTAMP_FORMAT

from .console import get_console


def _console(console: Console | None) -> Console:
    return console if console is not None else get_console()


def format_error(message: str, console: Console | None = None) -> None:
    """Format and display an error message."""
    _console(console).print(f"[bold red]✗[/bold red] {escape(message)}")


def format_success(message: str, console: Console | None = None) -> None:
    """Format and display a success message."""
    _console(console).print(f"[bold green]✓[/bold green] {escape(message)}")


def format_warning(message: str, console: Console | None = None) -> None:
    """Format and display a warning message."""
    _console(console).print(f"[bold yellow]![/bold yellow] {escape(message)}")


def format_info(message: str, console: Console | None = None) -> None:
    """Format and display an info message."""
    _console(console).print(f"[dim]{escape(message)}[/dim]")


def format_banner(title: str, console: Console | None = None) -> None:
    """Display the welcome banner."""
    out = _console(console)
    rule = "=" * 36
    out.print(rule)
    out.print(f"[bold]{escape(title)}[/bold]")
    out.print(rule)


def format_menu(
    title: str, options: list[tuple[str, str]], console: Console | None = None
) -> None:
    """Display a numbered menu. *options* holds (key, label) pairs."""
    out = _console(console)
    out.print()
    out.print(f"[bold cyan]--- {escape(title)} ---[/bold cyan]")
    for key, label in options:
        out.print(f"{key}. {escape(label)}")


def format_next_task(task: Task, console: Console | None = None) -> None:
    """Display the task at the front of the queue."""
    out = _console(console)
    out.print()
    out.print(f"[bold]Next task:[/bold] {escape(task.describe())}")


def format_task_table(tasks: list[Task], console: Console | None = None) -> None:
    """Display the queue front to back as a numbered table."""
    out = _console(console)
    if not tasks:
        format_warning("No tasks in the queue!", console=out)
        return

    table = Table(title="Your Tasks", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Task")
    table.add_column("Created", style="cyan")
    table.add_column("Priority", justify="center")

    for index, task in enumerate(tasks, start=1):
        table.add_row(
            str(index),
            escape(task.description),
            task.created_at.strftime(TIMESTAMP_FORMAT),
            "[bold red]PRIORITY[/bold red]" if task.is_priority else "-",
        )

    out.print()
    out.print(table)
