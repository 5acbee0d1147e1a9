"""Main entry point for TodoQueue CLI."""

from pathlib import Path

import typer

from todoqueue_cli import __version__
from todoqueue_cli.adapters import JsonSnapshotRepository
from todoqueue_cli.commands import config
from todoqueue_cli.commands.decorators import command_wrapper
from todoqueue_cli.services.config_service import get_config_service
from todoqueue_cli.services.directory_service import Directory
from todoqueue_cli.services.session_service import SessionController
from todoqueue_cli.utils.logger import set_log_level
from todoqueue_cli.utils.ui.console import get_console

app = typer.Typer(
    name="todoqueue",
    help="Multi-user task queues in the terminal. Run without a command to start a session.",
)

app.add_typer(config.app, name="config", help="Configuration management")


@command_wrapper
def run_session(data_file: Path | None = None) -> None:
    """Load the directory, run the interactive menu, then persist."""
    config_service = get_config_service()
    app_config = config_service.config
    set_log_level(app_config.logging.level)

    repository = JsonSnapshotRepository(config_service.resolve_data_file(data_file))
    controller = SessionController(
        Directory(repository),
        console=get_console(color=app_config.output.color),
    )
    controller.run()


@app.callback(invoke_without_command=True)
def session(
    ctx: typer.Context,
    data_file: Path | None = typer.Option(
        None, "--data-file", help="Snapshot file to use for this run"
    ),
) -> None:
    """Start an interactive session when no command is given."""
    if ctx.invoked_subcommand is None:
        run_session(data_file)


@app.command()
def version() -> None:
    """Show version information."""
    get_console().print(f"[bold]TodoQueue CLI[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
