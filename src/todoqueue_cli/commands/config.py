"""Configuration management commands."""

import typer
from pydantic import ValidationError

from todoqueue_cli.services.config_service import get_config_service
from todoqueue_cli.utils.ui.console import get_console
from todoqueue_cli.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


def _parse_value(value: str) -> str | bool | None:
    """Convert a command-line value to the type stored in the config."""
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("none", "null"):
        return None
    return value


@app.command("view")
@command_wrapper
def view_config() -> None:
    """View current configuration."""
    config_service = get_config_service()
    console.print_json(config_service.config.model_dump_json())


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.data_file)"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found") from e
    console.print(value, markup=False)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., logging.level)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    parsed_value = _parse_value(value)
    try:
        get_config_service().set(key, parsed_value)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found") from e
    except ValidationError as e:
        raise AppError(f"Invalid value for '{key}': {e.errors()[0]['msg']}") from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str | None = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)

    try:
        get_config_service().reset(key)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found") from e

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
