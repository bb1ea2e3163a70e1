"""Console output helpers for the wakatime-charts CLI.

User-facing feedback goes through these helpers; diagnostic detail goes to
the structured logger configured in ``core.logging_config``.
"""

from __future__ import annotations

import typer


def success(message: str, *, prefix: bool = True) -> None:
    """Display a success message in green with checkmark emoji.

    Example:
        success("Wrote 2 charts to generated/")
        # Output: ✅ Wrote 2 charts to generated/
    """
    formatted = f"✅ {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.GREEN)


def error(message: str, *, prefix: bool = True, err: bool = True) -> None:
    """Display an error message in red with cross emoji.

    Args:
        message: The error message to display
        prefix: Whether to include the cross emoji prefix (default: True)
        err: Whether to write to stderr instead of stdout (default: True)
    """
    formatted = f"❌ {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.RED, err=err)


def info(message: str, *, prefix: bool = True) -> None:
    """Display an informational message in cyan with info emoji."""
    formatted = f"ℹ️  {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.CYAN)


def warning(message: str, *, prefix: bool = True) -> None:
    """Display a warning message in yellow with warning emoji."""
    formatted = f"⚠️  {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.YELLOW)


def plain(message: str) -> None:
    """Display a message without emoji prefix or color."""
    typer.echo(message)
