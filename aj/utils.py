"""Logging helpers for aj.

Everything goes to stderr: stdout is reserved for the resolved path that the
shell function feeds to cd.
"""

import click

from .config import get_verbosity


def log_error(message: str) -> None:
    """Always shown."""
    click.echo(click.style(message, fg="red"), err=True)


def log_warning(message: str) -> None:
    if get_verbosity() >= 1:
        click.echo(click.style(f"Warning: {message}", fg="yellow"), err=True)


def log_info(message: str) -> None:
    if get_verbosity() >= 1:
        click.echo(message, err=True)


def log_verbose(message: str) -> None:
    if get_verbosity() >= 2:
        click.echo(message, err=True)


def log_debug(message: str) -> None:
    if get_verbosity() >= 3:
        click.echo(click.style(message, dim=True), err=True)
