"""Shared output and guard helpers for EXAMPORTAL commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from examportal.utils.formatting import format_date, format_time

if TYPE_CHECKING:
    from examportal.bootstrap import AppContainer
    from examportal.domain.records import User

LOGIN_REQUIRED_EXIT_CODE = 2


def echo_json(data: Any) -> None:
    """Write ``data`` to stdout as indented JSON."""
    click.echo(json.dumps(data, indent=2))


def as_number(value: float) -> int | float:
    """Return ``value`` as an int when it has no fractional part."""
    return int(value) if value.is_integer() else value


def display_timestamp(value: str, *, with_time: bool = True) -> str:
    """Render a stored timestamp for humans, or return it unchanged if unparseable."""
    try:
        if with_time:
            return f"{format_date(value)} {format_time(value)}"
        return format_date(value)
    except ValueError:
        return value


def require_user(app: AppContainer) -> User:
    """Return the logged-in user or stop the command.

    Runs the session guard, so the presenter shows the login notice and the
    redirect before the command exits with ``LOGIN_REQUIRED_EXIT_CODE``.
    """
    if app.session.require_auth():
        user = app.session.get_current_user()
        if user is not None:
            return user
    raise click.exceptions.Exit(LOGIN_REQUIRED_EXIT_CODE)
