"""Session commands: ``login``, ``logout`` and ``whoami``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from examportal.domain.errors import ReservedFieldError
from examportal.domain.records import User

from .helpers import parse_fields
from .helpers.output import echo_json, require_user

if TYPE_CHECKING:
    from examportal.bootstrap import AppContainer


@click.command()
@click.argument("user_id")
@click.option("--name", required=True, help="Display name of the user.")
@click.option(
    "-f",
    "--field",
    "fields",
    multiple=True,
    callback=parse_fields,
    help="Extra profile field as KEY=VALUE (repeatable).",
)
@click.pass_obj
def login(app: AppContainer, user_id: str, name: str, fields: dict[str, Any]) -> None:
    """Log in as USER_ID, replacing any current session.

    No password is checked: the session only records who is using the portal.
    """
    try:
        user = User(id=user_id, name=name, extra=fields)
    except ReservedFieldError as e:
        raise click.BadParameter(str(e), param_hint="'--field'") from e
    if not app.session.login(user):
        raise click.ClickException("Could not store the session.")
    app.presenter.show_success(f"Welcome, {name}!")


@click.command()
@click.pass_obj
def logout(app: AppContainer) -> None:
    """Log out. Does nothing if nobody is logged in."""
    app.session.logout(redirect_target=None)
    app.presenter.show_success("Logged out.")


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print the user as JSON.")
@click.pass_obj
def whoami(app: AppContainer, as_json: bool) -> None:
    """Show the logged-in user."""
    user = require_user(app)
    if as_json:
        echo_json(user.to_dict())
    else:
        click.echo(f"{user.name} ({user.id})" if user.name else user.id)
