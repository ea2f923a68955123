"""``registrations`` command group."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click
import click_extra as clickx

from examportal.domain.errors import ReservedFieldError
from examportal.domain.records import NewRegistration

from .helpers import parse_fields
from .helpers.output import display_timestamp, echo_json, require_user

if TYPE_CHECKING:
    from examportal.bootstrap import AppContainer


@click.group(cls=clickx.ExtraGroup)
def registrations() -> None:
    """Test registration commands."""


@registrations.command()
@click.argument("test_name")
@click.option(
    "-f",
    "--field",
    "fields",
    multiple=True,
    callback=parse_fields,
    help="Extra registration field as KEY=VALUE (repeatable).",
)
@click.pass_obj
def add(app: AppContainer, test_name: str, fields: dict[str, Any]) -> None:
    """Register the logged-in user for TEST_NAME.

    Refuses a second registration for the same test.
    """
    user = require_user(app)
    if app.registrations.is_registered(user.id, test_name):
        raise click.ClickException(f"Already registered for {test_name}.")
    try:
        new = NewRegistration(student_id=user.id, test_name=test_name, extra=fields)
    except ReservedFieldError as e:
        raise click.BadParameter(str(e), param_hint="'--field'") from e
    saved = app.registrations.save_registration(new)
    if saved is None:
        raise click.ClickException("Could not save the registration.")
    app.presenter.show_success(f"Registered for {test_name}.")
    click.echo(saved.id)


@registrations.command(name="list")
@click.option("--all", "all_users", is_flag=True, help="List every user's registrations.")
@click.option("--json", "as_json", is_flag=True, help="Print the registrations as JSON.")
@click.pass_obj
def list_registrations(app: AppContainer, all_users: bool, as_json: bool) -> None:
    """List the logged-in user's registrations."""
    if all_users:
        records = app.registrations.get_all_registrations()
    else:
        records = app.registrations.get_user_registrations(require_user(app).id)
    if as_json:
        echo_json([record.to_dict() for record in records])
        return
    for record in records:
        when = display_timestamp(record.registration_date, with_time=False)
        click.echo(f"{record.id}  {when}  {record.student_id}  {record.test_name}")


@registrations.command()
@click.argument("test_name")
@click.pass_obj
def check(app: AppContainer, test_name: str) -> None:
    """Exit 0 if the logged-in user is registered for TEST_NAME, 1 otherwise."""
    user = require_user(app)
    if app.registrations.is_registered(user.id, test_name):
        click.echo("registered")
        return
    click.echo("not registered")
    raise click.exceptions.Exit(1)
