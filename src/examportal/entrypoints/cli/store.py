"""``store`` command group: inspect and reset the key-value store."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import click_extra as clickx

from .helpers import warn

if TYPE_CHECKING:
    from examportal.bootstrap import AppContainer

CLEAR_WARNING = "This will delete the session, every result and every registration."


@click.group(cls=clickx.ExtraGroup)
def store() -> None:
    """Key-value store commands."""


@store.command()
@click.pass_obj
def keys(app: AppContainer) -> None:
    """List the stored keys."""
    for key in app.store.keys():
        click.echo(key)


@store.command()
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def clear(app: AppContainer, yes: bool) -> None:
    """Delete everything in the store."""
    if not yes:
        warn(CLEAR_WARNING)
        click.confirm("Proceed?", abort=True, err=True)
    if not app.store.clear():
        raise click.ClickException("Could not clear the store.")
    app.presenter.show_success("Store cleared.")
