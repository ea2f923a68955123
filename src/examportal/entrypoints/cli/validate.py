"""``validate`` command group: check input before it is submitted."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import click_extra as clickx

from examportal.bootstrap import MappingFormSource

from .helpers import parse_form_values, parse_required_fields

if TYPE_CHECKING:
    from examportal.bootstrap import AppContainer
    from examportal.service_layer.validation import FieldSpec


@click.group(cls=clickx.ExtraGroup)
def validate() -> None:
    """Input validation commands."""


@validate.command()
@click.argument("value")
@click.pass_obj
def email(app: AppContainer, value: str) -> None:
    """Exit 0 if VALUE looks like an email address."""
    if app.validator.validate_email(value):
        app.presenter.show_success(f"{value} looks like an email address.")
        return
    app.presenter.show_error(f"{value} is not a valid email address.")
    raise click.exceptions.Exit(1)


@validate.command()
@click.option(
    "-r",
    "--require",
    "required",
    multiple=True,
    callback=parse_required_fields,
    help="Required field as NAME or NAME:MESSAGE (repeatable).",
)
@click.option(
    "-f",
    "--field",
    "values",
    multiple=True,
    callback=parse_form_values,
    help="Submitted field value as NAME=VALUE (repeatable).",
)
@click.pass_obj
def form(app: AppContainer, required: list[FieldSpec], values: dict[str, str]) -> None:
    """Exit 0 if every required field has a non-blank value."""
    errors = app.validator.validate_required(required, MappingFormSource(values))
    if not app.validator.show_errors(errors):
        raise click.exceptions.Exit(1)
    app.presenter.show_success("All required fields are filled in.")
