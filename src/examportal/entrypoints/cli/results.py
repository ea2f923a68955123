"""``results`` command group: save, list and summarize test results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click
import click_extra as clickx

from examportal.domain.errors import ReservedFieldError
from examportal.domain.records import NewTestResult

from .helpers import parse_fields
from .helpers.output import as_number, display_timestamp, echo_json, require_user

if TYPE_CHECKING:
    from examportal.bootstrap import AppContainer
    from examportal.domain.records import TestResult


def _describe(result: TestResult) -> str:
    return (
        f"{result.id}  {display_timestamp(result.date)}  "
        f"{result.student_id}  {result.percentage}%  {result.time_used}s"
    )


@click.group(cls=clickx.ExtraGroup)
def results() -> None:
    """Test result commands."""


@results.command()
@click.option("--percentage", type=click.FLOAT, required=True, help="Score in percent.")
@click.option("--time-used", type=click.FLOAT, required=True, help="Time taken.")
@click.option(
    "-f",
    "--field",
    "fields",
    multiple=True,
    callback=parse_fields,
    help="Extra result field as KEY=VALUE (repeatable).",
)
@click.pass_obj
def save(
    app: AppContainer, percentage: float, time_used: float, fields: dict[str, Any]
) -> None:
    """Record a test attempt for the logged-in user."""
    user = require_user(app)
    try:
        new = NewTestResult(
            student_id=user.id,
            percentage=as_number(percentage),
            time_used=as_number(time_used),
            extra=fields,
        )
    except ReservedFieldError as e:
        raise click.BadParameter(str(e), param_hint="'--field'") from e
    saved = app.results.save_result(new)
    if saved is None:
        raise click.ClickException("Could not save the result.")
    app.presenter.show_success(f"Saved result {saved.id}.")
    click.echo(saved.id)


@results.command(name="list")
@click.option("--all", "all_users", is_flag=True, help="List every user's results.")
@click.option("--json", "as_json", is_flag=True, help="Print the results as JSON.")
@click.pass_obj
def list_results(app: AppContainer, all_users: bool, as_json: bool) -> None:
    """List the logged-in user's results in the order they were saved."""
    if all_users:
        records = app.results.get_all_results()
    else:
        records = app.results.get_user_results(require_user(app).id)
    if as_json:
        echo_json([record.to_dict() for record in records])
        return
    for record in records:
        click.echo(_describe(record))


@results.command()
@click.option("--json", "as_json", is_flag=True, help="Print the statistics as JSON.")
@click.pass_obj
def stats(app: AppContainer, as_json: bool) -> None:
    """Summarize the logged-in user's results."""
    summary = app.results.get_user_stats(require_user(app).id)
    if as_json:
        echo_json(summary.to_dict())
        return
    click.echo(f"Tests taken:   {summary.total_tests}")
    click.echo(f"Average score: {summary.average_score}%")
    click.echo(f"Best score:    {summary.best_score}%")
    click.echo(f"Total time:    {summary.total_time}s")
