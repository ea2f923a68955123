"""EXAMPORTAL CLI entry point.

Defines the top-level ``examportal`` command (via Click-Extra) and registers
subcommands exposed by the project.

Currently available commands
- ``examportal login`` / ``logout`` / ``whoami``: the current-user session.
- ``examportal results``: save, list and summarize test results.
- ``examportal registrations``: register for tests and check registrations.
- ``examportal validate``: email and required-field checks.
- ``examportal store``: inspect or clear the key-value store.

Notes
- The CLI version is sourced from `examportal.__version__` and displayed
  automatically by Click-Extra (``--version``).
- The store is chosen with ``--store`` / ``EXAMPORTAL_STORE_URL`` and defaults
  to a JSON file in the user data directory.

Examples
    $ examportal login S001 --name "Ada Lovelace"
    $ examportal results save --percentage 85 --time-used 1200
    $ examportal results stats --json
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from examportal import __version__, config
from examportal.bootstrap import bootstrap, build_store
from examportal.logging import config_console_handler, config_flight_recorder, log_startup

from .helpers.log_level_parser import parse_log_level
from .presenter import ConsolePresenter
from .registrations import registrations as registrations_group
from .results import results as results_group
from .session import login, logout, whoami
from .store import store as store_group
from .validate import validate as validate_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """EXAMPORTAL command-line interface.

    Keeps the exam portal's data: who is logged in, the test results they
    scored and the tests they registered for. Everything lives in one
    key-value store (a JSON file by default).
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "--store",
    "store_url",
    help=(
        "Key-value store to use: 'memory://', a path ending in '.json', or a "
        "SQLAlchemy database URL. Defaults to a JSON file in the user data directory."
    ),
    envvar=config.STORE_URL_ENV,
    show_envvar=True,
    default=None,
)
@click.option(
    "--namespace",
    help="Namespace within a SQL store.",
    envvar=config.STORE_NAMESPACE_ENV,
    show_envvar=True,
    default=config.DEFAULT_NAMESPACE,
    show_default=True,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("examportal", appauthor=False)) / "latest.log",
    envvar="EXAMPORTAL_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="EXAMPORTAL_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via EXAMPORTAL_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "(unaffected by -v/-q) and writes them to --log-path when a WARNING/ERROR "
        "occurs, or on clean exit if --force-flush is set."
    ),
    default=True,
    envvar="EXAMPORTAL_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR."
    ),
    default=False,
    show_default=True,
    envvar="EXAMPORTAL_FORCE_FLUSH",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to BOTH "
        "console and flight-recorder. Repeatable (e.g. -L sqlalchemy=INFO) or via "
        "EXAMPORTAL_LOGGER_LEVELS (comma/space list)."
    ),
    default=("sqlalchemy=WARNING",),
    show_default=True,
    envvar="EXAMPORTAL_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def examportal(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    store_url: str | None,
    namespace: str,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """EXAMPORTAL command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) configure flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) configure root logger; handlers do the filtering
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) set 3rd-party logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 5) log startup info
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    # 6) ensure logging is cleanly shut down on program exit
    ctx.call_on_close(logging.shutdown)

    # 7) wire the services for subcommands
    url = store_url or config.get_store_url()
    try:
        kv_store = build_store(url, namespace)
    except config.UnknownStoreUrlError as e:
        raise click.BadParameter(str(e), param_hint="'--store'") from e
    logger.debug("Store: %r", kv_store)
    ctx.obj = bootstrap(store=kv_store, presenter=ConsolePresenter())


examportal.add_command(login)
examportal.add_command(logout)
examportal.add_command(whoami)
examportal.add_command(results_group)
examportal.add_command(registrations_group)
examportal.add_command(validate_group)
examportal.add_command(store_group)
