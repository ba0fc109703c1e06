"""The ``shocktest`` console script.

The top-level group configures logging (console verbosity, debug layout,
flight recorder, per-logger levels) and hands over to its subcommand:

- ``shocktest run TARGET...`` imports the named test modules and runs the
  cases they register.

The test report goes to **stdout**; log records and notices go to **stderr**.
The exit status of ``run`` is the number of failed cases, capped at 255.
``--version`` comes from `shocktest.__version__` through Click-Extra.

Examples
    $ shocktest run tests/test_parser.py mypkg.tests.test_lexer
    $ shocktest -vv --no-color run tests/test_parser.py
    $ SHOCKTEST_LOGGER_LEVELS=mypkg.db=ERROR shocktest run tests/test_db.py
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from shocktest import __version__
from shocktest.errors import TargetLoadError
from shocktest.loader import load_targets
from shocktest.logging import LoggingSettings, configure_logging, log_startup
from shocktest.registry import default_registry
from shocktest.reporting import ConsoleReporter
from shocktest.runner import exit_status, run_all

from .helpers import parse_log_level, warn

logger = logging.getLogger(__name__)


HELP = """shocktest command-line interface.

    shocktest is a small, embeddable unit-testing harness. Test modules register
    good weather cases (expected to complete) and bad weather cases (expected to
    raise); the runner executes them in registration order and exits with the
    number of failed cases.
    """

NO_CASES_WARNING = "No test cases were registered by the given targets."

DEFAULT_LOG_PATH = (
    Path(user_log_dir("shocktest", appauthor=False, ensure_exists=True)) / "latest.log"
)


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
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    default=0,
    help="Show more log records on stderr: -v for INFO, -vv for DEBUG.",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    default=0,
    help="Show fewer log records on stderr: -q for ERROR, -qq for CRITICAL.",
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    default=False,
    help="Log everything to the console with timestamps and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="SHOCKTEST_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to. Truncated on every run.",
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="SHOCKTEST_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    default=True,
    show_envvar=True,
    help=(
        "Keep recent DEBUG records in memory regardless of -v/-q, and write "
        "them to --log-path as soon as a WARNING or worse is logged (for "
        "instance by the code under test)."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer to --log-path on exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="SHOCKTEST_LOGGER_LEVELS",
    default=("asyncio=WARNING",),
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level NAME=LEVEL for one logger and its children, on the "
        "console and in the flight recorder alike. Repeatable, or a comma or "
        "space separated list in SHOCKTEST_LOGGER_LEVELS."
    ),
)
@clickx.pass_context
def shocktest(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """shocktest command-line interface."""
    settings = LoggingSettings(
        verbosity=verbose_count - quiet_count,
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=log_path,
        flight_recorder=flight_recorder,
        capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, __version__, settings, handlers)

    ctx.call_on_close(logging.shutdown)


@click.command()
@click.argument("targets", nargs=-1, required=True)
@click.pass_context
def run(ctx: click.Context, targets: tuple[str, ...]) -> None:
    """Import TARGETS and run the test cases they register.

    Each TARGET is a dotted module name or a path to a ``.py`` file. Targets
    are imported in the order given, and cases run in registration order.
    The exit status is the number of failed cases (capped at 255).
    """
    try:
        load_targets(targets)
    except TargetLoadError as e:
        logger.error("Aborting run: %s", e)
        raise click.ClickException(str(e)) from e

    registry = default_registry()
    if not registry:
        warn(NO_CASES_WARNING)

    failures = run_all(registry, ConsoleReporter(color=ctx.color))
    ctx.exit(exit_status(failures))


shocktest.add_command(run)
