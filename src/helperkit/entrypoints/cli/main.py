"""helperkit CLI entry point.

Defines the top-level ``helperkit`` command (via Click-Extra) and registers
the subcommand groups.

Available groups
- ``helperkit check`` - SIREN/SIRET/NAF/VAT/company name/e-mail validation.
- ``helperkit color`` - colour conversion and contrast.
- ``helperkit phone`` - phone number formatting and line types.
- ``helperkit password`` - password strength.
- ``helperkit file`` - human-readable sizes and MIME types.

Examples
    $ helperkit --version
    $ helperkit check vat FR44732829320
    $ helperkit -v phone format 0123456789 --national
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from helperkit import __version__
from helperkit.adapters.redactor import Redactor
from helperkit.interfaces.redactor import RedactorMode
from helperkit.logging import config_console_handler, config_flight_recorder, log_startup

from .check import check as check_group
from .color import color as color_group
from .file import file as file_group
from .helpers import hyperlink, parse_log_level
from .password import password as password_group
from .phone import phone as phone_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """helperkit command-line interface.

    Everyday helpers for business applications: French company identifiers,
    VAT numbers, phone numbers, colours, passwords and files, usable from
    scripts as well as from Python.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  VIES  : " + hyperlink("https://ec.europa.eu/taxation_customs/vies/"),
        "  SIRENE: " + hyperlink("https://annuaire-entreprises.data.gouv.fr/"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (tracebacks with locals, file paths in log lines).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("helperkit", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="HELPERKIT_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="HELPERKIT_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records (HELPERKIT_FLIGHT_RECORDER_CAPACITY) at "
        "DEBUG granularity and write them to --log-path when a WARNING or "
        "ERROR occurs, or on exit with --force-flush."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit even without errors.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL), for both the "
        "console and the flight recorder. Repeatable (e.g. -L httpx=INFO) or "
        "via HELPERKIT_LOGGER_LEVEL (comma/space list)."
    ),
    default=("httpx=WARNING", "httpcore=WARNING"),
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--redactor-mode",
    "redactor_mode",
    type=click.Choice(["lenient", "strict"], case_sensitive=False),
    help=(
        "Redaction of logged URLs and command lines. 'lenient' masks passwords "
        "and tokens; 'strict' also masks usernames and ids."
    ),
    default="lenient",
    show_envvar=True,
    show_default=True,
)
@clickx.pass_context
def helperkit(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
    redactor_mode: str,
) -> None:
    """helperkit command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=ctx.color is not False)
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # root captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

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
        redactor_mode=redactor_mode,
    )

    # subcommands look the redactor up with ctx.find_object(Redactor)
    ctx.obj = Redactor(RedactorMode(redactor_mode.lower()))

    ctx.call_on_close(logging.shutdown)


helperkit.add_command(check_group)
helperkit.add_command(color_group)
helperkit.add_command(phone_group)
helperkit.add_command(password_group)
helperkit.add_command(file_group)
