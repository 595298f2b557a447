"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from ledgrid import __version__

from .commands import config, decode_cmd, encode_cmd

logger = logging.getLogger(__name__)


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Work out where log output goes."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "ledgrid-debug.log"
    return Path.home() / ".ledgrid" / "logs" / "ledgrid.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    The TUI owns stdout, so all log output goes to a rotating file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level used with a custom log file (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins when logging to a custom file
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


def report_error(error: Exception, log_path: Optional[Path] = None) -> None:
    """Print a clean error message and recovery hint to stderr."""
    from ledgrid.exceptions import format_error_for_display

    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)


class ErrorReportingGroup(click.Group):
    """Group that turns ledgrid errors raised by subcommands into clean messages."""

    def invoke(self, ctx):
        from ledgrid.exceptions import LedGridError

        try:
            return super().invoke(ctx)
        except LedGridError as e:
            logger.error(f"Command failed: {e.technical_message}")
            report_error(e)
            sys.exit(1)


@click.group(cls=ErrorReportingGroup, invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="ledgrid")
@click.option(
    '--config-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file to use (default: ~/.ledgrid/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./ledgrid-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    LED Grid - compose an 8x13 LED pattern and get its maxWrite() words.

    Click cells to toggle them, then press the button (or Enter) to show
    the four 32-bit words, ready to paste into a C array initializer.

    \b
    Examples:
      # Open the editor
      ledgrid

      # Encode without the UI
      ledgrid encode --cell 0,0 --cell 2,5 --cell 2,6

      # See what a set of words lights up
      ledgrid decode 0x80000001 0x0 0x0 0x0

      # Enable debug logging
      ledgrid --debug
    """
    # Subcommands print to stdout and skip the log file setup
    if ctx.invoked_subcommand is not None:
        return

    setup_logging(verbose, debug, log_file, log_level)

    # Lazy imports keep headless commands free of the Textual import cost
    from ledgrid.models import AppConfig
    from ledgrid.tui import LedGridApp

    logger.info("Starting LED Grid")
    log_path = resolve_log_path(debug, log_file)

    try:
        config_obj = AppConfig.load_or_default(config_file)
        app = LedGridApp(config=config_obj)
        app.run()

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        logger.exception("Error running application")
        report_error(e, log_path)
        click.echo("For logging options, run: ledgrid --help", err=True)
        sys.exit(1)


cli.add_command(encode_cmd, name="encode")
cli.add_command(decode_cmd, name="decode")
cli.add_command(config)

if __name__ == "__main__":
    cli()
