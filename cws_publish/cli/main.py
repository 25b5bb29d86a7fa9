# cws_publish/cli/main.py
"""Main CLI entry point for cws-publish"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT, CONFIG_FILE_NAME
from ..api.exceptions import ConfigurationError
from ..models import LoggingSettings
from ..services import ConfigService
from .utils.output import print_error

# Import all commands
from .commands import upload, store_configs

console = Console()

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'fatal': logging.CRITICAL,
    'critical': logging.CRITICAL,
}


def setup_logging(settings: LoggingSettings,
                  verbose: bool = False,
                  debug: bool = False,
                  quiet: bool = False) -> logging.Logger:
    """Setup logging configuration

    Command line flags take precedence over the configured level.

    Args:
        settings: Logging settings from the config file
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
        quiet: Only report errors

    Returns:
        Application logger
    """
    level_error = False
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = LOG_LEVELS.get(settings.level.lower())
        if level is None:
            level = logging.DEBUG
            level_error = True

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_time=settings.timestamp,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )

    # Adjust third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger = logging.getLogger(APP_NAME)
    if level_error:
        logger.error(f"Couldn't parse logging level {settings.level!r}, switch to debug")
    return logger


class Context:
    """CLI context object shared by all commands"""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize CLI context"""
        self.config = ConfigService(config_file)
        self.logger: logging.Logger = logging.getLogger(APP_NAME)


@click.group(name=APP_NAME)
@click.option('--config', 'config_file', type=click.Path(dir_okay=False, path_type=Path),
              default=None, help=f'Config file (default is $HOME/{CONFIG_FILE_NAME})')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.version_option(__version__, prog_name=APP_NAME)
@click.pass_context
def cli(ctx, config_file, verbose, debug, quiet):
    """Includes tools to build & publish Chrome Web Store extensions

    Credentials and the extension ID are read from the config file or from
    environment variables (extension.id -> EXTENSION_ID).
    """
    ctx.obj = Context(config_file)

    try:
        settings = ctx.obj.config.logging_settings()
    except ConfigurationError as e:
        print_error(str(e), title="Configuration Error")
        ctx.exit(1)

    ctx.obj.logger = setup_logging(settings, verbose=verbose, debug=debug, quiet=quiet)
    if ctx.obj.config.loaded_from:
        ctx.obj.logger.debug(f"Initialize config: {ctx.obj.config.loaded_from}")


# Register commands
cli.add_command(upload.upload)
cli.add_command(store_configs.build_store_configs)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Auto-help for incomplete commands
    - Keyboard interrupts
    - Unexpected exceptions, logged instead of crashing
    """
    try:
        # If only command name provided, show its help
        if len(sys.argv) == 2 and sys.argv[1] in cli.commands:
            sys.argv.append('--help')

        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        logging.getLogger(APP_NAME).error(f"Recovered unexpected error: {e}", exc_info=True)
        console.print(f"[red]Unexpected error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
