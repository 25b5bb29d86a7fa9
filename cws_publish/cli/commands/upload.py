"""Upload command implementation"""

import sys
from pathlib import Path

import click

from ..utils.output import console, print_error, format_upload_result
from ...api import Publisher
from ...api.exceptions import CwsPublishError, ConfigurationError
from ...constants import PUBLISH_TARGETS, DEFAULT_PUBLISH_TARGET


@click.command()
@click.option('--zipPath', '-z', 'zip_path', required=True,
              type=click.Path(dir_okay=False, path_type=Path),
              help='CWS zip file path')
@click.option('--publish', '-p', type=click.BOOL, default=False, show_default=True,
              help='Publish CWS item immediately after zip file uploaded')
@click.option('--target', '-t', default=DEFAULT_PUBLISH_TARGET, show_default=True,
              type=click.Choice(PUBLISH_TARGETS),
              help='Publish target')
@click.pass_context
def upload(ctx, zip_path, publish, target):
    """Upload a zip file into CWS

    The archive must be a zip file. Credentials and the extension ID come
    from the config file or environment.

    Examples:
        # Upload only
        cws-publish upload -z dist/extension.zip

        # Upload and publish to trusted testers
        cws-publish upload -z dist/extension.zip -p true -t trustedTesters
    """
    logger = ctx.obj.logger

    try:
        settings = ctx.obj.config.upload_settings(str(zip_path), publish, target)
        logger.debug(f"Upload settings: {settings!r}")

        with console.status("[bold green]Uploading to Chrome Web Store...[/bold green]"):
            with Publisher(logger=logger) as publisher:
                result = publisher.upload(settings)

        format_upload_result(result)

    except ConfigurationError as e:
        logger.error(f"upload: {e}")
        print_error(str(e), title="Configuration Error")
        sys.exit(1)

    except CwsPublishError as e:
        logger.error(f"upload: {e}")
        print_error(str(e), title="Upload Error")
        sys.exit(1)
