"""Build-store-configs command implementation"""

import sys
from pathlib import Path

import click

from ..utils.output import print_error, format_resolve_result
from ...api import build_store_configs as resolve_store_configs
from ...api.exceptions import CwsPublishError


@click.command(name='build-store-configs')
@click.option('--src', '-s', required=True,
              type=click.Path(path_type=Path),
              help='Source directory which contains store configs (YAML & provider)')
@click.option('--dest', '-d', required=True,
              type=click.Path(path_type=Path),
              help='Destination directory which stores store providers')
@click.pass_context
def build_store_configs(ctx, src, dest):
    """Lookup store configs then copy into CWS provider folder

    Every SRC/*/manifest.json is resolved through its desktop ruleset to a
    provider script, which is copied to DEST/<provider>.js.
    """
    logger = ctx.obj.logger

    try:
        settings = ctx.obj.config.resolver_settings(str(src), str(dest))
        result = resolve_store_configs(settings, logger)
        format_resolve_result(result)

    except CwsPublishError as e:
        logger.error(f"build-store-configs: {e}")
        print_error(str(e), title="Store Config Error")
        sys.exit(1)
