"""Command-line interface for chartkit."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

import click
import yaml
from safir.click import display_help
from structlog.stdlib import get_logger

from .builder import VolumeBuilder
from .config import Config
from .constants import CONFIG_FILE, CONFIG_FILE_ENV_VAR, ROOT_LOGGER

__all__ = ["help", "main", "volumes"]


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(message="%(version)s")
def main() -> None:
    """Command-line interface for chartkit."""


@main.command()
@click.argument("topic", default=None, required=False, nargs=1)
@click.argument("subtopic", default=None, required=False, nargs=1)
@click.pass_context
def help(ctx: click.Context, topic: str | None, subtopic: str | None) -> None:
    """Show help for any command."""
    display_help(main, ctx, topic, subtopic)


@main.command()
@click.option(
    "--config-file",
    "-c",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    envvar=CONFIG_FILE_ENV_VAR,
    default=CONFIG_FILE,
    help="Volume configuration file",
)
@click.option(
    "--debug",
    "-d",
    is_flag=True,
    envvar="DEBUG",
    help="Enable debug logging",
)
@click.option(
    "--mount-prefix",
    default="",
    help="Prefix to prepend to all mount paths",
)
@click.option(
    "--output",
    "-o",
    type=click.File("w"),
    default="-",
    help="File to write the YAML to, or - for standard output",
)
def volumes(
    *, config_file: Path, debug: bool, mount_prefix: str, output: TextIO
) -> None:
    """Synthesize the configured volumes and mounts as YAML."""
    config = Config.from_file(config_file)
    if debug:
        config.debug = debug
        config.configure_logging()

    logger = get_logger(ROOT_LOGGER)
    builder = VolumeBuilder(logger)
    built = builder.build_volumes(config.volumes)
    mounts = builder.build_mounts(config.volume_mounts, prefix=mount_prefix)
    logger.debug(
        "Synthesized volumes", volumes=len(built), volume_mounts=len(mounts)
    )

    manifest = {
        "volumes": [v.serialize() for v in built],
        "volumeMounts": [m.to_dict(serialize=True) for m in mounts],
    }
    yaml.safe_dump(manifest, output, sort_keys=False)
