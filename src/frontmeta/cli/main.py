# topmark:header:start
#
#   project      : FrontMeta
#   file         : main.py
#   file_relpath : src/frontmeta/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FrontMeta command-line interface.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the program-output console, so subcommands stay thin.
"""

from __future__ import annotations

import click

from frontmeta.cli.commands.decode import decode_command
from frontmeta.cli.commands.detect import detect_command
from frontmeta.cli.commands.front_matter import front_matter_command
from frontmeta.cli.commands.sync_config import sync_config_command
from frontmeta.cli.commands.version import version_command
from frontmeta.cli.console import ClickConsole
from frontmeta.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from frontmeta.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    The log level comes from ``-v``/``-q`` when given, else from
    ``FRONTMETA_LOG_LEVEL``; without either only critical messages are logged.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    level: int | None = None
    if verbose or quiet:
        level = resolve_verbosity(verbose, quiet)
    else:
        level = resolve_env_log_level()
    setup_logging(level=level)
    ctx.obj["log_level"] = level

    effective_color_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="FrontMeta: detect and decode JSON, YAML and TOML metadata.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the FrontMeta CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'frontmeta detect [PATHS...]' to identify data formats.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(detect_command)

cli.add_command(decode_command)

cli.add_command(front_matter_command)

cli.add_command(sync_config_command)

if __name__ == "__main__":
    cli()
