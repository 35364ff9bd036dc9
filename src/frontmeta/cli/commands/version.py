# topmark:header:start
#
#   project      : FrontMeta
#   file         : version.py
#   file_relpath : src/frontmeta/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FrontMeta `version` command.

Prints the current FrontMeta version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from frontmeta.cli.cli_types import EnumChoiceParam
from frontmeta.cli.cmd_common import get_console
from frontmeta.constants import FRONTMETA_VERSION
from frontmeta.core.formats import OutputFormat


@click.command(
    name="version",
    help="Show the current version of FrontMeta.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(
    *,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the current version of FrontMeta.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": FRONTMETA_VERSION}))
    else:
        console.print(console.styled(FRONTMETA_VERSION, bold=True))
