# topmark:header:start
#
#   project      : FrontMeta
#   file         : detect.py
#   file_relpath : src/frontmeta/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FrontMeta `detect` command.

Prints the data format of each file. The extension is consulted first; files
with an unknown extension (or all files, with ``--sniff``) are classified from
their content.
"""

from __future__ import annotations

import json

import click

from frontmeta.cli.cli_types import EnumChoiceParam
from frontmeta.cli.cmd_common import get_console, read_input_bytes
from frontmeta.config.logging import get_logger
from frontmeta.core.formats import OutputFormat
from frontmeta.metadecoders import Format, format_from_content, format_from_string

logger = get_logger(__name__)


def detect_one(path: str, *, sniff: bool) -> tuple[Format, str]:
    """Return ``(format, source)`` for ``path``; source is ``"extension"`` or ``"content"``."""
    if not sniff and path != "-":
        fmt: Format = format_from_string(path)
        if fmt:
            return fmt, "extension"
        logger.debug("No format for extension of %s; sniffing content", path)

    text: str = read_input_bytes(path).decode("utf-8", errors="replace")
    return format_from_content(text), "content"


@click.command(
    name="detect",
    help="Show the data format (json, yaml, toml) of each file.",
)
@click.argument("paths", nargs=-1, required=True, type=str)
@click.option(
    "--sniff",
    is_flag=True,
    default=False,
    help="Detect from content only, ignoring file extensions.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Report format ({', '.join(v.value for v in OutputFormat)}).",
)
def detect_command(
    *,
    paths: tuple[str, ...],
    sniff: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the data format of each file.

    Args:
        paths (tuple[str, ...]): Files to classify (``-`` reads STDIN).
        sniff (bool): Ignore extensions and classify from content.
        output_format (OutputFormat | None): Report format.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    results: list[tuple[str, Format, str]] = []
    for path in paths:
        fmt, source = detect_one(path, sniff=sniff)
        results.append((path, fmt, source))

    if output_format == OutputFormat.JSON:
        payload = [
            {"path": p, "format": f.value or None, "source": s} for p, f, s in results
        ]
        console.print(json.dumps(payload, indent=2))
        return

    for p, f, s in results:
        label: str = f.value if f else console.styled("unspecified", fg="yellow")
        console.print(f"{p}: {label} ({s})")
