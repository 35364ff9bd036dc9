# topmark:header:start
#
#   project      : FrontMeta
#   file         : front_matter.py
#   file_relpath : src/frontmeta/cli/commands/front_matter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FrontMeta `front-matter` command.

Splits a content file into its front matter and body, decodes the front matter
and prints it (as JSON by default). Files without front matter yield an empty
mapping.
"""

from __future__ import annotations

from typing import Any

import click

from frontmeta.cli.cli_types import EnumChoiceParam
from frontmeta.cli.cmd_common import get_console, read_input_bytes
from frontmeta.cli.commands.decode import DATA_FORMATS
from frontmeta.cli.errors import FrontmetaDataError, from_decoder_error
from frontmeta.config.logging import get_logger
from frontmeta.frontmatter import parse_front_matter
from frontmeta.metadecoders import Format, MetaDecoderError, encode

logger = get_logger(__name__)


@click.command(
    name="front-matter",
    help="Decode the front matter of a content file and print it (as JSON by default).",
)
@click.argument("path", type=str)
@click.option(
    "--to",
    "to_format",
    type=EnumChoiceParam(Format, DATA_FORMATS),
    default=Format.JSON.value,
    show_default=True,
    help="Output format for the metadata.",
)
@click.option(
    "--body",
    "show_body",
    is_flag=True,
    default=False,
    help="Also print the content body after the metadata.",
)
def front_matter_command(
    *,
    path: str,
    to_format: Format = Format.JSON,
    show_body: bool = False,
) -> None:
    """Decode and print the front matter of a content file.

    Args:
        path (str): The content file (``-`` reads STDIN).
        to_format (Format): Output format for the metadata.
        show_body (bool): Print the body after the metadata.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    try:
        text: str = read_input_bytes(path).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FrontmetaDataError(f"{path}: not valid UTF-8: {exc}") from exc

    try:
        meta: dict[str, Any]
        body: str
        meta, body = parse_front_matter(text)
        rendered: str = encode(meta, to_format)
    except MetaDecoderError as exc:
        raise from_decoder_error(exc, where=path) from exc
    except (TypeError, ValueError) as exc:
        raise FrontmetaDataError(f"{path}: cannot render as {to_format.label}: {exc}") from exc

    if not meta:
        logger.info("No front matter in %s", path)

    console.print(rendered.rstrip("\n"))
    if show_body:
        console.print()
        console.print(body, nl=False)
