# topmark:header:start
#
#   project      : FrontMeta
#   file         : decode.py
#   file_relpath : src/frontmeta/cli/commands/decode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FrontMeta `decode` command.

Decodes a JSON, YAML or TOML data file and renders it in the requested format,
e.g. ``frontmeta decode data/authors.yml --to toml``.
"""

from __future__ import annotations

from typing import Any

import click

from frontmeta.cli.cli_types import EnumChoiceParam
from frontmeta.cli.cmd_common import get_console, read_input_bytes
from frontmeta.cli.errors import (
    FrontmetaDataError,
    FrontmetaUnsupportedFormatError,
    from_decoder_error,
)
from frontmeta.config.logging import get_logger
from frontmeta.metadecoders import (
    DEFAULT_DECODER,
    Format,
    MetaDecoderError,
    encode,
    format_from_content,
    format_from_string,
)

logger = get_logger(__name__)

DATA_FORMATS: list[Format] = [Format.JSON, Format.TOML, Format.YAML]


def resolve_input_format(path: str, data: bytes, explicit: Format | None) -> Format:
    """Pick the input format: explicit option, then extension, then content sniffing."""
    if explicit is not None:
        return explicit
    if path != "-":
        fmt: Format = format_from_string(path)
        if fmt:
            return fmt
    return format_from_content(data.decode("utf-8", errors="replace"))


@click.command(
    name="decode",
    help="Decode a JSON, YAML or TOML data file and print it (as JSON by default).",
)
@click.argument("path", type=str)
@click.option(
    "--format",
    "input_format",
    type=EnumChoiceParam(Format, DATA_FORMATS),
    default=None,
    help="Input format; detected from the extension or content when omitted.",
)
@click.option(
    "--to",
    "to_format",
    type=EnumChoiceParam(Format, DATA_FORMATS),
    default=Format.JSON.value,
    show_default=True,
    help="Output format.",
)
def decode_command(
    *,
    path: str,
    input_format: Format | None = None,
    to_format: Format = Format.JSON,
) -> None:
    """Decode a data file and print it in ``to_format``.

    Args:
        path (str): The data file (``-`` reads STDIN).
        input_format (Format | None): Explicit input format.
        to_format (Format): Output format.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    data: bytes = read_input_bytes(path)
    fmt: Format = resolve_input_format(path, data, input_format)
    if not fmt:
        raise FrontmetaUnsupportedFormatError(f"{path}: cannot detect the data format")
    logger.info("Decoding %s as %s", path, fmt.label)

    try:
        value: Any = DEFAULT_DECODER.decode_to_value(data, fmt)
        rendered: str = encode(value, to_format)
    except MetaDecoderError as exc:
        raise from_decoder_error(exc, where=path) from exc
    except (TypeError, ValueError) as exc:
        raise FrontmetaDataError(f"{path}: cannot render as {to_format.label}: {exc}") from exc

    console.print(rendered.rstrip("\n"))
