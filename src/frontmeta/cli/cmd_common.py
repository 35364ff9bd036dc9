# topmark:header:start
#
#   project      : FrontMeta
#   file         : cmd_common.py
#   file_relpath : src/frontmeta/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by FrontMeta CLI commands."""

from __future__ import annotations

import click

from frontmeta.cli.console import ClickConsole
from frontmeta.cli.errors import from_os_error


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the Click context (created on demand)."""
    ctx.ensure_object(dict)
    console: ClickConsole | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def read_input_bytes(path: str) -> bytes:
    """Read ``path`` as bytes; ``-`` reads standard input.

    Raises:
        FrontmetaError: The CLI error matching the OS error.
    """
    if path == "-":
        return click.get_binary_stream("stdin").read()
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as exc:
        raise from_os_error(exc, where=path) from exc
