# topmark:header:start
#
#   project      : FrontMeta
#   file         : sync_config.py
#   file_relpath : src/frontmeta/cli/commands/sync_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FrontMeta `sync-config` command.

Shows the effective sync-tool configuration: defaults overridden by the first
usable ``config.json`` / ``config.yaml`` / ``config.yml`` / ``config.toml`` in
the chosen directory. The API token is masked unless ``--show-token`` is given.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Final

import click

from frontmeta.cli.cli_types import EnumChoiceParam
from frontmeta.cli.cmd_common import get_console
from frontmeta.cli.errors import FrontmetaConfigError
from frontmeta.config.logging import get_logger
from frontmeta.core.diagnostics import DiagnosticLog
from frontmeta.core.formats import OutputFormat
from frontmeta.sync import SyncConfig, SyncKeys, load_sync_config

logger = get_logger(__name__)

TOKEN_MASK: Final[str] = "****"


def mask_token(token: str) -> str:
    """Hide all but the last four characters of ``token`` (empty stays empty)."""
    if not token:
        return ""
    if len(token) <= 4:
        return TOKEN_MASK
    return TOKEN_MASK + token[-4:]


def _config_payload(cfg: SyncConfig, *, show_token: bool) -> dict[str, Any]:
    values: dict[str, Any] = cfg.to_dict()
    if not show_token:
        values[SyncKeys.KEY_TOKEN] = mask_token(cfg.token)
    return values


@click.command(
    name="sync-config",
    help="Show the effective sync configuration and its namespace.",
)
@click.option(
    "--dir",
    "base_dir",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help="Directory holding the config file (default: current directory).",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.option(
    "--show-token",
    is_flag=True,
    default=False,
    help="Print the API token in clear text.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail when the configuration produced warnings.",
)
def sync_config_command(
    *,
    base_dir: Path | None = None,
    output_format: OutputFormat | None = None,
    show_token: bool = False,
    strict: bool = False,
) -> None:
    """Show the effective sync configuration.

    Args:
        base_dir (Path | None): Directory holding the config file.
        output_format (OutputFormat | None): Output format.
        show_token (bool): Print the token unmasked.
        strict (bool): Exit with a config error when warnings were recorded.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    diagnostics = DiagnosticLog()
    cfg: SyncConfig = load_sync_config(base_dir, diagnostics=diagnostics)
    values: dict[str, Any] = _config_payload(cfg, show_token=show_token)
    source: str | None = str(cfg.source) if cfg.source is not None else None

    if output_format == OutputFormat.JSON:
        payload: dict[str, Any] = {
            "config": values,
            "namespace": cfg.namespace,
            "source": source,
            "diagnostics": [
                {"level": d.level.value, "message": d.message} for d in diagnostics
            ],
        }
        console.print(json.dumps(payload, indent=2))
    else:
        console.print(console.styled(f"Source: {source or '<defaults>'}", bold=True))
        width: int = max(len(k) for k in values)
        for key, value in values.items():
            shown: str = json.dumps(value) if not isinstance(value, str) else value
            console.print(f"  {key:<{width}} = {shown}")
        console.print(f"  {'namespace':<{width}} = {cfg.namespace}")
        for d in diagnostics:
            text: str = f"[{d.level.value}] {d.message}"
            console.warn(d.level.color(text) if console.enable_color else text)

    if strict and (diagnostics.has_warning() or diagnostics.has_error()):
        raise FrontmetaConfigError(
            f"Sync configuration has {len(diagnostics)} problem(s) (--strict)"
        )
