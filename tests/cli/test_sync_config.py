# topmark:header:start
#
#   project      : FrontMeta
#   file         : test_sync_config.py
#   file_relpath : tests/cli/test_sync_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `sync-config` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from frontmeta.cli.commands.sync_config import mask_token
from frontmeta.core.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@parametrize(
    "token, expected",
    [("", ""), ("abc", "****"), ("abcd", "****"), ("abcdefgh", "****efgh")],
)
def test_mask_token(token: str, expected: str) -> None:
    """Only the last four characters of long tokens stay visible."""
    assert mask_token(token) == expected


@mark_cli
def test_sync_config_defaults(tmp_path: Path) -> None:
    """Without a config file the defaults are shown."""
    result: Result = run_cli_in(tmp_path, ["sync-config", "--format", "json"])

    assert_SUCCESS(result)
    payload: dict[str, Any] = json.loads(result.output)
    assert payload["source"] is None
    assert payload["namespace"] == "/"
    assert payload["config"]["postPath"] == "yuque"
    assert payload["config"]["concurrency"] == 5
    assert payload["diagnostics"] == []


@mark_cli
def test_sync_config_masks_token(tmp_path: Path) -> None:
    """The token is masked unless `--show-token` is given."""
    (tmp_path / "config.json").write_text(
        '{"token": "s3cr3t-token", "login": "me", "repo": "notes"}', encoding="utf-8"
    )

    masked: Result = run_cli_in(tmp_path, ["sync-config", "--format", "json"])
    shown: Result = run_cli_in(tmp_path, ["sync-config", "--format", "json", "--show-token"])

    assert_SUCCESS(masked)
    assert_SUCCESS(shown)
    assert json.loads(masked.output)["config"]["token"] == "****oken"
    assert json.loads(shown.output)["config"]["token"] == "s3cr3t-token"
    assert json.loads(masked.output)["namespace"] == "me/notes"


@mark_cli
def test_sync_config_text(tmp_path: Path) -> None:
    """The text report lists the source, each key and the namespace."""
    (tmp_path / "config.yaml").write_text("login: me\nrepo: notes\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["--no-color", "sync-config"])

    assert_SUCCESS(result)
    assert "config.yaml" in result.output
    assert "mdFormat" in result.output
    assert "namespace   = me/notes" in result.output


@mark_cli
def test_sync_config_dir_option(tmp_path: Path) -> None:
    """`--dir` points at another directory."""
    site: Path = tmp_path / "site"
    site.mkdir()
    (site / "config.toml").write_text('repo = "blog"\n', encoding="utf-8")

    result: Result = run_cli(["sync-config", "--dir", str(site), "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.output)["config"]["repo"] == "blog"


@mark_cli
def test_sync_config_diagnostics_and_strict(tmp_path: Path) -> None:
    """Warnings are reported; `--strict` turns them into a config error."""
    (tmp_path / "config.json").write_text('{"concurrency": "lots"}', encoding="utf-8")

    lenient: Result = run_cli_in(tmp_path, ["sync-config", "--format", "json"])
    strict: Result = run_cli_in(tmp_path, ["sync-config", "--strict", "--format", "json"])

    assert_SUCCESS(lenient)
    diagnostics: list[dict[str, str]] = json.loads(lenient.output)["diagnostics"]
    assert [d["level"] for d in diagnostics] == ["warning"]
    assert "concurrency" in diagnostics[0]["message"]
    assert_exit(strict, ExitCode.CONFIG_ERROR)
