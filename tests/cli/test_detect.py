# topmark:header:start
#
#   project      : FrontMeta
#   file         : test_detect.py
#   file_relpath : tests/cli/test_detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `detect` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from frontmeta.core.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_detect_by_extension(tmp_path: Path) -> None:
    """Known extensions are reported without reading the content."""
    (tmp_path / "a.yml").write_text("{not: yaml-looking}", encoding="utf-8")
    (tmp_path / "b.TOML").write_text("", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["detect", "a.yml", "b.TOML"])

    assert_SUCCESS(result)
    assert result.output.splitlines() == ["a.yml: yaml (extension)", "b.TOML: toml (extension)"]


@mark_cli
def test_detect_falls_back_to_content(tmp_path: Path) -> None:
    """Files with an unknown extension are sniffed."""
    (tmp_path / "front.md").write_text("title: x\n", encoding="utf-8")
    (tmp_path / "data.txt").write_text('{"a": 1}', encoding="utf-8")
    (tmp_path / "plain").write_text("nothing here", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["detect", "front.md", "data.txt", "plain"])

    assert_SUCCESS(result)
    assert result.output.splitlines() == [
        "front.md: yaml (content)",
        "data.txt: json (content)",
        "plain: unspecified (content)",
    ]


@mark_cli
def test_detect_sniff_ignores_extension(tmp_path: Path) -> None:
    """`--sniff` classifies from content even when the extension is known."""
    (tmp_path / "misnamed.json").write_text("key = 'value'\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["detect", "--sniff", "misnamed.json"])

    assert_SUCCESS(result)
    assert result.output.strip() == "misnamed.json: toml (content)"


@mark_cli
def test_detect_json_report(tmp_path: Path) -> None:
    """`--format json` emits one record per path."""
    (tmp_path / "c.json").write_text("{}", encoding="utf-8")
    (tmp_path / "d").write_text("x", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["detect", "--format", "json", "c.json", "d"])

    assert_SUCCESS(result)
    payload: list[dict[str, Any]] = json.loads(result.output)
    assert payload == [
        {"path": "c.json", "format": "json", "source": "extension"},
        {"path": "d", "format": None, "source": "content"},
    ]


@mark_cli
def test_detect_stdin() -> None:
    """`-` reads standard input and always sniffs."""
    result: Result = run_cli(["detect", "-"], input_text="a = 1\n")

    assert_SUCCESS(result)
    assert result.output.strip() == "-: toml (content)"


@mark_cli
def test_detect_missing_file(tmp_path: Path) -> None:
    """A missing file whose format needs sniffing exits with FILE_NOT_FOUND."""
    result: Result = run_cli_in(tmp_path, ["detect", "absent.txt"])

    assert_exit(result, ExitCode.FILE_NOT_FOUND)
    assert "absent.txt" in result.output


@mark_cli
def test_detect_requires_paths() -> None:
    """At least one path is required."""
    result: Result = run_cli(["detect"])

    assert result.exit_code == 2
