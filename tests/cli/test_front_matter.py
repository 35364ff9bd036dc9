# topmark:header:start
#
#   project      : FrontMeta
#   file         : test_front_matter.py
#   file_relpath : tests/cli/test_front_matter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `front-matter` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import yaml

from frontmeta.core.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

POST = "+++\ntitle = \"Hello\"\ntags = [\"a\"]\n+++\nBody line.\n"


@mark_cli
def test_front_matter_as_json(tmp_path: Path) -> None:
    """The decoded metadata is printed as JSON by default."""
    (tmp_path / "post.md").write_text(POST, encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["front-matter", "post.md"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"title": "Hello", "tags": ["a"]}


@mark_cli
def test_front_matter_as_yaml_with_body(tmp_path: Path) -> None:
    """`--body` appends the content body after a blank line."""
    (tmp_path / "post.md").write_text(POST, encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["front-matter", "post.md", "--to", "yaml", "--body"])

    assert_SUCCESS(result)
    meta_text, _, body = result.output.partition("\n\n")
    assert yaml.safe_load(meta_text) == {"title": "Hello", "tags": ["a"]}
    assert body == "Body line.\n"


@mark_cli
def test_front_matter_missing_block() -> None:
    """Content without front matter yields an empty mapping."""
    result: Result = run_cli(["front-matter", "-"], input_text="Only a body.\n")

    assert_SUCCESS(result)
    assert json.loads(result.output) == {}


@mark_cli
def test_front_matter_org_is_unsupported() -> None:
    """Org metadata is recognised but not decodable."""
    result: Result = run_cli(["front-matter", "-"], input_text="#+TITLE: x\nBody\n")

    assert_exit(result, ExitCode.UNSUPPORTED_FORMAT)


@mark_cli
def test_front_matter_parse_error() -> None:
    """A malformed block exits with DATA_ERROR."""
    result: Result = run_cli(["front-matter", "-"], input_text="---\na: [1\n---\n")

    assert_exit(result, ExitCode.DATA_ERROR)


@mark_cli
def test_front_matter_invalid_utf8() -> None:
    """Undecodable bytes exit with DATA_ERROR."""
    result: Result = run_cli(["front-matter", "-"], input_text=b"---\n\xff\n---\n")

    assert_exit(result, ExitCode.DATA_ERROR)
