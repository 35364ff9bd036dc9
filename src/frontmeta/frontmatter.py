# topmark:header:start
#
#   project      : FrontMeta
#   file         : frontmatter.py
#   file_relpath : src/frontmeta/frontmatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Split and decode the front matter of a content file.

Recognized blocks (at the very start of the file, after an optional BOM):

- YAML: a ``---`` line, the metadata, and a closing ``---`` line.
- TOML: a ``+++`` line, the metadata, and a closing ``+++`` line.
- JSON: a JSON object starting with ``{`` and ending at its matching ``}``.
- Org: a run of ``#+KEY: value`` lines. Recognized but not decodable.

A block that is never closed is not front matter: the whole text is the body.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from frontmeta.config.logging import get_logger
from frontmeta.metadecoders import (
    DEFAULT_DECODER,
    Format,
    FrontMatterType,
    UnsupportedFormatError,
    format_from_front_matter_type,
)

if TYPE_CHECKING:
    from frontmeta.config.logging import FrontmetaLogger
    from frontmeta.metadecoders import Decoder

logger: FrontmetaLogger = get_logger(__name__)

BOM: str = "\ufeff"


@dataclass(frozen=True)
class FrontMatter:
    """A content file split into its front matter and body.

    Attributes:
        kind (FrontMatterType | None): The block kind, or None when there is no front matter.
        raw (str): The metadata text without its delimiters (JSON keeps its braces).
        body (str): Everything after the block.
    """

    kind: FrontMatterType | None
    raw: str
    body: str

    @property
    def format(self) -> Format:
        """The decodable format of this block (`Format.UNSPECIFIED` if none)."""
        return format_from_front_matter_type(self.kind)


def _strip_line(line: str) -> str:
    return line.rstrip("\r\n").rstrip()


def _split_delimited(text: str, kind: FrontMatterType) -> FrontMatter | None:
    lines: list[str] = text.splitlines(keepends=True)
    for i in range(1, len(lines)):
        if _strip_line(lines[i]) == kind.marker:
            return FrontMatter(kind, "".join(lines[1:i]), "".join(lines[i + 1 :]))
    logger.debug("Unclosed %s block; treating content as body", kind.label)
    return None


def _json_object_end(text: str) -> int:
    """Return the index just past the ``}`` closing the object at ``text[0]``, or -1.

    Braces inside JSON strings are ignored; backslash escapes inside strings are skipped.
    """
    depth = 0
    in_string = False
    i: int = 0
    n: int = len(text)

    while i < n:
        ch: str = text[i]
        if in_string:
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1

    return -1


def _split_json(text: str) -> FrontMatter | None:
    end: int = _json_object_end(text)
    if end == -1:
        logger.debug("Unbalanced JSON front matter; treating content as body")
        return None
    body: str = text[end:]
    # The closing brace normally sits on its own line
    if body.startswith("\r\n"):
        body = body[2:]
    elif body.startswith("\n"):
        body = body[1:]
    return FrontMatter(FrontMatterType.JSON, text[:end], body)


def _split_org(text: str) -> FrontMatter:
    lines: list[str] = text.splitlines(keepends=True)
    n_meta: int = 0
    while n_meta < len(lines) and lines[n_meta].startswith(FrontMatterType.ORG.marker):
        n_meta += 1
    return FrontMatter(FrontMatterType.ORG, "".join(lines[:n_meta]), "".join(lines[n_meta:]))


def split_front_matter(text: str) -> FrontMatter:
    """Split ``text`` into front matter and body.

    Args:
        text (str): The full content file.

    Returns:
        FrontMatter: The split result; ``kind`` is None when no front matter was found.
    """
    content: str = text[1:] if text.startswith(BOM) else text
    first_line: str = _strip_line(content.split("\n", 1)[0])

    split: FrontMatter | None = None
    if first_line in (FrontMatterType.YAML.marker, FrontMatterType.TOML.marker):
        kind: FrontMatterType | None = FrontMatterType.from_marker(first_line)
        if kind is not None:
            split = _split_delimited(content, kind)
    elif content.startswith(FrontMatterType.JSON.marker):
        split = _split_json(content)
    elif content.startswith(FrontMatterType.ORG.marker):
        split = _split_org(content)

    if split is None:
        return FrontMatter(None, "", text)
    logger.trace("Found %s (%d characters)", split.kind, len(split.raw))
    return split


def parse_front_matter(
    text: str,
    decoder: Decoder = DEFAULT_DECODER,
) -> tuple[dict[str, Any], str]:
    """Split ``text`` and decode its front matter.

    Args:
        text (str): The full content file.
        decoder (Decoder): The decoder to use.

    Returns:
        tuple[dict[str, Any], str]: The decoded metadata (empty when there is no
        front matter) and the body.

    Raises:
        UnsupportedFormatError: If the block kind cannot be decoded (e.g. Org).
        ParseFailureError: If the block does not parse.
    """
    fm: FrontMatter = split_front_matter(text)
    if fm.kind is None:
        return {}, fm.body

    fmt: Format = fm.format
    if not fmt:
        raise UnsupportedFormatError(fm.kind)
    return decoder.decode_to_mapping(fm.raw, fmt), fm.body
