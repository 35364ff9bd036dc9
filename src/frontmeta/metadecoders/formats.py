# topmark:header:start
#
#   project      : FrontMeta
#   file         : formats.py
#   file_relpath : src/frontmeta/metadecoders/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Metadata format vocabulary and format resolution.

A `Format` is resolved from one of three sources:

- a filename or bare extension (`format_from_string`),
- a front-matter marker kind (`format_from_front_matter_type`),
- the raw content itself (`format_from_content`), a cheap heuristic that
  never parses.

Resolution never raises: an unknown input yields `Format.UNSPECIFIED`, which
is falsy so callers can write ``if not fmt: ...``.
"""

from __future__ import annotations

import os
from typing import Final

from frontmeta.core.enum_mixins import KeyedStrEnum


class Format(KeyedStrEnum):
    """Supported metadata formats.

    Aliases hold the file extensions that map onto each format.
    """

    JSON = ("json", "JSON", ("json",))
    TOML = ("toml", "TOML", ("toml",))
    YAML = ("yaml", "YAML", ("yaml", "yml"))
    UNSPECIFIED = ("", "unspecified")

    @property
    def is_specified(self) -> bool:
        """True for JSON, TOML and YAML."""
        return self is not Format.UNSPECIFIED


class FrontMatterType(KeyedStrEnum):
    """Front matter kinds, keyed by name with their opening delimiter as alias."""

    YAML = ("yaml", "YAML front matter", ("---",))
    TOML = ("toml", "TOML front matter", ("+++",))
    JSON = ("json", "JSON front matter", ("{",))
    ORG = ("org", "Org-mode front matter", ("#+",))

    @property
    def marker(self) -> str:
        """The delimiter that opens a block of this kind."""
        return self.aliases[0]

    @classmethod
    def from_marker(cls, marker: str) -> FrontMatterType | None:
        """Return the kind opened by ``marker`` (e.g. ``"+++"``), or None."""
        for member in cls:
            if member.marker == marker:
                return member
        return None


_FRONT_MATTER_FORMATS: Final[dict[FrontMatterType, Format]] = {
    FrontMatterType.JSON: Format.JSON,
    FrontMatterType.TOML: Format.TOML,
    FrontMatterType.YAML: Format.YAML,
}

_SEPARATORS: Final[tuple[str, ...]] = ("/", os.sep) + ((os.altsep,) if os.altsep else ())


def _extension(name: str) -> str:
    """Return the text after the last dot of the last path element, or ""."""
    base: str = name
    for sep in _SEPARATORS:
        base = base.rpartition(sep)[2]
    _, dot, ext = base.rpartition(".")
    return ext if dot else ""


def format_from_string(format_str: str) -> Format:
    """Turn a file extension or filename into a `Format`.

    ``format_str`` is typically an extension without the dot (``"yml"``) or a
    filename (``"config.TOML"``). Matching is case-insensitive.

    Args:
        format_str (str): Extension or filename.

    Returns:
        Format: The matching format, or `Format.UNSPECIFIED` for unknown input.
    """
    token: str = format_str.lower()
    if "." in token:
        token = _extension(token)
    if not token:
        return Format.UNSPECIFIED

    for member in Format:
        if token in member.aliases:
            return member
    return Format.UNSPECIFIED


def format_from_front_matter_type(kind: FrontMatterType | str | None) -> Format:
    """Map a front matter kind (or its raw marker, e.g. ``"+++"``) to a `Format`.

    Returns:
        Format: The matching format, or `Format.UNSPECIFIED` if the kind is not decodable.
    """
    if kind is None:
        return Format.UNSPECIFIED
    if not isinstance(kind, FrontMatterType):
        resolved: FrontMatterType | None = FrontMatterType.from_marker(kind)
        if resolved is None:
            return Format.UNSPECIFIED
        kind = resolved
    return _FRONT_MATTER_FORMATS.get(kind, Format.UNSPECIFIED)


def _is_lower_index_than(first: int, *others: int) -> bool:
    """True if ``first`` is found and no found index in ``others`` precedes it."""
    if first == -1:
        return False
    return all(other == -1 or other >= first for other in others)


def format_from_content(data: str) -> Format:
    """Guess the format (JSON, YAML or TOML) of ``data`` without parsing it.

    The first ``{`` suggests JSON, the first ``:`` YAML and the first ``=``
    TOML; the earliest marker wins, with ties resolved JSON > YAML > TOML.
    This is a best-effort heuristic: a YAML document whose first line holds
    an inline ``{...}`` mapping is classified as JSON, and malformed content
    is only caught when decoding.

    Args:
        data (str): Raw content.

    Returns:
        Format: The guessed format, or `Format.UNSPECIFIED` if no marker was found.
    """
    json_idx: int = data.find("{")
    yaml_idx: int = data.find(":")
    toml_idx: int = data.find("=")

    if _is_lower_index_than(json_idx, yaml_idx, toml_idx):
        return Format.JSON
    if _is_lower_index_than(yaml_idx, toml_idx):
        return Format.YAML
    if toml_idx != -1:
        return Format.TOML
    return Format.UNSPECIFIED
