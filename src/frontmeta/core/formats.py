# topmark:header:start
#
#   project      : FrontMeta
#   file         : formats.py
#   file_relpath : src/frontmeta/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report output formats shared by FrontMeta frontends.

Not to be confused with [`frontmeta.metadecoders.Format`][frontmeta.metadecoders.Format],
which names the *data* formats FrontMeta decodes.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI reports.

    Attributes:
        TEXT: Human-friendly text output; may include ANSI color if enabled.
        JSON: A single JSON document (machine-readable, colorless).
    """

    TEXT = "text"
    JSON = "json"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats intended for machine consumption."""
    return fmt == OutputFormat.JSON
