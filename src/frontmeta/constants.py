# topmark:header:start
#
#   project      : FrontMeta
#   file         : constants.py
#   file_relpath : src/frontmeta/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FrontMeta Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    FRONTMETA_VERSION: str = get_version("frontmeta")
except PackageNotFoundError:  # running from a source checkout
    FRONTMETA_VERSION = "0.0.0+unknown"
