# topmark:header:start
#
#   project      : FrontMeta
#   file         : keys.py
#   file_relpath : src/frontmeta/sync/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical file names and keys for the sync-tool configuration.

Keys defined here are the *external configuration API*: they must match the
user-facing keys in ``config.json`` / ``config.yaml`` exactly, and renaming or
removing one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class SyncKeys:
    """Keys of the sync configuration mapping (camelCase, as written in config files)."""

    KEY_TOKEN: Final[str] = "token"
    KEY_LOGIN: Final[str] = "login"
    KEY_REPO: Final[str] = "repo"
    KEY_POST_PATH: Final[str] = "postPath"
    KEY_CACHE_PATH: Final[str] = "cachePath"
    KEY_MD_FORMAT: Final[str] = "mdFormat"
    KEY_CONCURRENCY: Final[str] = "concurrency"
    KEY_ONLY_PUB: Final[str] = "onlyPub"
    KEY_ADAPTER: Final[str] = "adapter"


# Candidate config files, in lookup order. The first one that exists and
# decodes wins.
SYNC_CONFIG_FILENAMES: Final[tuple[str, ...]] = (
    "config.json",
    "config.yaml",
    "config.yml",
    "config.toml",
)
