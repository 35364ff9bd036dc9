# topmark:header:start
#
#   project      : FrontMeta
#   file         : __init__.py
#   file_relpath : src/frontmeta/sync/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sync-tool configuration: model, defaults, and file-based loading."""

from __future__ import annotations

from .config import DEFAULT_SYNC_CONFIG, SyncConfig, gen_namespace, load_sync_config
from .keys import SYNC_CONFIG_FILENAMES, SyncKeys

__all__: list[str] = [
    "DEFAULT_SYNC_CONFIG",
    "SYNC_CONFIG_FILENAMES",
    "SyncConfig",
    "SyncKeys",
    "gen_namespace",
    "load_sync_config",
]
