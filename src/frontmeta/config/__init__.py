# topmark:header:start
#
#   project      : FrontMeta
#   file         : __init__.py
#   file_relpath : src/frontmeta/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-level configuration for FrontMeta (logging setup).

The sync-tool configuration model lives in [`frontmeta.sync`][frontmeta.sync].
"""

from __future__ import annotations

from .logging import (
    TRACE_LEVEL,
    FrontmetaLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)

__all__: list[str] = [
    "TRACE_LEVEL",
    "FrontmetaLogger",
    "get_logger",
    "resolve_env_log_level",
    "setup_logging",
]
