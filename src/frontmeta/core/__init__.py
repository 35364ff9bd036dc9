# topmark:header:start
#
#   project      : FrontMeta
#   file         : __init__.py
#   file_relpath : src/frontmeta/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, dependency-light building blocks shared across FrontMeta.

This package hosts the enum helpers, diagnostics, exit codes, and report
formats used by both the library and the CLI.
"""

from __future__ import annotations
