# topmark:header:start
#
#   project      : FrontMeta
#   file         : __init__.py
#   file_relpath : src/frontmeta/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FrontMeta package.

FrontMeta detects and decodes the structured metadata (JSON, YAML, TOML) of a
static-site build: data files and content front matter. It also loads the
sync-tool configuration and exposes everything through a small CLI.
"""

from __future__ import annotations
