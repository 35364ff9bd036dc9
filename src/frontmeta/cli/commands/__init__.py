# topmark:header:start
#
#   project      : FrontMeta
#   file         : __init__.py
#   file_relpath : src/frontmeta/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FrontMeta CLI subcommands."""
