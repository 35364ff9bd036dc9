# topmark:header:start
#
#   project      : FrontMeta
#   file         : __main__.py
#   file_relpath : src/frontmeta/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running FrontMeta via ``python -m frontmeta``.

Delegates to :func:`frontmeta.cli.main.cli`, the same entry point as the
``frontmeta`` console script.

Examples:
    Detect the format of a data file::

        python -m frontmeta detect data/authors.yml
"""

from __future__ import annotations

from frontmeta.cli.main import cli

if __name__ == "__main__":
    cli()
