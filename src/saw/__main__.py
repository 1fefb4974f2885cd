# topmark:header:start
#
#   project      : Saw
#   file         : __main__.py
#   file_relpath : src/saw/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Module entry point for running Saw via ``python -m saw``.

It delegates directly to :func:`saw.cli.main.cli`, so the module interface and
the ``saw`` console script share a single entry point.

Examples:
    Number the lines of every INI section::

        python -m saw -f settings.ini fr '^\\[' '^$' enum
"""

from __future__ import annotations

from saw.cli.main import cli

if __name__ == "__main__":
    cli()
