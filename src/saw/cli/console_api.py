# topmark:header:start
#
#   project      : Saw
#   file         : console_api.py
#   file_relpath : src/saw/cli/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Console protocol shared by the CLI and its exceptions.

Transformed lines bypass the console and are written as bytes by
`saw.cli.io.write_lines`; the console only carries listings and diagnostics.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """What `saw.cli.main` and `saw.cli.errors.SawError` need from a console."""

    def print(self, text: str = "") -> None:
        """Write one line of program output."""
        ...

    def error(self, text: str) -> None:
        """Write one line of diagnostics."""
        ...

    def styled(self, text: str, *, bold: bool = False) -> str:
        """Return ``text`` with emphasis, if styling is enabled."""
        ...
