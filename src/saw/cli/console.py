# topmark:header:start
#
#   project      : Saw
#   file         : console.py
#   file_relpath : src/saw/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Click-backed console for the command listing and error messages."""

from __future__ import annotations

import click


class ClickConsole:
    """Write listings to stdout and errors to stderr through Click.

    Args:
        enable_color (bool): Emit ANSI styles; ``--no-color`` turns this off.
    """

    def __init__(self, *, enable_color: bool = True) -> None:
        self.enable_color: bool = enable_color

    def print(self, text: str = "") -> None:
        click.echo(text, color=self.enable_color)

    def error(self, text: str) -> None:
        click.secho(text, err=True, fg="bright_red", color=self.enable_color)

    def styled(self, text: str, *, bold: bool = False) -> str:
        if not self.enable_color:
            return text
        return click.style(text, bold=bold)
