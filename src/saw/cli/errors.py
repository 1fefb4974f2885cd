# topmark:header:start
#
#   project      : Saw
#   file         : errors.py
#   file_relpath : src/saw/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Exceptions for the Saw CLI.

Usage:
    Raise these exceptions from the CLI to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if one is registered on the Click
    context (see `show()`); otherwise they fall back to Click's default output,
    ``Error: <message>`` on stderr.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from saw.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from saw.cli.console_api import ConsoleLike


class SawError(click.ClickException):
    """Base class for all Saw CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: object = ctx.obj if ctx is not None else None
        console: ConsoleLike | None = obj.get("console") if isinstance(obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class SawUsageError(SawError):
    """Error for an invalid program or invalid command-line options."""

    exit_code = ExitCode.USAGE_ERROR


class SawConfigError(SawError):
    """Error for configuration errors (invalid values)."""

    exit_code = ExitCode.CONFIG_ERROR


class SawFileNotFoundError(SawError):
    """Error when the input file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SawPermissionDeniedError(SawError):
    """Error for insufficient permissions on the input file."""

    exit_code = ExitCode.PERMISSION_DENIED


class SawIOError(SawError):
    """Error for I/O errors reading the input or writing the output."""

    exit_code = ExitCode.IO_ERROR


class SawEncodingError(SawError):
    """Error for input that cannot be decoded (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


class SawUnexpectedError(SawError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
