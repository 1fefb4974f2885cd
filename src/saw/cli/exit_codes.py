# topmark:header:start
#
#   project      : Saw
#   file         : exit_codes.py
#   file_relpath : src/saw/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Exit codes for the Saw CLI.

Saw aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently. An invalid program is a usage error: it is
reported before any input is read.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Saw CLI.

    Attributes:
        SUCCESS: All input was processed.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Invalid program or option misuse. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: The input could not be decoded with the configured
            encoding. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: The input file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading the input or writing the output. Mirrors BSD
            ``EX_IOERR (74)``.
        PERMISSION_DENIED: The input file cannot be read. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid configuration value. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
