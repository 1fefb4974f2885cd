# topmark:header:start
#
#   project      : Saw
#   file         : keys.py
#   file_relpath : src/saw/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Canonical TOML section and key names for Saw configuration.

Keys defined here are the external configuration API used in ``saw.toml`` and
in ``[tool.saw]`` inside ``pyproject.toml``. Renaming or removing a key is a
breaking change. CLI option names are kept separate (see `saw.cli.main`).
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Saw configuration."""

    # [input]
    SECTION_INPUT: Final[str] = "input"

    KEY_ENCODING: Final[str] = "encoding"
    KEY_ENCODING_ERRORS: Final[str] = "errors"


class ArgKey:
    """Keys of the arguments mapping accepted by `MutableConfig.apply_cli_args`."""

    INPUT_FILE: Final[str] = "input_file"
    ENCODING: Final[str] = "encoding"
    ENCODING_ERRORS: Final[str] = "encoding_errors"
