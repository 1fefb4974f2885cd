# topmark:header:start
#
#   project      : Saw
#   file         : options.py
#   file_relpath : src/saw/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Common CLI option utilities for the Saw command.

This module centralizes reusable options (verbosity, configuration) and their
resolution logic so that the command itself stays thin.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, ParamSpec, TypeVar

import click

from saw.cli.errors import SawUsageError
from saw.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

# Program tokens may look like options (e.g. a pattern such as "-x"); once the
# first program token is seen, everything is passed through verbatim.
CONTEXT_SETTINGS: Final[dict[str, Any]] = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program verbosity from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, else the ``-v`` count.

    Raises:
        SawUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SawUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def verbosity_to_log_level(verbosity_level: int) -> int | None:
    """Map a program verbosity to a logging level.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        Otherwise ``None`` is returned and the environment decides
        (see `saw.config.logging.resolve_env_log_level`).
    """
    if verbosity_level >= 3:  # -vvv
        return TRACE_LEVEL
    if verbosity_level == 2:  # -vv
        return logging.DEBUG
    if verbosity_level == 1:  # -v
        return logging.INFO
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat up to three times for trace output.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only print the outermost error message.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` options to a command."""
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=Path),
        help="Additional TOML config file, merged after discovered ones. Repeatable.",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        help="Do not read pyproject.toml or saw.toml from the current directory.",
    )(f)
    return f


def common_input_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the input selection and decoding options to a command."""
    f = click.option(
        "-f",
        "--file",
        "input_file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read input from FILE instead of standard input.",
    )(f)
    f = click.option(
        "--encoding",
        type=str,
        default=None,
        help="Input text encoding (default: utf-8, or the configured value).",
    )(f)
    f = click.option(
        "--encoding-errors",
        type=click.Choice(
            ["strict", "replace", "ignore", "surrogateescape", "backslashreplace"]
        ),
        default=None,
        help="How to handle undecodable input (default: strict).",
    )(f)
    return f
