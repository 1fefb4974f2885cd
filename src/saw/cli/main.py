# topmark:header:start
#
#   project      : Saw
#   file         : main.py
#   file_relpath : src/saw/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Click entry point for Saw.

``saw [OPTIONS] PROGRAM...`` compiles PROGRAM into a pipeline, then streams the
input (standard input or ``--file``) through it line by line. Options must come
before the program; from the first program token on, every token is passed to
the compiler verbatim, including tokens that start with ``-``.

A program that does not compile is reported before any input is read, with the
full context chain of the failure on stderr.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from saw.cli.console import ClickConsole
from saw.cli.errors import (
    SawConfigError,
    SawEncodingError,
    SawFileNotFoundError,
    SawIOError,
    SawPermissionDeniedError,
    SawUnexpectedError,
    SawUsageError,
)
from saw.cli.io import iter_lines, open_input, write_lines
from saw.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_input_options,
    common_verbose_options,
    resolve_verbosity,
    verbosity_to_log_level,
)
from saw.config.keys import ArgKey
from saw.config.logging import get_logger, resolve_env_log_level, setup_logging
from saw.config.model import Config, MutableConfig
from saw.constants import SAW_VERSION
from saw.grammar.compiler import COMMAND_SPECS, compile_program
from saw.grammar.errors import ParseError, error_chain, format_error_chain
from saw.pipeline.engine import run_lines

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from saw.cli.console_api import ConsoleLike
    from saw.config.logging import SawLogger
    from saw.pipeline.engine import Pipeline

logger: SawLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    verbosity_level: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbosity_level

    # -v flags win over the environment
    log_level: int | None = verbosity_to_log_level(verbosity_level)
    if log_level is None:
        log_level = resolve_env_log_level()
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    ctx.color = False if no_color else None
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


def print_command_table(console: ConsoleLike) -> None:
    """Print every command with its aliases, arguments and summary."""
    for spec in COMMAND_SPECS:
        usage: str = " ".join((spec.keyword, *spec.arguments))
        aliases: str = ", ".join(spec.aliases[1:])
        usage_cell: str = console.styled(usage.ljust(32), bold=True)
        console.print(f"{usage_cell} {spec.summary}")
        if aliases:
            console.print(f"    aliases: {aliases}")


def compile_or_fail(program: Sequence[str], *, quiet: bool) -> Pipeline:
    """Compile ``program`` or raise a `SawUsageError` describing why it failed.

    Args:
        program (Sequence[str]): The program tokens.
        quiet (bool): Only report the outermost message.

    Returns:
        Pipeline: The compiled pipeline.

    Raises:
        SawUsageError: If the program does not compile.
    """
    try:
        return compile_program(program)
    except ParseError as exc:
        logger.debug("Compilation failed: %s", error_chain(exc))
        message: str = error_chain(exc)[0] if quiet else format_error_chain(exc)
        raise SawUsageError(message) from exc


def build_config(
    *,
    input_file: Path | None,
    encoding: str | None,
    encoding_errors: str | None,
    config_paths: tuple[Path, ...],
    no_config: bool,
) -> Config:
    """Merge the configuration layers and the CLI options into a `Config`.

    Raises:
        SawConfigError: If a ``--config`` file is missing or a value is invalid.
    """
    for path in config_paths:
        if not path.is_file():
            raise SawConfigError(f"Config file not found: {path}")

    draft: MutableConfig = MutableConfig.load_merged(
        extra_config_files=config_paths,
        no_config=no_config,
    )
    draft.apply_cli_args(
        {
            ArgKey.INPUT_FILE: input_file,
            ArgKey.ENCODING: encoding,
            ArgKey.ENCODING_ERRORS: encoding_errors,
        }
    )
    try:
        config: Config = draft.freeze()
    except ValueError as exc:
        raise SawConfigError(str(exc)) from exc
    logger.debug("Effective config: %s", config)
    logger.info("Config sources: %s", ", ".join(str(src) for src in config.config_files))
    return config


def run_pipeline(pipeline: Pipeline, config: Config) -> int:
    """Stream the configured input through ``pipeline`` to standard output.

    Returns:
        int: The number of lines written.

    Raises:
        SawFileNotFoundError: If the input file does not exist.
        SawPermissionDeniedError: If the input file cannot be read.
        SawEncodingError: If the input cannot be decoded.
        SawIOError: On any other I/O failure.
        SawUnexpectedError: On any other failure while streaming.
    """
    source: str = str(config.input_file) if config.input_file else "<stdin>"
    try:
        with open_input(config.input_file) as stream:
            lines = iter_lines(
                stream, encoding=config.encoding, errors=config.encoding_errors
            )
            return write_lines(
                run_lines(pipeline, lines),
                click.get_binary_stream("stdout"),
                encoding=config.encoding,
                errors=config.encoding_errors,
            )
    except FileNotFoundError as exc:
        raise SawFileNotFoundError(f"No such file: {source}") from exc
    except PermissionError as exc:
        raise SawPermissionDeniedError(f"Permission denied: {source}") from exc
    except IsADirectoryError as exc:
        raise SawIOError(f"Is a directory: {source}") from exc
    except (UnicodeDecodeError, UnicodeEncodeError) as exc:
        raise SawEncodingError(
            f"Cannot process {source} as {config.encoding}: {exc.reason}"
        ) from exc
    except OSError as exc:
        raise SawIOError(f"I/O error on {source}: {exc.strerror or exc}") from exc
    except Exception as exc:
        logger.debug("Unexpected error processing %s", source, exc_info=True)
        raise SawUnexpectedError(
            f"Unexpected error processing {source}: {exc} (use -vv for traceback)"
        ) from exc


@click.command(
    context_settings=CONTEXT_SETTINGS,
    help=(
        "Transform lines of text with a small command language.\n\n"
        "PROGRAM is a sequence of commands, each a keyword followed by its "
        "arguments, e.g. `saw match '^key' gsub '\\s+' ' ' fields 2-`. "
        "Use --list-commands to see all keywords."
    ),
)
@common_input_options
@common_config_options
@common_verbose_options
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.option(
    "--list-commands",
    is_flag=True,
    help="List the available commands and exit.",
)
@click.version_option(SAW_VERSION, "--version", prog_name="saw", message="%(prog)s %(version)s")
@click.argument("program", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(
    ctx: click.Context,
    program: tuple[str, ...],
    input_file: Path | None,
    encoding: str | None,
    encoding_errors: str | None,
    config_paths: tuple[Path, ...],
    no_config: bool,
    verbose: int,
    quiet: int,
    no_color: bool,
    list_commands: bool,
) -> None:
    """Entry point for the Saw CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if list_commands:
        print_command_table(console)
        return

    if not program:
        raise SawUsageError("Missing argument 'PROGRAM...'.")

    verbosity_level: int = ctx.obj["verbosity_level"]
    pipeline: Pipeline = compile_or_fail(program, quiet=verbosity_level < 0)

    config: Config = build_config(
        input_file=input_file,
        encoding=encoding,
        encoding_errors=encoding_errors,
        config_paths=config_paths,
        no_config=no_config,
    )

    written: int = run_pipeline(pipeline, config)
    logger.info("Done: %d line(s) written", written)


if __name__ == "__main__":
    cli()
