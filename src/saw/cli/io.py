# topmark:header:start
#
#   project      : Saw
#   file         : io.py
#   file_relpath : src/saw/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Line input and output for the Saw CLI.

Input is read as bytes and decoded with the configured encoding and error
policy. Lines are split on ``\\n`` only; the terminator (``\\n`` or ``\\r\\n``)
is removed before a line enters the pipeline. Output lines are encoded with
the same encoding and policy and terminated with ``\\n``.
"""

from __future__ import annotations

import io
from contextlib import contextmanager
from typing import IO, TYPE_CHECKING

import click

from saw.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from saw.config.logging import SawLogger

logger: SawLogger = get_logger(__name__)


def strip_line_terminator(line: str) -> str:
    """Remove a trailing ``\\n`` or ``\\r\\n`` from ``line``."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


@contextmanager
def open_input(path: Path | None) -> Iterator[IO[bytes]]:
    """Open the binary input stream: ``path`` if given, else standard input.

    Standard input is never closed.

    Raises:
        OSError: If ``path`` cannot be opened.
    """
    if path is None:
        logger.debug("Reading input from stdin")
        yield click.get_binary_stream("stdin")
        return

    logger.debug("Reading input from %s", path)
    with path.open("rb") as fh:
        yield fh


def iter_lines(stream: IO[bytes], *, encoding: str, errors: str) -> Iterator[str]:
    """Decode ``stream`` and yield its lines without terminators.

    Args:
        stream (IO[bytes]): Binary input stream.
        encoding (str): Text encoding.
        errors (str): Codec error policy.

    Yields:
        str: One line at a time.

    Raises:
        UnicodeDecodeError: With the ``strict`` policy, on undecodable input.
    """
    reader = io.TextIOWrapper(stream, encoding=encoding, errors=errors, newline="\n")
    try:
        for line in reader:
            yield strip_line_terminator(line)
    finally:
        reader.detach()


def write_lines(lines: Iterable[str], stream: IO[bytes], *, encoding: str, errors: str) -> int:
    """Encode and write ``lines`` to ``stream``, each followed by ``\\n``.

    Args:
        lines (Iterable[str]): Lines to write, without terminators.
        stream (IO[bytes]): Binary output stream.
        encoding (str): Text encoding.
        errors (str): Codec error policy.

    Returns:
        int: The number of lines written.
    """
    writer = io.TextIOWrapper(stream, encoding=encoding, errors=errors, newline="\n")
    count: int = 0
    try:
        for line in lines:
            writer.write(line)
            writer.write("\n")
            count += 1
    finally:
        writer.flush()
        writer.detach()
    logger.debug("Wrote %d line(s)", count)
    return count
