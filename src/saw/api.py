# topmark:header:start
#
#   project      : Saw
#   file         : api.py
#   file_relpath : src/saw/api.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Public API for Saw.

This module exposes a small, typed surface for using Saw from Python code
without going through the CLI.

Examples:
    ```python
    from saw import api

    api.transform(["F", "2", "enum"], ["a b", "c d"])
    # ['1 b', '2 d']

    pipeline = api.compile_program(["m", "^#", "s", "^#", ";"])
    for line in lines:
        out = pipeline.run(line)
    ```

Errors:
    `saw.grammar.errors.ParseError` is raised for invalid programs; use
    `saw.grammar.errors.format_error_chain` to render it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from saw.grammar.compiler import compile_program
from saw.pipeline.engine import Pipeline, run_lines

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

__all__ = ["Pipeline", "compile_program", "transform"]


def transform(program: Sequence[str], lines: Iterable[str]) -> list[str]:
    """Compile ``program`` and run it over ``lines``.

    Args:
        program (Sequence[str]): Program tokens, e.g. ``["filter", "^a"]``.
        lines (Iterable[str]): Input lines without line terminators.

    Returns:
        list[str]: The output lines, in input order.

    Raises:
        ParseError: If the program does not compile; no line is processed.
    """
    pipeline: Pipeline = compile_program(program)
    return list(run_lines(pipeline, lines))
