# topmark:header:start
#
#   project      : Saw
#   file         : outcomes.py
#   file_relpath : src/saw/pipeline/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Per-unit control outcomes for the line-folding engine.

Every unit returns exactly one of these value objects when it processes a line:

- `Continue`: hand the (possibly rewritten) line to the next unit.
- `RestartAndContinue`: hand the line on, and reset every later unit before it
  runs. Range units use this when they enter a new block.
- `Emit`: stop processing this line. ``line`` is the output line, or ``None``
  to drop the line entirely.

The engine interprets the outcomes (see `saw.pipeline.engine.Pipeline.run`);
units never inspect each other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Continue:
    """Proceed with the next unit."""

    line: str


@dataclass(frozen=True, slots=True)
class RestartAndContinue:
    """Proceed with the next unit after resetting all downstream units."""

    line: str


@dataclass(frozen=True, slots=True)
class Emit:
    """Short-circuit: skip the remaining units.

    Attributes:
        line (str | None): The line to output as-is, or ``None`` to drop it.
    """

    line: str | None


Outcome: TypeAlias = "Continue | RestartAndContinue | Emit"


def final_line(outcome: Outcome) -> str | None:
    """Convert the outcome of the last unit into the pipeline's output.

    Args:
        outcome (Outcome): The running outcome after the last unit.

    Returns:
        str | None: The line to output, or ``None`` if it was dropped.
    """
    match outcome:
        case Continue(line=line) | RestartAndContinue(line=line):
            return line
        case Emit(line=line):
            return line
