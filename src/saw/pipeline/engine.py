# topmark:header:start
#
#   project      : Saw
#   file         : engine.py
#   file_relpath : src/saw/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Line-folding engine (engine layer).

A `Pipeline` owns an ordered, immutable sequence of units and folds every
input line through them:

1. If a reset is pending, the unit is reset before anything else.
2. The running outcome of the previous unit decides what happens:
   - `Continue`: the unit runs on the line.
   - `RestartAndContinue`: a reset becomes pending for every later unit, this
     unit is reset as well, then it runs on the line.
   - `Emit`: the unit is skipped and the outcome is kept (short-circuit).
3. After the last unit the outcome becomes the output line (or ``None``).

The pending-reset flag is local to one `Pipeline.run` call. Units only ever
reset themselves when the engine asks them to; they hold no references to
each other.

Design goals:
  - No CLI dependencies: reading input and writing output are the caller's job.
  - Logging only at TRACE level inside the per-line fold.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from saw.config.logging import get_logger
from saw.pipeline.outcomes import Continue, Emit, RestartAndContinue, final_line

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from saw.config.logging import SawLogger
    from saw.pipeline.contracts import Unit
    from saw.pipeline.outcomes import Outcome

logger: SawLogger = get_logger(__name__)


class Pipeline:
    """Compiled Saw program: an ordered sequence of units.

    Args:
        units (Sequence[Unit]): The units, in execution order. The order is fixed
            for the lifetime of the pipeline.
    """

    __slots__ = ("_units",)

    def __init__(self, units: Sequence[Unit]) -> None:
        self._units: tuple[Unit, ...] = tuple(units)

    @property
    def units(self) -> tuple[Unit, ...]:
        """The units of this pipeline, in execution order."""
        return self._units

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"Pipeline({' | '.join(u.describe() for u in self._units)})"

    def run(self, line: str) -> str | None:
        """Run every unit on one input line.

        Args:
            line (str): The input line, without its line terminator.

        Returns:
            str | None: The output line, or ``None`` if the line was dropped.
        """
        pending_reset: bool = False
        outcome: Outcome = Continue(line)

        for unit in self._units:
            if pending_reset:
                unit.reset()
            match outcome:
                case Continue(line=current):
                    outcome = unit.run(current)
                case RestartAndContinue(line=current):
                    pending_reset = True
                    unit.reset()
                    outcome = unit.run(current)
                case Emit():
                    pass
            logger.trace("%s -> %r", unit.keyword, outcome)

        return final_line(outcome)

    def reset(self) -> None:
        """Reset every unit, as if no line had been processed yet."""
        for unit in self._units:
            unit.reset()


def run_lines(pipeline: Pipeline, lines: Iterable[str]) -> Iterator[str]:
    """Lazily run ``pipeline`` over ``lines`` and yield the output lines.

    Lines are processed strictly one at a time, in input order; each input line
    yields at most one output line.

    Args:
        pipeline (Pipeline): The compiled pipeline.
        lines (Iterable[str]): Input lines without line terminators.

    Yields:
        str: Output lines, in input order.
    """
    for line in lines:
        result: str | None = pipeline.run(line)
        if result is not None:
            yield result
