# topmark:header:start
#
#   project      : Saw
#   file         : blocks.py
#   file_relpath : src/saw/pipeline/units/blocks.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Block detection units (``filter-range``/``fr`` and ``match-range``/``mr``).

A block starts at a line matching the start pattern and ends at the next line
matching the end pattern; both lines belong to the block. The start line itself
is never tested against the end pattern, so one pattern can serve as both the
start and the end of a block.

Entering a block returns `RestartAndContinue`, which makes the engine reset every
unit *after* this one: counters downstream restart at 1 for each block.

State machine::

    OUTSIDE --start matches--> INSIDE   (RestartAndContinue)
    INSIDE  --end matches----> OUTSIDE  (Continue, line still in the block)

Outside a block, `FilterRange` drops lines and `MatchRange` outputs them
unchanged without running the rest of the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from saw.config.logging import get_logger
from saw.pipeline.outcomes import Continue, Emit, RestartAndContinue
from saw.pipeline.units.base import BaseUnit

if TYPE_CHECKING:
    import re

    from saw.config.logging import SawLogger
    from saw.pipeline.outcomes import Outcome

logger: SawLogger = get_logger(__name__)


class BlockState(Enum):
    """Whether the previous line left a range unit inside a block."""

    OUTSIDE = "outside"
    INSIDE = "inside"


@dataclass(eq=False)
class _RangeUnit(BaseUnit):
    """Shared block state machine; subclasses decide what happens outside a block."""

    start: re.Pattern[str]
    end: re.Pattern[str]
    state: BlockState = field(default=BlockState.OUTSIDE, init=False)

    def outside(self, line: str) -> Outcome:
        """Return the outcome for a line outside any block."""
        raise NotImplementedError

    def run(self, line: str) -> Outcome:
        if self.state is BlockState.OUTSIDE:
            if self.start.search(line):
                self.state = BlockState.INSIDE
                logger.trace("%s: entering block at %r", self.keyword, line)
                return RestartAndContinue(line)
            return self.outside(line)

        if self.end.search(line):
            self.state = BlockState.OUTSIDE
            logger.trace("%s: leaving block at %r", self.keyword, line)
        return Continue(line)

    def reset(self) -> None:
        self.state = BlockState.OUTSIDE

    def describe(self) -> str:
        return f"{self.keyword} {self.start.pattern!r} {self.end.pattern!r}"


@dataclass(eq=False)
class FilterRange(_RangeUnit):
    """Keep only the lines inside blocks."""

    keyword = "filter-range"

    def outside(self, line: str) -> Outcome:
        return Emit(None)


@dataclass(eq=False)
class MatchRange(_RangeUnit):
    """Run the rest of the pipeline on lines inside blocks only.

    Lines outside blocks are output unchanged.
    """

    keyword = "match-range"

    def outside(self, line: str) -> Outcome:
        return Emit(line)
