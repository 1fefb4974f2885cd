# topmark:header:start
#
#   project      : Saw
#   file         : counters.py
#   file_relpath : src/saw/pipeline/units/counters.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Units that count the lines they see.

Both counters are 1-based: the first line after construction or after a reset
is line 1. Only lines that reach the unit are counted, so a counter placed after
a ``filter`` or a range counts the lines that survived it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from saw.pipeline.outcomes import Continue, Emit
from saw.pipeline.units.base import BaseUnit

if TYPE_CHECKING:
    from saw.pipeline.outcomes import Outcome
    from saw.pipeline.ranges import LinesAtom


@dataclass(eq=False)
class Enumerate(BaseUnit):
    """Prefix each line with its number and a single space."""

    keyword = "enumerate"

    current_line: int = field(default=0, init=False)

    def run(self, line: str) -> Outcome:
        self.current_line += 1
        return Continue(f"{self.current_line} {line}")

    def reset(self) -> None:
        self.current_line = 0


@dataclass(eq=False)
class LineSelect(BaseUnit):
    """Keep only the lines whose number is selected by one of ``atoms``.

    Attributes:
        atoms (tuple[LinesAtom, ...]): Selected line numbers and ranges.
        current_line (int): Number of the last line seen (0 before the first one).
    """

    keyword = "lines"

    atoms: tuple[LinesAtom, ...]
    current_line: int = field(default=0, init=False)

    def run(self, line: str) -> Outcome:
        self.current_line += 1
        if any(atom.contains(self.current_line) for atom in self.atoms):
            return Continue(line)
        return Emit(None)

    def reset(self) -> None:
        self.current_line = 0

    def describe(self) -> str:
        return f"{self.keyword} {','.join(str(a) for a in self.atoms)}"
