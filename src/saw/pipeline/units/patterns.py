# topmark:header:start
#
#   project      : Saw
#   file         : patterns.py
#   file_relpath : src/saw/pipeline/units/patterns.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Pattern-driven units without cross-line state.

- `Filter` (``filter``/``f``): keep matching lines, drop the others.
- `Match` (``match``/``m``): run the rest of the pipeline on matching lines
  only; other lines are output unchanged.
- `Substitute` (``sub``/``s``): replace the first match.
- `SubstituteAll` (``gsub``/``gs``): replace every non-overlapping match.

Patterns are searched anywhere in the line (they are not implicitly anchored).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from saw.pipeline.outcomes import Continue, Emit
from saw.pipeline.units.base import BaseUnit

if TYPE_CHECKING:
    import re

    from saw.pipeline.outcomes import Outcome
    from saw.pipeline.template import ReplacementTemplate


@dataclass(eq=False)
class Filter(BaseUnit):
    """Drop every line that does not match ``pattern``."""

    keyword = "filter"

    pattern: re.Pattern[str]

    def run(self, line: str) -> Outcome:
        if self.pattern.search(line):
            return Continue(line)
        return Emit(None)

    def describe(self) -> str:
        return f"{self.keyword} {self.pattern.pattern!r}"


@dataclass(eq=False)
class Match(BaseUnit):
    """Skip the remaining units for lines that do not match ``pattern``.

    Unmatched lines are still output, unmodified.
    """

    keyword = "match"

    pattern: re.Pattern[str]

    def run(self, line: str) -> Outcome:
        if self.pattern.search(line):
            return Continue(line)
        return Emit(line)

    def describe(self) -> str:
        return f"{self.keyword} {self.pattern.pattern!r}"


@dataclass(eq=False)
class Substitute(BaseUnit):
    """Replace the first match of ``pattern`` with ``replacement``."""

    keyword = "sub"

    pattern: re.Pattern[str]
    replacement: ReplacementTemplate

    def run(self, line: str) -> Outcome:
        return Continue(self.pattern.sub(self.replacement.expander(), line, count=1))

    def describe(self) -> str:
        return f"{self.keyword} {self.pattern.pattern!r} {self.replacement.source!r}"


@dataclass(eq=False)
class SubstituteAll(BaseUnit):
    """Replace every non-overlapping match of ``pattern`` with ``replacement``.

    An empty match that starts where the previous match ended is not replaced,
    so ``x*`` turns ``abxd`` into ``-a-b-d-``.
    """

    keyword = "gsub"

    pattern: re.Pattern[str]
    replacement: ReplacementTemplate

    def run(self, line: str) -> Outcome:
        pieces: list[str] = []
        last_end: int | None = None
        copied: int = 0
        for match in self.pattern.finditer(line):
            start, end = match.span()
            if start == end and start == last_end:
                continue
            pieces.append(line[copied:start])
            pieces.append(self.replacement.expand(match))
            copied = last_end = end
        pieces.append(line[copied:])
        return Continue("".join(pieces))

    def describe(self) -> str:
        return f"{self.keyword} {self.pattern.pattern!r} {self.replacement.source!r}"
