# topmark:header:start
#
#   project      : Saw
#   file         : fields.py
#   file_relpath : src/saw/pipeline/units/fields.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Field selection unit (``fields``/``F``).

A line is split on single spaces and empty fragments are discarded, so runs of
spaces act as one separator. Selected fields are joined back with single spaces
in their original order. The line is never dropped: selecting nothing yields an
empty line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from saw.pipeline.outcomes import Continue
from saw.pipeline.units.base import BaseUnit

if TYPE_CHECKING:
    from saw.pipeline.outcomes import Outcome
    from saw.pipeline.ranges import FieldsAtom

FIELD_SEPARATOR: str = " "


def split_fields(line: str) -> list[str]:
    """Return the non-empty, space-separated fields of ``line``."""
    return [f for f in line.split(FIELD_SEPARATOR) if f]


@dataclass(eq=False)
class FieldSelect(BaseUnit):
    """Keep only the fields selected by one of ``atoms``."""

    keyword = "fields"

    atoms: tuple[FieldsAtom, ...]

    def contains(self, position: int, last: int) -> bool:
        """Return whether the 1-based ``position`` is selected for a line of ``last`` fields."""
        return any(atom.contains(position, last) for atom in self.atoms)

    def run(self, line: str) -> Outcome:
        fields: list[str] = split_fields(line)
        count: int = len(fields)
        kept: list[str] = [
            f for position, f in enumerate(fields, start=1) if self.contains(position, count)
        ]
        return Continue(FIELD_SEPARATOR.join(kept))

    def describe(self) -> str:
        return f"{self.keyword} {','.join(str(a) for a in self.atoms)}"
