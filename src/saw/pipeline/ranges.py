# topmark:header:start
#
#   project      : Saw
#   file         : ranges.py
#   file_relpath : src/saw/pipeline/ranges.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Open ranges and selector atoms used by the line and field selection units.

- `OpenRange`: inclusive interval where either bound may be missing.
- `FieldId`: an absolute 1-based field index, or one counted from the last field.
- `LinesAtom` / `FieldsAtom`: one comma-separated element of a ``lines`` or
  ``fields`` argument, either a single position or an open range of positions.

Line and field numbering starts at 1, so a resolved position of ``0`` never
matches anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable


class _Comparable(Protocol):
    def __le__(self, other: object, /) -> bool: ...


T = TypeVar("T")
S = TypeVar("S")
C = TypeVar("C", bound=_Comparable)


@dataclass(frozen=True, slots=True)
class OpenRange(Generic[T]):
    """Possibly unbounded range; both bounds are inclusive.

    Attributes:
        lower (T | None): Lower bound, or ``None`` for unbounded.
        upper (T | None): Upper bound, or ``None`` for unbounded.
    """

    lower: T | None = None
    upper: T | None = None

    def map(self, f: Callable[[T], S]) -> OpenRange[S]:
        """Return a new range with ``f`` applied to each present bound."""
        return OpenRange(
            lower=None if self.lower is None else f(self.lower),
            upper=None if self.upper is None else f(self.upper),
        )

    def __str__(self) -> str:
        lower: str = "" if self.lower is None else str(self.lower)
        upper: str = "" if self.upper is None else str(self.upper)
        return f"{lower}-{upper}"


def range_contains(rng: OpenRange[C], item: C) -> bool:
    """Return whether ``item`` lies within ``rng`` (bounds inclusive).

    Args:
        rng (OpenRange[C]): The range to test.
        item (C): The candidate value.

    Returns:
        bool: ``True`` if ``lower <= item <= upper`` for the present bounds.
    """
    if rng.lower is not None and not rng.lower <= item:
        return False
    if rng.upper is not None and not item <= rng.upper:
        return False
    return True


class FieldIdKind(Enum):
    """How a `FieldId` position is counted."""

    ABSOLUTE = "absolute"
    FROM_LAST = "from-last"


@dataclass(frozen=True, slots=True)
class FieldId:
    """Field index, either absolute or counted back from the last field.

    ``FieldId.from_last(1)`` is the last field, ``FieldId.from_last(2)`` the one
    before it, and so on.
    """

    kind: FieldIdKind
    index: int

    @classmethod
    def absolute(cls, index: int) -> FieldId:
        """Return a 1-based absolute field index."""
        return cls(FieldIdKind.ABSOLUTE, index)

    @classmethod
    def from_last(cls, index: int) -> FieldId:
        """Return an index counted back from the last field (1 = last)."""
        return cls(FieldIdKind.FROM_LAST, index)

    def resolve(self, last: int) -> int:
        """Return the absolute position of this index for a line with ``last`` fields.

        A from-last index that reaches before the first field resolves to ``0``,
        which matches no field.

        Args:
            last (int): Number of fields in the current line.

        Returns:
            int: The 1-based absolute position (``0`` when out of reach).
        """
        if self.kind is FieldIdKind.ABSOLUTE:
            return self.index
        if self.index <= last + 1:
            return last + 1 - self.index
        return 0

    def __str__(self) -> str:
        if self.kind is FieldIdKind.ABSOLUTE:
            return str(self.index)
        return f"(-{self.index})"


@dataclass(frozen=True, slots=True)
class LinesAtom:
    """One element of a ``lines`` selector: a single line number or a range."""

    single: int | None = None
    span: OpenRange[int] | None = None

    def contains(self, line_no: int) -> bool:
        """Return whether the 1-based ``line_no`` is selected by this atom."""
        if self.span is not None:
            return range_contains(self.span, line_no)
        return line_no == self.single

    def __str__(self) -> str:
        return str(self.span) if self.span is not None else str(self.single)


@dataclass(frozen=True, slots=True)
class FieldsAtom:
    """One element of a ``fields`` selector: a single field index or a range."""

    single: FieldId | None = None
    span: OpenRange[FieldId] | None = None

    def contains(self, position: int, last: int) -> bool:
        """Return whether the 1-based field ``position`` is selected.

        Args:
            position (int): Position of the field in the current line.
            last (int): Number of fields in the current line.

        Returns:
            bool: ``True`` if the atom selects the field.
        """
        if self.span is not None:
            return range_contains(self.span.map(lambda fid: fid.resolve(last)), position)
        if self.single is None:
            return False
        return position == self.single.resolve(last)

    def __str__(self) -> str:
        return str(self.span) if self.span is not None else str(self.single)
