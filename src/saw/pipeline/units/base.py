# topmark:header:start
#
#   project      : Saw
#   file         : base.py
#   file_relpath : src/saw/pipeline/units/base.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Base class for pipeline units.

Concrete units override ``run()`` and, when they carry state across lines,
``reset()``. Stateless units inherit the no-op ``reset()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from saw.pipeline.outcomes import Outcome


class BaseUnit:
    """Reusable foundation for pipeline units.

    Attributes:
        keyword (str): Canonical command keyword that produces this unit.
    """

    keyword: ClassVar[str] = ""

    def run(self, line: str) -> Outcome:
        """Process one line.

        Subclasses must implement this method.

        Args:
            line (str): The input line.

        Returns:
            Outcome: The control outcome for the engine.
        """
        raise NotImplementedError(f"{type(self).__name__}.run() is not implemented")

    def reset(self) -> None:
        """Return the unit to its initial state.

        Default: no-op, for units without cross-line state.
        """

    def describe(self) -> str:
        """Return a short, human-readable description for logs.

        Returns:
            str: The canonical keyword followed by the unit's arguments.
        """
        return self.keyword
