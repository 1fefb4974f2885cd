# topmark:header:start
#
#   project      : Saw
#   file         : contracts.py
#   file_relpath : src/saw/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Type contracts for pipeline units (engine-facing).

This module defines the minimal protocol that all pipeline units must implement.
The engine dispatches on this protocol only; it never needs to know which
concrete unit it holds.

Lifecycle
---------
1) The engine calls ``unit.reset()`` when an upstream unit has entered a new
   block (see `saw.pipeline.outcomes.RestartAndContinue`).
2) The engine calls ``unit.run(line)`` unless an upstream unit short-circuited
   the line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol

if TYPE_CHECKING:
    from .outcomes import Outcome


class Unit(Protocol):
    """Protocol for a single pipeline unit.

    A unit owns its own mutable state (counters, block state) and exposes it
    only through ``run`` and ``reset``. Implementations typically subclass
    `saw.pipeline.units.base.BaseUnit`.
    """

    keyword: ClassVar[str]

    def run(self, line: str) -> Outcome:
        """Process one line and return the control outcome.

        Args:
            line (str): The input line, without its line terminator.

        Returns:
            Outcome: What the engine should do next with this line.
        """
        ...

    def reset(self) -> None:
        """Return the unit to its initial state."""
        ...

    def describe(self) -> str:
        """Return a short, human-readable description for logs."""
        ...
