# topmark:header:start
#
#   project      : Saw
#   file         : __init__.py
#   file_relpath : src/saw/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Saw pipeline: control outcomes, units and the line-folding engine.

Layout:
  - `saw.pipeline.outcomes`: per-unit control outcomes.
  - `saw.pipeline.ranges`: open ranges and selector atoms.
  - `saw.pipeline.template`: replacement templates for substitutions.
  - `saw.pipeline.units`: one unit type per command.
  - `saw.pipeline.engine`: the `Pipeline` that folds lines through the units.
"""

from __future__ import annotations

from saw.pipeline.engine import Pipeline, run_lines

__all__ = ["Pipeline", "run_lines"]
