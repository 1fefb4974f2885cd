# topmark:header:start
#
#   project      : Saw
#   file         : __init__.py
#   file_relpath : src/saw/pipeline/units/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Pipeline units, one per command of the Saw language."""

from __future__ import annotations

from saw.pipeline.units.base import BaseUnit
from saw.pipeline.units.blocks import BlockState, FilterRange, MatchRange
from saw.pipeline.units.counters import Enumerate, LineSelect
from saw.pipeline.units.fields import FieldSelect
from saw.pipeline.units.patterns import Filter, Match, Substitute, SubstituteAll

__all__ = [
    "BaseUnit",
    "BlockState",
    "Enumerate",
    "FieldSelect",
    "Filter",
    "FilterRange",
    "LineSelect",
    "Match",
    "MatchRange",
    "Substitute",
    "SubstituteAll",
]
