# topmark:header:start
#
#   project      : Saw
#   file         : keywords.py
#   file_relpath : src/saw/grammar/keywords.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Canonical command keywords and their aliases.

This module is the single source of truth for the words that start a command in
a Saw program. The first alias of each tuple is the canonical keyword (the one
reported by `saw.pipeline.units.base.BaseUnit.keyword`).

Notes:
    - Aliases are matched exactly (case-sensitive): ``F`` selects fields while
      ``f`` is a filter.
    - Renaming or removing an alias is a breaking change for user scripts.
"""

from __future__ import annotations

from typing import Final


class Keywords:
    """Alias tuples for every Saw command, canonical keyword first."""

    ENUMERATE: Final[tuple[str, ...]] = ("enumerate", "enum", "e", "#")
    FILTER: Final[tuple[str, ...]] = ("filter", "f")
    MATCH: Final[tuple[str, ...]] = ("match", "m")
    SUB: Final[tuple[str, ...]] = ("sub", "s")
    GSUB: Final[tuple[str, ...]] = ("gsub", "gs")
    MATCH_RANGE: Final[tuple[str, ...]] = ("match-range", "mr")
    FILTER_RANGE: Final[tuple[str, ...]] = ("filter-range", "fr")
    LINES: Final[tuple[str, ...]] = ("lines", "line", "l")
    FIELDS: Final[tuple[str, ...]] = ("fields", "F")
