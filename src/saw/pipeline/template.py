# topmark:header:start
#
#   project      : Saw
#   file         : template.py
#   file_relpath : src/saw/pipeline/template.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Replacement templates for the ``sub`` and ``gsub`` commands.

Templates reference capture groups with a dollar sign:

- ``$1``, ``$name``: the longest run of ``[_0-9A-Za-z]`` after ``$`` names the
  group; an all-digit name is a group number.
- ``${name}``: explicit delimiting, e.g. ``${1}a``.
- ``$$``: a literal dollar sign.

A ``$`` that does not start a valid reference is kept literally. References to
groups that do not exist, or that did not take part in the match, expand to the
empty string. Backslashes have no special meaning.

Example:
    ```python
    import re

    pattern = re.compile(r"(?P<y>\\d{4})-(?P<m>\\d{2})-(?P<d>\\d{2})")
    template = ReplacementTemplate.parse("$m/$d/$y")
    assert pattern.sub(template.expander(), "2012-03-14") == "03/14/2012"
    ```
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable

_GROUP_REF_RE: Final[re.Pattern[str]] = re.compile(
    r"\$(?:(?P<dollar>\$)|\{(?P<braced>[^}]+)\}|(?P<bare>[_0-9A-Za-z]+))"
)


@dataclass(frozen=True, slots=True)
class GroupRef:
    """Reference to a capture group, by number or by name."""

    key: int | str

    @classmethod
    def from_name(cls, name: str) -> GroupRef:
        """Return a numeric reference for all-digit names, a named one otherwise."""
        return cls(int(name) if name.isascii() and name.isdigit() else name)

    def lookup(self, match: re.Match[str]) -> str:
        """Return the text captured by the referenced group, or ``""``.

        Args:
            match (re.Match[str]): The current match.

        Returns:
            str: The captured text; empty for unknown or non-participating groups.
        """
        pattern: re.Pattern[str] = match.re
        if isinstance(self.key, int):
            if self.key > pattern.groups:
                return ""
        elif self.key not in pattern.groupindex:
            return ""
        return match.group(self.key) or ""


@dataclass(frozen=True, slots=True)
class ReplacementTemplate:
    """A parsed replacement template.

    Attributes:
        source (str): The template as written on the command line.
        parts (tuple[str | GroupRef, ...]): Literal text and group references, in order.
    """

    source: str
    parts: tuple[str | GroupRef, ...]

    @classmethod
    def parse(cls, source: str) -> ReplacementTemplate:
        """Split ``source`` into literal text and group references.

        Parsing never fails: anything that is not a valid reference is literal text.

        Args:
            source (str): The raw template.

        Returns:
            ReplacementTemplate: The parsed template.
        """
        parts: list[str | GroupRef] = []
        literal: list[str] = []
        pos: int = 0
        for m in _GROUP_REF_RE.finditer(source):
            literal.append(source[pos : m.start()])
            pos = m.end()
            if m.group("dollar") is not None:
                literal.append("$")
                continue
            name: str = m.group("braced") if m.group("braced") is not None else m.group("bare")
            if literal:
                parts.append("".join(literal))
                literal = []
            parts.append(GroupRef.from_name(name))
        literal.append(source[pos:])
        tail: str = "".join(literal)
        if tail:
            parts.append(tail)
        return cls(source=source, parts=tuple(p for p in parts if p != ""))

    def expand(self, match: re.Match[str]) -> str:
        """Return the replacement text for one match."""
        return "".join(p if isinstance(p, str) else p.lookup(match) for p in self.parts)

    def expander(self) -> Callable[[re.Match[str]], str]:
        """Return a callable usable as the ``repl`` argument of ``Pattern.sub``.

        The callable bypasses the template syntax of ``re``, so backslashes
        in the template stay literal.

        Returns:
            Callable[[re.Match[str]], str]: The expansion function.
        """
        if all(isinstance(p, str) for p in self.parts):
            text: str = "".join(str(p) for p in self.parts)
            return lambda _m: text
        return self.expand

    def __str__(self) -> str:
        return self.source
