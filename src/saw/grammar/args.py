# topmark:header:start
#
#   project      : Saw
#   file         : args.py
#   file_relpath : src/saw/grammar/args.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Parsers for individual command arguments.

Each parser takes one raw token and either returns the parsed value or raises a
`saw.grammar.errors.ParseError`. Parsers always consume the whole token.

Selector grammar (``lines`` and ``fields``):

    list     := "" | atom ("," atom)*
    atom     := bound? "-" bound? | bound
    bound    := NUMBER                   (lines and fields)
              | "(-" NUMBER ")"          (fields only: counted from the last field)
"""

from __future__ import annotations

import re
import sys
from typing import TYPE_CHECKING, Final

from saw.config.logging import get_logger
from saw.grammar.errors import InvalidSpecError, PatternError
from saw.pipeline.ranges import FieldId, FieldsAtom, LinesAtom, OpenRange
from saw.pipeline.template import ReplacementTemplate

if TYPE_CHECKING:
    from saw.config.logging import SawLogger

logger: SawLogger = get_logger(__name__)

ATOM_SEPARATOR: Final[str] = ","

_NUMBER: Final[str] = r"[0-9]+"
_FIELD_BOUND: Final[str] = rf"{_NUMBER}|\(-{_NUMBER}\)"

_LINES_ATOM_RE: Final[re.Pattern[str]] = re.compile(
    rf"(?P<lower>{_NUMBER})?-(?P<upper>{_NUMBER})?|(?P<single>{_NUMBER})"
)
_FIELDS_ATOM_RE: Final[re.Pattern[str]] = re.compile(
    rf"(?P<lower>{_FIELD_BOUND})?-(?P<upper>{_FIELD_BOUND})?|(?P<single>{_FIELD_BOUND})"
)


def parse_pattern(token: str) -> re.Pattern[str]:
    """Compile ``token`` as a regular expression.

    Args:
        token (str): The raw pattern.

    Returns:
        re.Pattern[str]: The compiled pattern.

    Raises:
        PatternError: If the pattern does not compile. The message is the syntax
            diagnostic of ``re`` without position information, or a generic
            message naming the token when no diagnostic is available.
    """
    try:
        return re.compile(token)
    except re.error as exc:
        logger.debug("Pattern %r rejected: %s", token, exc)
        raise PatternError(exc.msg) from exc
    except OverflowError as exc:
        raise PatternError(f"Invalid regular expression: {token}") from exc


def parse_replacement(token: str) -> ReplacementTemplate:
    """Parse a replacement template (``$name``, ``${name}``, ``$1``, ``$$``)."""
    return ReplacementTemplate.parse(token)


def _split_atoms(token: str) -> list[str]:
    if token == "":
        return []
    return token.split(ATOM_SEPARATOR)


def parse_number(text: str) -> int:
    """Parse an unsigned decimal number no larger than ``sys.maxsize``.

    Raises:
        InvalidSpecError: If ``text`` is not made of ASCII digits only, or is
            out of range.
    """
    if not re.fullmatch(_NUMBER, text):
        raise InvalidSpecError(f"Not a number: {text!r}")
    digits: str = text.lstrip("0") or "0"
    if len(digits) > len(str(sys.maxsize)) or int(digits) > sys.maxsize:
        raise InvalidSpecError(f"Number too large: {text}")
    return int(digits)


def parse_field_id(text: str) -> FieldId:
    """Parse a field bound: ``N`` (absolute) or ``(-N)`` (from the last field).

    Raises:
        InvalidSpecError: If ``text`` is not a field bound.
    """
    if text.startswith("(-") and text.endswith(")"):
        return FieldId.from_last(parse_number(text[2:-1]))
    return FieldId.absolute(parse_number(text))


def parse_lines_spec(token: str) -> tuple[LinesAtom, ...]:
    """Parse the argument of ``lines``, e.g. ``1,5-8,20-``.

    Args:
        token (str): The raw argument.

    Returns:
        tuple[LinesAtom, ...]: The atoms, in the order written.

    Raises:
        InvalidSpecError: If any atom is malformed.
    """
    atoms: list[LinesAtom] = []
    for raw in _split_atoms(token):
        m: re.Match[str] | None = _LINES_ATOM_RE.fullmatch(raw)
        if m is None:
            raise InvalidSpecError(f"Malformed line selector: {raw!r}")
        if m.group("single") is not None:
            atoms.append(LinesAtom(single=parse_number(m.group("single"))))
            continue
        lower: str | None = m.group("lower")
        upper: str | None = m.group("upper")
        atoms.append(
            LinesAtom(
                span=OpenRange(
                    lower=None if lower is None else parse_number(lower),
                    upper=None if upper is None else parse_number(upper),
                )
            )
        )
    return tuple(atoms)


def parse_fields_spec(token: str) -> tuple[FieldsAtom, ...]:
    """Parse the argument of ``fields``, e.g. ``1,3-(-2)``.

    Args:
        token (str): The raw argument.

    Returns:
        tuple[FieldsAtom, ...]: The atoms, in the order written.

    Raises:
        InvalidSpecError: If any atom is malformed.
    """
    atoms: list[FieldsAtom] = []
    for raw in _split_atoms(token):
        m: re.Match[str] | None = _FIELDS_ATOM_RE.fullmatch(raw)
        if m is None:
            raise InvalidSpecError(f"Malformed field selector: {raw!r}")
        if m.group("single") is not None:
            atoms.append(FieldsAtom(single=parse_field_id(m.group("single"))))
            continue
        lower: str | None = m.group("lower")
        upper: str | None = m.group("upper")
        atoms.append(
            FieldsAtom(
                span=OpenRange(
                    lower=None if lower is None else parse_field_id(lower),
                    upper=None if upper is None else parse_field_id(upper),
                )
            )
        )
    return tuple(atoms)
