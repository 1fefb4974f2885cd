# topmark:header:start
#
#   project      : Saw
#   file         : compiler.py
#   file_relpath : src/saw/grammar/compiler.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Command grammar compiler: token list → `Pipeline`.

A Saw program is a flat list of tokens (usually ``argv``). Commands are read
left to right; each one starts with a keyword followed by a fixed number of
argument tokens:

    saw m '^key' gsub '\\s+' ' ' F 2-

Parsing rules:
  - Recognizing a keyword *commits* to its command: any failure while reading
    its arguments is fatal and reported under
    ``Failed parsing arguments of '<keyword>'``.
  - Argument parsers add ``Invalid argument: <token>`` context on failure.
  - A token that is not a keyword fails the whole compilation with
    ``Not a recognized keyword: <token>``.
  - Running out of tokens ends the program normally.

The command table (`COMMANDS`) maps every alias to a `CommandSpec`; it is also
used by the CLI to list the available commands.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, TypeVar

from saw.config.logging import get_logger
from saw.grammar.args import (
    parse_fields_spec,
    parse_lines_spec,
    parse_pattern,
    parse_replacement,
)
from saw.grammar.errors import (
    NoMatch,
    TrailingTokensError,
    UnknownKeywordError,
    committed,
    context,
)
from saw.grammar.keywords import Keywords
from saw.pipeline.engine import Pipeline
from saw.pipeline.units import (
    Enumerate,
    FieldSelect,
    Filter,
    FilterRange,
    LineSelect,
    Match,
    MatchRange,
    Substitute,
    SubstituteAll,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from saw.config.logging import SawLogger
    from saw.pipeline.contracts import Unit

logger: SawLogger = get_logger(__name__)

T = TypeVar("T")


class TokenStream:
    """Cursor over the program tokens.

    Args:
        tokens (Sequence[str]): The raw tokens.
    """

    __slots__ = ("_tokens", "_pos")

    def __init__(self, tokens: Sequence[str]) -> None:
        self._tokens: tuple[str, ...] = tuple(tokens)
        self._pos: int = 0

    def __bool__(self) -> bool:
        return self._pos < len(self._tokens)

    @property
    def remaining(self) -> tuple[str, ...]:
        """Tokens not consumed yet."""
        return self._tokens[self._pos :]

    def next_token(self) -> str:
        """Consume and return the next token.

        Raises:
            NoMatch: If no token is left.
        """
        if not self:
            raise NoMatch("Missing argument")
        token: str = self._tokens[self._pos]
        self._pos += 1
        return token

    def argument(self, parse: Callable[[str], T]) -> T:
        """Consume the next token and parse it with ``parse``.

        Parse failures get an ``Invalid argument: <token>`` context; a missing
        token is reported as-is.

        Args:
            parse (Callable[[str], T]): Parser for a single token.

        Returns:
            T: The parsed value.
        """
        token: str = self.next_token()
        with context(f"Invalid argument: {token}"):
            return parse(token)


@dataclass(frozen=True)
class CommandSpec:
    """Description of one command of the Saw language.

    Attributes:
        aliases (tuple[str, ...]): Keywords that select the command, canonical first.
        arguments (tuple[str, ...]): Argument names, for help output.
        summary (str): One-line description, for help output.
        build (Callable[[TokenStream], Unit]): Reads the arguments and builds the unit.
    """

    aliases: tuple[str, ...]
    arguments: tuple[str, ...]
    summary: str
    build: Callable[[TokenStream], Unit]

    @property
    def keyword(self) -> str:
        """The canonical keyword."""
        return self.aliases[0]


def _build_enumerate(stream: TokenStream) -> Unit:
    return Enumerate()


def _build_filter(stream: TokenStream) -> Unit:
    return Filter(stream.argument(parse_pattern))


def _build_match(stream: TokenStream) -> Unit:
    return Match(stream.argument(parse_pattern))


def _build_sub(stream: TokenStream) -> Unit:
    pattern = stream.argument(parse_pattern)
    return Substitute(pattern, stream.argument(parse_replacement))


def _build_gsub(stream: TokenStream) -> Unit:
    pattern = stream.argument(parse_pattern)
    return SubstituteAll(pattern, stream.argument(parse_replacement))


def _build_match_range(stream: TokenStream) -> Unit:
    start = stream.argument(parse_pattern)
    return MatchRange(start, stream.argument(parse_pattern))


def _build_filter_range(stream: TokenStream) -> Unit:
    start = stream.argument(parse_pattern)
    return FilterRange(start, stream.argument(parse_pattern))


def _build_lines(stream: TokenStream) -> Unit:
    return LineSelect(stream.argument(parse_lines_spec))


def _build_fields(stream: TokenStream) -> Unit:
    return FieldSelect(stream.argument(parse_fields_spec))


COMMAND_SPECS: Final[tuple[CommandSpec, ...]] = (
    CommandSpec(Keywords.ENUMERATE, (), "Prefix lines with their number", _build_enumerate),
    CommandSpec(Keywords.FIELDS, ("SPEC",), "Keep the selected fields", _build_fields),
    CommandSpec(Keywords.FILTER, ("PATTERN",), "Drop lines not matching PATTERN", _build_filter),
    CommandSpec(Keywords.LINES, ("SPEC",), "Keep the selected lines", _build_lines),
    CommandSpec(
        Keywords.FILTER_RANGE,
        ("START", "END"),
        "Keep only lines in START..END blocks",
        _build_filter_range,
    ),
    CommandSpec(
        Keywords.GSUB,
        ("PATTERN", "REPLACEMENT"),
        "Replace every match of PATTERN",
        _build_gsub,
    ),
    CommandSpec(
        Keywords.MATCH,
        ("PATTERN",),
        "Apply the rest of the program to matching lines only",
        _build_match,
    ),
    CommandSpec(
        Keywords.MATCH_RANGE,
        ("START", "END"),
        "Apply the rest of the program to START..END blocks only",
        _build_match_range,
    ),
    CommandSpec(
        Keywords.SUB,
        ("PATTERN", "REPLACEMENT"),
        "Replace the first match of PATTERN",
        _build_sub,
    ),
)

COMMANDS: Final[Mapping[str, CommandSpec]] = {
    alias: spec for spec in COMMAND_SPECS for alias in spec.aliases
}


def parse_command(stream: TokenStream) -> Unit:
    """Parse one command (keyword and arguments) from ``stream``.

    Args:
        stream (TokenStream): The token cursor.

    Returns:
        Unit: The unit built for the command.

    Raises:
        NoMatch: If no token is left (recoverable).
        UnknownKeywordError: If the next token is not a keyword.
        ParseError: If the arguments of a recognized keyword are invalid.
    """
    keyword: str = stream.next_token()
    spec: CommandSpec | None = COMMANDS.get(keyword)
    if spec is None:
        raise UnknownKeywordError(keyword)

    with context(f"Failed parsing arguments of '{keyword}'"), committed():
        unit: Unit = spec.build(stream)
    logger.debug("Parsed '%s' as %s", keyword, unit.describe())
    return unit


def compile_program(tokens: Sequence[str]) -> Pipeline:
    """Compile a Saw program into a `Pipeline`.

    Commands are parsed until the tokens are exhausted; every token must be
    consumed. No partial pipeline is ever returned.

    Args:
        tokens (Sequence[str]): The program tokens, e.g. ``["f", "^a", "enum"]``.

    Returns:
        Pipeline: The compiled pipeline, units in program order.

    Raises:
        ParseError: On the first invalid command; the exception chain carries
            the keyword and argument context.
    """
    stream = TokenStream(tokens)
    units: list[Unit] = []
    while True:
        try:
            units.append(parse_command(stream))
        except NoMatch:
            break

    if stream:
        raise TrailingTokensError(stream.remaining)

    pipeline = Pipeline(units)
    logger.info("Compiled program: %r", pipeline)
    return pipeline
