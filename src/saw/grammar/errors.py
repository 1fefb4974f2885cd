# topmark:header:start
#
#   project      : Saw
#   file         : errors.py
#   file_relpath : src/saw/grammar/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Errors raised while compiling a Saw program.

Two families are distinguished:

- `NoMatch` is *recoverable*: the parser that raised it did not apply to the
  current input (typically because no token is left). The compiler uses it to end
  the command loop; it is never shown to the user as-is.
- `ParseError` is *fatal*: a keyword was recognized and its arguments are
  invalid, or a token is not a keyword at all. Outer parsers add context by
  raising a new `ParseError` chained to the inner one (``raise ... from err``).

`error_chain` and `format_error_chain` turn such a chain into the consolidated
message printed by the CLI, outermost context first.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator

INTERNAL_ERROR_MESSAGE: Final[str] = "Internal error"


class GrammarError(Exception):
    """Base class for all grammar errors."""


class NoMatch(GrammarError):
    """Recoverable failure: the parser does not apply here, try something else."""


class ParseError(GrammarError):
    """Fatal failure with a user-directed message.

    Attributes:
        internal (bool): ``True`` for failures without a user-directed message
            (e.g. a malformed selector atom). They are dropped from the rendered
            chain as soon as an outer context replaces them.
    """

    internal: bool = False


class UnknownKeywordError(ParseError):
    """The next token is not a recognized command keyword."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Not a recognized keyword: {token}")
        self.token = token


class MissingArgumentError(ParseError):
    """A command ran out of tokens before all of its arguments were read."""

    def __init__(self, message: str = "Missing argument") -> None:
        super().__init__(message)


class PatternError(ParseError):
    """A regular expression argument failed to compile."""


class InvalidSpecError(ParseError):
    """A ``lines``/``fields`` selector could not be parsed."""

    internal = True


class TrailingTokensError(ParseError):
    """Tokens were left over after the last command."""

    def __init__(self, tokens: tuple[str, ...]) -> None:
        super().__init__(f"Unexpected trailing arguments: {' '.join(tokens)}")
        self.tokens = tokens


@contextmanager
def context(message: str) -> Iterator[None]:
    """Wrap any `ParseError` raised in the block in an outer `ParseError`.

    Args:
        message (str): The outer context message.

    Raises:
        ParseError: The outer error, chained to the original one.
    """
    try:
        yield
    except ParseError as exc:
        raise ParseError(message) from exc


@contextmanager
def committed() -> Iterator[None]:
    """Turn recoverable failures raised in the block into fatal ones.

    Used once a keyword has been recognized: from then on, there is no
    alternative left to try.

    Raises:
        MissingArgumentError: When the block raised `NoMatch`.
    """
    try:
        yield
    except NoMatch as exc:
        raise MissingArgumentError(str(exc) or "Missing argument") from None


def error_chain(err: BaseException) -> list[str]:
    """Return the messages of a grammar error chain, outermost first.

    The chain follows ``__cause__`` links between grammar errors. Internal
    errors are skipped; if nothing else is left, a generic message is returned.

    Args:
        err (BaseException): The outermost error.

    Returns:
        list[str]: The user-facing messages.
    """
    messages: list[str] = []
    current: BaseException | None = err
    while isinstance(current, GrammarError):
        if not (isinstance(current, ParseError) and current.internal):
            messages.append(str(current))
        current = current.__cause__
    return messages or [INTERNAL_ERROR_MESSAGE]


def format_error_chain(err: BaseException) -> str:
    """Render an error chain as a single human-readable message.

    Example:
        ```text
        Failed parsing arguments of 'filter'

        Caused by:
            0: Invalid argument: (
            1: missing ), unterminated subpattern
        ```

    Args:
        err (BaseException): The outermost error.

    Returns:
        str: The consolidated message.
    """
    head, *causes = error_chain(err)
    if not causes:
        return head
    lines: list[str] = [head, "", "Caused by:"]
    lines.extend(f"    {i}: {msg}" for i, msg in enumerate(causes))
    return "\n".join(lines)
