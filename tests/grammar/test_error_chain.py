# topmark:header:start
#
#   project      : Saw
#   file         : test_error_chain.py
#   file_relpath : tests/grammar/test_error_chain.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Tests for grammar error chaining and rendering."""

from __future__ import annotations

import pytest

from saw.grammar.compiler import compile_program
from saw.grammar.errors import (
    InvalidSpecError,
    MissingArgumentError,
    NoMatch,
    ParseError,
    committed,
    context,
    error_chain,
    format_error_chain,
)
from tests.conftest import mark_grammar


@mark_grammar
def test_context_chains_the_inner_error() -> None:
    """Context wraps a fatal error and keeps it as the cause."""
    with pytest.raises(ParseError) as excinfo, context("outer"):
        raise ParseError("inner")
    assert str(excinfo.value) == "outer"
    assert str(excinfo.value.__cause__) == "inner"


@mark_grammar
def test_context_lets_recoverable_errors_through() -> None:
    """NoMatch is not fatal and is not wrapped."""
    with pytest.raises(NoMatch), context("outer"):
        raise NoMatch("nothing here")


@mark_grammar
def test_committed_turns_no_match_into_missing_argument() -> None:
    """Once committed, running out of tokens is fatal."""
    with pytest.raises(MissingArgumentError), committed():
        raise NoMatch("Missing argument")


@mark_grammar
def test_internal_errors_are_hidden_behind_context() -> None:
    """Internal errors do not show up in the chain."""
    with pytest.raises(ParseError) as excinfo, context("outer"):
        raise InvalidSpecError("detail")
    assert error_chain(excinfo.value) == ["outer"]


@mark_grammar
def test_bare_internal_error_gets_a_generic_message() -> None:
    """An internal error without context is reported generically."""
    assert error_chain(InvalidSpecError("detail")) == ["Internal error"]


@mark_grammar
def test_format_single_message() -> None:
    """A chain of one renders as the message alone."""
    assert format_error_chain(ParseError("Not a recognized keyword: x")) == (
        "Not a recognized keyword: x"
    )


@mark_grammar
def test_format_full_chain() -> None:
    """The outermost message comes first, then numbered causes."""
    with pytest.raises(ParseError) as excinfo:
        compile_program(["filter", "("])
    assert format_error_chain(excinfo.value) == "\n".join(
        [
            "Failed parsing arguments of 'filter'",
            "",
            "Caused by:",
            "    0: Invalid argument: (",
            "    1: missing ), unterminated subpattern",
        ]
    )
