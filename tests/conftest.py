# topmark:header:start
#
#   project      : Saw
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Pytest configuration for the Saw test suite.

This file sets up global fixtures, typed wrappers around pytest decorators and
the logging configuration for test runs.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from saw.config import logging
from saw.config.logging import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Iterable

    from saw.pipeline.engine import Pipeline

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_grammar: DecoratorType[Any] = as_typed_mark(pytest.mark.grammar)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_saw_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Saw's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    SAW_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE so the per-line fold is exercised with logging on."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def rx(pattern: str) -> re.Pattern[str]:
    """Compile ``pattern``; shorthand for building units in tests."""
    return re.compile(pattern)


def run_all(pipeline: Pipeline, lines: Iterable[str]) -> list[str | None]:
    """Run ``pipeline`` on each line and return every result, dropped lines included."""
    return [pipeline.run(line) for line in lines]


# Sample INI document used across pipeline, grammar and CLI tests.
INI_LINES: list[str] = [
    "",
    "[Header 1]",
    "key1 = header1_value1",
    "key2 = header1_value2",
    "",
    "[Header 2]",
    "key1 = header2_value1",
    "key2 = header2_value2",
]
