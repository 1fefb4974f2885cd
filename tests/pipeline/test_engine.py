# topmark:header:start
#
#   project      : Saw
#   file         : test_engine.py
#   file_relpath : tests/pipeline/test_engine.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Tests for the line-folding engine.

Covers short-circuiting, reset propagation after a block is entered and the
lazy `run_lines` driver, using the sample INI document from `tests.conftest`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from saw.pipeline.engine import Pipeline, run_lines
from saw.pipeline.ranges import LinesAtom, OpenRange
from saw.pipeline.template import ReplacementTemplate
from saw.pipeline.units import (
    BlockState,
    Enumerate,
    Filter,
    FilterRange,
    LineSelect,
    Match,
    MatchRange,
    Substitute,
)
from tests.conftest import INI_LINES, mark_pipeline, rx, run_all

if TYPE_CHECKING:
    from collections.abc import Iterator


@mark_pipeline
def test_empty_pipeline_is_identity() -> None:
    """A pipeline without units outputs every line unchanged."""
    assert run_all(Pipeline([]), ["a", "", "b"]) == ["a", "", "b"]


@mark_pipeline
def test_filter_range_keeps_the_first_block() -> None:
    """Lines 2 to 6 (1-based) form the block and are the only ones kept."""
    pipeline = Pipeline([FilterRange(rx(r"^\[Header 1"), rx(r"^\["))])
    assert list(run_lines(pipeline, INI_LINES)) == INI_LINES[1:6]


@mark_pipeline
def test_match_range_outputs_every_line() -> None:
    """MatchRange never drops lines; lines outside the block are untouched."""
    pipeline = Pipeline(
        [
            MatchRange(rx(r"^\[Header 1"), rx(r"^\[")),
            Substitute(rx("^"), ReplacementTemplate.parse("> ")),
        ]
    )
    assert run_all(pipeline, INI_LINES) == [
        "",
        "> [Header 1]",
        "> key1 = header1_value1",
        "> key2 = header1_value2",
        "> ",
        "> [Header 2]",
        "key1 = header2_value1",
        "key2 = header2_value2",
    ]


@mark_pipeline
def test_emit_short_circuits_later_units() -> None:
    """Units after an Emit do not run and keep their state."""
    enum = Enumerate()
    pipeline = Pipeline([Match(rx("^key")), enum])
    assert run_all(pipeline, ["[s]", "key = 1", "[t]", "key = 2"]) == [
        "[s]",
        "1 key = 1",
        "[t]",
        "2 key = 2",
    ]
    assert enum.current_line == 2


@mark_pipeline
def test_filter_drops_before_later_units() -> None:
    """A dropped line is not seen by downstream counters."""
    pipeline = Pipeline([Filter(rx("^key")), Enumerate()])
    assert list(run_lines(pipeline, INI_LINES)) == [
        "1 key1 = header1_value1",
        "2 key2 = header1_value2",
        "3 key1 = header2_value1",
        "4 key2 = header2_value2",
    ]


@mark_pipeline
def test_entering_a_block_resets_downstream_counters() -> None:
    """Enumerate after a range numbers each block from 1."""
    pipeline = Pipeline([FilterRange(rx(r"^\["), rx(r"^$")), Enumerate()])
    assert list(run_lines(pipeline, INI_LINES)) == [
        "1 [Header 1]",
        "2 key1 = header1_value1",
        "3 key2 = header1_value2",
        "4 ",
        "1 [Header 2]",
        "2 key1 = header2_value1",
        "3 key2 = header2_value2",
    ]


@mark_pipeline
def test_lines_after_range_count_relative_to_block_start() -> None:
    """``lines 2-3`` after a range keeps the 2nd and 3rd line of each block."""
    pipeline = Pipeline(
        [
            FilterRange(rx(r"^\["), rx(r"^$")),
            LineSelect((LinesAtom(span=OpenRange(lower=2, upper=3)),)),
        ]
    )
    assert list(run_lines(pipeline, INI_LINES)) == [
        "key1 = header1_value1",
        "key2 = header1_value2",
        "key1 = header2_value1",
        "key2 = header2_value2",
    ]


@mark_pipeline
def test_reset_does_not_revert_the_unit_entering_a_block() -> None:
    """The range unit that restarts stays inside its block.

    Only the units after it are reset; a reset of the emitting unit itself would
    move it back outside and drop the rest of the block.
    """
    first = FilterRange(rx("begin"), rx("end"))
    pipeline = Pipeline([first, Enumerate()])

    assert pipeline.run("begin") == "1 begin"
    assert first.state is BlockState.INSIDE
    assert pipeline.run("body") == "2 body"
    assert pipeline.run("end") == "3 end"
    assert first.state is BlockState.OUTSIDE
    assert pipeline.run("after") is None


@mark_pipeline
def test_reset_propagates_past_a_second_range_unit() -> None:
    """An outer block entry resets an inner range unit and everything after it."""
    outer = FilterRange(rx("^A"), rx("^Z"))
    inner = FilterRange(rx("^b"), rx("^e"))
    pipeline = Pipeline([outer, inner, Enumerate()])

    lines = ["A1", "b", "x", "Z", "A2", "y", "b", "z", "e"]
    assert run_all(pipeline, lines) == [
        None,
        "1 b",
        "2 x",
        "3 Z",
        None,
        None,
        "1 b",
        "2 z",
        "3 e",
    ]
    assert inner.state is BlockState.OUTSIDE


@mark_pipeline
def test_reset_reaches_units_skipped_after_an_emit() -> None:
    """A block entry resets later units even when the line is dropped before them.

    ``filter`` drops the block's start line, so ``enumerate`` does not run on it,
    yet its count still restarts for the second block.
    """
    enum = Enumerate()
    pipeline = Pipeline([FilterRange(rx("^A"), rx("^Z")), Filter(rx("^key")), enum])

    lines = ["A", "key1", "key2", "Z", "A"]
    assert run_all(pipeline, lines) == [None, "1 key1", "2 key2", None, None]
    assert enum.current_line == 0
    assert pipeline.run("key3") == "1 key3"


@mark_pipeline
def test_restart_from_last_unit_outputs_the_line() -> None:
    """A RestartAndContinue from the last unit still yields the line."""
    pipeline = Pipeline([Enumerate(), FilterRange(rx("go"), rx("stop"))])
    assert pipeline.run("go") == "1 go"


@mark_pipeline
def test_pipeline_reset_resets_every_unit() -> None:
    """Pipeline.reset() behaves like a freshly compiled pipeline."""
    enum = Enumerate()
    rng = MatchRange(rx("s"), rx("e"))
    pipeline = Pipeline([rng, enum])
    pipeline.run("s")
    pipeline.reset()
    assert enum.current_line == 0
    assert rng.state is BlockState.OUTSIDE


@mark_pipeline
def test_run_lines_is_lazy() -> None:
    """Lines are pulled one at a time from the input iterable."""
    pulled: list[str] = []

    def source() -> Iterator[str]:
        for line in ("a", "b", "c"):
            pulled.append(line)
            yield line

    it = run_lines(Pipeline([Enumerate()]), source())
    assert next(it) == "1 a"
    assert pulled == ["a"]


@mark_pipeline
def test_repr_lists_units() -> None:
    """The pipeline repr shows the unit chain."""
    pipeline = Pipeline([Filter(rx("a")), Enumerate()])
    assert repr(pipeline) == "Pipeline(filter 'a' | enumerate)"
    assert len(pipeline) == 2
