# topmark:header:start
#
#   project      : Saw
#   file         : test_units.py
#   file_relpath : tests/pipeline/test_units.py
#   license      : MIT
#   copyright    : (c) 2025 The Saw Authors
#
# topmark:header:end

"""Unit tests for the individual pipeline units.

Each unit is exercised on its own: the control outcome it returns for a line,
and the state it keeps (or not) across lines and resets.
"""

from __future__ import annotations

from saw.pipeline.outcomes import Continue, Emit, RestartAndContinue
from saw.pipeline.ranges import FieldId, FieldsAtom, LinesAtom, OpenRange
from saw.pipeline.template import ReplacementTemplate
from saw.pipeline.units import (
    BlockState,
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
from saw.pipeline.units.fields import split_fields
from tests.conftest import INI_LINES, mark_pipeline, parametrize, rx


@mark_pipeline
def test_filter_continues_on_match_and_drops_otherwise() -> None:
    """Filter keeps matching lines and drops the others."""
    unit = Filter(rx("^key"))
    assert unit.run("key1 = v") == Continue("key1 = v")
    assert unit.run("[Header 1]") == Emit(None)


@mark_pipeline
def test_match_continues_on_match_and_passes_others_through() -> None:
    """Match runs the rest on matching lines and emits others unchanged."""
    unit = Match(rx("^key"))
    assert unit.run("key1 = v") == Continue("key1 = v")
    assert unit.run("[Header 1]") == Emit("[Header 1]")


@mark_pipeline
def test_patterns_are_not_anchored() -> None:
    """A pattern may match anywhere in the line."""
    assert Filter(rx("value")).run("key = value1") == Continue("key = value1")


@mark_pipeline
def test_sub_replaces_first_match_only() -> None:
    """Sub rewrites only the leftmost match."""
    unit = Substitute(rx("a"), ReplacementTemplate.parse("b"))
    assert unit.run("aaa") == Continue("baa")
    assert unit.run("xyz") == Continue("xyz")


@mark_pipeline
def test_gsub_replaces_every_match() -> None:
    """Gsub rewrites all non-overlapping matches."""
    unit = SubstituteAll(rx(r"\s+"), ReplacementTemplate.parse(" "))
    assert unit.run("a   b \t c") == Continue("a b c")


@mark_pipeline
@parametrize(
    "pattern, line, expected",
    [
        ("x*", "abxd", "-a-b-d-"),
        ("x*", "", "-"),
        ("x*", "xx", "-"),
        ("", "ab", "-a-b-"),
        ("a|", "ab", "-b-"),
    ],
)
def test_gsub_skips_empty_match_right_after_a_match(
    pattern: str, line: str, expected: str
) -> None:
    """An empty match adjacent to the previous match is left alone."""
    unit = SubstituteAll(rx(pattern), ReplacementTemplate.parse("-"))
    assert unit.run(line) == Continue(expected)


@mark_pipeline
def test_gsub_with_named_groups() -> None:
    """Named group references are expanded for every match."""
    unit = SubstituteAll(
        rx(r"(?P<y>\d{4})-(?P<m>\d{2})-(?P<d>\d{2})"),
        ReplacementTemplate.parse("$m/$d/$y"),
    )
    assert unit.run("2012-03-14 and 2014-07-05") == Continue("03/14/2012 and 07/05/2014")


@mark_pipeline
def test_sub_keeps_backslashes_literal() -> None:
    """Backslashes in the replacement are not escape sequences."""
    unit = Substitute(rx("x"), ReplacementTemplate.parse(r"\n\1"))
    assert unit.run("axb") == Continue(r"a\n\1b")


@mark_pipeline
def test_enumerate_numbers_lines_from_one() -> None:
    """Enumerate prefixes lines with 1, 2, ... and a single space."""
    unit = Enumerate()
    out = [unit.run(line) for line in ("a", "b", "c")]
    assert out == [Continue("1 a"), Continue("2 b"), Continue("3 c")]


@mark_pipeline
def test_enumerate_restarts_after_reset() -> None:
    """After a reset the next line is number 1 again."""
    unit = Enumerate()
    unit.run("a")
    unit.run("b")
    unit.reset()
    assert unit.run("c") == Continue("1 c")


@mark_pipeline
def test_enumerate_empty_line() -> None:
    """An empty line still gets its number and the separating space."""
    assert Enumerate().run("") == Continue("1 ")


@mark_pipeline
def test_lines_selects_by_number_and_range() -> None:
    """Lines keeps line 1 and lines 3 to 4."""
    unit = LineSelect(
        (LinesAtom(single=1), LinesAtom(span=OpenRange(lower=3, upper=4)))
    )
    out = [unit.run(str(i)) for i in range(1, 7)]
    assert out == [
        Continue("1"),
        Emit(None),
        Continue("3"),
        Continue("4"),
        Emit(None),
        Emit(None),
    ]


@mark_pipeline
def test_lines_open_range_without_lower_bound() -> None:
    """``-2`` selects every line up to line 2."""
    unit = LineSelect((LinesAtom(span=OpenRange(upper=2)),))
    out = [unit.run(str(i)) for i in range(1, 4)]
    assert out == [Continue("1"), Continue("2"), Emit(None)]


@mark_pipeline
def test_lines_with_no_atoms_drops_everything() -> None:
    """An empty selector selects no line."""
    unit = LineSelect(())
    assert unit.run("a") == Emit(None)
    assert unit.current_line == 1


@mark_pipeline
def test_lines_counter_restarts_after_reset() -> None:
    """Reset makes the next line number 1 again."""
    unit = LineSelect((LinesAtom(single=1),))
    assert unit.run("a") == Continue("a")
    assert unit.run("b") == Emit(None)
    unit.reset()
    assert unit.run("c") == Continue("c")


@mark_pipeline
@parametrize(
    "line, expected",
    [
        ("a b c", ["a", "b", "c"]),
        ("  a   b  ", ["a", "b"]),
        ("", []),
        ("a\tb c", ["a\tb", "c"]),
    ],
)
def test_split_fields(line: str, expected: list[str]) -> None:
    """Fields are split on spaces only; runs of spaces act as one separator."""
    assert split_fields(line) == expected


@mark_pipeline
def test_fields_range_to_from_last_and_single() -> None:
    """``3-(-2),1`` on seven fields keeps fields 1 and 3 to 6."""
    unit = FieldSelect(
        (
            FieldsAtom(span=OpenRange(lower=FieldId.absolute(3), upper=FieldId.from_last(2))),
            FieldsAtom(single=FieldId.absolute(1)),
        )
    )
    assert unit.run("1 2 3 4 5 6 7") == Continue("1 3 4 5 6")


@mark_pipeline
def test_fields_keep_original_order_and_collapse_spaces() -> None:
    """Selected fields are re-joined with single spaces in line order."""
    unit = FieldSelect(
        (FieldsAtom(single=FieldId.absolute(3)), FieldsAtom(single=FieldId.absolute(1)))
    )
    assert unit.run("  a   b   c  ") == Continue("a c")


@mark_pipeline
def test_fields_never_drop_the_line() -> None:
    """Selecting no field yields an empty line, not a dropped one."""
    unit = FieldSelect((FieldsAtom(single=FieldId.absolute(9)),))
    assert unit.run("a b") == Continue("")


@mark_pipeline
def test_fields_from_last_out_of_reach_selects_nothing() -> None:
    """``(-5)`` on a two-field line resolves before the first field."""
    unit = FieldSelect((FieldsAtom(single=FieldId.from_last(5)),))
    assert unit.run("a b") == Continue("")


@mark_pipeline
def test_fields_last_field() -> None:
    """``(-1)`` is the last field, whatever the field count."""
    unit = FieldSelect((FieldsAtom(single=FieldId.from_last(1)),))
    assert unit.run("a b c") == Continue("c")
    assert unit.run("x") == Continue("x")


@mark_pipeline
def test_filter_range_state_machine() -> None:
    """Entering a block restarts; the end line stays in the block."""
    unit = FilterRange(rx(r"^\[Header 1"), rx(r"^\["))
    assert unit.run("") == Emit(None)
    assert unit.run("[Header 1]") == RestartAndContinue("[Header 1]")
    assert unit.state is BlockState.INSIDE
    assert unit.run("key1 = header1_value1") == Continue("key1 = header1_value1")
    assert unit.run("[Header 2]") == Continue("[Header 2]")
    assert unit.state is BlockState.OUTSIDE
    assert unit.run("key1 = header2_value1") == Emit(None)


@mark_pipeline
def test_range_start_line_is_not_tested_against_end() -> None:
    """A line matching both patterns opens a block without closing it."""
    unit = FilterRange(rx(r"^\["), rx(r"^\["))
    assert unit.run("[a]") == RestartAndContinue("[a]")
    assert unit.run("x = 1") == Continue("x = 1")
    assert unit.run("[b]") == Continue("[b]")
    assert unit.state is BlockState.OUTSIDE


@mark_pipeline
def test_match_range_passes_outside_lines_through() -> None:
    """Outside a block, MatchRange emits lines unchanged."""
    unit = MatchRange(rx(r"^\[Header 1"), rx(r"^\["))
    outcomes = [unit.run(line) for line in INI_LINES]
    assert outcomes[0] == Emit("")
    assert outcomes[1] == RestartAndContinue("[Header 1]")
    assert all(isinstance(o, Continue) for o in outcomes[2:6])
    assert outcomes[6:] == [Emit("key1 = header2_value1"), Emit("key2 = header2_value2")]


@mark_pipeline
def test_range_reset_returns_outside() -> None:
    """Reset always leaves the unit outside any block."""
    unit = MatchRange(rx("start"), rx("end"))
    unit.run("start")
    assert unit.state is BlockState.INSIDE
    unit.reset()
    assert unit.state is BlockState.OUTSIDE


@mark_pipeline
def test_describe_names_the_canonical_keyword() -> None:
    """Descriptions start with the canonical keyword of the command."""
    assert Enumerate().describe() == "enumerate"
    assert Filter(rx("a")).describe() == "filter 'a'"
    assert SubstituteAll(rx("a"), ReplacementTemplate.parse("b")).describe() == "gsub 'a' 'b'"
    assert LineSelect((LinesAtom(single=1), LinesAtom(span=OpenRange(lower=3)))).describe() == (
        "lines 1,3-"
    )
