"""Tests for the inline engine: scanner, delimiter queues and resolver."""

import pytest

from linemark.fragments import InlineText, Span
from linemark.nodes import Image, Link, Style, StyledRun
from linemark.parsing.inline import (
    STYLE_TABLE,
    DelimiterPair,
    DelimiterQueues,
    parse_inline,
    resolve_delimiters,
    scan_line,
    try_scan_link,
)
from linemark.parsing.inline.queues import bucket_for

N = Style.NORMAL
M = Style.MODIFIER


def run(style: Style, text: str) -> StyledRun:
    return StyledRun(style, text)


class TestDelimiterQueues:
    """FIFO queues and global-minimum pair selection."""

    @pytest.mark.parametrize(("length", "bucket"), [(1, 0), (2, 1), (3, 2), (7, 2)])
    def test_bucket_for(self, length: int, bucket: int) -> None:
        assert bucket_for(length) == bucket

    def test_empty_has_no_pair(self) -> None:
        assert DelimiterQueues().pop_min_pair() is None

    def test_single_offset_is_not_a_pair(self) -> None:
        queues = DelimiterQueues()
        queues.push(0, 1, 4)
        assert queues.pop_min_pair() is None
        assert queues.pending() == 1

    def test_fifo_order(self) -> None:
        queues = DelimiterQueues()
        for offset in (1, 2, 3):
            queues.push(0, 1, offset)
        assert queues.pop_min_pair() == DelimiterPair(1, 2, 0, 0)
        assert queues.pop_min_pair() is None
        assert queues.pending() == 1

    def test_global_minimum_front_wins(self) -> None:
        queues = DelimiterQueues()
        queues.push(0, 1, 3)
        queues.push(0, 1, 8)
        queues.push(1, 1, 1)
        queues.push(1, 1, 6)
        assert queues.pop_min_pair() == DelimiterPair(1, 6, 1, 0)
        assert queues.pop_min_pair() == DelimiterPair(3, 8, 0, 0)
        assert queues.pop_min_pair() is None

    def test_pair_properties(self) -> None:
        pair = DelimiterPair(0, 5, marker=2, bucket=1)
        assert pair.char == "`"
        assert pair.width == 2


class TestScanner:
    """Single-pass discovery of links, runs and escapes."""

    def test_marker_runs_are_queued(self) -> None:
        scan = scan_line("a *b* c")
        assert scan.queues.pop_min_pair() == DelimiterPair(2, 4, 0, 0)

    def test_run_length_picks_bucket(self) -> None:
        scan = scan_line("**x**")
        assert scan.queues.pop_min_pair() == DelimiterPair(0, 3, 0, 1)

    def test_escape_skips_next_character(self) -> None:
        scan = scan_line("a\\*b")
        assert scan.escapes == [1]
        assert scan.queues.pending() == 0

    def test_link(self) -> None:
        assert scan_line("[a](b)").links == [(Span(0, 6), Link("a", "b"))]

    def test_image(self) -> None:
        assert scan_line("![alt](src.png)").links == [(Span(0, 15), Image("alt", "src.png"))]

    def test_bracket_in_alt_aborts_then_rescans(self) -> None:
        assert scan_line("[a[b](c)").links == [(Span(2, 6), Link("b", "c"))]

    @pytest.mark.parametrize("line", ["[a](b", "[a] (b)", "[a", "!(b)", "[a]"])
    def test_incomplete_link_is_text(self, line: str) -> None:
        assert scan_line(line).links == []

    def test_markers_inside_link_are_not_queued(self) -> None:
        assert scan_line("[*a*](b)").queues.pending() == 0

    def test_try_scan_link_at_offset(self) -> None:
        assert try_scan_link("x [a](b)", 2) == (Span(2, 6), Link("a", "b"))
        assert try_scan_link("x [a](b)", 0) is None


class TestStyleTable:
    """Marker and bucket to style mapping."""

    def test_star_and_underscore(self) -> None:
        for row in (STYLE_TABLE[0], STYLE_TABLE[1]):
            assert row == (Style.EMPHASIS, Style.STRONG, Style.EMPHASIS | Style.STRONG)

    def test_backtick_is_always_code(self) -> None:
        assert STYLE_TABLE[2] == (Style.CODE, Style.CODE, Style.CODE)

    def test_tilde_only_double(self) -> None:
        assert STYLE_TABLE[3] == (None, Style.STRIKETHROUGH, None)


class TestResolver:
    """Greedy pairing applied through parse_inline."""

    def test_emphasis_pairing(self) -> None:
        assert parse_inline("a *b* c") == (
            run(N, "a "),
            run(M, "*"),
            run(Style.EMPHASIS, "b"),
            run(M, "*"),
            run(N, " c"),
        )

    def test_strong(self) -> None:
        assert parse_inline("**b**") == (run(M, "**"), run(Style.STRONG, "b"), run(M, "**"))

    def test_strong_emphasis(self) -> None:
        assert parse_inline("***b***") == (
            run(M, "***"),
            run(Style.EMPHASIS | Style.STRONG, "b"),
            run(M, "***"),
        )

    def test_underscore_strong(self) -> None:
        assert parse_inline("__u__")[1] == run(Style.STRONG, "u")

    @pytest.mark.parametrize(("line", "inner"), [("`code`", "code"), ("``x``", "x")])
    def test_code(self, line: str, inner: str) -> None:
        assert parse_inline(line)[1] == run(Style.CODE, inner)

    def test_strikethrough(self) -> None:
        assert parse_inline("~~s~~")[1] == run(Style.STRIKETHROUGH, "s")

    def test_single_tilde_is_ignored(self) -> None:
        assert parse_inline("~s~") == (run(N, "~s~"),)

    def test_unmatched_delimiter_stays_text(self) -> None:
        assert parse_inline("a *b c") == (run(N, "a *b c"),)

    def test_nested_styles_overlap(self) -> None:
        assert parse_inline("**a *b* c**") == (
            run(M, "**"),
            run(Style.STRONG, "a "),
            run(M, "*"),
            run(Style.STRONG | Style.EMPHASIS, "b"),
            run(M, "*"),
            run(Style.STRONG, " c"),
            run(M, "**"),
        )

    def test_earliest_pair_wins_across_classes(self) -> None:
        fragments = parse_inline("*a `b* c`")
        assert run(Style.EMPHASIS, "a `b") in fragments
        assert all(
            Style.CODE not in f.style for f in fragments if isinstance(f, StyledRun)
        )

    def test_resolve_counts_applied_pairs(self) -> None:
        line = "*a `b* c`"
        text = InlineText.from_line(line)
        assert resolve_delimiters(text, scan_line(line).queues) == 1
        assert text.text() == line

    def test_empty_line(self) -> None:
        assert parse_inline("") == ()

    def test_multibyte_offsets(self) -> None:
        assert parse_inline("ü *é* ñ")[2] == run(Style.EMPHASIS, "é")


class TestSubstitutions:
    """Links, images and escapes applied after styling."""

    def test_escaped_markers_are_literal(self) -> None:
        fragments = parse_inline("\\*not\\*")
        assert "".join(f.text for f in fragments) == "*not*"
        assert all(f.style == N for f in fragments)

    def test_two_links_on_one_line(self) -> None:
        assert parse_inline("[a](x) and [b](y)") == (
            Link("a", "x"),
            run(N, " and "),
            Link("b", "y"),
        )

    def test_link_and_escape_on_one_line(self) -> None:
        assert parse_inline("\\_ [a](x) \\_") == (
            run(N, "_ "),
            Link("a", "x"),
            run(N, " "),
            run(N, "_"),
        )

    def test_link_inside_emphasis(self) -> None:
        assert parse_inline("*see [a](b)*") == (
            run(M, "*"),
            run(Style.EMPHASIS, "see "),
            Link("a", "b"),
            run(M, "*"),
        )

    def test_image(self) -> None:
        assert parse_inline("![c](x.png)") == (Image("c", "x.png"),)

    def test_trailing_backslash_is_removed(self) -> None:
        assert parse_inline("abc\\") == (run(N, "abc"),)
