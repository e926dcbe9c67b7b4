"""Tests for hakasha.core.markup – progress highlighting."""

from __future__ import annotations

from hakasha.core.markup import (
    CORRECT,
    ERROR,
    NEXT,
    Segment,
    progress_segments,
    render_progress,
    render_segment,
)

TARGET = "abc de fgh"


# ===========================================================================
# progress_segments
# ===========================================================================

class TestSegments:
    def test_nothing_typed(self):
        assert progress_segments(TARGET, "", []) == [
            Segment("a", NEXT, underline=True),
            Segment("bc de fgh"),
        ]

    def test_remainder_is_one_block_of_nine(self):
        segments = progress_segments(TARGET, "", [])
        assert len(segments[1].text) == 9

    def test_typed_with_error(self):
        assert progress_segments(TARGET, "abc", [1]) == [
            Segment("a", CORRECT),
            Segment("b", ERROR),
            Segment("c", CORRECT),
            Segment(" ", NEXT, underline=True),
            Segment("de fgh"),
        ]

    def test_flagged_cursor_shows_error(self):
        segments = progress_segments(TARGET, "ab", [2])
        assert segments[2] == Segment("c", ERROR, underline=True)

    def test_complete_has_no_next(self):
        segments = progress_segments(TARGET, TARGET, [])
        assert len(segments) == len(TARGET)
        assert all(s.tag == CORRECT for s in segments)
        assert not any(s.underline for s in segments)

    def test_last_character_has_no_remainder(self):
        segments = progress_segments("a b", "a ", [])
        assert segments[-1] == Segment("b", NEXT, underline=True)

    def test_empty_target(self):
        assert progress_segments("", "", []) == []

    def test_errors_as_any_iterable(self):
        segments = progress_segments(TARGET, "ab", (0,))
        assert segments[0].tag == ERROR


# ===========================================================================
# render_progress
# ===========================================================================

class TestRender:
    def test_nothing_typed(self):
        assert render_progress(TARGET, "", []) == (
            '<span class="next-char"><u>a</u></span><span>bc de fgh</span>'
        )

    def test_typed_with_error(self):
        assert render_progress(TARGET, "abc", [1]) == (
            '<span class="correct-text">a</span>'
            '<span class="error-text">b</span>'
            '<span class="correct-text">c</span>'
            '<span class="next-char"><u> </u></span>'
            "<span>de fgh</span>"
        )

    def test_flagged_cursor(self):
        html = render_progress("a b", "", [0])
        assert html.startswith('<span class="error-text"><u>a</u></span>')

    def test_complete(self):
        html = render_progress("a b", "a b", [2])
        assert html == (
            '<span class="correct-text">a</span>'
            '<span class="correct-text"> </span>'
            '<span class="error-text">b</span>'
        )
        assert "next-char" not in html

    def test_hebrew_passes_through(self):
        assert render_progress("ח כ", "ח ", []).startswith('<span class="correct-text">ח</span>')

    def test_markup_characters_escaped(self):
        assert render_segment(Segment("<", CORRECT)) == '<span class="correct-text">&lt;</span>'

    def test_does_not_mutate_inputs(self):
        errors = [1]
        render_progress(TARGET, "abc", errors)
        assert errors == [1]
