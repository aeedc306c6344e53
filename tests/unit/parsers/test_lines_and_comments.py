#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for line/block splitting and comment elision."""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from adocparse.exceptions import IncompleteDelimiter, NoMatch, ParseFailure
from adocparse.parsers.combinators import Cursor, parse_with
from adocparse.parsers.comments import (
    parse_comment,
    parse_comment_block,
    parse_comment_line,
    skip_comments,
)
from adocparse.parsers.header import parse_author_line, parse_doc_attr, parse_title
from adocparse.parsers.lines import Blocks, Lines, is_blank, parse_block, parse_line


def _outcome(parser, cursor):
    try:
        end, result = parser(cursor)
    except ParseFailure as failure:
        return type(failure), failure.remaining
    return end.rest, result


@pytest.mark.unit
class TestParseLine:
    """Test the single-line rule."""

    def test_line_with_terminator(self):
        cursor, line = parse_with(parse_line, "first\nsecond")

        assert line == "first"
        assert cursor.rest == "second"

    def test_crlf_counts_as_one_terminator(self):
        cursor, line = parse_with(parse_line, "first\r\nsecond")

        assert line == "first"
        assert cursor.rest == "second"

    def test_empty_line_fails(self):
        with pytest.raises(NoMatch):
            parse_with(parse_line, "\nsecond")

    def test_missing_terminator_fails(self):
        with pytest.raises(NoMatch):
            parse_with(parse_line, "last line")


@pytest.mark.unit
class TestParseBlock:
    """Test the block rule."""

    def test_block_ends_at_empty_line(self):
        cursor, lines = parse_with(parse_block, "a\nb\n\nc\n")

        assert lines == ["a", "b"]
        assert cursor.rest == "c\n"

    def test_block_on_empty_line_is_empty(self):
        cursor, lines = parse_with(parse_block, "\nrest")

        assert lines == []
        assert cursor.rest == "rest"

    def test_block_without_closing_empty_line_fails(self):
        with pytest.raises(NoMatch):
            parse_with(parse_block, "a\nb\n")


@pytest.mark.unit
class TestLines:
    """Test the lazy line sequence."""

    def test_mixed_terminators(self):
        assert [line.text for line in Lines("one\r\ntwo\n\nthree")] == ["one", "two", "", "three"]

    def test_final_terminator_adds_no_empty_line(self):
        assert [line.text for line in Lines("one\ntwo\n")] == ["one", "two"]

    def test_empty_input(self):
        assert list(Lines("")) == []

    def test_restartable(self):
        lines = Lines("a\nb")

        assert list(lines) == list(lines)

    def test_starts_at_cursor(self):
        assert [line.text for line in Lines(Cursor("skip\nkeep", 5))] == ["keep"]

    def test_is_blank(self):
        assert is_blank(next(iter(Lines(" \t\n"))))
        assert not is_blank(next(iter(Lines(" x\n"))))


@pytest.mark.unit
class TestComments:
    """Test comment recognition."""

    def test_line_comment_consumes_terminator(self):
        cursor, result = parse_with(parse_comment_line, "// note\nnext")

        assert result is None
        assert cursor.rest == "next"

    def test_line_comment_at_end_of_input(self):
        cursor, _ = parse_with(parse_comment_line, "// note")

        assert cursor.at_end

    def test_comment_block(self):
        cursor, result = parse_with(parse_comment_block, "////\nA\nB\n////\nC")

        assert result is None
        assert cursor.rest == "C"

    def test_comment_block_closing_at_end_of_input(self):
        cursor, _ = parse_with(parse_comment_block, "////\nA\n////")

        assert cursor.at_end

    def test_unclosed_comment_block_raises_incomplete_delimiter(self):
        with pytest.raises(IncompleteDelimiter):
            parse_with(parse_comment_block, "////\nA\nB\n")

    def test_block_form_is_preferred(self):
        cursor, _ = parse_with(parse_comment, "////\nhidden\n////\nvisible")

        assert cursor.rest == "visible"

    def test_longer_slash_run_is_a_line_comment(self):
        cursor, _ = parse_with(parse_comment, "///// not a block\nvisible")

        assert cursor.rest == "visible"

    def test_not_a_comment(self):
        with pytest.raises(NoMatch):
            parse_with(parse_comment, "/ single slash")

    def test_skip_comments_consumes_runs_and_always_succeeds(self):
        cursor, _ = parse_with(skip_comments, "// a\n////\nb\n////\n// c\ntext")
        assert cursor.rest == "text"

        cursor, _ = parse_with(skip_comments, "text")
        assert cursor.pos == 0

    @given(
        st.text(alphabet=st.characters(exclude_characters="\r\n"), max_size=40),
        st.text(alphabet=st.characters(exclude_characters="/"), max_size=40),
    )
    def test_skip_comments_idempotent(self, comment, rest):
        source = f"//{comment}\n{rest}"
        once, _ = parse_with(skip_comments, source)
        twice, _ = skip_comments(once)

        assert twice.pos == once.pos

    @pytest.mark.fuzzing
    @pytest.mark.parametrize(
        "downstream",
        [parse_line, parse_title, parse_author_line, parse_doc_attr, parse_comment],
        ids=lambda parser: parser.__name__,
    )
    @given(
        comment=st.text(alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\r\n"), max_size=30),
        rest=st.text(alphabet="ab =:!<>@*/\n\r", max_size=40),
    )
    def test_downstream_sees_the_same_stream(self, downstream, comment, rest):
        cursor, _ = parse_with(parse_comment, f"// {comment}\n{rest}")

        assert _outcome(downstream, cursor) == _outcome(downstream, Cursor(rest))


@pytest.mark.unit
class TestBlocks:
    """Test block splitting of the body."""

    def test_blank_lines_separate_blocks(self):
        blocks = list(Blocks("a\nb\n\n\nc\n"))

        assert [block.text for block in blocks] == ["a\nb", "c"]

    def test_whitespace_only_line_separates_blocks(self):
        assert [block.text for block in Blocks("a\n \t\nb")] == ["a", "b"]

    def test_leading_blank_lines_skipped(self):
        assert [block.text for block in Blocks("\n\n\nbody")] == ["body"]

    def test_comments_are_elided_without_splitting(self):
        blocks = list(Blocks("a\n// hidden\nb\n"))

        assert len(blocks) == 1
        assert [line.text for line in blocks[0].lines] == ["a", "b"]

    def test_comment_block_is_elided(self):
        assert [block.text for block in Blocks("////\nA\nB\n////\nC")] == ["C"]

    def test_keep_comments(self):
        blocks = list(Blocks("a\n// kept\n", strip_comments=False))

        assert blocks[0].text == "a\n// kept"

    def test_unclosed_comment_block_strict(self):
        with pytest.raises(IncompleteDelimiter):
            list(Blocks("a\n\n////\nnever closed\n"))

    def test_unclosed_comment_block_lenient(self, caplog):
        with caplog.at_level(logging.WARNING, logger="adocparse"):
            blocks = list(Blocks("a\n\n////\nnever closed\n", strict=False))

        assert [block.text for block in blocks] == ["a"]
        assert "Unclosed comment block" in caplog.text

    def test_block_span_covers_lines(self):
        source = "x\n\nfirst\nsecond\n"
        (_, block) = list(Blocks(source))

        assert block.span == "first\nsecond"
        assert block.span.source is source

    def test_restartable(self):
        blocks = Blocks("a\n\nb")

        assert [b.text for b in blocks] == [b.text for b in blocks]

    @given(st.lists(st.text(alphabet="abc *", min_size=1, max_size=10).filter(str.strip), min_size=1, max_size=5))
    def test_paragraphs_round_trip(self, paragraphs):
        source = "\n\n".join(paragraphs)
        blocks = list(Blocks(source))

        assert [block.text for block in blocks] == paragraphs
