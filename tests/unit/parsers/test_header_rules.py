#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the title, author line and attribute entry rules."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from adocparse.exceptions import EmptyRequiredSpan, IncompleteDelimiter, NoMatch
from adocparse.parsers.combinators import parse_with
from adocparse.parsers.header import parse_author_line, parse_doc_attr, parse_title

name_tokens = st.text(alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ.-'", min_size=1, max_size=12)
attribute_names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789-_", min_size=1, max_size=15)
attribute_values = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\r\n"), min_size=1, max_size=30
).filter(lambda v: not v[0].isspace() and v[0] not in " \t")


@pytest.mark.unit
class TestParseTitle:
    """Test the title rule."""

    def test_level_and_content(self):
        cursor, title = parse_with(parse_title, "===== Hello Asciidoctor\nHello World!")

        assert title.level == 5
        assert title.content == " Hello Asciidoctor"
        assert cursor.rest == "Hello World!"

    def test_bare_marker_has_empty_content(self):
        cursor, title = parse_with(parse_title, "=\n")

        assert title.level == 1
        assert title.content == ""
        assert cursor.at_end

    def test_title_at_end_of_input(self):
        cursor, title = parse_with(parse_title, "= Only")

        assert title.content == " Only"
        assert cursor.at_end

    def test_crlf_terminator(self):
        cursor, title = parse_with(parse_title, "== Title\r\nbody")

        assert title.content == " Title"
        assert cursor.rest == "body"

    def test_no_marker_fails(self):
        with pytest.raises(NoMatch):
            parse_with(parse_title, "Title\n")

    def test_content_is_a_view(self):
        source = "== Zero copy\n"
        _, title = parse_with(parse_title, source)

        assert title.content.source is source
        assert (title.content.start, title.content.end) == (2, 12)

    @given(st.integers(min_value=1, max_value=12), st.text(alphabet="abc XYZ!?", max_size=20))
    def test_level_counts_markers(self, level, text):
        source = "=" * level + " " + text + "\n"
        _, title = parse_with(parse_title, source)

        assert title.level == level
        assert title.content == " " + text


@pytest.mark.unit
class TestParseAuthorLine:
    """Test the author line rule."""

    def test_three_tokens(self):
        cursor, info = parse_with(parse_author_line, "Wang Yue Heng\n")

        assert info.author.firstname == "Wang"
        assert info.author.middlename == "Yue"
        assert info.author.lastname == "Heng"
        assert info.email is None
        assert cursor.at_end

    def test_two_tokens_are_first_and_last(self):
        _, info = parse_with(parse_author_line, "Wang Heng\n")

        assert info.author.firstname == "Wang"
        assert info.author.middlename is None
        assert info.author.lastname == "Heng"

    def test_single_token(self):
        _, info = parse_with(parse_author_line, "Heng\n")

        assert info.author.firstname == "Heng"
        assert info.author.middlename is None
        assert info.author.lastname is None

    def test_with_email(self):
        cursor, info = parse_with(parse_author_line, "Heng Wang <admin@eastack.me>\nnext")

        assert info.full_name == "Heng Wang"
        assert info.email == "admin@eastack.me"
        assert cursor.rest == "next"

    def test_blanks_around_parts_are_discarded(self):
        _, info = parse_with(parse_author_line, "  Heng \t Wang  <  admin@eastack.me >  \n")

        assert info.author.parts == ("Heng", "Wang")
        assert info.email == "admin@eastack.me"

    def test_email_without_space(self):
        _, info = parse_with(parse_author_line, "Heng<h@x.io>")

        assert info.author.firstname == "Heng"
        assert info.email == "h@x.io"

    def test_unclosed_email_raises_incomplete_delimiter(self):
        with pytest.raises(IncompleteDelimiter):
            parse_with(parse_author_line, "Heng Wang <admin@eastack.me\n")

    def test_empty_email_raises_empty_required_span(self):
        with pytest.raises(EmptyRequiredSpan):
            parse_with(parse_author_line, "Heng Wang <>\n")

    def test_four_tokens_fail(self):
        with pytest.raises(NoMatch):
            parse_with(parse_author_line, "This is a sentence\n")

    def test_empty_line_fails(self):
        with pytest.raises(EmptyRequiredSpan):
            parse_with(parse_author_line, "\nbody")

    def test_attribute_line_is_not_an_author(self):
        with pytest.raises(EmptyRequiredSpan):
            parse_with(parse_author_line, ":toc:\n")

    @given(st.lists(name_tokens, min_size=1, max_size=3))
    def test_name_mapping(self, tokens):
        _, info = parse_with(parse_author_line, " ".join(tokens) + "\n")
        name = info.author

        assert [part.text for part in name.parts] == tokens
        assert name.firstname == tokens[0]
        assert (name.middlename is None) == (len(tokens) < 3)
        assert (name.lastname is None) == (len(tokens) < 2)


@pytest.mark.unit
class TestParseDocAttr:
    """Test the attribute entry rule."""

    def test_name_and_value(self):
        cursor, attr = parse_with(parse_doc_attr, ":hello: world\nnext")

        assert attr.name == "hello"
        assert attr.value == "world"
        assert not attr.unset
        assert cursor.rest == "\nnext"

    def test_valueless(self):
        _, attr = parse_with(parse_doc_attr, ":toc:\n")

        assert attr.name == "toc"
        assert attr.value is None

    def test_blanks_only_after_name_give_no_value(self):
        _, attr = parse_with(parse_doc_attr, ":toc:   \n")

        assert attr.value is None

    def test_unset_prefix(self):
        _, attr = parse_with(parse_doc_attr, ":!toc:\n")

        assert attr.name == "toc"
        assert attr.unset

    def test_unset_suffix(self):
        _, attr = parse_with(parse_doc_attr, ":toc!:\n")

        assert attr.name == "toc"
        assert attr.unset

    def test_value_keeps_inner_text(self):
        _, attr = parse_with(parse_doc_attr, ":description: A *very* short: note\n")

        assert attr.value == "A *very* short: note"

    def test_unclosed_name_raises_incomplete_delimiter(self):
        with pytest.raises(IncompleteDelimiter):
            parse_with(parse_doc_attr, ":hello world\n")

    def test_empty_name_raises_empty_required_span(self):
        with pytest.raises(EmptyRequiredSpan):
            parse_with(parse_doc_attr, ":: value\n")

    def test_not_an_attribute(self):
        with pytest.raises(NoMatch):
            parse_with(parse_doc_attr, "toc: left\n")

    @given(attribute_names, st.one_of(st.none(), attribute_values), st.booleans())
    def test_attribute_structure(self, name, value, unset):
        line = f":{'!' if unset else ''}{name}:" + (f" {value}" if value is not None else "")
        cursor, attr = parse_with(parse_doc_attr, line + "\n")

        assert attr.name == name
        assert attr.unset == unset
        if value is None:
            assert attr.value is None
        else:
            assert attr.value == value
        assert cursor.rest == "\n"
