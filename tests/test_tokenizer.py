"""
Unit Tests for the Tokenizer

Covers field counting, lazy splitting, caller-owned cursors and restartable
tokenized lines.
"""

import pytest

from core.tokenizer import FieldCursor, TokenizedLine, count_fields, split_fields
from utils.error_handler import ParseError


class TestCountFields:
    """Tests for count_fields()."""

    def test_count_when_plain_line_then_counts_every_field(self):
        assert count_fields("Bob,1,2,3") == 4

    def test_count_when_consecutive_delimiters_then_empty_fields_counted(self):
        assert count_fields("Bob,,2") == 3

    def test_count_when_trailing_delimiter_then_trailing_empty_field_counted(self):
        assert count_fields("Bob,1,") == 3

    def test_count_when_empty_line_then_one_field(self):
        assert count_fields("") == 1

    def test_count_when_none_then_raises_parse_error(self):
        with pytest.raises(ParseError):
            count_fields(None)


class TestSplitFields:
    """Tests for split_fields()."""

    def test_split_when_padded_fields_then_trims_each(self):
        assert list(split_fields(" Bob , 90 ,80 ")) == ["Bob", "90", "80"]

    def test_split_when_consecutive_delimiters_then_does_not_merge(self):
        assert list(split_fields("a,,b")) == ["a", "", "b"]

    def test_split_when_custom_delimiter_then_uses_it(self):
        assert list(split_fields("a;b;c", ";")) == ["a", "b", "c"]

    def test_split_when_multi_char_delimiter_then_uses_it(self):
        assert list(split_fields("a::b", "::")) == ["a", "b"]

    def test_split_when_none_then_raises_immediately(self):
        with pytest.raises(ParseError):
            split_fields(None)

    def test_split_when_empty_delimiter_then_raises(self):
        with pytest.raises(ParseError):
            split_fields("a,b", "")

    def test_split_does_not_mutate_input(self):
        line = "Bob,1,2"
        list(split_fields(line))
        assert line == "Bob,1,2"

    @pytest.mark.parametrize("line", [
        "Bob,95,92,88",
        "a,,b",
        "single",
        "x,",
    ])
    def test_split_when_joined_then_reproduces_line(self, line):
        assert ",".join(split_fields(line)) == line

    def test_split_when_count_compared_then_matches(self):
        line = "Bob,1,,3,"
        assert len(list(split_fields(line))) == count_fields(line)


class TestFieldCursor:
    """Tests for the caller-owned FieldCursor."""

    def test_next_field_when_walked_then_returns_fields_then_none(self):
        cursor = FieldCursor("Bob,90,80")
        assert cursor.next_field() == "Bob"
        assert cursor.next_field() == "90"
        assert cursor.next_field() == "80"
        assert cursor.next_field() is None
        assert cursor.next_field() is None

    def test_remaining_when_partially_consumed_then_counts_rest(self):
        cursor = FieldCursor("a,b,c")
        assert cursor.remaining() == 3
        cursor.next_field()
        assert cursor.remaining() == 2
        list(cursor)
        assert cursor.remaining() == 0
        assert not cursor.has_next()

    def test_reset_when_exhausted_then_starts_over(self):
        cursor = FieldCursor("a,b")
        assert list(cursor) == ["a", "b"]
        cursor.reset()
        assert list(cursor) == ["a", "b"]

    def test_two_cursors_when_interleaved_then_do_not_interfere(self):
        first = FieldCursor("a,b,c")
        second = FieldCursor("x,y,z")
        assert first.next_field() == "a"
        assert second.next_field() == "x"
        assert first.next_field() == "b"
        assert second.next_field() == "y"
        assert list(first) == ["c"]
        assert list(second) == ["z"]

    def test_two_cursors_when_same_line_then_independent(self):
        line = "a,b"
        first = FieldCursor(line)
        second = FieldCursor(line)
        assert list(first) == ["a", "b"]
        assert second.next_field() == "a"

    def test_cursor_when_none_then_raises(self):
        with pytest.raises(ParseError):
            FieldCursor(None)


class TestTokenizedLine:
    """Tests for the restartable TokenizedLine view."""

    def test_iterate_when_twice_then_same_fields(self):
        tokens = TokenizedLine("Bob,1,2")
        assert list(tokens) == ["Bob", "1", "2"]
        assert list(tokens) == ["Bob", "1", "2"]

    def test_len_when_empty_fields_then_counts_them(self):
        assert len(TokenizedLine("a,,")) == 3

    def test_cursor_when_created_then_fresh_each_time(self):
        tokens = TokenizedLine("a,b")
        cursor = tokens.cursor()
        cursor.next_field()
        assert tokens.cursor().next_field() == "a"
