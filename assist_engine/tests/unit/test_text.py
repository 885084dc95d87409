"""Unit tests for assist_engine.text and assist_engine.language."""

from __future__ import annotations

import pytest

from assist_engine.language import SQL_LANGUAGE_CONFIGURATION, build_language_configuration
from assist_engine.models import Position
from assist_engine.text import (
    is_word_char,
    line_at,
    split_lines,
    trim_line,
    word_at_position,
    word_until_position,
)


class TestLines:
    def test_split_keeps_empty_trailing_line(self):
        assert split_lines("a\n") == ["a", ""]

    def test_split_keeps_carriage_return(self):
        assert split_lines("a\r\nb") == ["a\r", "b"]

    def test_line_at(self):
        assert line_at("a\nb", 2) == "b"
        assert line_at("a\nb", 3) is None
        assert line_at("a\nb", 0) is None

    def test_trim_line_drops_whitespace_and_byte_order_mark(self):
        assert trim_line("\ufeff  SELECT 1\r") == "SELECT 1"
        assert trim_line(" \ufeff ") == ""


class TestWordChars:
    @pytest.mark.parametrize("ch", ["a", "Z", "0", "_"])
    def test_word_chars(self, ch):
        assert is_word_char(ch)

    @pytest.mark.parametrize("ch", [".", " ", "(", "'", "é"])
    def test_non_word_chars(self, ch):
        assert not is_word_char(ch)


class TestWordSpans:
    def test_until_position_in_middle_of_word(self):
        span = word_until_position("SELECT users", Position(line=1, column=11))
        assert (span.word, span.start_column, span.end_column) == ("use", 8, 11)

    def test_at_position_returns_whole_word(self):
        span = word_at_position("SELECT users", Position(line=1, column=10))
        assert span is not None
        assert (span.word, span.start_column, span.end_column) == ("users", 8, 13)

    def test_at_position_at_line_start(self):
        span = word_at_position("users", Position(line=1, column=1))
        assert span is not None
        assert span.word == "users"

    def test_at_position_past_document(self):
        assert word_at_position("users", Position(line=2, column=1)) is None


class TestLanguageConfiguration:
    def test_comments(self):
        assert SQL_LANGUAGE_CONFIGURATION["comments"] == {"lineComment": "--", "blockComment": ["/*", "*/"]}

    def test_pairs(self):
        config = build_language_configuration()
        assert config["brackets"] == [["(", ")"], ["[", "]"]]
        opens = [p["open"] for p in config["autoClosingPairs"]]
        assert opens == ["(", "[", "'", '"']
        assert config["surroundingPairs"] == config["autoClosingPairs"]

    def test_builder_returns_fresh_copies(self):
        first = build_language_configuration()
        first["brackets"].clear()
        assert build_language_configuration()["brackets"]
