"""Document text helpers: line splitting and identifier spans.

These mirror the "word at / until position" queries a host editor answers,
so the providers can be exercised without an editor attached.
"""

from __future__ import annotations

import re

from assist_engine.models import Position, WordSpan

# Editor trimming also drops the byte-order mark, which str.strip() keeps.
_EDGE_BLANKS = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def split_lines(text: str) -> list[str]:
    """Split *text* into lines on ``\\n``.

    A trailing ``\\r`` from CRLF documents stays on the line, matching how
    the editor model reports line content to the validator.
    """
    return text.split("\n")


def trim_line(line: str) -> str:
    """Strip surrounding whitespace and any byte-order mark from *line*."""
    return _EDGE_BLANKS.sub("", line)


def is_word_char(ch: str) -> bool:
    """Return True for identifier characters (ASCII letters, digits, underscore)."""
    return ch == "_" or (ch.isascii() and ch.isalnum())


def line_at(text: str, line: int) -> str | None:
    """Return the 1-indexed *line* of *text*, or ``None`` past the end."""
    lines = split_lines(text)
    if line < 1 or line > len(lines):
        return None
    return lines[line - 1]


def word_until_position(text: str, position: Position) -> WordSpan:
    """Return the identifier prefix that ends at *position*.

    The span starts at the first identifier character contiguous with the
    cursor going left and ends at the cursor.  An empty span is returned
    when the cursor does not follow an identifier character.  Cursors past
    the end of the line are clamped to the line end.
    """
    line_text = line_at(text, position.line)
    if line_text is None:
        return WordSpan(word="", start_column=position.column, end_column=position.column)

    cursor = min(position.column - 1, len(line_text))
    start = cursor
    while start > 0 and is_word_char(line_text[start - 1]):
        start -= 1
    return WordSpan(word=line_text[start:cursor], start_column=start + 1, end_column=cursor + 1)


def word_at_position(text: str, position: Position) -> WordSpan | None:
    """Return the whole identifier touching *position*, or ``None``.

    An identifier touches the position when the character under the cursor
    or the one immediately before it belongs to it.
    """
    line_text = line_at(text, position.line)
    if line_text is None:
        return None

    index = position.column - 1
    if 0 <= index < len(line_text) and is_word_char(line_text[index]):
        anchor = index
    elif 0 < index <= len(line_text) and is_word_char(line_text[index - 1]):
        anchor = index - 1
    else:
        return None

    start = anchor
    while start > 0 and is_word_char(line_text[start - 1]):
        start -= 1
    end = anchor + 1
    while end < len(line_text) and is_word_char(line_text[end]):
        end += 1
    return WordSpan(word=line_text[start:end], start_column=start + 1, end_column=end + 1)
