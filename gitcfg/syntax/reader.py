"""
Code point reader over a UTF-8 byte buffer.

Decodes one code point at a time and keeps the byte offset, line and
column of the current code point. Besides real code points the reader
can sit on one of three marks:

- START: nothing has been read yet
- EOF: the buffer is exhausted
- INVALID: a malformed UTF-8 sequence was found

EOF and INVALID are terminal, advancing from them does nothing.
"""

import unicodedata
from enum import Enum, auto

from ..const import NAME_PUNCTUATION
from .errors import ParseError


class Mark(Enum):
    """Pseudo code points the reader can be positioned on."""

    START = auto()
    EOF = auto()
    INVALID = auto()


Rune = str | Mark

# Characters str.isspace() accepts that are not Unicode White_Space
_NOT_WHITE_SPACE = frozenset("\n\x1c\x1d\x1e\x1f")


def is_space(rune: Rune) -> bool:
    """Check for Unicode white space other than newline."""
    return isinstance(rune, str) and rune.isspace() and rune not in _NOT_WHITE_SPACE


def is_name(rune: Rune) -> bool:
    """Check for a character allowed in section and key names."""
    if not isinstance(rune, str):
        return False
    return rune in NAME_PUNCTUATION or unicodedata.category(rune)[0] in ("L", "N")


def _sequence_length(lead: int) -> int:
    """Length of the UTF-8 sequence started by a lead byte, 0 if it cannot lead."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _decode(chunk: bytes, size: int) -> str | None:
    """Decode a single UTF-8 sequence, None if it is truncated or malformed."""
    if size == 0 or len(chunk) < size:
        return None
    try:
        return chunk.decode("utf-8")
    except UnicodeDecodeError:
        return None


class Reader:
    """
    Cursor over an immutable byte buffer.

    Attributes:
        rune: Current code point (a one character string) or a Mark
        offset: Byte offset of the current code point
        next_offset: Byte offset the next code point is decoded from
        line: 1-based line of the current code point
        column: 1-based column of the current code point
    """

    def __init__(self, data: bytes):
        self.data = data
        self.rune: Rune = Mark.START
        self.offset = 0
        self.next_offset = 0
        self.line = 0
        self.column = 0

    @property
    def at_end(self) -> bool:
        return self.rune is Mark.EOF or self.rune is Mark.INVALID

    def advance(self) -> None:
        """
        Move to the next code point.

        Raises:
            ParseError: If the bytes at the new position are not valid UTF-8.
                The reader is left on Mark.INVALID.
        """
        if self.at_end:
            return

        if self.rune == "\n" or self.next_offset == 0:
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.offset = self.next_offset

        if self.next_offset >= len(self.data):
            self.rune = Mark.EOF
            return

        size = _sequence_length(self.data[self.next_offset])
        chunk = self.data[self.next_offset:self.next_offset + size]

        rune = _decode(chunk, size)

        if rune is None:
            self.rune = Mark.INVALID
            self.next_offset += 1
            raise ParseError(self.line, self.column, "UTF-8 encoding error.")

        self.rune = rune
        self.next_offset += size

    def span(self, start: int, end: int) -> str:
        """Text between two byte offsets that have already been decoded."""
        return self.data[start:end].decode("utf-8")
