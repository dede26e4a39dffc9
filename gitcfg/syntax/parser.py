"""
Pull parser for git-style configuration syntax.

Turns a UTF-8 byte buffer into a stream of events, one per call to
Parser.next(). The current section, parameter, key and value are exposed
as attributes and describe the event just produced.

Grammar:
    file      := (line '\\n')* line
    line      := space* (section | key)? space* comment?
    section   := '[' space* NAME (space+ STRING?)? space* ']'
    key       := NAME (space* '=' space* value?)?
    value     := STRING | RAWSTRING | PLAINTEXT
    comment   := (';' | '#') <anything up to newline>

The first error found is latched: every later call returns the same error
together with Event.EOF and does not scan again.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from ..const import (
    ASSIGN,
    COMMENT_MARKERS,
    ESCAPE,
    QUOTE,
    RAW_QUOTE,
    SECTION_CLOSE,
    SECTION_OPEN,
    STRING_ESCAPES,
)
from ..logging import get_logger
from .errors import ParseError
from .reader import Mark, Reader, is_name, is_space


logger = get_logger("syntax")


class Event(Enum):
    """Events produced by the parser."""

    SECTION = auto()  # [name] or [name "parameter"]
    KEY = auto()      # name, name = value
    EOF = auto()      # end of input (or a latched error)


@dataclass(frozen=True)
class Running:
    """The parser is scanning input."""


@dataclass(frozen=True)
class Errored:
    """The parser hit an error and only reports it from now on."""

    error: ParseError


@dataclass(frozen=True)
class Entry:
    """
    Snapshot of the parser fields after a SECTION or KEY event.

    Examples:
        [host "example.org"]  -> Entry(SECTION, "host", "example.org", "", "")
        port = 8080           -> Entry(KEY, "host", "example.org", "port", "8080")
    """

    event: Event
    section: str
    parameter: str
    key: str
    value: str
    line: int = 0
    column: int = 0

    def __repr__(self) -> str:
        if self.event is Event.SECTION:
            return f"Entry(SECTION, {self.section!r}, {self.parameter!r}, {self.line}:{self.column})"
        return f"Entry(KEY, {self.key!r}, {self.value!r}, {self.line}:{self.column})"


class Parser:
    """
    Scanner for git-style configuration files.

    Example file:
        # Global options
        debug = true

        [host "example.org"]
        port = 8080
        user-name = example

    Usage:
        parser = Parser(data)
        while True:
            event, error = parser.next()
            if error or event is Event.EOF:
                break
            print(parser.section, parser.key, parser.value)
    """

    def __init__(self, data: bytes):
        self.section = ""
        self.parameter = ""
        self.key = ""
        self.value = ""
        # Position of the first character of the last event
        self.line = 0
        self.column = 0

        self._reader = Reader(memoryview(data).tobytes())
        self._state: Running | Errored = Running()

    @property
    def error(self) -> ParseError | None:
        """The latched error, or None while the input is well formed."""
        if isinstance(self._state, Errored):
            return self._state.error
        return None

    def next(self) -> tuple[Event, ParseError | None]:
        """
        Find the next section or key.

        Returns:
            (event, error) where error is None unless the input is malformed.
            On error the event is always Event.EOF and the fields keep the
            values of the last successful event.
        """
        if isinstance(self._state, Errored):
            return Event.EOF, self._state.error

        try:
            return self._scan(), None
        except ParseError as e:
            self._state = Errored(e)
            logger.debug(f"Parse error latched: {e}")
            return Event.EOF, e

    def entry(self, event: Event) -> Entry:
        """Snapshot the current fields for the given event."""
        return Entry(
            event=event,
            section=self.section,
            parameter=self.parameter,
            key=self.key,
            value=self.value,
            line=self.line,
            column=self.column,
        )

    def __iter__(self) -> Iterator[Entry]:
        """
        Iterate over sections and keys until the end of input.

        Raises:
            ParseError: If the input is malformed
        """
        while True:
            event, error = self.next()
            if error is not None:
                raise error
            if event is Event.EOF:
                return
            yield self.entry(event)

    # Scanning

    def _scan(self) -> Event:
        reader = self._reader

        while True:
            reader.advance()
            rune = reader.rune

            if rune is Mark.EOF:
                return Event.EOF

            if rune == "\n" or is_space(rune):
                continue

            if rune in COMMENT_MARKERS:
                self._skip_comment()
                continue

            if rune == SECTION_OPEN:
                start = (reader.line, reader.column)
                reader.advance()
                section, parameter = self._parse_section()
                self.line, self.column = start
                self.section = section
                self.parameter = parameter
                self.key = ""
                self.value = ""
                return Event.SECTION

            if is_name(rune):
                start = (reader.line, reader.column)
                self.key, self.value = self._parse_key()
                self.line, self.column = start
                return Event.KEY

            raise self._unexpected("'[', NAME, ';' or '#'")

    def _parse_section(self) -> tuple[str, str]:
        """Parse a section header after the opening bracket."""
        reader = self._reader
        parameter = ""

        self._skip_space()
        name = self._parse_name()

        if reader.rune != SECTION_CLOSE:
            # Comment markers are not allowed before the closing bracket
            if not is_space(reader.rune):
                raise self._unexpected("']' or space")

            self._skip_space()
            if reader.rune == QUOTE:
                reader.advance()
                parameter = self._parse_string()
                self._skip_space()

            if reader.rune != SECTION_CLOSE:
                raise self._unexpected("']'")

        reader.advance()
        self._finish_line()

        return name, parameter

    def _parse_key(self) -> tuple[str, str]:
        """Parse a key and its optional value."""
        reader = self._reader
        value = ""

        key = self._parse_name()
        self._skip_space()

        if not self._at_line_end():
            if reader.rune != ASSIGN:
                raise self._unexpected("'=', ';' or '#'")

            reader.advance()
            self._skip_space()

            if reader.rune == QUOTE:
                reader.advance()
                value = self._parse_string()
            elif reader.rune == RAW_QUOTE:
                reader.advance()
                value = self._parse_raw_string()
            elif not self._at_line_end():
                value = self._parse_plain()

        self._finish_line()

        return key, value

    def _finish_line(self) -> None:
        """Allow trailing space and a comment, then require a line end."""
        reader = self._reader

        self._skip_space()
        if reader.rune in COMMENT_MARKERS:
            self._skip_comment()

        if reader.rune != "\n" and reader.rune is not Mark.EOF:
            raise self._unexpected("'\\n' or EOF")

    def _parse_name(self) -> str:
        reader = self._reader

        if not is_name(reader.rune):
            raise self._unexpected("NAME")

        start = reader.offset
        while is_name(reader.rune):
            reader.advance()

        return reader.span(start, reader.offset)

    def _parse_plain(self) -> str:
        """
        Read a plain text value up to a comment, newline or end of input.

        Trailing white space is dropped by remembering where the last
        non-space character ended; inner white space is kept.
        """
        reader = self._reader
        chars: list[str] = []
        end = 0

        while not self._at_line_end():
            chars.append(reader.rune)
            if not is_space(reader.rune):
                end = len(chars)
            reader.advance()

        return "".join(chars[:end])

    def _parse_string(self) -> str:
        """Read a quoted string after the opening quote, consuming the closing one."""
        reader = self._reader
        chars: list[str] = []

        while True:
            rune = reader.rune

            if rune == QUOTE:
                reader.advance()
                return "".join(chars)

            if rune == "\n" or rune is Mark.EOF:
                raise self._error("Unterminated string.")

            if rune == ESCAPE:
                reader.advance()
                if reader.rune not in STRING_ESCAPES:
                    raise self._unexpected("'\\', '\"', 'n', 'r', 't'")
                chars.append(STRING_ESCAPES[reader.rune])
            else:
                chars.append(rune)

            reader.advance()

    def _parse_raw_string(self) -> str:
        """Copy everything up to the closing backtick, newlines included."""
        reader = self._reader
        start = reader.offset

        while reader.rune != RAW_QUOTE:
            if reader.rune is Mark.EOF:
                raise self._error("Unterminated raw string.")
            reader.advance()

        value = reader.span(start, reader.offset)
        reader.advance()

        return value

    def _skip_comment(self) -> None:
        reader = self._reader
        while reader.rune != "\n" and reader.rune is not Mark.EOF:
            reader.advance()

    def _skip_space(self) -> None:
        reader = self._reader
        while is_space(reader.rune):
            reader.advance()

    def _at_line_end(self) -> bool:
        """Check for a comment marker, newline or end of input."""
        rune = self._reader.rune
        return rune in COMMENT_MARKERS or rune == "\n" or rune is Mark.EOF

    # Errors

    def _error(self, message: str) -> ParseError:
        return ParseError(self._reader.line, self._reader.column, message)

    def _unexpected(self, expecting: str) -> ParseError:
        rune = self._reader.rune
        if rune is Mark.EOF:
            return self._error(f"Unexpected EOF, expecting {expecting}.")
        # '\'' instead of repr's "'"
        text = "'\\''" if rune == "'" else repr(rune)
        return self._error(f"Unexpected {text}, expecting {expecting}.")


def parse(data: bytes) -> list[Entry]:
    """
    Convenience function to scan a whole buffer.

    Args:
        data: UTF-8 encoded configuration

    Returns:
        One Entry per section and key, in file order

    Raises:
        ParseError: If the input is malformed
    """
    return list(Parser(data))
