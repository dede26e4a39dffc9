"""
Scanning engine for git-style configuration syntax.
"""

from .parser import Entry, Errored, Event, ParseError, Parser, Running, parse
from .reader import Mark, Reader, is_name, is_space

__all__ = [
    "Entry",
    "Errored",
    "Event",
    "Mark",
    "ParseError",
    "Parser",
    "Reader",
    "Running",
    "is_name",
    "is_space",
    "parse",
]
