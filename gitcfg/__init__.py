"""
Streaming scanner for git-style configuration files.
"""

from .const import APP_VERSION
from .syntax import Entry, Event, ParseError, Parser, parse

__version__ = APP_VERSION

__all__ = [
    "Entry",
    "Event",
    "ParseError",
    "Parser",
    "parse",
    "__version__",
]
