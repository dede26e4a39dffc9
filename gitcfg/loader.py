"""
Configuration file loading.
"""

from pathlib import Path

from .logging import get_logger
from .syntax import Entry, Event, ParseError, parse


logger = get_logger("loader")


class ConfigError(Exception):
    """Exception raised for unreadable or malformed configuration files."""

    pass


class ConfigLoader:
    """
    Reads configuration files into a list of entries.

    Usage:
        loader = ConfigLoader()
        entries = loader.load_file("/etc/example.conf")
        # or
        entries = loader.load_bytes(data, "example.conf")
    """

    def __init__(self):
        self.last_entries: list[Entry] = []

    def load_file(self, path: str | Path) -> list[Entry]:
        """
        Load entries from a file.

        Args:
            path: Path to the configuration file

        Returns:
            Sections and keys in file order

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.is_file():
            raise ConfigError(f"Not a file: {path}")

        try:
            data = path.read_bytes()
        except OSError as e:
            raise ConfigError(f"Failed to read {path}: {e}") from e

        return self.load_bytes(data, str(path))

    def load_bytes(self, data: bytes, filename: str = "<bytes>") -> list[Entry]:
        """
        Load entries from an in-memory buffer.

        Args:
            data: UTF-8 encoded configuration
            filename: Name used in error messages

        Returns:
            Sections and keys in file order

        Raises:
            ConfigError: If the buffer cannot be parsed
        """
        logger.debug(f"Parsing {filename} ({len(data)} bytes)")

        try:
            entries = parse(data)
        except ParseError as e:
            raise ConfigError(f"{filename}: {e}") from e

        self.last_entries = entries

        sections = sum(1 for entry in entries if entry.event is Event.SECTION)
        logger.info(f"Loaded {filename}: {sections} sections, {len(entries) - sections} keys")

        return entries
