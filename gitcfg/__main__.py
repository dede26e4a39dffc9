"""
Entry point for gitcfg.

Usage:
    python -m gitcfg /path/to/file.conf
    python -m gitcfg --format json /path/to/file.conf
    python -m gitcfg --check /path/to/file.conf
"""

import argparse
import json
import sys
from pathlib import Path

from . import __version__
from .loader import ConfigError, ConfigLoader
from .logging import LogConfig, get_logger, setup_logging
from .syntax import Entry, Event


logger = get_logger("cli")


def format_entry(entry: Entry, output_format: str = "text") -> str:
    """
    Render an entry as a single output line.

    Text format:
        [host "example.org"]
        host "example.org".port = "8080"
        debug
    """
    if output_format == "json":
        return json.dumps(
            {
                "event": entry.event.name.lower(),
                "section": entry.section,
                "parameter": entry.parameter,
                "key": entry.key,
                "value": entry.value,
                "line": entry.line,
                "column": entry.column,
            },
            ensure_ascii=False,
        )

    header = entry.section
    if entry.parameter:
        header = f"{header} {json.dumps(entry.parameter, ensure_ascii=False)}"

    if entry.event is Event.SECTION:
        return f"[{header}]"

    name = f"{header}.{entry.key}" if header else entry.key
    if not entry.value:
        return name
    return f"{name} = {json.dumps(entry.value, ensure_ascii=False)}"


def check_config(config_path: str) -> int:
    """Parse a configuration file and print a summary."""
    try:
        entries = ConfigLoader().load_file(config_path)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    sections = [entry for entry in entries if entry.event is Event.SECTION]

    print(f"Configuration summary for {config_path}:")
    print(f"  Sections: {len(sections)}")
    print(f"  Keys: {len(entries) - len(sections)}")
    print("\nConfiguration is valid!")
    return 0


def dump_config(config_path: str, output_format: str) -> int:
    """Print every section and key of a configuration file."""
    try:
        entries = ConfigLoader().load_file(config_path)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    for entry in entries:
        print(format_entry(entry, output_format))

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="gitcfg",
        description="Scan git-style configuration files and print their sections and keys",
    )

    parser.add_argument(
        "config",
        help="Path to configuration file",
    )

    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Only check that the file parses and print a summary",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.file_enabled = True
        log_config.file_path = args.log_file

    setup_logging(log_config)

    config_path = Path(args.config)
    if not config_path.exists():
        print(f"Configuration file not found: {config_path}", file=sys.stderr)
        return 1

    logger.debug(f"Reading {config_path}")

    if args.check:
        return check_config(str(config_path))

    return dump_config(str(config_path), args.format)


if __name__ == "__main__":
    sys.exit(main())
