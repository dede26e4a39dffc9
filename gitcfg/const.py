"""
Application constants and syntax metadata.
"""

# Application info
APP_NAME = "gitcfg"
APP_VERSION = "0.1.0"

# Syntax characters
SECTION_OPEN = "["
SECTION_CLOSE = "]"
ASSIGN = "="
QUOTE = '"'
RAW_QUOTE = "`"
ESCAPE = "\\"
COMMENT_MARKERS = frozenset({";", "#"})
NAME_PUNCTUATION = frozenset({".", "_", "-"})

# Escape sequences accepted inside quoted strings
STRING_ESCAPES = {
    "\\": "\\",
    '"': '"',
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
