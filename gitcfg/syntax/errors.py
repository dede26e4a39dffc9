"""
Error types raised while scanning configuration input.
"""


class ParseError(Exception):
    """
    A diagnosed failure at a 1-based line and column.

    Rendered as ``[line, column] message``, e.g.
    ``[4, 5] Unexpected ']', expecting '[', NAME, ';' or '#'.``
    """

    def __init__(self, line: int, column: int, message: str):
        self.line = line
        self.column = column
        self.message = message
        super().__init__(f"[{line}, {column}] {message}")

    def __repr__(self) -> str:
        return f"ParseError({self.line}, {self.column}, {self.message!r})"
