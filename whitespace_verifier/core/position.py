"""
Position Model

Token positions as produced by the parsing front end, and the reportable
locations violations are attached to.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """
    An atomic lexical unit.

    `line` is 1-indexed, `start_column` is the 0-indexed offset of the
    first character within that line.
    """
    line: int
    start_column: int
    text: str

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def last_column(self) -> int:
        """0-indexed offset of the token's last character."""
        return self.start_column + self.length - 1

    def __repr__(self):
        return f"Token({self.text!r}, line={self.line}, column={self.start_column})"


@dataclass(frozen=True)
class Location:
    """A user-facing (line, column) pair. Column is 1-indexed."""
    line: int
    column: int

    def __str__(self):
        return f"{self.line}:{self.column}"


def token_location(token: Token) -> Location:
    """Location of the token's first character."""
    return Location(token.line, token.start_column + 1)


def end_location(token: Token) -> Location:
    """Location immediately following the token on its line."""
    return Location(token.line, token.last_column + 1)
