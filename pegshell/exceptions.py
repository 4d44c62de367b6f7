"""Exception hierarchy for pegshell."""

from __future__ import annotations


class ShellFrontError(Exception):
    """Base error for the shell front end."""


class ParseError(ShellFrontError):
    """Script text does not conform to the grammar."""

    def __init__(self, position: int, line: int, column: int, reason: str = "") -> None:
        self.position = position
        self.line = line
        self.column = column
        self.reason = reason
        message = f"Syntax error at line {line}, column {column}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class GlobError(ShellFrontError):
    """Raised by a glob service that rejects a pattern."""


__all__ = ["ShellFrontError", "ParseError", "GlobError"]
