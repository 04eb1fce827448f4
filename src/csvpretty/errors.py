"""Errors raised while reading, parsing or rendering a table.

Every error is fatal to a run. The CLI reports ``str(error)`` once on stderr
and exits non-zero; library callers can catch :class:`CsvprettyError`.
"""

from __future__ import annotations


class CsvprettyError(Exception):
    """Base class for all csvpretty errors."""

    exit_code = 1


class InputError(CsvprettyError):
    """Standard input could not be read or decoded."""


class CsvParseError(CsvprettyError):
    """The input is not well-formed CSV."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class InvalidArgument(CsvprettyError, ValueError):
    """An option value is not one of the accepted choices."""


class EmptyInput(CsvprettyError):
    """The input holds no CSV records, not even a header."""
