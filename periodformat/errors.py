"""Error taxonomy for period formatting and parsing.

Compile-time errors (a bad pattern) and parse-time errors (input that does
not match a good pattern) live in separate branches so callers can tell
"my format string is wrong" from "the data doesn't match this format".

Every error derives from ``ValueError`` and carries positional context:

    PeriodFormatError
    ├── FormatCompileError
    │   ├── InvalidSpecifier
    │   └── EmptyFormat
    ├── PeriodParseError
    │   ├── DelimiterMismatch
    │   ├── WidthMismatch
    │   ├── NoDigits
    │   ├── UnknownMonthName
    │   ├── TrailingInput
    │   └── MissingYear
    ├── MissingField
    └── UnknownSpecifier
"""

from typing import Optional


class PeriodFormatError(ValueError):
    """Base class for every error raised by periodformat.

    Attributes:
        position: Character offset (or token index for MissingField) where
            the problem was detected, if known
        expected: The literal, field or value that was expected, if any
    """

    def __init__(
        self,
        message: str,
        *,
        position: Optional[int] = None,
        expected: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.position = position
        self.expected = expected


# ============================================================================
# Compile-time
# ============================================================================

class FormatCompileError(PeriodFormatError):
    """The pattern string itself is malformed."""


class InvalidSpecifier(FormatCompileError):
    pass


class EmptyFormat(FormatCompileError):
    pass


# ============================================================================
# Parse-time
# ============================================================================

class PeriodParseError(PeriodFormatError):
    """The input text does not match the compiled format."""


ParseError = PeriodParseError


class DelimiterMismatch(PeriodParseError):
    pass


class WidthMismatch(PeriodParseError):
    pass


class NoDigits(PeriodParseError):
    pass


class UnknownMonthName(PeriodParseError):
    """A month name (or number) has no entry in the locale table.

    Attributes:
        suggestion: Closest known name, when one is close enough
    """

    def __init__(self, message: str, *, suggestion: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.suggestion = suggestion


class TrailingInput(PeriodParseError):
    pass


class MissingYear(PeriodParseError):
    pass


# ============================================================================
# Format-time / registry
# ============================================================================

class MissingField(PeriodFormatError):
    """A value cannot answer a field the format demands."""


class UnknownSpecifier(PeriodFormatError, LookupError):
    pass


__all__ = [
    "PeriodFormatError",
    "FormatCompileError",
    "InvalidSpecifier",
    "EmptyFormat",
    "PeriodParseError",
    "ParseError",
    "DelimiterMismatch",
    "WidthMismatch",
    "NoDigits",
    "UnknownMonthName",
    "TrailingInput",
    "MissingYear",
    "MissingField",
    "UnknownSpecifier",
]
