"""Format module: pattern compiler, formatter and parser.

Public API:
    compile_format(pattern) -> PeriodFormat
        Compile a pattern such as "yyyy-Qq"

    get_format(pattern) -> PeriodFormat
        Cached compile_format

    format_period(value, fmt=None, locale=None) -> str
        Render a period value

    parse_period(text, fmt, kind=None, locale=None) -> Period | PeriodDate
        Parse a period string

    YearFormat, SemesterFormat, QuarterFormat, MonthFormat, WeekFormat, DayFormat
        Predefined formats

Examples:
    >>> from periodformat.formats import parse_period, format_period, QuarterFormat
    >>> p = parse_period("2018-Q2", QuarterFormat)
    >>> format_period(p, "Qq yyyy")
    'Q2 2018'
"""

from periodformat.formats.formatcompiler import PeriodFormat, compile_format
from periodformat.formats.formattokens import PeriodToken, PeriodPart, Delim
from periodformat.formats.formatapi import (
    YearFormat,
    SemesterFormat,
    QuarterFormat,
    MonthFormat,
    WeekFormat,
    DayFormat,
    default_format,
    get_format,
    clear_cache,
    format_period,
    parse_period,
    format_series,
    parse_series,
)

__all__ = [
    "PeriodFormat",
    "compile_format",
    "PeriodToken",
    "PeriodPart",
    "Delim",
    "YearFormat",
    "SemesterFormat",
    "QuarterFormat",
    "MonthFormat",
    "WeekFormat",
    "DayFormat",
    "default_format",
    "get_format",
    "clear_cache",
    "format_period",
    "parse_period",
    "format_series",
    "parse_series",
]
