"""Period formatting API.

Public API for compiling patterns, formatting period values and parsing
period strings.

Configuration:
    PERIODFORMAT_CACHE_SIZE: Number of compiled patterns kept by
        get_format() (default: 128)
"""

import logging
import os
from functools import lru_cache
from typing import Any, Optional, Union

import pandas as pd

from periodformat.errors import PeriodParseError
from periodformat.formats.formatcompiler import PeriodFormat, compile_format
from periodformat.formats.formatengine import parse, render
from periodformat.periods.periodtypes import Period, PeriodDate, PeriodKind

logger = logging.getLogger(__name__)

CACHE_SIZE = int(os.environ.get("PERIODFORMAT_CACHE_SIZE", "128"))


# ============================================================================
# Standard formats
# ============================================================================

YearFormat = compile_format("yyyy")
"""Example: format_period(Year(2018), YearFormat) -> '2018'"""

SemesterFormat = compile_format("yyyy-Ss")
"""Example: format_period(period_date(2018, 1, kind=SEMESTER), SemesterFormat) -> '2018-S1'"""

QuarterFormat = compile_format("yyyy-Qq")
"""Example: format_period(period_date(2018, 2, kind=QUARTER), QuarterFormat) -> '2018-Q2'"""

MonthFormat = compile_format("yyyy-mm")
"""Example: format_period(period_date(2018, 3, kind=MONTH), MonthFormat) -> '2018-03'"""

WeekFormat = compile_format("yyyy-Www")
"""Example: format_period(period_date(2018, 4, kind=WEEK), WeekFormat) -> '2018-W04'"""

DayFormat = compile_format("yyyy-mm-dd")
"""Example: format_period(period_date(2018, 3, 11, kind=DAY), DayFormat) -> '2018-03-11'"""

DEFAULT_FORMATS = {
    PeriodKind.YEAR: YearFormat,
    PeriodKind.SEMESTER: SemesterFormat,
    PeriodKind.QUARTER: QuarterFormat,
    PeriodKind.MONTH: MonthFormat,
    PeriodKind.WEEK: WeekFormat,
    PeriodKind.DAY: DayFormat,
}


def default_format(kind: PeriodKind) -> Optional[PeriodFormat]:
    """Predefined format for `kind`, or None for UNDATED."""
    return DEFAULT_FORMATS.get(kind)


# ============================================================================
# Compilation cache
# ============================================================================

@lru_cache(maxsize=CACHE_SIZE)
def get_format(pattern: str) -> PeriodFormat:
    """
    Compile `pattern`, reusing a previous compilation when available.

    Compilation is pure, so the cache never changes results; a pattern
    compiled twice by concurrent callers is harmless.

    Examples:
        >>> get_format("yyyy-Qq") is get_format("yyyy-Qq")
        True
    """
    return compile_format(pattern)


def clear_cache():
    """Clear the compiled pattern cache.

    Useful for testing or to release memory after many ad-hoc patterns.
    """
    get_format.cache_clear()
    logger.info("Cleared period format cache")


def _as_format(fmt: Union[PeriodFormat, str]) -> PeriodFormat:
    if isinstance(fmt, PeriodFormat):
        return fmt
    if isinstance(fmt, str):
        return get_format(fmt)
    raise TypeError(f"Expected a PeriodFormat or pattern string, got {type(fmt).__name__}")


def _as_kind(kind: Union[PeriodKind, str, type, None]) -> Optional[PeriodKind]:
    if kind is None or isinstance(kind, PeriodKind):
        return kind
    if isinstance(kind, str):
        return PeriodKind(kind.lower())
    if isinstance(kind, type) and issubclass(kind, Period) and kind.kind is not None:
        return kind.kind
    raise TypeError(f"Expected a PeriodKind, kind name or Period class, got {kind!r}")


# ============================================================================
# Format / parse
# ============================================================================

def format_period(
    value: Any,
    fmt: Union[PeriodFormat, str, None] = None,
    *,
    locale: Optional[str] = None,
) -> str:
    """
    Format a period value as text.

    Args:
        value: Period, PeriodDate, datetime.date, pandas.Timestamp/Period
        fmt: PeriodFormat or pattern string (default: the predefined format
            of the value's kind). Pattern strings go through get_format();
            pass a PeriodFormat to skip even the cache lookup.
        locale: Locale for month-name fields (default: configured locale)

    Returns:
        Formatted string

    Raises:
        MissingField: If the value cannot answer a field of the format

    Examples:
        >>> format_period(period_date(2018, 2, kind=PeriodKind.QUARTER))
        '2018-Q2'

        >>> format_period(Month(3), "mm")
        '03'

        >>> format_period(Year(-12000), "yyyy")
        '-12000'

        >>> format_period(date(2018, 3, 11), "U yyyy")
        'March 2018'
    """
    if fmt is None:
        kind = getattr(value, "kind", None)
        fmt = default_format(kind) if isinstance(kind, PeriodKind) else None
        if fmt is None:
            raise TypeError(f"No default format for {type(value).__name__}; pass fmt explicitly")

    return render(value, _as_format(fmt), locale)


def parse_period(
    text: str,
    fmt: Union[PeriodFormat, str],
    kind: Union[PeriodKind, str, type, None] = None,
    *,
    locale: Optional[str] = None,
):
    """
    Parse a period string.

    Args:
        text: Input such as "2018-Q2"
        fmt: PeriodFormat or pattern string
        kind: Granularity of the result (PeriodKind, "month", or Month).
            Default: a format with a single field kind gives the bare
            period (Year(5)); otherwise the finest parsed kind as a
            PeriodDate.
        locale: Locale for month-name fields (default: configured locale)

    Returns:
        Period or PeriodDate

    Raises:
        PeriodParseError: DelimiterMismatch, WidthMismatch, NoDigits,
            UnknownMonthName, TrailingInput or MissingYear

    Examples:
        >>> parse_period("2018-Q2", "yyyy-Qq")
        PeriodDate(QUARTER, year=2018, quarter=2)

        >>> parse_period("1995", "yyyy")
        Year(value=1995)

        >>> parse_period("2018-Q2", QuarterFormat, kind="month")
        PeriodDate(MONTH, year=2018, quarter=2, month=1)
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a string to parse, got {type(text).__name__}")
    return parse(text, _as_format(fmt), _as_kind(kind), locale)


# ============================================================================
# Vectorized helpers
# ============================================================================

def format_series(
    values: pd.Series,
    fmt: Union[PeriodFormat, str, None] = None,
    *,
    locale: Optional[str] = None,
) -> pd.Series:
    """
    Format every element of a Series. Missing values stay missing.

    Examples:
        >>> s = pd.Series([Year(2018), None, Year(5)])
        >>> format_series(s, "yyyy").tolist()
        ['2018', None, '0005']
    """
    resolved = _as_format(fmt) if fmt is not None else None

    def _one(v):
        if v is None or (not isinstance(v, (Period, PeriodDate)) and pd.isna(v)):
            return None
        return format_period(v, resolved, locale=locale)

    return pd.Series([_one(v) for v in values], index=values.index, name=values.name, dtype=object)


def parse_series(
    values: pd.Series,
    fmt: Union[PeriodFormat, str],
    kind: Union[PeriodKind, str, type, None] = None,
    *,
    locale: Optional[str] = None,
    errors: str = "raise",
) -> pd.Series:
    """
    Parse every element of a Series of strings.

    Args:
        values: Series of period strings (missing values stay missing)
        fmt: PeriodFormat or pattern string, compiled once
        kind: Target kind, as in parse_period()
        locale: Locale for month-name fields
        errors: "raise" to propagate the first parse error, "coerce" to
            turn unparseable entries into None

    Returns:
        Series of Period / PeriodDate objects

    Examples:
        >>> parse_series(pd.Series(["2018-Q2", "bad"]), "yyyy-Qq", errors="coerce").tolist()
        [PeriodDate(QUARTER, year=2018, quarter=2), None]
    """
    if errors not in ("raise", "coerce"):
        raise ValueError(f"Unknown errors mode: {errors}. Use 'raise' or 'coerce'")

    compiled = _as_format(fmt)
    target = _as_kind(kind)
    out = []
    failures = 0
    for v in values:
        if v is None or (not isinstance(v, str) and pd.isna(v)):
            out.append(None)
            continue
        try:
            out.append(parse(str(v), compiled, target, locale))
        except PeriodParseError as e:
            if errors == "raise":
                raise
            logger.debug(f"Could not parse {v!r} with {compiled.pattern!r}: {e}")
            failures += 1
            out.append(None)

    if failures:
        logger.info(f"Coerced {failures}/{len(values)} unparseable values to None")

    return pd.Series(out, index=values.index, name=values.name, dtype=object)


__all__ = [
    "YearFormat",
    "SemesterFormat",
    "QuarterFormat",
    "MonthFormat",
    "WeekFormat",
    "DayFormat",
    "DEFAULT_FORMATS",
    "default_format",
    "get_format",
    "clear_cache",
    "format_period",
    "parse_period",
    "format_series",
    "parse_series",
]
