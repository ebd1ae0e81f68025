"""Period Format - text formats for calendar periods

Public API for compiling period patterns and converting period values to
and from text such as "2018-Q2" or "2018-S1".

Usage:
    from periodformat import format_period, parse_period, compile_format
    from periodformat import Year, Quarter, PeriodKind, period_date

    # Format a composite period with its predefined format
    format_period(period_date(2018, 2, kind=PeriodKind.QUARTER))   # '2018-Q2'

    # Parse with a pattern string (compiled once, cached)
    parse_period("2018-S1", "yyyy-Ss")   # PeriodDate(SEMESTER, year=2018, semester=1)

    # Compile once, reuse many times
    fmt = compile_format("U yyyy")
    format_period(period_date(2018, 3, kind=PeriodKind.MONTH), fmt)   # 'March 2018'

See periodformat/formats/formatcompiler.py for the pattern language.
"""

__version__ = "0.1.0"

# ============================================================================
# Formatting / Parsing API
# ============================================================================

from .formats.formatapi import (
    format_period,       # Primary API - period value -> text
    parse_period,        # Primary API - text -> period value
    get_format,          # Cached pattern compilation
    clear_cache,         # Clear the pattern cache
    default_format,      # Predefined format for a kind
    format_series,       # Vectorized format over a pandas Series
    parse_series,        # Vectorized parse over a pandas Series
    YearFormat,
    SemesterFormat,
    QuarterFormat,
    MonthFormat,
    WeekFormat,
    DayFormat,
)
from .formats.formatcompiler import (
    PeriodFormat,        # Compiled pattern
    compile_format,      # Pattern -> PeriodFormat
)

# ============================================================================
# Period values
# ============================================================================

from .periods.periodtypes import (
    PeriodKind,
    Period,
    Year,
    Semester,
    Quarter,
    Month,
    Week,
    Day,
    Undated,
    PeriodDate,
    period_date,
    get_field,
)
from .periods.periodconvert import (
    weeks,
    months,
    quarters,
    semesters,
    years,
)

# ============================================================================
# Locales
# ============================================================================

from .locales.localeapi import (
    register_locale,
    month_name,
    month_abbr,
    name_to_month,
    abbr_to_month,
)

# ============================================================================
# Errors
# ============================================================================

from .errors import (
    PeriodFormatError,
    FormatCompileError,
    InvalidSpecifier,
    EmptyFormat,
    PeriodParseError,
    ParseError,
    DelimiterMismatch,
    WidthMismatch,
    NoDigits,
    UnknownMonthName,
    TrailingInput,
    MissingYear,
    MissingField,
    UnknownSpecifier,
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "format_period",
    "parse_period",
    "compile_format",

    # ========================================================================
    # Formats
    # ========================================================================
    "PeriodFormat",
    "get_format",
    "clear_cache",
    "default_format",
    "format_series",
    "parse_series",
    "YearFormat",
    "SemesterFormat",
    "QuarterFormat",
    "MonthFormat",
    "WeekFormat",
    "DayFormat",

    # ========================================================================
    # Period values
    # ========================================================================
    "PeriodKind",
    "Period",
    "Year",
    "Semester",
    "Quarter",
    "Month",
    "Week",
    "Day",
    "Undated",
    "PeriodDate",
    "period_date",
    "get_field",
    "weeks",
    "months",
    "quarters",
    "semesters",
    "years",

    # ========================================================================
    # Locales
    # ========================================================================
    "register_locale",
    "month_name",
    "month_abbr",
    "name_to_month",
    "abbr_to_month",

    # ========================================================================
    # Errors
    # ========================================================================
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
