"""Period values, the composite PeriodDate, and the field registry.

Public API:
    Year, Semester, Quarter, Month, Week, Day, Undated
        Bare period values (a single signed 64-bit count)

    PeriodDate, period_date(*values, kind=...)
        Calendar positions truncated to one kind's granularity

    get_field(value, kind) -> int
        Field accessor used by the formatter

    lookup(letter), required_fields(kind)
        Field registry

Examples:
    >>> from periodformat.periods import Quarter, PeriodKind, period_date
    >>> Quarter(3).value
    3
    >>> str(period_date(2018, 3, kind=PeriodKind.MONTH))
    '2018-03'
"""

from periodformat.periods.periodtypes import (
    PeriodKind,
    Period,
    Year,
    Semester,
    Quarter,
    Month,
    Week,
    Day,
    Undated,
    make_period,
    PeriodDate,
    period_date,
    get_field,
)
from periodformat.periods.periodregistry import (
    lookup,
    required_fields,
    specifier_letters,
    default_kind,
)
from periodformat.periods.periodconvert import (
    weeks,
    months,
    quarters,
    semesters,
    years,
    default,
    divexact,
)

__all__ = [
    "PeriodKind",
    "Period",
    "Year",
    "Semester",
    "Quarter",
    "Month",
    "Week",
    "Day",
    "Undated",
    "make_period",
    "PeriodDate",
    "period_date",
    "get_field",
    "lookup",
    "required_fields",
    "specifier_letters",
    "default_kind",
    "weeks",
    "months",
    "quarters",
    "semesters",
    "years",
    "default",
    "divexact",
]
