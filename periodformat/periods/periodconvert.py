"""Unit conversion helpers for bare period values.

Conversions between units that do not divide evenly use ISO week-date
averages: 400 Gregorian years hold 20871 weeks, so a year is 52.1775 weeks
and a month 4.348125 weeks.

Examples:
    >>> weeks(Year(1))
    52.1775
    >>> months(Quarter(2))
    6
    >>> years(Month(30))
    2
"""

import math

from periodformat.periods.periodtypes import (
    Day,
    Month,
    Period,
    PeriodKind,
    Quarter,
    Semester,
    Week,
    Year,
    make_period,
)


# ============================================================================
# Conversion Constants
# ============================================================================

DAYS_PER_YEAR = 365.2425
DAYS_PER_SEMESTER = 182.62125
DAYS_PER_QUARTER = 91.310625
DAYS_PER_MONTH = 30.436875

WEEKS_PER_YEAR = 52.1775
WEEKS_PER_SEMESTER = 26.08875
WEEKS_PER_QUARTER = 13.044375
WEEKS_PER_MONTH = 4.348125


def _div(value: int, divisor) -> int:
    # Truncates toward zero, like integer division of counts
    if isinstance(divisor, float):
        return math.trunc(value / divisor)
    q = abs(value) // abs(divisor)
    return q if (value >= 0) == (divisor > 0) else -q


def _unsupported(name: str, p: Period):
    return TypeError(f"{name}() does not support {type(p).__name__}")


def weeks(p: Period):
    """Length of `p` in weeks (exact for Day/Week, an ISO average otherwise)."""
    if isinstance(p, Day):
        return _div(p.value, 7)
    if isinstance(p, Week):
        return p.value
    factors = {Month: WEEKS_PER_MONTH, Quarter: WEEKS_PER_QUARTER, Semester: WEEKS_PER_SEMESTER, Year: WEEKS_PER_YEAR}
    for cls, factor in factors.items():
        if isinstance(p, cls):
            return factor * p.value
    raise _unsupported("weeks", p)


def months(p: Period) -> int:
    """Whole months in `p`."""
    if isinstance(p, Day):
        return _div(p.value, DAYS_PER_MONTH)
    if isinstance(p, Week):
        return _div(p.value, WEEKS_PER_MONTH)
    multiples = {Month: 1, Quarter: 3, Semester: 6, Year: 12}
    for cls, factor in multiples.items():
        if isinstance(p, cls):
            return factor * p.value
    raise _unsupported("months", p)


def quarters(p: Period) -> int:
    """Whole quarters in `p`."""
    if isinstance(p, Day):
        return _div(p.value, DAYS_PER_QUARTER)
    if isinstance(p, Week):
        return _div(p.value, WEEKS_PER_QUARTER)
    if isinstance(p, Month):
        return _div(p.value, 3)
    multiples = {Quarter: 1, Semester: 2, Year: 4}
    for cls, factor in multiples.items():
        if isinstance(p, cls):
            return factor * p.value
    raise _unsupported("quarters", p)


def semesters(p: Period) -> int:
    """Whole semesters in `p`."""
    if isinstance(p, Day):
        return _div(p.value, DAYS_PER_SEMESTER)
    if isinstance(p, Week):
        return _div(p.value, WEEKS_PER_SEMESTER)
    if isinstance(p, Month):
        return _div(p.value, 6)
    if isinstance(p, Quarter):
        return _div(p.value, 2)
    if isinstance(p, Semester):
        return p.value
    if isinstance(p, Year):
        return 2 * p.value
    raise _unsupported("semesters", p)


def years(p: Period) -> int:
    """Whole years in `p`."""
    divisors = {
        Day: DAYS_PER_YEAR,
        Week: WEEKS_PER_YEAR,
        Month: 12,
        Quarter: 4,
        Semester: 2,
        Year: 1,
    }
    for cls, divisor in divisors.items():
        if isinstance(p, cls):
            return _div(p.value, divisor)
    raise _unsupported("years", p)


def default(kind) -> Period:
    """
    Sensible default value for a period kind: one unit.

    Args:
        kind: PeriodKind, Period subclass, or Period instance

    Examples:
        >>> default(PeriodKind.QUARTER)
        Quarter(value=1)
        >>> default(Semester(5))
        Semester(value=1)
    """
    if isinstance(kind, Period) or (isinstance(kind, type) and issubclass(kind, Period)):
        kind = kind.kind
    if not isinstance(kind, PeriodKind):
        raise TypeError(f"Expected a PeriodKind or Period, got {type(kind).__name__}")
    return make_period(kind, 1)


def divexact(x: int, y: int) -> int:
    """Integer division that refuses to drop a remainder.

    Raises:
        ArithmeticError: If `y` does not divide `x`

    Examples:
        >>> divexact(12, 3)
        4
    """
    q, r = divmod(x, y)
    if r != 0:
        raise ArithmeticError(f"{x} is not exactly divisible by {y}")
    return q


__all__ = [
    "weeks",
    "months",
    "quarters",
    "semesters",
    "years",
    "default",
    "divexact",
]
