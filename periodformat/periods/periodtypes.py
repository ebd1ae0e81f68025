"""Period Value Types
------------------

Period kinds, bare period values and the composite PeriodDate.

  - PeriodKind: Year, Semester, Quarter, Month, Week, Day, Undated
  - Period: a single signed 64-bit count of one kind (Year(2018), Quarter(3))
  - PeriodDate: a calendar position truncated to one kind's granularity
    (2018-Q2 is PeriodDate(QUARTER, year=2018, quarter=2))
  - get_field: the field accessor the formatter reads values through

Examples:
  >>> Quarter(3)
  Quarter(value=3)

  >>> str(Quarter(3))
  '3 quarters'

  >>> d = period_date(2018, 2, kind=PeriodKind.QUARTER)
  >>> str(d)
  '2018-Q2'

  >>> get_field(d, PeriodKind.SEMESTER)
  1
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Callable, Optional

try:
    from isoweek import Week as IsoWeek
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from periodformat.errors import MissingField


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class PeriodKind(Enum):
    """Period kinds, ordered coarse to fine (Undated sits outside the chain)."""

    YEAR = "year"
    SEMESTER = "semester"
    QUARTER = "quarter"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    UNDATED = "undated"

    @property
    def rank(self) -> int:
        return _KIND_ORDER.index(self)


_KIND_ORDER = list(PeriodKind)


# ============================================================================
# Bare period values
# ============================================================================

@dataclass(frozen=True, order=True)
class Period:
    """A raw count of one period unit.

    Construct one of the concrete subclasses (Year, Semester, ...). The
    integer is never reinterpreted: Quarter(3) is "quarter 3".

    Raises:
        TypeError: If value is not integral (digit strings are accepted)
        OverflowError: If value does not fit in a signed 64-bit integer
    """

    value: int

    kind = None

    def __post_init__(self):
        if type(self) is Period:
            raise TypeError("Period is abstract; use Year, Quarter, Month, ...")

        value = self.value
        if isinstance(value, str):
            value = int(value.strip())
        elif isinstance(value, bool) or not hasattr(value, "__index__"):
            raise TypeError(
                f"{type(self).__name__} value must be an integer, got {type(value).__name__}"
            )
        value = int(value)

        if not INT64_MIN <= value <= INT64_MAX:
            raise OverflowError(f"{type(self).__name__}({value}) does not fit in 64 bits")

        object.__setattr__(self, "value", value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        # Printed through the kind's predefined format only when this value
        # alone answers every field of it (in practice: Year).
        from periodformat.formats.formatapi import default_format, format_period

        fmt = default_format(self.kind)
        if fmt is not None and fmt.field_kinds == {self.kind}:
            return format_period(self, fmt)

        if self.kind is PeriodKind.UNDATED:
            return str(self.value)

        units = self.kind.value if abs(self.value) == 1 else f"{self.kind.value}s"
        return f"{self.value} {units}"


class Year(Period):
    kind = PeriodKind.YEAR


class Semester(Period):
    kind = PeriodKind.SEMESTER


class Quarter(Period):
    kind = PeriodKind.QUARTER


class Month(Period):
    kind = PeriodKind.MONTH


class Week(Period):
    kind = PeriodKind.WEEK


class Day(Period):
    kind = PeriodKind.DAY


class Undated(Period):
    kind = PeriodKind.UNDATED


PERIOD_CLASSES = {cls.kind: cls for cls in (Year, Semester, Quarter, Month, Week, Day, Undated)}


def make_period(kind: PeriodKind, value: int) -> Period:
    """Build the bare period of `kind` holding `value`.

    Examples:
        >>> make_period(PeriodKind.MONTH, 3)
        Month(value=3)
    """
    return PERIOD_CLASSES[kind](value)


# ============================================================================
# Composite period dates
# ============================================================================

_FIELD_KINDS = (
    PeriodKind.YEAR,
    PeriodKind.SEMESTER,
    PeriodKind.QUARTER,
    PeriodKind.MONTH,
    PeriodKind.WEEK,
    PeriodKind.DAY,
)


@dataclass(frozen=True)
class PeriodDate:
    """A calendar position truncated to the granularity of `kind`.

    Every field in required_fields(kind) must be set; other fields may be
    carried along (a parser keeps everything it read). No calendar
    validation happens here: month 13 is accepted.

    Args:
        kind: Granularity (any kind but UNDATED)
        year, semester, quarter, month, week, day: Integer fields or None

    Examples:
        >>> PeriodDate(PeriodKind.DAY, year=2018, month=3, day=11)
        PeriodDate(DAY, year=2018, month=3, day=11)

        >>> str(PeriodDate(PeriodKind.WEEK, year=2018, week=4))
        '2018-W04'
    """

    kind: PeriodKind
    year: Optional[int] = None
    semester: Optional[int] = None
    quarter: Optional[int] = None
    month: Optional[int] = None
    week: Optional[int] = None
    day: Optional[int] = None

    def __post_init__(self):
        from periodformat.periods.periodregistry import required_fields

        for field_kind in _FIELD_KINDS:
            value = getattr(self, field_kind.value)
            if value is not None:
                # Reuse Period's integer coercion and range check
                object.__setattr__(self, field_kind.value, make_period(field_kind, value).value)

        missing = [k.value for k in required_fields(self.kind) if getattr(self, k.value) is None]
        if missing:
            raise MissingField(
                f"{self.kind.name} period date requires {', '.join(missing)}",
                expected=missing[0],
            )

    @property
    def fields(self) -> dict:
        """Set fields keyed by PeriodKind."""
        return {
            k: getattr(self, k.value)
            for k in _FIELD_KINDS
            if getattr(self, k.value) is not None
        }

    def format(self, fmt=None, *, locale: Optional[str] = None) -> str:
        """Render with `fmt` (PeriodFormat or pattern), defaulting to the kind's format."""
        from periodformat.formats.formatapi import default_format, format_period

        return format_period(self, fmt if fmt is not None else default_format(self.kind), locale=locale)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        parts = ", ".join(f"{k.value}={v}" for k, v in self.fields.items())
        return f"PeriodDate({self.kind.name}, {parts})"


def period_date(*values: int, kind: PeriodKind, **extra: int) -> PeriodDate:
    """Build a PeriodDate from positional values along the kind's required chain.

    Args:
        *values: One integer per field in required_fields(kind), coarse first
        kind: Granularity of the result
        **extra: Additional fields to carry (e.g. quarter=2 on a MONTH date)

    Returns:
        PeriodDate

    Raises:
        TypeError: If the number of values does not match the chain

    Examples:
        >>> period_date(2018, 1, kind=PeriodKind.SEMESTER)
        PeriodDate(SEMESTER, year=2018, semester=1)

        >>> period_date(2018, 3, 11, kind=PeriodKind.DAY)
        PeriodDate(DAY, year=2018, month=3, day=11)
    """
    from periodformat.periods.periodregistry import required_fields

    chain = required_fields(kind)
    if len(values) != len(chain):
        names = ", ".join(k.value for k in chain)
        raise TypeError(f"{kind.name} period date takes {len(chain)} values ({names}), got {len(values)}")

    fields = {k.value: v for k, v in zip(chain, values)}
    fields.update(extra)
    return PeriodDate(kind, **fields)


# ============================================================================
# Field accessor
# ============================================================================

def _derive(getter: Callable[[PeriodKind], Optional[int]], kind: PeriodKind) -> Optional[int]:
    """Answer `kind` directly, or derive it from finer fields the value carries."""
    direct = getter(kind)
    if direct is not None:
        return direct

    if kind is PeriodKind.SEMESTER:
        quarter = getter(PeriodKind.QUARTER)
        if quarter is not None:
            return (quarter + 1) // 2
        month = getter(PeriodKind.MONTH)
        if month is not None:
            return (month - 1) // 6 + 1

    elif kind is PeriodKind.QUARTER:
        month = getter(PeriodKind.MONTH)
        if month is not None:
            return (month - 1) // 3 + 1

    elif kind is PeriodKind.WEEK:
        # ISO week of a concrete calendar day
        year, month, day = (getter(k) for k in (PeriodKind.YEAR, PeriodKind.MONTH, PeriodKind.DAY))
        if None not in (year, month, day):
            try:
                return IsoWeek.withdate(date(year, month, day)).week
            except (ValueError, OverflowError):
                return None

    return None


def _attribute_getter(value: Any) -> Callable[[PeriodKind], Optional[int]]:
    def getter(kind: PeriodKind) -> Optional[int]:
        attr = getattr(value, kind.value, None)
        if callable(attr):
            attr = attr()
        return attr
    return getter


def get_field(value: Any, kind: PeriodKind) -> int:
    """Read one field of a period, composite or date-like value as an integer.

    Supports:
      - Period: only its own kind (Year(2018) answers YEAR)
      - PeriodDate: stored fields, plus semester/quarter derived from finer
        fields and the ISO week of a valid year/month/day
      - datetime.date / datetime.datetime / pandas.Timestamp
      - any object exposing year/quarter/month/... attributes (pandas.Period)

    Args:
        value: Value to read from
        kind: Field to read

    Returns:
        Field value

    Raises:
        MissingField: If the value cannot answer `kind`

    Examples:
        >>> get_field(Year(2018), PeriodKind.YEAR)
        2018

        >>> get_field(date(2018, 3, 11), PeriodKind.QUARTER)
        1

        >>> get_field(date(2018, 3, 11), PeriodKind.WEEK)
        10
    """
    if isinstance(value, Period):
        if value.kind is kind:
            return value.value
        raise MissingField(
            f"{type(value).__name__} value has no {kind.value} field",
            expected=kind.value,
        )

    if isinstance(value, PeriodDate):
        getter = lambda k: getattr(value, k.value)
    elif isinstance(value, date):
        getter = {
            PeriodKind.YEAR: value.year,
            PeriodKind.MONTH: value.month,
            PeriodKind.DAY: value.day,
        }.get
    else:
        getter = _attribute_getter(value)

    result = _derive(getter, kind)
    if result is None:
        raise MissingField(
            f"{type(value).__name__} value has no {kind.value} field",
            expected=kind.value,
        )
    return int(result)


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
    "PERIOD_CLASSES",
    "make_period",
    "PeriodDate",
    "period_date",
    "get_field",
]
