"""Field Registry
--------------

Fixed tables mapping format specifier letters to period kinds, the default
used when a field is absent at parse time, and the chain of fields a
composite value of each kind requires.

| Code | Kind     | Parse default |
|:-----|:---------|:--------------|
| `y`  | Year     | none (MissingYear) |
| `s`  | Semester | 1             |
| `q`  | Quarter  | 1             |
| `m`  | Month    | 1             |
| `u`  | Month    | 1 (abbreviated month name) |
| `U`  | Month    | 1 (full month name) |
| `w`  | Week     | 0             |
| `d`  | Day      | 1             |
"""

from typing import Iterable, Optional, Tuple

from periodformat.errors import UnknownSpecifier
from periodformat.periods.periodtypes import PeriodKind


# Specifier letter -> period kind
CONVERSION_SPECIFIERS = {
    "y": PeriodKind.YEAR,
    "s": PeriodKind.SEMESTER,
    "q": PeriodKind.QUARTER,
    "m": PeriodKind.MONTH,
    "u": PeriodKind.MONTH,
    "U": PeriodKind.MONTH,
    "w": PeriodKind.WEEK,
    "d": PeriodKind.DAY,
}

# Month-name variants: letter -> locale table ("abbr" or "name")
MONTH_NAME_SPECIFIERS = {
    "u": "abbr",
    "U": "name",
}

# Values used when a field is absent from parsed input. Year has none.
CONVERSION_DEFAULTS = {
    PeriodKind.YEAR: None,
    PeriodKind.SEMESTER: 1,
    PeriodKind.QUARTER: 1,
    PeriodKind.MONTH: 1,
    PeriodKind.WEEK: 0,
    PeriodKind.DAY: 1,
}

# Fields needed to resolve a composite value of each kind, coarse first
CONVERSION_TRANSLATIONS = {
    PeriodKind.YEAR: (PeriodKind.YEAR,),
    PeriodKind.SEMESTER: (PeriodKind.YEAR, PeriodKind.SEMESTER),
    PeriodKind.QUARTER: (PeriodKind.YEAR, PeriodKind.QUARTER),
    PeriodKind.MONTH: (PeriodKind.YEAR, PeriodKind.MONTH),
    PeriodKind.WEEK: (PeriodKind.YEAR, PeriodKind.WEEK),
    PeriodKind.DAY: (PeriodKind.YEAR, PeriodKind.MONTH, PeriodKind.DAY),
}


def specifier_letters() -> str:
    """All recognised specifier letters, e.g. 'ysqmuUwd'."""
    return "".join(CONVERSION_SPECIFIERS)


def is_specifier(char: str) -> bool:
    return char in CONVERSION_SPECIFIERS


def lookup(letter: str) -> Tuple[PeriodKind, Optional[int]]:
    """
    Look up a specifier letter.

    Args:
        letter: One character from a format pattern

    Returns:
        (period_kind, default_value) tuple; default is None for Year

    Raises:
        UnknownSpecifier: If `letter` is not a recognised code

    Examples:
        >>> lookup("q")
        (<PeriodKind.QUARTER: 'quarter'>, 1)

        >>> lookup("U")
        (<PeriodKind.MONTH: 'month'>, 1)
    """
    try:
        kind = CONVERSION_SPECIFIERS[letter]
    except KeyError:
        raise UnknownSpecifier(
            f"Unknown specifier {letter!r}; expected one of {specifier_letters()!r}",
            expected=specifier_letters(),
        ) from None
    return kind, CONVERSION_DEFAULTS[kind]


def required_fields(kind: PeriodKind) -> Tuple[PeriodKind, ...]:
    """
    Fields that must be known to resolve a composite value of `kind`.

    Raises:
        ValueError: For UNDATED, which has no composite representation

    Examples:
        >>> required_fields(PeriodKind.DAY)
        (<PeriodKind.YEAR: 'year'>, <PeriodKind.MONTH: 'month'>, <PeriodKind.DAY: 'day'>)
    """
    try:
        return CONVERSION_TRANSLATIONS[kind]
    except KeyError:
        raise ValueError(f"{kind.name} has no composite representation") from None


def default_kind(kinds: Iterable[PeriodKind]) -> Optional[PeriodKind]:
    """
    Finest kind among `kinds`, used to infer the target of a parse.

    Day > Week > Month > Quarter > Semester > Year.

    Examples:
        >>> default_kind([PeriodKind.YEAR, PeriodKind.QUARTER])
        <PeriodKind.QUARTER: 'quarter'>
    """
    kinds = [k for k in kinds if k in CONVERSION_TRANSLATIONS]
    if not kinds:
        return None
    return max(kinds, key=lambda k: k.rank)


__all__ = [
    "CONVERSION_SPECIFIERS",
    "MONTH_NAME_SPECIFIERS",
    "CONVERSION_DEFAULTS",
    "CONVERSION_TRANSLATIONS",
    "specifier_letters",
    "is_specifier",
    "lookup",
    "required_fields",
    "default_kind",
]
