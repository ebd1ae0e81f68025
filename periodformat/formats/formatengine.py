"""Formatter and Parser
--------------------

Runs a compiled PeriodFormat forwards (render a value to text) or
backwards (consume text and collect field values, then resolve them into a
period value).

Both walk the tokens strictly in order; output order follows token order,
never field kind, so "mm/yyyy" prints the month first.
"""

from typing import Any, Dict, Optional

from periodformat.errors import MissingField, MissingYear, TrailingInput
from periodformat.formats.formatcompiler import PeriodFormat
from periodformat.formats.formattokens import PeriodPart
from periodformat.periods.periodregistry import (
    CONVERSION_DEFAULTS,
    default_kind,
    required_fields,
)
from periodformat.periods.periodtypes import PeriodDate, PeriodKind, make_period


def render(value: Any, fmt: PeriodFormat, locale=None) -> str:
    """
    Render `value` with `fmt`.

    Args:
        value: Period, PeriodDate, date or any value get_field can read
        fmt: Compiled format
        locale: Locale name for month-name fields (default: configured)

    Returns:
        Formatted text

    Raises:
        MissingField: If `value` cannot answer a field of `fmt`;
            `position` is the index of the offending token
    """
    parts = []
    for index, token in enumerate(fmt.tokens):
        try:
            parts.append(token.render(value, locale))
        except MissingField as e:
            raise MissingField(
                f"Format {fmt.pattern!r} needs {token.show_content()!r} (token {index}): {e.message}",
                position=index,
                expected=token.show_content(),
            ) from None
    return "".join(parts)


def parse_tokens(text: str, fmt: PeriodFormat, locale=None) -> Dict[PeriodKind, int]:
    """
    Consume `text` with `fmt` and collect field values.

    A later field of the same kind overwrites an earlier one.

    Returns:
        Mapping of PeriodKind -> parsed integer

    Raises:
        DelimiterMismatch, WidthMismatch, NoDigits, UnknownMonthName:
            From the token that failed
        TrailingInput: If text remains after the last token
    """
    fields: Dict[PeriodKind, int] = {}
    i = 0
    for token in fmt.tokens:
        value, i = token.parse_next(text, i, locale)
        if isinstance(token, PeriodPart):
            fields[token.kind] = value

    if i < len(text):
        raise TrailingInput(
            f"Unexpected trailing input {text[i:]!r} at position {i} for format {fmt.pattern!r}",
            position=i,
            expected="end of input",
        )
    return fields


def resolve(fields: Dict[PeriodKind, int], kind: Optional[PeriodKind] = None):
    """
    Turn parsed fields into a period value.

    With no `kind`, fields of a single kind resolve to that bare period
    (Year(5)); otherwise the finest parsed kind is resolved to a PeriodDate.
    Required fields missing from `fields` take their registry default.

    Raises:
        MissingYear: If the target needs a year and none was parsed

    Examples:
        >>> resolve({PeriodKind.YEAR: 5})
        Year(value=5)

        >>> resolve({PeriodKind.YEAR: 2018, PeriodKind.QUARTER: 2}, PeriodKind.MONTH)
        PeriodDate(MONTH, year=2018, quarter=2, month=1)
    """
    if kind is None:
        if len(fields) == 1:
            (only, value), = fields.items()
            return make_period(only, value)
        kind = default_kind(fields)
        if kind is None:
            raise MissingYear("Format has no fields to resolve a period from", expected="y")

    values = dict(fields)
    for required in required_fields(kind):
        if required in values:
            continue
        default = CONVERSION_DEFAULTS[required]
        if default is None:
            raise MissingYear(
                f"Cannot resolve a {kind.name} period without a year",
                expected="y",
            )
        values[required] = default

    return PeriodDate(kind, **{k.value: v for k, v in values.items()})


def parse(text: str, fmt: PeriodFormat, kind: Optional[PeriodKind] = None, locale=None):
    """Parse `text` with `fmt` and resolve it (see parse_tokens and resolve)."""
    return resolve(parse_tokens(text, fmt, locale), kind)


__all__ = [
    "render",
    "parse_tokens",
    "resolve",
    "parse",
]
