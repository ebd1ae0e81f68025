"""Pluggable month-name lookup for the `u` and `U` format specifiers.

Public API:
    month_name(month, locale=None) -> str
    month_abbr(month, locale=None) -> str
    name_to_month(word, locale=None) -> int
    abbr_to_month(word, locale=None) -> int
    register_locale(name, months, months_abbr) -> Locale

Examples:
    >>> from periodformat.locales import month_name, abbr_to_month
    >>> month_name(3, "french")
    'mars'
    >>> abbr_to_month("Dez", "german")
    12
"""

from periodformat.locales.localeapi import (
    Locale,
    get_locale,
    register_locale,
    list_locales,
    default_locale_name,
    month_name,
    month_abbr,
    name_to_month,
    abbr_to_month,
)

__all__ = [
    "Locale",
    "get_locale",
    "register_locale",
    "list_locales",
    "default_locale_name",
    "month_name",
    "month_abbr",
    "name_to_month",
    "abbr_to_month",
]
