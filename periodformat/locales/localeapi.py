"""Month-name locale tables.

Locales are loaded from data/locales.yaml and may be extended at runtime
with register_locale(). Lookups by name are case-insensitive; unknown names
raise UnknownMonthName with a fuzzy "did you mean" suggestion.

Configuration:
    PERIODFORMAT_LOCALE: Default locale name (default: "english")
"""

import logging
import os
import unicodedata
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import yaml

try:
    from rapidfuzz import fuzz, process
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

from periodformat.errors import UnknownMonthName

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "english"
SUGGESTION_CUTOFF = 80


def _fold(word: str) -> str:
    return unicodedata.normalize("NFC", word).strip().lower()


@dataclass(frozen=True)
class Locale:
    """Month names for one language.

    Args:
        name: Locale name (e.g. "english")
        months: Twelve full month names, January first
        months_abbr: Twelve abbreviated month names, January first
    """

    name: str
    months: Tuple[str, ...]
    months_abbr: Tuple[str, ...]
    month_value: Dict[str, int] = field(init=False, repr=False, compare=False)
    abbr_value: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        months = tuple(self.months)
        months_abbr = tuple(self.months_abbr)
        if len(months) != 12 or len(months_abbr) != 12:
            raise ValueError(f"Locale {self.name!r} needs 12 month names and 12 abbreviations")

        object.__setattr__(self, "months", months)
        object.__setattr__(self, "months_abbr", months_abbr)
        object.__setattr__(self, "month_value", {_fold(n): i for i, n in enumerate(months, 1)})
        object.__setattr__(self, "abbr_value", {_fold(n): i for i, n in enumerate(months_abbr, 1)})


# ============================================================================
# Load Configuration
# ============================================================================

@lru_cache(maxsize=1)
def _load_config() -> dict:
    """Load locale tables from YAML.

    Returns:
        Parsed YAML with a "locales" mapping
    """
    config_path = Path(__file__).parent / "data" / "locales.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"Required file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


_LOCALES: Dict[str, Locale] = {}


def _registry() -> Dict[str, Locale]:
    if not _LOCALES:
        for name, entry in _load_config()["locales"].items():
            _LOCALES.setdefault(name, Locale(name, entry["months"], entry["months_abbr"]))
    return _LOCALES


def default_locale_name() -> str:
    """Configured default locale, from PERIODFORMAT_LOCALE or the YAML default."""
    name = os.environ.get("PERIODFORMAT_LOCALE") or _load_config().get("default", FALLBACK_LOCALE)
    if name not in _registry():
        logger.warning(f"Default locale {name!r} is not registered, falling back to {FALLBACK_LOCALE!r}")
        return FALLBACK_LOCALE
    return name


def register_locale(name: str, months: Sequence[str], months_abbr: Sequence[str]) -> Locale:
    """Register (or replace) a locale.

    Args:
        name: Locale name used in `locale=` arguments
        months: Twelve full month names, January first
        months_abbr: Twelve abbreviated month names, January first

    Returns:
        The registered Locale

    Examples:
        >>> register_locale("dutch",
        ...     ["januari", "februari", "maart", "april", "mei", "juni", "juli",
        ...      "augustus", "september", "oktober", "november", "december"],
        ...     ["jan", "feb", "mrt", "apr", "mei", "jun", "jul", "aug", "sep",
        ...      "okt", "nov", "dec"])
        Locale(name='dutch', ...)
    """
    loc = Locale(name, months, months_abbr)
    _registry()[name] = loc
    logger.info(f"Registered locale {name!r}")
    return loc


def list_locales() -> List[str]:
    return sorted(_registry())


def get_locale(locale: Union[str, Locale, None] = None) -> Locale:
    """Resolve a locale name (or None for the default) to a Locale.

    Raises:
        LookupError: If the name is not registered
    """
    if isinstance(locale, Locale):
        return locale
    if locale is None:
        locale = default_locale_name()

    try:
        return _registry()[locale]
    except KeyError:
        raise LookupError(f"Unknown locale {locale!r}. Available: {', '.join(list_locales())}") from None


# ============================================================================
# Month names
# ============================================================================

def _name_at(names: Tuple[str, ...], month: int, loc: Locale, what: str) -> str:
    if not 1 <= month <= 12:
        raise UnknownMonthName(
            f"No {what} for month {month} in locale {loc.name!r}",
            expected="1-12",
        )
    return names[month - 1]


def month_name(month: int, locale: Union[str, Locale, None] = None) -> str:
    """Full month name, e.g. month_name(1) -> 'January'."""
    loc = get_locale(locale)
    return _name_at(loc.months, month, loc, "month name")


def month_abbr(month: int, locale: Union[str, Locale, None] = None) -> str:
    """Abbreviated month name, e.g. month_abbr(1, "german") -> 'Jan'."""
    loc = get_locale(locale)
    return _name_at(loc.months_abbr, month, loc, "month abbreviation")


def _suggest(word: str, names: Sequence[str]) -> Optional[str]:
    match = process.extractOne(word, list(names), scorer=fuzz.WRatio, score_cutoff=SUGGESTION_CUTOFF)
    return match[0] if match else None


def _to_month(word: str, table: Dict[str, int], names: Tuple[str, ...], loc: Locale, what: str) -> int:
    value = table.get(_fold(word))
    if value is not None:
        return value

    suggestion = _suggest(word, names)
    hint = f" (did you mean {suggestion!r}?)" if suggestion else ""
    raise UnknownMonthName(
        f"Unknown {what} {word!r} in locale {loc.name!r}{hint}",
        suggestion=suggestion,
    )


def name_to_month(word: str, locale: Union[str, Locale, None] = None) -> int:
    """
    Month number for a full month name.

    Raises:
        UnknownMonthName: If the name is not in the locale table

    Examples:
        >>> name_to_month("march")
        3

        >>> name_to_month("Febuary")
        Traceback (most recent call last):
        ...
        UnknownMonthName: Unknown month name 'Febuary' in locale 'english' (did you mean 'February'?)
    """
    loc = get_locale(locale)
    return _to_month(word, loc.month_value, loc.months, loc, "month name")


def abbr_to_month(word: str, locale: Union[str, Locale, None] = None) -> int:
    """
    Month number for an abbreviated month name.

    Raises:
        UnknownMonthName: If the abbreviation is not in the locale table

    Examples:
        >>> abbr_to_month("SEP")
        9
    """
    loc = get_locale(locale)
    return _to_month(word, loc.abbr_value, loc.months_abbr, loc, "month abbreviation")


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
