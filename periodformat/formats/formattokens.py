"""Format Tokens
-------------

The two token kinds a compiled PeriodFormat is made of:

  - PeriodPart: a field (specifier letter, width, fixed/minimum-width)
  - Delim: a literal run matched verbatim

Each token can render itself for a value and consume itself from input:

  parse_next(text, i, locale)      -> (value, next_i), raises PeriodParseError
  try_parse_next(text, i, locale)  -> (value, next_i) or None
  render(value, locale)            -> str

Width semantics for numeric fields:

| Mode  | Render                          | Parse                        |
|:------|:--------------------------------|:-----------------------------|
| fixed | zero-pad digits to `width`      | exactly `width` digits       |
| min   | zero-pad digits to `width`      | 1+ digits, optional `-` sign |

Rendering never truncates; the sign sits outside the padding, so
Year(-5) with `yyyy` renders as "-0005".
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from periodformat.errors import (
    DelimiterMismatch,
    NoDigits,
    PeriodParseError,
    UnknownMonthName,
    WidthMismatch,
)
from periodformat.locales.localeapi import (
    abbr_to_month,
    month_abbr,
    month_name,
    name_to_month,
)
from periodformat.periods.periodregistry import MONTH_NAME_SPECIFIERS, is_specifier, lookup
from periodformat.periods.periodtypes import PeriodKind, get_field

ESCAPE_CHAR = "\\"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


class PeriodToken(ABC):
    """A single step of a compiled format program."""

    @abstractmethod
    def parse_next(self, text: str, i: int, locale=None) -> Tuple[Any, int]:
        """Consume this token from `text` at offset `i`."""

    @abstractmethod
    def render(self, value: Any, locale=None) -> str:
        """Text for this token given `value`."""

    @abstractmethod
    def show_content(self) -> str:
        """Pattern text that compiles back to this token."""

    def try_parse_next(self, text: str, i: int, locale=None) -> Optional[Tuple[Any, int]]:
        try:
            return self.parse_next(text, i, locale)
        except PeriodParseError:
            return None


# ============================================================================
# Field tokens
# ============================================================================

@dataclass(frozen=True)
class PeriodPart(PeriodToken):
    """A field of the pattern, e.g. `yyyy` or `q`.

    Args:
        letter: Specifier letter (see periodregistry)
        width: Number of repeated letters in the pattern (>= 1)
        fixed: Exact-width parse when True, greedy minimum-width otherwise
    """

    letter: str
    width: int
    fixed: bool

    def __post_init__(self):
        lookup(self.letter)
        if self.width < 1:
            raise ValueError(f"Field width must be >= 1, got {self.width}")

    @property
    def kind(self) -> PeriodKind:
        return lookup(self.letter)[0]

    @property
    def is_month_name(self) -> bool:
        return self.letter in MONTH_NAME_SPECIFIERS

    @property
    def min_width(self) -> int:
        return self.width if self.fixed else 1

    @property
    def max_width(self) -> int:
        # 0 means unbounded
        return self.width if self.fixed else 0

    def _limit(self, text: str, start: int) -> int:
        if self.max_width == 0:
            return len(text)
        return min(len(text), start + self.max_width)

    def parse_next(self, text: str, i: int, locale=None) -> Tuple[int, int]:
        if self.is_month_name:
            return self._parse_month_name(text, i, locale)
        return self._parse_base10(text, i)

    def _parse_base10(self, text: str, i: int) -> Tuple[int, int]:
        start = i
        if not self.fixed and text[i:i + 1] == "-" and _is_digit(text[i + 1:i + 2]):
            start += 1

        limit = self._limit(text, start)
        j = start
        while j < limit and _is_digit(text[j]):
            j += 1

        count = j - start
        if self.fixed and count < self.width:
            raise WidthMismatch(
                f"Expected {self.width} digits for {self.show_content()!r} at position {i}, "
                f"found {count}",
                position=i,
                expected=self.show_content(),
            )
        if count == 0:
            raise NoDigits(
                f"Expected digits for {self.show_content()!r} at position {i}",
                position=i,
                expected=self.show_content(),
            )
        return int(text[i:j]), j

    def _parse_month_name(self, text: str, i: int, locale) -> Tuple[int, int]:
        limit = self._limit(text, i)
        j = i
        while j < limit and text[j].isalpha():
            j += 1

        word = text[i:j]
        if not word:
            raise UnknownMonthName(
                f"Expected a month name for {self.show_content()!r} at position {i}",
                position=i,
                expected=self.show_content(),
            )

        to_month = abbr_to_month if MONTH_NAME_SPECIFIERS[self.letter] == "abbr" else name_to_month
        try:
            return to_month(word, locale), j
        except UnknownMonthName as e:
            raise UnknownMonthName(
                f"{e.message} at position {i}",
                suggestion=e.suggestion,
                position=i,
                expected=self.show_content(),
            ) from None

    def render(self, value: Any, locale=None) -> str:
        number = get_field(value, self.kind)

        if self.is_month_name:
            to_name = month_abbr if MONTH_NAME_SPECIFIERS[self.letter] == "abbr" else month_name
            return to_name(number, locale)

        digits = str(abs(number)).zfill(self.width)
        return f"-{digits}" if number < 0 else digits

    def show_content(self) -> str:
        return self.letter * self.width

    def __repr__(self) -> str:
        return f"PeriodPart({self.show_content()}{'' if self.fixed else ', min'})"


# ============================================================================
# Delimiters
# ============================================================================

@dataclass(frozen=True)
class Delim(PeriodToken):
    """A literal run, e.g. `-Q`. Escaped specifier letters are stored unescaped."""

    text: str

    def __post_init__(self):
        if not self.text:
            raise ValueError("Delimiter text must be non-empty")

    def parse_next(self, text: str, i: int, locale=None) -> Tuple[bool, int]:
        if not text.startswith(self.text, i):
            found = text[i:i + len(self.text)]
            raise DelimiterMismatch(
                f"Expected {self.text!r} at position {i}, found {found!r}",
                position=i,
                expected=self.text,
            )
        return True, i + len(self.text)

    def render(self, value: Any = None, locale=None) -> str:
        return self.text

    def show_content(self) -> str:
        out = []
        for c in self.text:
            if c == ESCAPE_CHAR or is_specifier(c):
                out.append(ESCAPE_CHAR)
            out.append(c)
        return "".join(out)

    def __repr__(self) -> str:
        return f"Delim({self.show_content()})"


__all__ = [
    "ESCAPE_CHAR",
    "PeriodToken",
    "PeriodPart",
    "Delim",
]
