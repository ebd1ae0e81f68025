"""Format Compiler
---------------

Compiles a pattern string such as "yyyy-Qq" into a PeriodFormat: an
ordered program of field and delimiter tokens.

| Code | Matches   | Comment                                   |
|:-----|:----------|:------------------------------------------|
| `y`  | 1996, 96  | Year                                      |
| `s`  | 1, 2      | Semester                                  |
| `q`  | 1, ..., 4 | Quarter                                   |
| `m`  | 1, 01     | Month number                              |
| `u`  | Jan       | Abbreviated month name (locale)           |
| `U`  | January   | Full month name (locale)                  |
| `w`  | 1, ..., 53| Week                                      |
| `d`  | 1, 01     | Day                                       |

Any other character is a literal. A backslash makes the next character
literal, so "yyyy\\qmm" puts a literal `q` between year and month.

A run of one repeated letter is one field whose width is the run length.
A field followed by literal text and then another field is fixed-width; a
field followed directly by another field is minimum-width, and so is the
last field of the pattern.

Examples:
  >>> compile_format("yyyy-Qq").tokens
  (PeriodPart(yyyy), Delim(-Q), PeriodPart(q, min))

  >>> compile_format("yyyy\\\\qmm").tokens
  (PeriodPart(yyyy), Delim(\\q), PeriodPart(mm, min))
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from periodformat.errors import EmptyFormat, InvalidSpecifier, UnknownSpecifier
from periodformat.formats.formattokens import ESCAPE_CHAR, Delim, PeriodPart, PeriodToken
from periodformat.periods.periodregistry import is_specifier, lookup
from periodformat.periods.periodtypes import PeriodKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeriodFormat:
    """A compiled pattern. Immutable and safe to share across threads.

    Attributes:
        pattern: The source pattern string
        tokens: Ordered PeriodPart / Delim tokens
    """

    pattern: str
    tokens: Tuple[PeriodToken, ...]

    @property
    def canonical(self) -> str:
        """Pattern rebuilt from the tokens, with specifier literals escaped."""
        return "".join(t.show_content() for t in self.tokens)

    @property
    def fields(self) -> Tuple[PeriodPart, ...]:
        return tuple(t for t in self.tokens if isinstance(t, PeriodPart))

    @property
    def field_kinds(self) -> Set[PeriodKind]:
        return {t.kind for t in self.fields}

    def __str__(self) -> str:
        return self.pattern

    def __repr__(self) -> str:
        return f"PeriodFormat({self.canonical!r})"


def _flush(
    tokens: List[PeriodToken],
    pending: Optional[Tuple[str, int]],
    literal: List[str],
    fixed: bool,
) -> None:
    if pending is not None:
        letter, width = pending
        tokens.append(PeriodPart(letter, width, fixed))
    if literal:
        tokens.append(Delim("".join(literal)))


def compile_format(pattern: str) -> PeriodFormat:
    """
    Compile a pattern string into a PeriodFormat.

    Single left-to-right pass: escapes are stripped where they appear,
    maximal runs of one unescaped specifier letter become fields, and the
    literal text between runs becomes one delimiter.

    Args:
        pattern: Pattern such as "yyyy-Qq" or "Uyyyy"

    Returns:
        PeriodFormat

    Raises:
        EmptyFormat: If pattern is empty
        InvalidSpecifier: If a field letter is not in the registry

    Examples:
        >>> compile_format("yyyy-mm-dd").canonical
        'yyyy-mm-dd'

        >>> [t.fixed for t in compile_format("yyyy-mm-dd").fields]
        [True, True, False]
    """
    if not isinstance(pattern, str):
        raise TypeError(f"Pattern must be a string, got {type(pattern).__name__}")
    if not pattern:
        raise EmptyFormat("Format pattern is empty", position=0)

    tokens: List[PeriodToken] = []
    pending: Optional[Tuple[str, int]] = None
    literal: List[str] = []

    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]

        if c == ESCAPE_CHAR and i + 1 < n:
            literal.append(pattern[i + 1])
            i += 2
            continue

        if is_specifier(c):
            j = i + 1
            while j < n and pattern[j] == c:
                j += 1

            try:
                lookup(c)
            except UnknownSpecifier as e:
                raise InvalidSpecifier(
                    f"{e.message} at position {i} of {pattern!r}",
                    position=i,
                    expected=e.expected,
                ) from None

            # Literal text after the pending field anchors its width
            _flush(tokens, pending, literal, fixed=bool(literal))
            pending = (c, j - i)
            literal = []
            i = j
            continue

        literal.append(c)
        i += 1

    _flush(tokens, pending, literal, fixed=False)

    fmt = PeriodFormat(pattern, tuple(tokens))
    logger.debug(f"Compiled {pattern!r} -> {list(fmt.tokens)}")
    return fmt


__all__ = [
    "PeriodFormat",
    "compile_format",
]
