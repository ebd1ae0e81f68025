"""Tests for format tokens and the pattern compiler.

Run with: pytest tests/test_formatcompiler.py -v
"""

import pytest

from periodformat import (
    DelimiterMismatch,
    EmptyFormat,
    FormatCompileError,
    InvalidSpecifier,
    NoDigits,
    PeriodKind,
    UnknownSpecifier,
    WidthMismatch,
    Year,
    compile_format,
)
from periodformat.formats import formatcompiler
from periodformat.formats.formattokens import Delim, PeriodPart


# ============================================================================
# Tokens
# ============================================================================

class TestPeriodPart:
    """Test field tokens in isolation"""

    def test_kind(self):
        assert PeriodPart("q", 1, False).kind is PeriodKind.QUARTER
        assert PeriodPart("U", 1, False).kind is PeriodKind.MONTH

    def test_widths(self):
        fixed = PeriodPart("y", 4, True)
        greedy = PeriodPart("y", 4, False)
        assert (fixed.min_width, fixed.max_width) == (4, 4)
        assert (greedy.min_width, greedy.max_width) == (1, 0)

    def test_fixed_parse_exact_width(self):
        assert PeriodPart("y", 4, True).parse_next("201803", 0) == (2018, 4)

    def test_fixed_parse_too_short(self):
        with pytest.raises(WidthMismatch) as exc_info:
            PeriodPart("y", 4, True).parse_next("18-Q2", 0)
        assert exc_info.value.position == 0

    def test_greedy_parse(self):
        assert PeriodPart("y", 4, False).parse_next("12345x", 0) == (12345, 5)
        assert PeriodPart("y", 4, False).parse_next("x5", 1) == (5, 2)

    def test_greedy_parse_negative(self):
        assert PeriodPart("y", 4, False).parse_next("-12000", 0) == (-12000, 6)

    def test_no_digits(self):
        with pytest.raises(NoDigits):
            PeriodPart("q", 1, False).parse_next("Q", 0)

    def test_try_parse_next_returns_none(self):
        assert PeriodPart("y", 4, True).try_parse_next("20", 0) is None
        assert PeriodPart("y", 4, True).try_parse_next("2018", 0) == (2018, 4)

    def test_render_pads_without_truncating(self):
        assert PeriodPart("y", 4, False).render(Year(5)) == "0005"
        assert PeriodPart("y", 4, True).render(Year(-5)) == "-0005"
        assert PeriodPart("y", 2, True).render(Year(2018)) == "2018"

    def test_unknown_letter(self):
        with pytest.raises(UnknownSpecifier):
            PeriodPart("x", 1, True)

    def test_zero_width(self):
        with pytest.raises(ValueError):
            PeriodPart("y", 0, True)


class TestDelim:
    """Test delimiter tokens"""

    def test_parse_match(self):
        assert Delim("-Q").parse_next("2018-Q2", 4) == (True, 6)

    def test_parse_mismatch(self):
        with pytest.raises(DelimiterMismatch) as exc_info:
            Delim("-Q").parse_next("2018-X2", 4)
        assert exc_info.value.position == 4
        assert exc_info.value.expected == "-Q"

    def test_parse_past_end(self):
        with pytest.raises(DelimiterMismatch):
            Delim("-Q").parse_next("2018-", 4)

    def test_render(self):
        assert Delim("-W").render(None) == "-W"

    def test_show_content_escapes_specifiers(self):
        assert Delim("q").show_content() == "\\q"
        assert Delim("-Q").show_content() == "-Q"
        assert Delim("\\").show_content() == "\\\\"


# ============================================================================
# Compiler
# ============================================================================

class TestCompileFormat:
    """Test pattern -> token program"""

    def test_quarter_format(self):
        fmt = compile_format("yyyy-Qq")
        assert fmt.tokens == (
            PeriodPart("y", 4, True),
            Delim("-Q"),
            PeriodPart("q", 1, False),
        )

    def test_day_format(self):
        fmt = compile_format("yyyy-mm-dd")
        assert [t.fixed for t in fmt.fields] == [True, True, False]
        assert [t.width for t in fmt.fields] == [4, 2, 2]

    def test_trailing_field_is_minimum_width(self):
        """'yyyy' alone compiles to a minimum-width year"""
        (token,) = compile_format("yyyy").tokens
        assert token == PeriodPart("y", 4, False)

    def test_adjacent_fields_are_minimum_width(self):
        fmt = compile_format("yyyymmdd")
        assert fmt.tokens == (
            PeriodPart("y", 4, False),
            PeriodPart("m", 2, False),
            PeriodPart("d", 2, False),
        )

    def test_last_field_before_trailing_literal(self):
        fmt = compile_format("yyyy-")
        assert fmt.tokens == (PeriodPart("y", 4, False), Delim("-"))

    def test_leading_literal(self):
        fmt = compile_format("FY yyyy")
        assert fmt.tokens == (Delim("FY "), PeriodPart("y", 4, False))

    def test_escape(self):
        fmt = compile_format("yyyy\\qmm")
        assert fmt.tokens == (
            PeriodPart("y", 4, True),
            Delim("q"),
            PeriodPart("m", 2, False),
        )
        assert fmt.field_kinds == {PeriodKind.YEAR, PeriodKind.MONTH}

    def test_escape_then_run(self):
        """Only the escaped letter is literal; the next one starts a run"""
        fmt = compile_format("\\qq")
        assert fmt.tokens == (Delim("q"), PeriodPart("q", 1, False))

    def test_escaped_backslash(self):
        fmt = compile_format("yyyy\\\\mm")
        assert fmt.tokens == (PeriodPart("y", 4, True), Delim("\\"), PeriodPart("m", 2, False))

    def test_trailing_backslash_is_literal(self):
        fmt = compile_format("yyyy\\")
        assert fmt.tokens[-1] == Delim("\\")

    def test_literal_only(self):
        assert compile_format("-Q").tokens == (Delim("-Q"),)

    def test_month_name_runs(self):
        fmt = compile_format("uuu yyyy")
        assert fmt.tokens[0] == PeriodPart("u", 3, True)

    def test_empty_pattern(self):
        with pytest.raises(EmptyFormat):
            compile_format("")

    def test_not_a_string(self):
        with pytest.raises(TypeError):
            compile_format(None)

    def test_invalid_specifier(self, monkeypatch):
        """A run letter the registry cannot resolve is a compile error"""
        monkeypatch.setattr(formatcompiler, "is_specifier", lambda c: c in "ysqmuUwdX")
        with pytest.raises(InvalidSpecifier) as exc_info:
            compile_format("yyyy-X")
        assert exc_info.value.position == 5
        assert isinstance(exc_info.value, FormatCompileError)

    def test_compile_is_pure(self):
        assert compile_format("yyyy-Www") == compile_format("yyyy-Www")
        assert compile_format("yyyy-Www") is not compile_format("yyyy-Www")


class TestPeriodFormat:
    """Test the compiled artifact"""

    def test_pattern_kept(self):
        fmt = compile_format("yyyy-Ss")
        assert fmt.pattern == "yyyy-Ss"
        assert str(fmt) == "yyyy-Ss"

    def test_canonical_round_trip(self):
        for pattern in ["yyyy-Qq", "yyyy\\qmm", "dd/mm/yyyy", "Www yyyy", "yyyy\\\\mm"]:
            fmt = compile_format(pattern)
            assert compile_format(fmt.canonical).tokens == fmt.tokens

    def test_repr(self):
        assert repr(compile_format("yyyy\\qmm")) == "PeriodFormat('yyyy\\\\qmm')"

    def test_immutable(self):
        fmt = compile_format("yyyy")
        with pytest.raises(AttributeError):
            fmt.tokens = ()
