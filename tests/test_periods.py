"""Tests for period values, PeriodDate, the field registry and conversions."""

import dataclasses
from datetime import date

import pandas as pd
import pytest

from periodformat import (
    Day,
    MissingField,
    Month,
    Period,
    PeriodDate,
    PeriodKind,
    Quarter,
    Semester,
    UnknownSpecifier,
    Undated,
    Week,
    Year,
    get_field,
    period_date,
)
from periodformat.periods import (
    default,
    default_kind,
    divexact,
    lookup,
    months,
    quarters,
    required_fields,
    semesters,
    specifier_letters,
    weeks,
    years,
)


# ============================================================================
# Bare period values
# ============================================================================

class TestPeriodValues:
    """Test construction, equality and display of bare periods"""

    def test_value_is_raw_count(self):
        """Quarter(3) holds 3"""
        assert Quarter(3).value == 3
        assert int(Year(2018)) == 2018

    def test_kinds(self):
        assert Year(1).kind is PeriodKind.YEAR
        assert Undated(1).kind is PeriodKind.UNDATED

    def test_digit_string_accepted(self):
        assert Semester("3") == Semester(3)
        assert Undated(" 7 ") == Undated(7)

    def test_different_kinds_not_equal(self):
        assert Year(1) != Month(1)
        assert Quarter(2) == Quarter(2)

    def test_ordering_within_kind(self):
        assert Year(1) < Year(2)
        with pytest.raises(TypeError):
            Year(1) < Month(2)

    def test_non_integer_rejected(self):
        with pytest.raises(TypeError):
            Month(1.5)
        with pytest.raises(TypeError):
            Day(True)

    def test_int64_range(self):
        assert Day(2 ** 63 - 1).value == 2 ** 63 - 1
        with pytest.raises(OverflowError):
            Day(2 ** 63)
        with pytest.raises(OverflowError):
            Day(-(2 ** 63) - 1)

    def test_abstract_period(self):
        with pytest.raises(TypeError):
            Period(1)

    def test_immutable(self):
        y = Year(2018)
        with pytest.raises(dataclasses.FrozenInstanceError):
            y.value = 2019

    def test_hashable(self):
        assert len({Week(3), Week(3), Day(3)}) == 2

    def test_str_year_uses_predefined_format(self):
        """Year alone answers every field of 'yyyy'"""
        assert str(Year(2018)) == "2018"
        assert str(Year(-12000)) == "-12000"

    def test_str_with_units(self):
        assert str(Quarter(3)) == "3 quarters"
        assert str(Semester(1)) == "1 semester"
        assert str(Month(-1)) == "-1 month"

    def test_str_undated(self):
        assert str(Undated(5)) == "5"


# ============================================================================
# Composite PeriodDate
# ============================================================================

class TestPeriodDate:
    """Test PeriodDate construction and display"""

    def test_period_date_positional(self):
        d = period_date(2018, 3, 11, kind=PeriodKind.DAY)
        assert d == PeriodDate(PeriodKind.DAY, year=2018, month=3, day=11)

    def test_period_date_extra_fields(self):
        d = period_date(2018, 1, kind=PeriodKind.MONTH, quarter=2)
        assert d.quarter == 2
        assert d.fields == {PeriodKind.YEAR: 2018, PeriodKind.QUARTER: 2, PeriodKind.MONTH: 1}

    def test_period_date_wrong_arity(self):
        with pytest.raises(TypeError):
            period_date(2018, kind=PeriodKind.QUARTER)

    def test_required_fields_enforced(self):
        with pytest.raises(MissingField):
            PeriodDate(PeriodKind.DAY, year=2018, month=3)

    def test_undated_has_no_composite(self):
        with pytest.raises(ValueError):
            PeriodDate(PeriodKind.UNDATED, year=2018)

    def test_no_calendar_validation(self):
        """Month 13 is accepted at this layer"""
        assert period_date(2018, 13, kind=PeriodKind.MONTH).month == 13

    def test_repr(self):
        d = period_date(2018, 2, kind=PeriodKind.QUARTER)
        assert repr(d) == "PeriodDate(QUARTER, year=2018, quarter=2)"

    def test_str_uses_predefined_format(self, sample_dates):
        for value, text in sample_dates.values():
            assert str(value) == text

    def test_format_override(self):
        d = period_date(2018, 3, 11, kind=PeriodKind.DAY)
        assert d.format("dd/mm/yyyy") == "11/03/2018"

    def test_hashable(self):
        a = period_date(2018, 2, kind=PeriodKind.QUARTER)
        b = period_date(2018, 2, kind=PeriodKind.QUARTER)
        assert len({a, b}) == 1


# ============================================================================
# Field accessor
# ============================================================================

class TestGetField:
    """Test reading fields from periods, composites and dates"""

    def test_bare_period_own_kind(self):
        assert get_field(Year(2018), PeriodKind.YEAR) == 2018

    def test_bare_period_other_kind(self):
        with pytest.raises(MissingField):
            get_field(Quarter(3), PeriodKind.YEAR)

    def test_derived_from_month(self):
        d = period_date(2018, 8, kind=PeriodKind.MONTH)
        assert get_field(d, PeriodKind.QUARTER) == 3
        assert get_field(d, PeriodKind.SEMESTER) == 2

    def test_semester_from_quarter(self):
        d = period_date(2018, 3, kind=PeriodKind.QUARTER)
        assert get_field(d, PeriodKind.SEMESTER) == 2

    def test_finer_field_not_invented(self):
        d = period_date(2018, 3, kind=PeriodKind.QUARTER)
        with pytest.raises(MissingField):
            get_field(d, PeriodKind.MONTH)

    def test_iso_week_of_day(self):
        """2018-03-11 is the Sunday ending ISO week 10"""
        d = period_date(2018, 3, 11, kind=PeriodKind.DAY)
        assert get_field(d, PeriodKind.WEEK) == 10

    def test_iso_week_of_invalid_day(self):
        d = period_date(2018, 13, 40, kind=PeriodKind.DAY)
        with pytest.raises(MissingField):
            get_field(d, PeriodKind.WEEK)

    def test_python_date(self):
        d = date(2018, 3, 11)
        assert get_field(d, PeriodKind.YEAR) == 2018
        assert get_field(d, PeriodKind.QUARTER) == 1
        assert get_field(d, PeriodKind.SEMESTER) == 1
        assert get_field(d, PeriodKind.WEEK) == 10

    def test_pandas_period(self):
        p = pd.Period("2018Q2", freq="Q")
        assert get_field(p, PeriodKind.YEAR) == 2018
        assert get_field(p, PeriodKind.QUARTER) == 2

    def test_unknown_object(self):
        with pytest.raises(MissingField):
            get_field(object(), PeriodKind.YEAR)


# ============================================================================
# Field registry
# ============================================================================

class TestRegistry:
    """Test specifier lookup and required-field chains"""

    def test_lookup(self):
        assert lookup("q") == (PeriodKind.QUARTER, 1)
        assert lookup("w") == (PeriodKind.WEEK, 0)

    def test_year_has_no_default(self):
        assert lookup("y") == (PeriodKind.YEAR, None)

    def test_month_name_variants(self):
        assert lookup("u")[0] is PeriodKind.MONTH
        assert lookup("U")[0] is PeriodKind.MONTH

    def test_unknown_specifier(self):
        with pytest.raises(UnknownSpecifier):
            lookup("x")
        with pytest.raises(LookupError):
            lookup("Q")

    def test_specifier_letters(self):
        assert set(specifier_letters()) == set("ysqmuUwd")

    def test_required_fields(self):
        assert required_fields(PeriodKind.DAY) == (PeriodKind.YEAR, PeriodKind.MONTH, PeriodKind.DAY)
        assert required_fields(PeriodKind.WEEK) == (PeriodKind.YEAR, PeriodKind.WEEK)
        assert required_fields(PeriodKind.YEAR) == (PeriodKind.YEAR,)

    def test_required_fields_undated(self):
        with pytest.raises(ValueError):
            required_fields(PeriodKind.UNDATED)

    def test_default_kind_is_finest(self):
        assert default_kind([PeriodKind.YEAR, PeriodKind.QUARTER]) is PeriodKind.QUARTER
        assert default_kind([PeriodKind.DAY, PeriodKind.MONTH, PeriodKind.YEAR]) is PeriodKind.DAY
        assert default_kind([]) is None


# ============================================================================
# Conversions
# ============================================================================

class TestConversions:
    """Test unit conversion helpers"""

    def test_weeks(self):
        assert weeks(Day(15)) == 2
        assert weeks(Week(3)) == 3
        assert weeks(Year(1)) == pytest.approx(52.1775)
        assert weeks(Month(2)) == pytest.approx(8.69625)

    def test_months(self):
        assert months(Quarter(2)) == 6
        assert months(Year(2)) == 24
        assert months(Day(61)) == 2

    def test_quarters_and_semesters(self):
        assert quarters(Month(7)) == 2
        assert quarters(Year(1)) == 4
        assert semesters(Year(3)) == 6
        assert semesters(Quarter(5)) == 2

    def test_years(self):
        assert years(Month(30)) == 2
        assert years(Day(730)) == 1
        assert years(Semester(4)) == 2

    def test_truncates_toward_zero(self):
        assert years(Month(-30)) == -2

    def test_undated_unsupported(self):
        with pytest.raises(TypeError):
            weeks(Undated(3))

    def test_default(self):
        assert default(PeriodKind.QUARTER) == Quarter(1)
        assert default(Semester(5)) == Semester(1)
        assert default(Day) == Day(1)

    def test_divexact(self):
        assert divexact(12, 3) == 4
        with pytest.raises(ArithmeticError):
            divexact(7, 2)
