"""Shared test fixtures for periodformat tests."""

import pytest

from periodformat import PeriodKind, period_date
from periodformat.formats.formatapi import clear_cache
from periodformat.locales import localeapi


@pytest.fixture(autouse=True)
def english_locale(monkeypatch):
    """Run every test with the built-in default locale (english)."""
    monkeypatch.delenv("PERIODFORMAT_LOCALE", raising=False)


@pytest.fixture
def fresh_cache():
    """Start and finish with an empty compiled-pattern cache."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def scratch_locales():
    """Remove locales registered by a test once it finishes."""
    before = set(localeapi.list_locales())
    yield
    for name in set(localeapi.list_locales()) - before:
        localeapi._LOCALES.pop(name, None)


@pytest.fixture
def sample_dates():
    """One representative PeriodDate per composite kind.

    Returns a dict of PeriodKind -> (PeriodDate, text in the predefined format).
    """
    return {
        PeriodKind.SEMESTER: (period_date(2018, 1, kind=PeriodKind.SEMESTER), "2018-S1"),
        PeriodKind.QUARTER: (period_date(2018, 2, kind=PeriodKind.QUARTER), "2018-Q2"),
        PeriodKind.MONTH: (period_date(2018, 3, kind=PeriodKind.MONTH), "2018-03"),
        PeriodKind.WEEK: (period_date(2018, 4, kind=PeriodKind.WEEK), "2018-W04"),
        PeriodKind.DAY: (period_date(2018, 3, 11, kind=PeriodKind.DAY), "2018-03-11"),
    }
