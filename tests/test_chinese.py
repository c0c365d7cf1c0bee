# tests/test_chinese.py

from concurrent.futures import ThreadPoolExecutor

import pytest

from polycal.core.errors import InvalidDateError
from polycal.core.time import gregorian_to_jdn
from polycal.engines.chinese import ChineseConverter


@pytest.fixture(scope="module")
def chinese(registry):
    return registry.get("chinese")


@pytest.mark.parametrize(
    "gregorian, ymd",
    [
        ((2024, 2, 10), (2024, 1, 1)),   # Spring Festival 2024
        ((2023, 1, 22), (2023, 1, 1)),
        ((2023, 3, 22), (2023, 14, 1)),  # leap 2nd month
        ((2023, 4, 20), (2023, 3, 1)),
        ((2024, 9, 17), (2024, 8, 15)),  # Mid-Autumn 2024
        ((2025, 1, 29), (2025, 1, 1)),
        ((2025, 7, 25), (2025, 18, 1)),  # leap 6th month
        ((2024, 2, 9), (2023, 12, 30)),  # New Year's Eve
    ],
)
def test_reference_dates(chinese, gregorian, ymd):
    jdn = gregorian_to_jdn(*gregorian)
    assert chinese.from_day_count(jdn).key() == ymd
    assert chinese.to_day_count(*ymd) == jdn


@pytest.mark.parametrize("year, leap", [(2020, 4), (2023, 2), (2024, None), (2025, 6)])
def test_leap_months(chinese, year, leap):
    assert chinese.leap_month(year) == leap
    assert chinese.is_leap_year(year) == (leap is not None)


def test_leap_month_has_no_principal_term(chinese):
    rec = chinese.year_record(2023)
    leap = rec.month(14)
    assert leap is not None and leap.is_leap
    assert not any(t % 2 == 1 for t in leap.solar_terms)
    # the regular 2nd month right before it does contain one
    assert any(t % 2 == 1 for t in rec.month(2).solar_terms)
    assert rec.month(2).end + 1 == leap.start


def test_year_2023_structure(chinese):
    assert list(chinese.month_labels(2023)) == [1, 2, 14, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12]
    assert chinese.months_in_year(2023) == 13
    assert chinese.days_in_year(2023) == 384
    rec = chinese.year_record(2023)
    assert rec.new_year == gregorian_to_jdn(2023, 1, 22)
    assert rec.end == gregorian_to_jdn(2024, 2, 9)
    assert all(m.length in (29, 30) for m in rec.months)


def test_month_eleven_holds_the_winter_solstice(chinese):
    rec = chinese.year_record(2023)
    m11 = rec.month(11)
    assert m11.start <= gregorian_to_jdn(2023, 12, 22) <= m11.end


def test_month_names(chinese):
    assert chinese.month_name(2023, 1) == "正"
    assert chinese.month_name(2023, 14) == "闰二"
    assert chinese.format(chinese.date(2023, 14, 1), "MMMM") == "闰二"


def test_invalid_dates(chinese):
    assert chinese.days_in_month(2024, 1) == 29
    with pytest.raises(InvalidDateError):
        chinese.to_day_count(2024, 1, 30)
    with pytest.raises(InvalidDateError):
        chinese.to_day_count(2024, 14, 1)
    assert not chinese.is_valid(2024, 14, 1)


def test_caches_are_per_instance():
    a, b = ChineseConverter(), ChineseConverter()
    a.year_record(2024)
    assert 2024 in a.cache
    assert len(b.cache) == 0
    assert a.year_record(2024) is a.year_record(2024)


def test_year_records_are_shared_across_threads():
    conv = ChineseConverter()
    years = [2000 + i % 5 for i in range(40)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        records = list(pool.map(conv.year_record, years))
    assert len(conv.cache) == 5
    for year, rec in zip(years, records):
        assert rec.year == year
        assert rec is conv.year_record(year)
