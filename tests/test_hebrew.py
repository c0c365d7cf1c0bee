# tests/test_hebrew.py

from concurrent.futures import ThreadPoolExecutor

import pytest

from polycal.core.errors import InvalidDateError
from polycal.core.time import gregorian_to_jdn
from polycal.engines.hebrew import HEBREW_EPOCH, HebrewConverter, is_hebrew_leap


@pytest.fixture(scope="module")
def heb():
    return HebrewConverter()


@pytest.mark.parametrize(
    "ymd, gregorian",
    [
        ((5785, 7, 1), (2024, 10, 3)),   # Rosh Hashanah 5785
        ((5784, 7, 1), (2023, 9, 16)),   # Rosh Hashanah 5784
        ((5784, 1, 15), (2024, 4, 23)),  # Pesach 5784
        ((5784, 13, 14), (2024, 3, 24)), # Purim 5784 (Adar II)
        ((5783, 7, 10), (2022, 10, 5)),  # Yom Kippur 5783
        ((5786, 9, 25), (2025, 12, 15)), # Hanukkah 5786
    ],
)
def test_reference_dates(heb, ymd, gregorian):
    jdn = gregorian_to_jdn(*gregorian)
    assert heb.to_day_count(*ymd) == jdn
    assert heb.from_day_count(jdn).key() == ymd


def test_epoch(heb):
    assert heb.new_year(1) == HEBREW_EPOCH == 347998
    assert heb.from_day_count(HEBREW_EPOCH).key() == (1, 7, 1)


def test_leap_years_follow_the_19_year_cycle(heb):
    positions = [p for p in range(1, 20) if is_hebrew_leap(p)]
    assert positions == [3, 6, 8, 11, 14, 17, 19]
    assert heb.is_leap_year(5784)
    assert not heb.is_leap_year(5785)
    assert heb.months_in_year(5784) == 13
    assert heb.months_in_year(5785) == 12


def test_year_runs_from_tishrei(heb):
    assert list(heb.month_labels(5785)) == [7, 8, 9, 10, 11, 12, 1, 2, 3, 4, 5, 6]
    assert list(heb.month_labels(5784)) == [7, 8, 9, 10, 11, 12, 13, 1, 2, 3, 4, 5, 6]


def test_year_lengths_are_canonical(heb):
    allowed = {353, 354, 355, 383, 384, 385}
    for year in range(5700, 5800):
        n = heb.days_in_year(year)
        assert n in allowed
        assert (n > 380) == is_hebrew_leap(year)
        assert sum(heb.days_in_month(year, m) for m in heb.month_labels(year)) == n


def test_variable_months(heb):
    # 5784 is a deficient leap year (383 days): Cheshvan 29, Kislev 29
    assert heb.days_in_year(5784) == 383
    assert heb.days_in_month(5784, 8) == 29
    assert heb.days_in_month(5784, 9) == 29
    assert heb.days_in_month(5784, 12) == 30
    assert heb.days_in_month(5784, 13) == 29
    # 5785 is a complete common year (355 days): Cheshvan 30, Kislev 30
    assert heb.days_in_year(5785) == 355
    assert heb.days_in_month(5785, 8) == 30
    assert heb.days_in_month(5785, 12) == 29


def test_rosh_hashanah_never_on_sunday_wednesday_friday(heb):
    for year in range(5600, 5900):
        # weekday(): 0 = Sunday
        assert (heb.new_year(year) + 1) % 7 not in (0, 3, 5)


def test_adar_names(heb):
    assert heb.month_name(5784, 12) == "Adar I"
    assert heb.month_name(5784, 13) == "Adar II"
    assert heb.month_name(5785, 12) == "Adar"


def test_no_adar_ii_in_common_year(heb):
    assert not heb.is_valid(5785, 13, 1)
    with pytest.raises(InvalidDateError):
        heb.to_day_count(5785, 13, 1)


def test_cache_is_per_instance():
    a, b = HebrewConverter(), HebrewConverter()
    a.new_year(5785)
    assert len(a.cache) >= 1
    assert len(b.cache) == 0


def test_new_years_are_consistent_across_threads():
    conv = HebrewConverter()
    years = [5780 + i % 6 for i in range(60)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        starts = list(pool.map(conv.new_year, years))
    assert len(conv.cache) == 6
    for year, start in zip(years, starts):
        assert start == HebrewConverter().new_year(year)
