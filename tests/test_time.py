# tests/test_time.py

from datetime import date

import pytest

from polycal.core import time as t


@pytest.mark.parametrize(
    "ymd, jdn",
    [
        ((2000, 1, 1), 2451545),
        ((1, 1, 1), 1721426),
        ((1582, 10, 15), 2299161),
        ((1858, 11, 17), 2400001),
        ((0, 1, 1), 1721060),
        ((-4713, 11, 24), 0),
    ],
)
def test_gregorian_known_days(ymd, jdn):
    assert t.gregorian_to_jdn(*ymd) == jdn
    assert t.jdn_to_gregorian(jdn) == ymd


@pytest.mark.parametrize(
    "ymd, jdn",
    [
        ((1, 1, 1), 1721424),
        ((1582, 10, 4), 2299160),
        ((-4712, 1, 1), 0),
    ],
)
def test_julian_known_days(ymd, jdn):
    assert t.julian_to_jdn(*ymd) == jdn
    assert t.jdn_to_julian(jdn) == ymd


def test_gregorian_and_julian_agree_in_third_century():
    # the two calendars coincide from 1 March 200 to 28 February 300
    assert t.gregorian_to_jdn(250, 6, 1) == t.julian_to_jdn(250, 6, 1)


def test_kernel_is_ordered_over_negative_years():
    prev = t.gregorian_to_jdn(-200, 1, 1) - 1
    for jdn in range(t.gregorian_to_jdn(-200, 1, 1), t.gregorian_to_jdn(-195, 1, 1)):
        y, m, d = t.jdn_to_gregorian(jdn)
        assert t.gregorian_to_jdn(y, m, d) == jdn == prev + 1
        prev = jdn


def test_leap_rules():
    assert t.is_gregorian_leap(2024)
    assert not t.is_gregorian_leap(1900)
    assert t.is_gregorian_leap(2000)
    assert t.is_gregorian_leap(0)
    assert t.is_gregorian_leap(-4)
    assert t.is_julian_leap(1900)
    assert not t.is_julian_leap(-1)
    assert t.gregorian_month_length(2023, 2) == 28
    assert t.julian_month_length(1900, 2) == 29


def test_weekday():
    # 2000-01-01 was a Saturday; 0 = Sunday
    assert t.weekday(2451545) == 6
    assert t.weekday(t.gregorian_to_jdn(2024, 3, 10)) == 0


def test_datetime_bridge():
    assert t.date_to_jdn(date(2024, 2, 29)) == 2460370
    assert t.jdn_to_date(2460370) == date(2024, 2, 29)


def test_jd_to_jdn_day_boundaries():
    assert t.jd_to_jdn(2451545.0) == 2451545
    # midnight UT opens the civil day
    assert t.jd_to_jdn(2451544.5) == 2451545
    assert t.jd_to_jdn(2451544.4999) == 2451544
    # 17:00 UT is already the next day at UTC+8
    assert t.jd_to_jdn(2451545.2083334, 8.0) == 2451546
    assert t.jdn_to_jd(2451545) == 2451544.5
    assert t.jdn_to_jd(2451545, 8.0) == pytest.approx(2451544.5 - 8.0 / 24.0)
