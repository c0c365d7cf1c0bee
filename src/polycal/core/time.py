from __future__ import annotations
import math
from datetime import date
from typing import Tuple

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_julian_leap(year: int) -> bool:
    return year % 4 == 0


def gregorian_month_length(year: int, month: int) -> int:
    if month == 2 and is_gregorian_leap(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


def julian_month_length(year: int, month: int) -> int:
    if month == 2 and is_julian_leap(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Gregorian date -> Julian Day Number (Fliegel-Van Flandern)."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """Inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def julian_to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Julian date -> Julian Day Number."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - 32083


def jdn_to_julian(jdn: int) -> Tuple[int, int, int]:
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return year, month, day


def weekday(jdn: int) -> int:
    """Day of week, 0 = Sunday .. 6 = Saturday."""
    return (jdn + 1) % 7


def date_to_jdn(d: date) -> int:
    return gregorian_to_jdn(d.year, d.month, d.day)


def jdn_to_date(jdn: int) -> date:
    """JDN -> datetime.date; raises ValueError outside years 1..9999."""
    y, m, d = jdn_to_gregorian(jdn)
    return date(y, m, d)


def jd_to_jdn(jd: float, utc_offset_hours: float = 0.0) -> int:
    """
    Civil day containing the moment jd (UT), reckoned in a zone offset from UTC.

      JDN = floor(JD + 0.5 + offset/24)
    """
    return int(math.floor(jd + 0.5 + utc_offset_hours / 24.0))


def jdn_to_jd(jdn: int, utc_offset_hours: float = 0.0) -> float:
    """JD (UT) of local midnight starting the civil day jdn."""
    return float(jdn) - 0.5 - utc_offset_hours / 24.0
