from __future__ import annotations

from ..core.time import gregorian_to_jdn, is_gregorian_leap, jdn_to_gregorian
from ..core.types import CalendarDate
from .base import BaseConverter

MOON_DAYS = 28


class IroquoisConverter(BaseConverter):
    """
    Thirteen moons counted from 1 January of the Gregorian year.

    Moons 1-12 have 28 days; the thirteenth takes what is left of the solar
    year (29 days, 30 in Gregorian leap years).
    """
    id = "iroquois"

    def is_leap_year(self, year: int) -> bool:
        return is_gregorian_leap(year)

    def days_in_month(self, year: int, month: int) -> int:
        if month < 13:
            return MOON_DAYS
        return (366 if is_gregorian_leap(year) else 365) - 12 * MOON_DAYS

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        return gregorian_to_jdn(year, 1, 1) + (month - 1) * MOON_DAYS + day - 1

    def from_day_count(self, jdn: int) -> CalendarDate:
        year = jdn_to_gregorian(jdn)[0]
        doy0 = jdn - gregorian_to_jdn(year, 1, 1)
        moon = min(doy0 // MOON_DAYS, 12) + 1
        return self.date(year, moon, doy0 - (moon - 1) * MOON_DAYS + 1)
