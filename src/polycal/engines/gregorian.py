"""
polycal.engines.gregorian
-------------------------
Calendars that are the proleptic Gregorian or Julian calendar under another
year count or other month names.
"""

from __future__ import annotations

from ..core.time import (
    gregorian_month_length,
    gregorian_to_jdn,
    is_gregorian_leap,
    is_julian_leap,
    jdn_to_gregorian,
    jdn_to_julian,
    julian_month_length,
    julian_to_jdn,
)
from ..core.types import CalendarDate
from .base import BaseConverter


class GregorianConverter(BaseConverter):
    id = "gregorian"
    year_offset = 0  # this calendar's year minus the Gregorian year

    def is_leap_year(self, year: int) -> bool:
        return is_gregorian_leap(year - self.year_offset)

    def days_in_month(self, year: int, month: int) -> int:
        return gregorian_month_length(year - self.year_offset, month)

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        return gregorian_to_jdn(year - self.year_offset, month, day)

    def from_day_count(self, jdn: int) -> CalendarDate:
        y, m, d = jdn_to_gregorian(jdn)
        return self.date(y + self.year_offset, m, d)


class ThaiBuddhistConverter(GregorianConverter):
    """Buddhist Era: Gregorian months and days, year + 543."""
    id = "thai-buddhist"
    year_offset = 543


class CherokeeConverter(GregorianConverter):
    """Gregorian year structure carrying the Cherokee moon names."""
    id = "cherokee"


class JulianConverter(BaseConverter):
    id = "julian"

    def is_leap_year(self, year: int) -> bool:
        return is_julian_leap(year)

    def days_in_month(self, year: int, month: int) -> int:
        return julian_month_length(year, month)

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        return julian_to_jdn(year, month, day)

    def from_day_count(self, jdn: int) -> CalendarDate:
        return self.date(*jdn_to_julian(jdn))
