from __future__ import annotations

from ..core.time import gregorian_to_jdn, is_gregorian_leap, jdn_to_gregorian
from ..core.types import CalendarDate
from .base import BaseConverter

SAKA_OFFSET = 78  # Gregorian year in which Saka year 0 ends


class IndianSakaConverter(BaseConverter):
    """
    Indian national calendar.

    1 Chaitra falls on 22 March (21 March in Gregorian leap years). Chaitra
    has 30 days (31 in leap years), Vaisakha..Bhadra 31 and the rest 30.
    """
    id = "indian-saka"

    def is_leap_year(self, year: int) -> bool:
        return is_gregorian_leap(year + SAKA_OFFSET)

    def year_start(self, year: int) -> int:
        gy = year + SAKA_OFFSET
        return gregorian_to_jdn(gy, 3, 22) - (1 if is_gregorian_leap(gy) else 0)

    def days_in_month(self, year: int, month: int) -> int:
        if month == 1:
            return 31 if self.is_leap_year(year) else 30
        return 31 if month <= 6 else 30

    def _month_offset(self, year: int, month: int) -> int:
        chaitra = self.days_in_month(year, 1)
        if month == 1:
            return 0
        if month <= 7:
            return chaitra + 31 * (month - 2)
        return chaitra + 155 + 30 * (month - 7)

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        return self.year_start(year) + self._month_offset(year, month) + day - 1

    def from_day_count(self, jdn: int) -> CalendarDate:
        year = jdn_to_gregorian(jdn)[0] - SAKA_OFFSET
        if jdn < self.year_start(year):
            year -= 1
        doy0 = jdn - self.year_start(year)
        chaitra = self.days_in_month(year, 1)
        if doy0 < chaitra:
            month = 1
        elif doy0 < chaitra + 155:
            month = 2 + (doy0 - chaitra) // 31
        else:
            month = 7 + (doy0 - chaitra - 155) // 30
        return self.date(year, month, doy0 - self._month_offset(year, month) + 1)
