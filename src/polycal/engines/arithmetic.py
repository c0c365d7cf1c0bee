"""
polycal.engines.arithmetic
--------------------------
Fixed-arithmetic calendars whose leap rule repeats over a cycle of years.

A subclass provides the epoch (JDN of the first day of year 1), a YearCycle
and the month layout inside one year; year accumulation in both directions
goes through core.yearcycle.
"""

from __future__ import annotations

from ..core.types import CalendarDate
from ..core.yearcycle import YearCycle, days_before_year, locate_year
from .base import BaseConverter


class CyclicYearConverter(BaseConverter):
    epoch: int = 0
    cycle: YearCycle

    def year_start(self, year: int) -> int:
        """JDN of the first day of `year`."""
        return self.epoch + days_before_year(year, self.cycle)

    def days_in_year(self, year: int) -> int:
        return self.cycle.year_length(year)

    def is_leap_year(self, year: int) -> bool:
        return self.cycle.year_length(year) > self.descriptor().days_in_year[0]

    def month_offset(self, year: int, month: int) -> int:
        """Days in the year before the first day of `month`."""
        raise NotImplementedError

    def month_of_day(self, year: int, doy0: int) -> int:
        """Month containing zero-based day-of-year doy0."""
        raise NotImplementedError

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        return self.year_start(year) + self.month_offset(year, month) + day - 1

    def from_day_count(self, jdn: int) -> CalendarDate:
        year, doy0 = locate_year(jdn - self.epoch, self.cycle)
        month = self.month_of_day(year, doy0)
        return self.date(year, month, doy0 - self.month_offset(year, month) + 1)


# ------------------------------------------------------------
# Coptic / Ethiopian: 12 x 30 days + 5 epagomenal days (6 in leap years)
# ------------------------------------------------------------

def _alexandrian_year_length(year: int) -> int:
    return 366 if year % 4 == 3 else 365


_ALEXANDRIAN_CYCLE = YearCycle(4, _alexandrian_year_length)


class CopticConverter(CyclicYearConverter):
    id = "coptic"
    epoch = 1825030  # 1 Tout 1 = 29 August 284 (Julian)
    cycle = _ALEXANDRIAN_CYCLE

    def days_in_month(self, year: int, month: int) -> int:
        if month < 13:
            return 30
        return self.cycle.year_length(year) - 360

    def month_offset(self, year: int, month: int) -> int:
        return 30 * (month - 1)

    def month_of_day(self, year: int, doy0: int) -> int:
        return min(doy0 // 30 + 1, 13)


class EthiopianConverter(CopticConverter):
    id = "ethiopian"
    epoch = 1724221  # 1 Meskerem 1 = 29 August 8 (Julian)
