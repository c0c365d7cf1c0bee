from __future__ import annotations

from ..core.yearcycle import YearCycle
from .arithmetic import CyclicYearConverter

# Years of the 30-year cycle that get a 30th day in Dhu al-Hijjah
LEAP_POSITIONS = (2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29)


def is_islamic_leap(year: int) -> bool:
    return (14 + 11 * year) % 30 < 11


def _year_length(year: int) -> int:
    return 355 if is_islamic_leap(year) else 354


class IslamicConverter(CyclicYearConverter):
    """Tabular (arithmetical) Hijri calendar, civil epoch 16 July 622 (Julian)."""
    id = "islamic"
    epoch = 1948440
    cycle = YearCycle(30, _year_length)

    def is_leap_year(self, year: int) -> bool:
        return is_islamic_leap(year)

    def days_in_month(self, year: int, month: int) -> int:
        if month == 12 and is_islamic_leap(year):
            return 30
        return 30 if month % 2 == 1 else 29

    def month_offset(self, year: int, month: int) -> int:
        return 29 * (month - 1) + month // 2

    def month_of_day(self, year: int, doy0: int) -> int:
        # months alternate 30, 29: one 59-day pair per two months
        pair, rem = divmod(doy0, 59)
        return min(2 * pair + (1 if rem < 30 else 2), 12)
