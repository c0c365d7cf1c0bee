from __future__ import annotations

from ..core.yearcycle import YearCycle
from .arithmetic import CyclicYearConverter


def is_persian_leap(year: int) -> bool:
    """33-year arithmetic rule: leap at cycle positions 1, 5, 9, 13, 17, 22, 26, 30."""
    return (25 * year + 11) % 33 < 8


def _year_length(year: int) -> int:
    return 366 if is_persian_leap(year) else 365


class PersianConverter(CyclicYearConverter):
    """
    Solar Hijri calendar with the 33-year arithmetic leap cycle.

    Farvardin..Shahrivar have 31 days, Mehr..Bahman 30, Esfand 29 (30 in
    leap years).
    """
    id = "persian"
    epoch = 1948320  # 1 Farvardin 1
    cycle = YearCycle(33, _year_length)

    def is_leap_year(self, year: int) -> bool:
        return is_persian_leap(year)

    def days_in_month(self, year: int, month: int) -> int:
        if month <= 6:
            return 31
        if month <= 11:
            return 30
        return 30 if is_persian_leap(year) else 29

    def month_offset(self, year: int, month: int) -> int:
        if month <= 7:
            return 31 * (month - 1)
        return 186 + 30 * (month - 7)

    def month_of_day(self, year: int, doy0: int) -> int:
        if doy0 < 186:
            return doy0 // 31 + 1
        return min((doy0 - 186) // 30 + 7, 12)
