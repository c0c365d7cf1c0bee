"""
polycal.engines.hebrew
----------------------
Arithmetic Hebrew calendar (molad of Tishrei with the four dehiyyot).

Months are numbered from Nisan as in the Torah reckoning,

  1 Nisan .. 6 Elul, 7 Tishrei .. 12 Adar (Adar I in leap years), 13 Adar II

while the year number changes on 1 Tishrei. A year therefore runs
7, 8, ..., 12 (13), 1, 2, ..., 6.

Time unit for the molad is the part (halakim): 1080 parts per hour, 25920 per
day. Lunation = 29d 12h 793p = 765433 parts.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Set

from ..core.types import CalendarDate
from .base import BaseConverter

LOG = logging.getLogger(__name__)

HEBREW_EPOCH = 347998  # JDN of 1 Tishrei AM 1
TISHREI = 7
NISAN = 1

# mean year in days: 235 lunations / 19 years
_MEAN_YEAR = 35975351 / 98496


def is_hebrew_leap(year: int) -> bool:
    """Years 3, 6, 8, 11, 14, 17, 19 of the 19-year cycle have 13 months."""
    return (7 * year + 1) % 19 < 7


def months_in_hebrew_year(year: int) -> int:
    return 13 if is_hebrew_leap(year) else 12


def elapsed_days(year: int) -> int:
    """Days from the epoch to the molad-based Tishrei 1 of `year`, before year-length corrections."""
    months = (235 * year - 234) // 19
    parts = 12084 + 13753 * months
    days = 29 * months + parts // 25920
    # lo ADU rosh: no Sunday, Wednesday or Friday
    if (3 * (days + 1)) % 7 < 3:
        days += 1
    return days


def year_length_correction(year: int) -> int:
    ny0 = elapsed_days(year - 1)
    ny1 = elapsed_days(year)
    ny2 = elapsed_days(year + 1)
    if ny2 - ny1 == 356:
        return 2
    if ny1 - ny0 == 382:
        return 1
    return 0


class HebrewCache:
    """
    Per-converter memo of new-year days.

    Values are computed outside the lock; a year already being computed on the
    calling thread is evaluated again instead of waiting on itself.
    """

    def __init__(self) -> None:
        self._values: Dict[int, int] = {}
        self._computing: Set[int] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def get(self, year: int, compute: Callable[[int], int]) -> int:
        with self._lock:
            if year in self._values:
                return self._values[year]
            reentrant = year in self._computing
            if not reentrant:
                self._computing.add(year)
        if reentrant:
            return compute(year)
        try:
            value = compute(year)
            with self._lock:
                value = self._values.setdefault(year, value)
        finally:
            with self._lock:
                self._computing.discard(year)
        LOG.debug("hebrew new year %d -> JDN %d", year, value)
        return value


def _new_year(year: int) -> int:
    return HEBREW_EPOCH + elapsed_days(year) + year_length_correction(year)


class HebrewConverter(BaseConverter):
    id = "hebrew"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.cache = HebrewCache()

    # ---------------------------------------------------------
    # Year structure
    # ---------------------------------------------------------

    def new_year(self, year: int) -> int:
        """JDN of 1 Tishrei of `year`."""
        return self.cache.get(year, _new_year)

    def days_in_year(self, year: int) -> int:
        return self.new_year(year + 1) - self.new_year(year)

    def is_leap_year(self, year: int) -> bool:
        return is_hebrew_leap(year)

    def months_in_year(self, year: int) -> int:
        return months_in_hebrew_year(year)

    def month_labels(self, year: int):
        n = months_in_hebrew_year(year)
        return tuple(range(TISHREI, n + 1)) + tuple(range(NISAN, TISHREI))

    @staticmethod
    def _month_length(year_len: int, leap: bool, month: int) -> int:
        if month in (2, 4, 6, 10, 13):
            return 29
        if month == 12 and not leap:
            return 29
        if month == 8:
            # Cheshvan is long only in complete years (355 / 385)
            return 30 if year_len % 10 == 5 else 29
        if month == 9:
            # Kislev is short only in deficient years (353 / 383)
            return 29 if year_len % 10 == 3 else 30
        return 30

    def days_in_month(self, year: int, month: int) -> int:
        return self._month_length(self.days_in_year(year), is_hebrew_leap(year), month)

    def month_name(self, year: int, month: int, *, short: bool = False) -> str:
        if month == 12 and is_hebrew_leap(year):
            return "Ada I" if short else "Adar I"
        return super().month_name(year, month, short=short)

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def _days_before_month(self, year: int, month: int) -> int:
        year_len = self.days_in_year(year)
        leap = is_hebrew_leap(year)
        total = 0
        for m in self.month_labels(year):
            if m == month:
                return total
            total += self._month_length(year_len, leap, m)
        raise ValueError(f"month {month} not in Hebrew year {year}")

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        return self.new_year(year) + self._days_before_month(year, month) + day - 1

    def from_day_count(self, jdn: int) -> CalendarDate:
        approx = int((jdn - HEBREW_EPOCH) // _MEAN_YEAR) + 1
        year = approx if self.new_year(approx) <= jdn else approx - 1
        if jdn >= self.new_year(year + 1):
            year += 1

        doy0 = jdn - self.new_year(year)
        year_len = self.days_in_year(year)
        leap = is_hebrew_leap(year)
        for m in self.month_labels(year):
            n = self._month_length(year_len, leap, m)
            if doy0 < n:
                return self.date(year, m, doy0 + 1)
            doy0 -= n
        raise AssertionError(f"JDN {jdn} past the end of Hebrew year {year}")
