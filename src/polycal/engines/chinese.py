"""
polycal.engines.chinese
-----------------------
Astronomical Chinese calendar (Shixian rules, Beijing time).

Construction of one sui (winter-solstice year):
  1) month 11 is the lunar month containing the December solstice day;
  2) the sui runs from month 11 of one year to month 11 of the next;
  3) if it holds 13 lunations, the first month after month 11 whose span
     contains no principal term (zhongqi, solar longitude a multiple of 30)
     repeats the previous month number and is the leap month.

A Chinese year starts with month 1 and is numbered by the Gregorian year in
which that day falls. Leap months appear in dates as month + 12.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from ..core.errors import InvalidDateError
from ..core.time import jd_to_jdn, jdn_to_gregorian, jdn_to_jd
from ..core.types import CalendarDate, LunarMonth, LunisolarYear
from ..events import (
    next_new_moon,
    previous_new_moon,
    solar_term_of_longitude,
    sun_longitude,
    winter_solstice_moment,
)
from ..formatting import lookup_month_name
from .base import BaseConverter

LOG = logging.getLogger(__name__)

LEAP_PREFIX = "闰"

V = TypeVar("V")


class LunisolarYearCache(Generic[V]):
    """Thread-safe insert-if-absent memo keyed by year; entries are never invalidated."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._values: Dict[int, V] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __contains__(self, year: int) -> bool:
        with self._lock:
            return year in self._values

    def get(self, year: int, compute: Callable[[int], V]) -> V:
        with self._lock:
            if year in self._values:
                return self._values[year]
        value = compute(year)
        with self._lock:
            stored = self._values.setdefault(year, value)
        LOG.debug("%s cache: filled year %d", self.name, year)
        return stored


@dataclass(frozen=True)
class _SuiMonth:
    start: int
    ordinal: int
    is_leap: bool
    solar_terms: Tuple[int, ...]


def _is_principal(term: int) -> bool:
    # terms count from Lichun (315 deg); odd terms sit on multiples of 30 deg
    return term % 2 == 1


class ChineseConverter(BaseConverter):
    id = "chinese"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._sui: LunisolarYearCache[Tuple[_SuiMonth, ...]] = LunisolarYearCache("chinese sui")
        self.cache: LunisolarYearCache[LunisolarYear] = LunisolarYearCache("chinese year")

    # ---------------------------------------------------------
    # Astronomy in local (Beijing) days
    # ---------------------------------------------------------

    @property
    def _offset(self) -> float:
        return self.config.chinese.utc_offset_hours

    def _local_day(self, jd_ut: float) -> int:
        return jd_to_jdn(jd_ut, self._offset)

    def _midnight(self, jdn: int) -> float:
        """UT moment of the local midnight that opens day jdn."""
        return jdn_to_jd(jdn, self._offset)

    def _term_at(self, jdn: int) -> int:
        return solar_term_of_longitude(sun_longitude(self._midnight(jdn), config=self.config))

    def month_eleven(self, gregorian_year: int) -> int:
        """First day of the lunar month containing the December solstice of a Gregorian year."""
        ws = self._local_day(winter_solstice_moment(gregorian_year, config=self.config))
        return self._local_day(previous_new_moon(self._midnight(ws + 1), config=self.config))

    def _build_sui(self, gregorian_year: int) -> Tuple[_SuiMonth, ...]:
        """Months from month 11 of gregorian_year - 1 up to (excluding) month 11 of gregorian_year."""
        first = self.month_eleven(gregorian_year - 1)
        last = self.month_eleven(gregorian_year)

        starts: List[int] = [first]
        nm = previous_new_moon(self._midnight(first + 1), config=self.config)
        while True:
            nm = next_new_moon(nm, config=self.config)
            day = self._local_day(nm)
            starts.append(day)
            if day >= last:
                break

        terms: List[Tuple[int, ...]] = []
        for a, b in zip(starts, starts[1:]):
            t0, t1 = self._term_at(a), self._term_at(b)
            terms.append(tuple((t0 + i) % 24 for i in range(1, (t1 - t0) % 24 + 1)))

        n_months = len(starts) - 1
        leap_index: Optional[int] = None
        if n_months == 13:
            for i in range(1, n_months):
                if not any(_is_principal(t) for t in terms[i]):
                    leap_index = i
                    break

        months: List[_SuiMonth] = []
        ordinal = 10
        for i in range(n_months):
            is_leap = i == leap_index
            if not is_leap:
                ordinal = ordinal % 12 + 1
            months.append(_SuiMonth(starts[i], ordinal, is_leap, terms[i]))

        if leap_index is not None:
            LOG.debug("sui %d: leap month after month %d", gregorian_year, months[leap_index].ordinal)
        return tuple(months)

    def sui(self, gregorian_year: int) -> Tuple[_SuiMonth, ...]:
        return self._sui.get(gregorian_year, self._build_sui)

    # ---------------------------------------------------------
    # Years
    # ---------------------------------------------------------

    def _build_year(self, year: int) -> LunisolarYear:
        this_sui, next_sui = self.sui(year), self.sui(year + 1)

        def first_month_index(sui: Sequence[_SuiMonth]) -> int:
            for i, m in enumerate(sui):
                if m.ordinal == 1 and not m.is_leap:
                    return i
            raise AssertionError("sui without a first month")

        i0 = first_month_index(this_sui)
        i1 = first_month_index(next_sui)
        seq = list(this_sui[i0:]) + list(next_sui[:i1])
        new_year = seq[0].start
        end_excl = next_sui[i1].start

        months = []
        for k, m in enumerate(seq):
            nxt = seq[k + 1].start if k + 1 < len(seq) else end_excl
            months.append(LunarMonth(m.ordinal, m.is_leap, m.start, nxt - 1, m.solar_terms))
        return LunisolarYear(year, new_year, tuple(months))

    def year_record(self, year: int) -> LunisolarYear:
        """Month table of a Chinese year (numbered by the Gregorian year of its new year)."""
        return self.cache.get(year, self._build_year)

    def new_year(self, year: int) -> int:
        return self.year_record(year).new_year

    def leap_month(self, year: int) -> Optional[int]:
        """Ordinal of the leap month in `year`, or None."""
        return self.year_record(year).leap_month

    def is_leap_year(self, year: int) -> bool:
        return self.leap_month(year) is not None

    def months_in_year(self, year: int) -> int:
        return len(self.year_record(year).months)

    def month_labels(self, year: int) -> Sequence[int]:
        return tuple(m.label for m in self.year_record(year).months)

    def days_in_month(self, year: int, month: int) -> int:
        m = self.year_record(year).month(month)
        if m is None:
            raise InvalidDateError(f"Chinese: month {month} does not exist in year {year}")
        return m.length

    def days_in_year(self, year: int) -> int:
        rec = self.year_record(year)
        return rec.end - rec.new_year + 1

    def month_name(self, year: int, month: int, *, short: bool = False) -> str:
        if month > 12:
            return LEAP_PREFIX + lookup_month_name(self.id, month - 12, short=short)
        return lookup_month_name(self.id, month, short=short)

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        m = self.year_record(year).month(month)
        assert m is not None
        return m.start + day - 1

    def from_day_count(self, jdn: int) -> CalendarDate:
        year = jdn_to_gregorian(jdn)[0]
        if jdn < self.new_year(year):
            year -= 1
        for m in self.year_record(year).months:
            if m.start <= jdn <= m.end:
                return self.date(year, m.label, jdn - m.start + 1)
        raise AssertionError(f"JDN {jdn} not covered by Chinese year {year}")

    def new_year_gregorian(self, year: int) -> Tuple[int, int, int]:
        return jdn_to_gregorian(self.new_year(year))

