"""
polycal.core.yearcycle
----------------------
Signed-year accumulation for calendars whose leap pattern repeats over a
fixed number of years.

Year numbering is astronomical: ... -1, 0, 1, 2 ... with year 1 the first
year of the era. Day offsets are measured from the first day of year 1, so
they are negative before it. Forward and backward accumulation go through
the same floor-division path, which keeps the two directions consistent.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Callable, Tuple


@dataclass(frozen=True)
class YearCycle:
    """
    A leap pattern with period `years`.

    year_length(y) must satisfy year_length(y + years) == year_length(y);
    only years 1..years are ever evaluated.
    """
    years: int
    year_length: Callable[[int], int]
    _offsets: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.years <= 0:
            raise ValueError("years must be positive")
        acc = [0]
        for y in range(1, self.years + 1):
            acc.append(acc[-1] + self.year_length(y))
        object.__setattr__(self, "_offsets", tuple(acc))

    @property
    def days(self) -> int:
        """Days in one full cycle."""
        return self._offsets[-1]


def days_before_year(year: int, cycle: YearCycle) -> int:
    """Days from the first day of year 1 to the first day of `year`."""
    q, r = divmod(year - 1, cycle.years)
    return q * cycle.days + cycle._offsets[r]


def locate_year(days: int, cycle: YearCycle) -> Tuple[int, int]:
    """
    Inverse of days_before_year.

    Returns (year, day_of_year0) where day_of_year0 counts from 0.
    """
    q, r = divmod(days, cycle.days)
    i = bisect_right(cycle._offsets, r) - 1
    return 1 + q * cycle.years + i, r - cycle._offsets[i]
