"""
polycal.engines.bahai
---------------------
Badíʻ calendar.

Nineteen months of nineteen days plus the intercalary days of Ayyám-i-Há,
which sit between the 18th and 19th months. Month numbers in dates are
positional so that they increase through the year:

  1..18  Bahá .. Mulk
  19     Ayyám-i-Há (4 or 5 days)
  20     ‘Alá’ (the 19th month, the month of fasting)

Naw-Rúz (1 Bahá) is 21 March up to year 171. From 172 BE (2015) it is the
day, in Tehran, on which the March equinox falls before sunset.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict

from ..core.time import gregorian_to_jdn, jd_to_jdn, jdn_to_gregorian
from ..core.types import CalendarDate
from ..events import vernal_equinox_moment
from .base import BaseConverter

LOG = logging.getLogger(__name__)

BAHAI_OFFSET = 1843  # Gregorian year of the Naw-Rúz ending year 0
AYYAM_I_HA = 19
ALA = 20


class BahaiConverter(BaseConverter):
    id = "bahai"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._naw_ruz: Dict[int, int] = {}
        self._lock = threading.Lock()

    def naw_ruz(self, year: int) -> int:
        """JDN of 1 Bahá of `year`."""
        with self._lock:
            cached = self._naw_ruz.get(year)
        if cached is not None:
            return cached

        cfg = self.config.bahai
        gy = year + BAHAI_OFFSET
        if year < cfg.astronomical_from_year:
            jdn = gregorian_to_jdn(gy, 3, 21)
        else:
            # local day of the equinox, pushed to the next day at or after sunset
            moment = vernal_equinox_moment(gy, config=self.config)
            jdn = jd_to_jdn(moment, cfg.tehran_offset_hours + 24.0 - cfg.sunset_hour)
            LOG.debug("Naw-Ruz %d BE: equinox JD %.5f -> JDN %d", year, moment, jdn)

        with self._lock:
            jdn = self._naw_ruz.setdefault(year, jdn)
        return jdn

    def days_in_year(self, year: int) -> int:
        return self.naw_ruz(year + 1) - self.naw_ruz(year)

    def is_leap_year(self, year: int) -> bool:
        return self.days_in_year(year) == 366

    def months_in_year(self, year: int) -> int:
        return ALA

    def days_in_month(self, year: int, month: int) -> int:
        if month == AYYAM_I_HA:
            return self.days_in_year(year) - 19 * 19
        return 19

    def _month_offset(self, year: int, month: int) -> int:
        if month <= AYYAM_I_HA:
            return 19 * (month - 1)
        return 18 * 19 + self.days_in_month(year, AYYAM_I_HA)

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        return self.naw_ruz(year) + self._month_offset(year, month) + day - 1

    def from_day_count(self, jdn: int) -> CalendarDate:
        year = jdn_to_gregorian(jdn)[0] - BAHAI_OFFSET
        if jdn < self.naw_ruz(year):
            year -= 1
        doy0 = jdn - self.naw_ruz(year)
        ha = self.days_in_month(year, AYYAM_I_HA)
        if doy0 < 18 * 19:
            month = doy0 // 19 + 1
        elif doy0 < 18 * 19 + ha:
            month = AYYAM_I_HA
        else:
            month = ALA
        return self.date(year, month, doy0 - self._month_offset(year, month) + 1)
