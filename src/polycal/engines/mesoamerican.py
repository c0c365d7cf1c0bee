"""
polycal.engines.mesoamerican
----------------------------
Day counts anchored at the Long Count epoch 0.0.0.0.0 (JDN 584283,
GMT correlation).

The cyclical calendars number their cycles from 1 at the epoch, so every
day maps to exactly one (cycle, month, day) triple:

  mayan-tzolkin        cycle of 260 days; month = day name 1..20,
                       day = day number 1..13
  mayan-haab           cycle of 365 days; 18 months of 20 days + Wayeb' (5)
  aztec-xiuhpohualli   same structure as the Haab'; Nemontemi is month 19
  mayan-longcount      (baktun, katun, day within the katun 0..7199)
"""

from __future__ import annotations

import re
from typing import Optional, Sequence, Tuple

from ..core.errors import InvalidDateError
from ..core.types import CalendarDate
from .base import BaseConverter

MAYAN_EPOCH = 584283

KIN_PER_UINAL = 20
KIN_PER_TUN = 360
KIN_PER_KATUN = 7200
KIN_PER_BAKTUN = 144000

_DOTTED_RE = re.compile(r"^\s*(-?\d+)\.(\d+)\.(\d+)\.(\d+)\.(\d+)\s*$")


class _MesoamericanConverter(BaseConverter):
    cycle_days: int = 0

    def era_label(self, year: int) -> str:
        return ""

    def is_leap_year(self, year: int) -> bool:
        return False

    def days_in_year(self, year: int) -> int:
        return self.cycle_days

    def _cycle_start(self, year: int) -> int:
        return MAYAN_EPOCH + (year - 1) * self.cycle_days


class TzolkinConverter(_MesoamericanConverter):
    id = "mayan-tzolkin"
    cycle_days = 260

    def days_in_month(self, year: int, month: int) -> int:
        return 13

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        # r = month - 1 (mod 20) and r = day - 1 (mod 13)
        r = (40 * (day - 1) - 39 * (month - 1)) % 260
        return self._cycle_start(year) + r

    def from_day_count(self, jdn: int) -> CalendarDate:
        year, r = divmod(jdn - MAYAN_EPOCH, self.cycle_days)
        return self.date(year + 1, r % 20 + 1, r % 13 + 1)


class HaabConverter(_MesoamericanConverter):
    id = "mayan-haab"
    cycle_days = 365

    def months_in_year(self, year: int) -> int:
        return 19

    def days_in_month(self, year: int, month: int) -> int:
        return 5 if month == 19 else 20

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        return self._cycle_start(year) + 20 * (month - 1) + day - 1

    def from_day_count(self, jdn: int) -> CalendarDate:
        year, r = divmod(jdn - MAYAN_EPOCH, self.cycle_days)
        return self.date(year + 1, r // 20 + 1, r % 20 + 1)


class AztecXiuhpohualliConverter(HaabConverter):
    id = "aztec-xiuhpohualli"


def long_count_components(jdn: int) -> Tuple[int, int, int, int, int]:
    """(baktun, katun, tun, uinal, kin) of a day; baktun is negative before the epoch."""
    baktun, rem = divmod(jdn - MAYAN_EPOCH, KIN_PER_BAKTUN)
    katun, rem = divmod(rem, KIN_PER_KATUN)
    tun, rem = divmod(rem, KIN_PER_TUN)
    uinal, kin = divmod(rem, KIN_PER_UINAL)
    return baktun, katun, tun, uinal, kin


class LongCountConverter(_MesoamericanConverter):
    """
    Long Count as a date triple (baktun, katun, day-in-katun), all zero-based.

    day-in-katun packs tun/uinal/kin as tun*400 + uinal*20 + kin so that
    "YYYY-MM-DD" renders every component, and dotted notation
    "b.k.t.u.k" is accepted and produced through notation()/parse().
    """
    id = "mayan-longcount"
    cycle_days = KIN_PER_BAKTUN

    def month_labels(self, year: int) -> Sequence[int]:
        return range(0, 20)

    def days_in_month(self, year: int, month: int) -> int:
        return KIN_PER_KATUN

    @staticmethod
    def _unpack(day: int) -> Tuple[int, int, int]:
        tun, rem = divmod(day, 400)
        uinal, kin = divmod(rem, 20)
        return tun, uinal, kin

    def _problem(self, year: int, month: int, day: int) -> Optional[str]:
        if month not in self.month_labels(year):
            return f"katun {month} out of range 0..19"
        if day < 0:
            return f"day {day} is negative"
        tun, uinal, kin = self._unpack(day)
        if tun > 19 or uinal > 17:
            return f"day {day} does not encode a tun 0..19 / uinal 0..17 / kin 0..19"
        return None

    def is_valid(self, year: int, month: int, day: int) -> bool:
        return self._problem(year, month, day) is None

    def validate(self, year: int, month: int, day: int) -> None:
        problem = self._problem(year, month, day)
        if problem is not None:
            raise InvalidDateError(f"Mayan Long Count: {problem}")

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        tun, uinal, kin = self._unpack(day)
        return (
            MAYAN_EPOCH
            + year * KIN_PER_BAKTUN
            + month * KIN_PER_KATUN
            + tun * KIN_PER_TUN
            + uinal * KIN_PER_UINAL
            + kin
        )

    def from_day_count(self, jdn: int) -> CalendarDate:
        baktun, katun, tun, uinal, kin = long_count_components(jdn)
        return self.date(baktun, katun, tun * 400 + uinal * 20 + kin)

    def notation(self, d: CalendarDate) -> str:
        tun, uinal, kin = self._unpack(d.day)
        return f"{d.year}.{d.month}.{tun}.{uinal}.{kin}"

    def from_components(self, baktun: int, katun: int, tun: int, uinal: int, kin: int) -> CalendarDate:
        if not (0 <= tun <= 19 and 0 <= uinal <= 17 and 0 <= kin <= 19):
            raise InvalidDateError(f"Mayan Long Count: invalid {baktun}.{katun}.{tun}.{uinal}.{kin}")
        day = tun * 400 + uinal * 20 + kin
        self.validate(baktun, katun, day)
        return self.date(baktun, katun, day)

    def parse(self, text: str) -> Optional[CalendarDate]:
        m = _DOTTED_RE.match(text)
        if m is None:
            return super().parse(text)
        try:
            return self.from_components(*(int(g) for g in m.groups()))
        except InvalidDateError:
            return None
