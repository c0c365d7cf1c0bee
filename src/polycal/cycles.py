"""
polycal.cycles
--------------
Long cycles layered on top of the calendars:

  sexagenary_year     Chinese stem/branch year (1984 = 甲子, position 1)
  metonic_cycle       position of a Hebrew year in the 19-year cycle
  calendar_round      52-year (18980-day) Tzolk'in x Haab' round
  long_count_cycles   baktun/katun/tun/uinal/kin breakdown of a day
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .engines.hebrew import is_hebrew_leap
from .engines.mesoamerican import KIN_PER_KATUN, KIN_PER_TUN, KIN_PER_UINAL, MAYAN_EPOCH, long_count_components

HEAVENLY_STEMS = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")
EARTHLY_BRANCHES = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")
ZODIAC_ANIMALS = ("Rat", "Ox", "Tiger", "Rabbit", "Dragon", "Snake", "Horse", "Goat", "Monkey", "Rooster", "Dog", "Pig")

SEXAGENARY_EPOCH_YEAR = 1984
CALENDAR_ROUND_DAYS = 18980  # lcm(260, 365)


@dataclass(frozen=True)
class SexagenaryYear:
    stem: str
    stem_index: int      # 0..9
    branch: str
    branch_index: int    # 0..11
    animal: str
    position: int        # 1..60
    cycle: int           # cycles since 1984 (negative before)

    @property
    def name(self) -> str:
        return self.stem + self.branch


@dataclass(frozen=True)
class MetonicPosition:
    position: int  # 1..19, year 1 AM at position 1
    cycle: int
    is_leap: bool


@dataclass(frozen=True)
class CalendarRound:
    round: int           # rounds since 0.0.0.0.0
    days_into_round: int
    years_into_round: int  # 365-day years, 0..51


@dataclass(frozen=True)
class LongCountCycles:
    baktun: int
    katun: int
    tun: int
    uinal: int
    kin: int
    katun_global: int     # katuns since the epoch
    days_into_baktun: int
    days_into_katun: int

    def notation(self) -> str:
        return f"{self.baktun}.{self.katun}.{self.tun}.{self.uinal}.{self.kin}"


def sexagenary_year(chinese_year: int) -> SexagenaryYear:
    cycle, pos0 = divmod(chinese_year - SEXAGENARY_EPOCH_YEAR, 60)
    return SexagenaryYear(
        stem=HEAVENLY_STEMS[pos0 % 10],
        stem_index=pos0 % 10,
        branch=EARTHLY_BRANCHES[pos0 % 12],
        branch_index=pos0 % 12,
        animal=ZODIAC_ANIMALS[pos0 % 12],
        position=pos0 + 1,
        cycle=cycle,
    )


def metonic_cycle(hebrew_year: int) -> MetonicPosition:
    cycle, pos0 = divmod(hebrew_year - 1, 19)
    return MetonicPosition(pos0 + 1, cycle, is_hebrew_leap(hebrew_year))


def calendar_round(jdn: int) -> CalendarRound:
    rnd, days = divmod(jdn - MAYAN_EPOCH, CALENDAR_ROUND_DAYS)
    return CalendarRound(rnd, days, days // 365)


def long_count_cycles(jdn: int) -> LongCountCycles:
    baktun, katun, tun, uinal, kin = long_count_components(jdn)
    into_katun = tun * KIN_PER_TUN + uinal * KIN_PER_UINAL + kin
    return LongCountCycles(
        baktun=baktun,
        katun=katun,
        tun=tun,
        uinal=uinal,
        kin=kin,
        katun_global=baktun * 20 + katun,
        days_into_baktun=katun * KIN_PER_KATUN + into_katun,
        days_into_katun=into_katun,
    )


@dataclass(frozen=True)
class MacroCycles:
    sexagenary: Optional[SexagenaryYear]
    metonic: Optional[MetonicPosition]
    calendar_round: CalendarRound
    long_count: LongCountCycles


def macro_cycles(jdn: int, *, chinese_year: Optional[int] = None, hebrew_year: Optional[int] = None) -> MacroCycles:
    """All cycles of a day; the year-based ones only when their year is given."""
    return MacroCycles(
        sexagenary=sexagenary_year(chinese_year) if chinese_year is not None else None,
        metonic=metonic_cycle(hebrew_year) if hebrew_year is not None else None,
        calendar_round=calendar_round(jdn),
        long_count=long_count_cycles(jdn),
    )
