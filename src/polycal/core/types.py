from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Literal, Optional, Tuple

CalendarId = Literal[
    "gregorian",
    "julian",
    "islamic",
    "hebrew",
    "persian",
    "chinese",
    "ethiopian",
    "coptic",
    "indian-saka",
    "bahai",
    "thai-buddhist",
    "mayan-tzolkin",
    "mayan-haab",
    "mayan-longcount",
    "cherokee",
    "iroquois",
    "aztec-xiuhpohualli",
]

CALENDAR_IDS: Tuple[str, ...] = (
    "gregorian",
    "julian",
    "islamic",
    "hebrew",
    "persian",
    "chinese",
    "ethiopian",
    "coptic",
    "indian-saka",
    "bahai",
    "thai-buddhist",
    "mayan-tzolkin",
    "mayan-haab",
    "mayan-longcount",
    "cherokee",
    "iroquois",
    "aztec-xiuhpohualli",
)

CalendarKind = Literal["solar", "lunar", "lunisolar", "other"]

MoonPhase = Literal[
    "new-moon",
    "waxing-crescent",
    "first-quarter",
    "waxing-gibbous",
    "full-moon",
    "waning-gibbous",
    "last-quarter",
    "waning-crescent",
]

SeasonEvent = Literal["vernal-equinox", "summer-solstice", "autumnal-equinox", "winter-solstice"]


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int  # 1-based except mayan-longcount (katun)
    day: int
    calendar: str
    era: Optional[str] = None

    def key(self) -> Tuple[int, int, int]:
        """Lexicographic sort key inside one calendar."""
        return (self.year, self.month, self.day)

    def with_era(self, era: Optional[str]) -> "CalendarDate":
        return replace(self, era=era)


@dataclass(frozen=True)
class CalendarDescriptor:
    """Static, read-only metadata for one calendar system."""
    id: str
    name: str
    native_name: str
    kind: CalendarKind
    months: int
    days_in_year: Tuple[int, int]  # (min, max)
    era_start: int                 # Gregorian year in which year 1 begins
    era_name: str
    leap_rule: str


@dataclass(frozen=True)
class LunarMonth:
    ordinal: int                 # 1..12
    is_leap: bool
    start: int                   # JDN of day 1
    end: int                     # JDN of the last day
    solar_terms: Tuple[int, ...] # term numbers 0..23 whose day falls in the month

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    @property
    def label(self) -> int:
        """Month number as used in CalendarDate (leap months are ordinal + 12)."""
        return self.ordinal + 12 if self.is_leap else self.ordinal


@dataclass(frozen=True)
class LunisolarYear:
    """Derived month table of one Chinese year."""
    year: int
    new_year: int
    months: Tuple[LunarMonth, ...]

    @property
    def end(self) -> int:
        return self.months[-1].end

    @property
    def leap_month(self) -> Optional[int]:
        for m in self.months:
            if m.is_leap:
                return m.ordinal
        return None

    def month(self, label: int) -> Optional[LunarMonth]:
        for m in self.months:
            if m.label == label:
                return m
        return None


@dataclass(frozen=True)
class AstronomicalEvent:
    kind: Literal["solstice-equinox", "moon-phase"]
    name: str
    display_name: str
    jdn: int
    date: CalendarDate
