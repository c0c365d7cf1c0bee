from __future__ import annotations

from typing import Dict

from ..core.types import CalendarDescriptor

_D = CalendarDescriptor

DESCRIPTORS: Dict[str, CalendarDescriptor] = {
    "gregorian": _D(
        "gregorian", "Gregorian", "Gregorian", "solar", 12, (365, 366), 1, "CE",
        "Every 4 years, except century years unless divisible by 400",
    ),
    "julian": _D(
        "julian", "Julian", "Julian", "solar", 12, (365, 366), 1, "CE",
        "Every 4 years",
    ),
    "islamic": _D(
        "islamic", "Islamic (Hijri)", "التقويم الهجري", "lunar", 12, (354, 355), 622, "AH",
        "30-year cycle with 11 leap years (2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29)",
    ),
    "hebrew": _D(
        "hebrew", "Hebrew (Jewish)", "הלוח העברי", "lunisolar", 12, (353, 385), -3760, "AM",
        "19-year Metonic cycle; years 3, 6, 8, 11, 14, 17, 19 have 13 months",
    ),
    "persian": _D(
        "persian", "Persian (Jalali)", "گاهشماری جلالی", "solar", 12, (365, 366), 622, "SH",
        "33-year arithmetic cycle with 8 leap years",
    ),
    "chinese": _D(
        "chinese", "Chinese", "农历", "lunisolar", 12, (353, 385), 1, "CE",
        "Leap month when a year holds 13 new moons: the first month without a principal solar term",
    ),
    "ethiopian": _D(
        "ethiopian", "Ethiopian", "የኢትዮጵያ ዘመን አቆጣጠር", "solar", 13, (365, 366), 8, "EE",
        "Every 4 years (year mod 4 == 3)",
    ),
    "coptic": _D(
        "coptic", "Coptic", "ⲛⲓⲙⲉⲧⲟⲩⲛⲓⲙⲓⲛⲓ", "solar", 13, (365, 366), 284, "AM",
        "Every 4 years (year mod 4 == 3)",
    ),
    "indian-saka": _D(
        "indian-saka", "Indian National (Saka)", "शक संवत", "solar", 12, (365, 366), 78, "Saka",
        "Leap when Saka year + 78 is a Gregorian leap year",
    ),
    "bahai": _D(
        "bahai", "Baháʼí", "Badíʻ", "solar", 19, (365, 366), 1844, "BE",
        "Year begins on the day of the vernal equinox in Tehran (from 172 BE)",
    ),
    "thai-buddhist": _D(
        "thai-buddhist", "Thai Buddhist", "พุทธศักราช", "solar", 12, (365, 366), -542, "BE",
        "Same as Gregorian",
    ),
    "mayan-tzolkin": _D(
        "mayan-tzolkin", "Mayan Tzolk'in", "Tzolk'in", "other", 20, (260, 260), -3113, "",
        "260-day cycle",
    ),
    "mayan-haab": _D(
        "mayan-haab", "Mayan Haab'", "Haab'", "solar", 18, (365, 365), -3113, "",
        "Fixed 365-day year",
    ),
    "mayan-longcount": _D(
        "mayan-longcount", "Mayan Long Count", "Long Count", "other", 20, (144000, 144000), -3113, "",
        "Linear count from epoch",
    ),
    "cherokee": _D(
        "cherokee", "Cherokee", "ᎠᏂᏴᏫᏯᎢ", "lunisolar", 12, (365, 366), 1, "CE",
        "Same as Gregorian (adapted 12-month system)",
    ),
    "iroquois": _D(
        "iroquois", "Iroquois (Haudenosaunee)", "Haudenosaunee", "lunisolar", 13, (365, 366), 1, "CE",
        "13 moons of 28 days; the thirteenth moon takes the remaining days of the solar year",
    ),
    "aztec-xiuhpohualli": _D(
        "aztec-xiuhpohualli", "Aztec Xiuhpohualli", "Xiuhpohualli", "solar", 18, (365, 365), -3113, "",
        "Fixed 365-day year (no leap years)",
    ),
}
