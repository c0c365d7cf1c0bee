"""
polycal.formatting
------------------
Token-based rendering and ISO-shaped parsing of calendar dates.

Tokens (longest match wins):
  YYYY  signed year, zero-padded to four digits ("-0100", "2024")
  YY    last two digits of the year
  MMMM  month name        MMM  abbreviated month name
  MM    two-digit month   M    month number
  DD    two-digit day     D    day number
  ERA   era name of the calendar, "BCE" for years <= 0
  EEEE  weekday name      EEE  abbreviated weekday     E  weekday initial
Anything else is copied through.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Dict, Optional, Tuple

from .core.time import weekday
from .core.types import CalendarDate

if TYPE_CHECKING:
    from .engines.base import BaseConverter

_GREGORIAN_MONTHS = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)
_GREGORIAN_MONTHS_SHORT = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    "gregorian": _GREGORIAN_MONTHS,
    "julian": _GREGORIAN_MONTHS,
    "islamic": (
        "Muharram", "Safar", "Rabi' al-awwal", "Rabi' al-thani", "Jumada al-awwal", "Jumada al-thani",
        "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qi'dah", "Dhu al-Hijjah",
    ),
    "hebrew": (
        "Nisan", "Iyar", "Sivan", "Tammuz", "Av", "Elul", "Tishrei",
        "Cheshvan", "Kislev", "Tevet", "Shevat", "Adar", "Adar II",
    ),
    "persian": (
        "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
        "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
    ),
    "chinese": ("正", "二", "三", "四", "五", "六", "七", "八", "九", "十", "十一", "十二"),
    "ethiopian": (
        "Meskerem", "Tikimt", "Hidar", "Tahsas", "Tir", "Yekatit", "Megabit",
        "Miazia", "Genbot", "Sene", "Hamle", "Nehase", "Pagume",
    ),
    "coptic": (
        "Tout", "Baba", "Hator", "Koiak", "Tobi", "Meshir", "Paremhat",
        "Paremoude", "Pashons", "Paoni", "Epip", "Mesori", "Pi Kogi Enavot",
    ),
    "indian-saka": (
        "Chaitra", "Vaisakha", "Jyeshtha", "Ashadha", "Shravana", "Bhadra",
        "Ashwin", "Kartika", "Agrahayana", "Pausha", "Magha", "Phalguna",
    ),
    "bahai": (
        "Bahá", "Jalál", "Jamál", "‘Aẓamat", "Núr", "Raḥmat", "Kalimát", "Kamál", "Asmá'", "‘Izzat",
        "Mashíyyat", "‘Ilm", "Qudrat", "Qawl", "Masá'il", "Sharaf", "Sulṭán", "Mulk", "Ayyám-i-Há", "‘Alá'",
    ),
    "thai-buddhist": (
        "มกราคม", "กุมภาพันธ์", "มีนาคม", "เมษายน", "พฤษภาคม", "มิถุนายน",
        "กรกฎาคม", "สิงหาคม", "กันยายน", "ตุลาคม", "พฤศจิกายน", "ธันวาคม",
    ),
    "mayan-tzolkin": (
        "Imix", "Ik'", "Ak'b'al", "K'an", "Chikchan", "Kimi", "Manik'", "Lamat", "Muluk", "Ok",
        "Chuwen", "Eb'", "B'en", "Ix", "Men", "K'ib'", "Kab'an", "Etz'nab'", "Kawak", "Ajaw",
    ),
    "mayan-haab": (
        "Pop", "Wo'", "Sip", "Sotz'", "Sek", "Xul", "Yaxk'in", "Mol", "Ch'en", "Yax",
        "Sak'", "Keh", "Mak", "K'ank'in", "Muwan", "Pax", "K'ayab'", "Kumk'u", "Wayeb'",
    ),
    "mayan-longcount": (),
    "cherokee": (
        "Cold Moon", "Bony Moon", "Windy Moon", "Flower Moon", "Planting Moon", "Green Corn Moon",
        "Ripe Corn Moon", "Fruit Moon", "Nut Moon", "Harvest Moon", "Trading Moon", "Snow Moon",
    ),
    "iroquois": (
        "First Moon", "Second Moon", "Third Moon", "Fourth Moon", "Fifth Moon", "Sixth Moon", "Seventh Moon",
        "Eighth Moon", "Ninth Moon", "Tenth Moon", "Eleventh Moon", "Twelfth Moon", "Thirteenth Moon",
    ),
    "aztec-xiuhpohualli": (
        "Atlcahualo", "Tlacaxipehualiztli", "Tozoztontli", "Huey Tozoztli", "Toxcatl", "Etzalcualiztli",
        "Tecuilhuitontli", "Huey Tecuilhuitl", "Tlaxochimaco", "Xocotlhuetzi", "Ochpaniztli", "Teotleco",
        "Tepeilhuitl", "Quecholli", "Panquetzaliztli", "Atemoztli", "Tititl", "Izcalli", "Nemontemi",
    ),
}

MONTH_NAMES_SHORT: Dict[str, Tuple[str, ...]] = {
    "gregorian": _GREGORIAN_MONTHS_SHORT,
    "julian": _GREGORIAN_MONTHS_SHORT,
    "islamic": ("Muh", "Saf", "Rab I", "Rab II", "Jum I", "Jum II", "Raj", "Sha'", "Ram", "Shaw", "Dhu Q", "Dhu H"),
    "hebrew": ("Nis", "Iyy", "Siv", "Tam", "Av", "Elu", "Tis", "Che", "Kis", "Tev", "She", "Ada", "Ada II"),
    "persian": ("Far", "Ord", "Kho", "Tir", "Mor", "Sha", "Meh", "Aba", "Aza", "Dey", "Bah", "Esf"),
    "chinese": MONTH_NAMES["chinese"],
    "ethiopian": ("Mes", "Tik", "Hid", "Tah", "Tir", "Yek", "Meg", "Mia", "Gen", "Sen", "Ham", "Neh", "Pag"),
    "coptic": ("Tou", "Bab", "Hat", "Koi", "Tob", "Mes", "Par", "Par", "Pas", "Pao", "Epi", "Mes", "PiK"),
    "indian-saka": ("Cha", "Vai", "Jye", "Ash", "Shr", "Bha", "Ash", "Kar", "Agr", "Pau", "Mag", "Pha"),
    "bahai": (
        "Bah", "Jal", "Jam", "Aẓa", "Núr", "Raḥ", "Kal", "Kam", "Asm", "Izz",
        "Mas", "Ilm", "Qud", "Qaw", "Mas", "Sha", "Sul", "Mul", "Ayy", "Ala",
    ),
    "thai-buddhist": (
        "ม.ค.", "ก.พ.", "มี.ค.", "เม.ย.", "พ.ค.", "มิ.ย.", "ก.ค.", "ส.ค.", "ก.ย.", "ต.ค.", "พ.ย.", "ธ.ค.",
    ),
    "mayan-tzolkin": (
        "Imi", "Ik", "Ak'", "K'an", "Chi", "Kim", "Man", "Lam", "Mul", "Ok",
        "Chu", "Eb", "B'en", "Ix", "Men", "K'ib", "Kab", "Etz", "Kaw", "Aja",
    ),
    "mayan-haab": (
        "Pop", "Wo", "Sip", "Sot", "Sek", "Xul", "Yax", "Mol", "Ch'e", "Yax",
        "Sak", "Keh", "Mak", "K'an", "Muw", "Pax", "K'ay", "Kum", "Way",
    ),
    "mayan-longcount": (),
    "cherokee": (
        "Cold", "Bony", "Windy", "Flower", "Planting", "Green Corn",
        "Ripe Corn", "Fruit", "Nut", "Harvest", "Trading", "Snow",
    ),
    "iroquois": (
        "1st Moon", "2nd Moon", "3rd Moon", "4th Moon", "5th Moon", "6th Moon", "7th Moon",
        "8th Moon", "9th Moon", "10th Moon", "11th Moon", "12th Moon", "13th Moon",
    ),
    "aztec-xiuhpohualli": (
        "Atlc", "Tlac", "Toz", "Huey", "Tox", "Etz", "Tec", "Huey T", "Tlax", "Xoc",
        "Och", "Teot", "Tepe", "Que", "Pan", "Atem", "Titi", "Izca", "Nemo",
    ),
}

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
DAY_NAMES_SHORT = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

_TOKEN_RE = re.compile(r"YYYY|EEEE|MMMM|MMM|EEE|ERA|YY|MM|DD|M|D|E")
_ISO_RE = re.compile(r"^(-?\d{4,})-(\d{2})-(\d{2,})$")


def lookup_month_name(calendar_id: str, month: int, *, short: bool = False) -> str:
    """Name from the tables above, or the month number when there is none."""
    table = (MONTH_NAMES_SHORT if short else MONTH_NAMES).get(calendar_id, ())
    if 1 <= month <= len(table):
        return table[month - 1]
    return str(month)


def format_year(year: int) -> str:
    sign = "-" if year < 0 else ""
    return f"{sign}{abs(year):04d}"


def format_date(converter: "BaseConverter", d: CalendarDate, fmt: str = "YYYY-MM-DD") -> str:
    wd: Optional[int] = None

    def _weekday() -> int:
        nonlocal wd
        if wd is None:
            wd = weekday(converter.to_day_count(d.year, d.month, d.day))
        return wd

    def repl(m: "re.Match[str]") -> str:
        tok = m.group(0)
        if tok == "YYYY":
            return format_year(d.year)
        if tok == "YY":
            return f"{abs(d.year) % 100:02d}"
        if tok == "MMMM":
            return converter.month_name(d.year, d.month)
        if tok == "MMM":
            return converter.month_name(d.year, d.month, short=True)
        if tok == "MM":
            return f"{d.month:02d}"
        if tok == "M":
            return str(d.month)
        if tok == "DD":
            return f"{d.day:02d}"
        if tok == "D":
            return str(d.day)
        if tok == "ERA":
            return converter.era_label(d.year)
        if tok == "EEEE":
            return DAY_NAMES[_weekday()]
        if tok == "EEE":
            return DAY_NAMES_SHORT[_weekday()]
        return DAY_NAMES_SHORT[_weekday()][0]

    return _TOKEN_RE.sub(repl, fmt)


def parse_date(converter: "BaseConverter", text: str) -> Optional[CalendarDate]:
    """
    Parse "(-)YYYY-MM-DD" into a date of `converter`'s calendar.

    Returns None when the text has another shape or names a day that does
    not exist in that calendar, so callers can probe several calendars.
    """
    m = _ISO_RE.match(text.strip())
    if m is None:
        return None
    year, month, day = (int(g) for g in m.groups())
    if not converter.is_valid(year, month, day):
        return None
    return converter.date(year, month, day)
