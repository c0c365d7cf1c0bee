from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import Any, Dict, List, Optional

from .core.engine import CalendarConverter, ConverterRegistry
from .core.time import date_to_jdn, jdn_to_date
from .core.types import CalendarDate

_registry: Optional[ConverterRegistry] = None


def set_registry(reg: ConverterRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> ConverterRegistry:
    if _registry is None:
        raise RuntimeError("Converter registry not initialized")
    return _registry


def list_calendars() -> List[str]:
    return _reg().list()


def get_converter(calendar_id: str) -> Optional[CalendarConverter]:
    """Converter for an id, or None when the id is not registered."""
    return _reg().find(calendar_id)


def calendar_info(calendar_id: str) -> Dict[str, Any]:
    info = asdict(_reg().get(calendar_id).descriptor())
    info["days_in_year"] = list(info["days_in_year"])
    return info


def register_converter(calendar_id: str, converter: CalendarConverter, *, overwrite: bool = False) -> None:
    _reg().register(calendar_id, converter, overwrite=overwrite)


# ============================================================
# Conversion
# ============================================================

def convert_date(d: CalendarDate, target: str) -> CalendarDate:
    """Any-to-any conversion through the day count."""
    return _reg().convert(d, target)


def calendar_date_to_jdn(d: CalendarDate) -> int:
    return _reg().get(d.calendar).to_day_count(d.year, d.month, d.day)


def jdn_to_calendar_date(jdn: int, calendar_id: str) -> CalendarDate:
    return _reg().get(calendar_id).from_day_count(jdn)


def date_to_calendar_date(civil: date, calendar_id: str) -> CalendarDate:
    """A `datetime.date` (proleptic Gregorian) in another calendar."""
    return jdn_to_calendar_date(date_to_jdn(civil), calendar_id)


def calendar_date_to_date(d: CalendarDate) -> date:
    """Inverse of date_to_calendar_date; ValueError outside datetime's year range 1..9999."""
    return jdn_to_date(calendar_date_to_jdn(d))


# ============================================================
# Text
# ============================================================

def format_calendar_date(d: CalendarDate, fmt: str = "YYYY-MM-DD") -> str:
    return _reg().get(d.calendar).format(d, fmt)


def parse_calendar_date(text: str, calendar_id: str) -> Optional[CalendarDate]:
    return _reg().get(calendar_id).parse(text)
