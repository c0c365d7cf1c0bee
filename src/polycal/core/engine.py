from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol

from .errors import UnknownCalendarError
from .types import CalendarDate, CalendarDescriptor

LOG = logging.getLogger(__name__)


class CalendarConverter(Protocol):
    id: str

    def to_day_count(self, year: int, month: int, day: int) -> int: ...
    def from_day_count(self, jdn: int) -> CalendarDate: ...
    def descriptor(self) -> CalendarDescriptor: ...
    def format(self, d: CalendarDate, fmt: str = "YYYY-MM-DD") -> str: ...
    def parse(self, text: str) -> Optional[CalendarDate]: ...


@dataclass
class ConverterRegistry:
    _converters: Dict[str, CalendarConverter]

    def get(self, calendar_id: str) -> CalendarConverter:
        if calendar_id not in self._converters:
            raise UnknownCalendarError(
                f"Unknown calendar '{calendar_id}'. Available: {sorted(self._converters)}"
            )
        return self._converters[calendar_id]

    def find(self, calendar_id: str) -> Optional[CalendarConverter]:
        return self._converters.get(calendar_id)

    def list(self) -> List[str]:
        return sorted(self._converters.keys())

    def register(self, calendar_id: str, converter: CalendarConverter, *, overwrite: bool = False) -> None:
        if calendar_id in self._converters:
            if not overwrite:
                raise KeyError(f"Calendar '{calendar_id}' already exists. Use overwrite=True to replace.")
            LOG.info("Replacing converter for calendar '%s'", calendar_id)
        self._converters[calendar_id] = converter

    def convert(self, d: CalendarDate, target: str) -> CalendarDate:
        source = self.get(d.calendar)
        dest = self.get(target)
        return dest.from_day_count(source.to_day_count(d.year, d.month, d.day))
