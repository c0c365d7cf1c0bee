"""
polycal.engines.base
--------------------
Shared converter contract: validation, date construction, naming and the
format/parse hooks. Subclasses supply the calendar arithmetic through
`_to_jdn`, `from_day_count` and the month structure queries.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ..core.config import DEFAULT_CONFIG, PolycalConfig
from ..core.errors import InvalidDateError
from ..core.types import CalendarDate, CalendarDescriptor
from .. import formatting
from .descriptors import DESCRIPTORS


class BaseConverter:
    id: str = ""

    def __init__(self, config: PolycalConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"

    # ---------------------------------------------------------
    # Metadata
    # ---------------------------------------------------------

    def descriptor(self) -> CalendarDescriptor:
        return DESCRIPTORS[self.id]

    def era_label(self, year: int) -> str:
        if year <= 0:
            return "BCE"
        return self.descriptor().era_name

    def month_name(self, year: int, month: int, *, short: bool = False) -> str:
        return formatting.lookup_month_name(self.id, month, short=short)

    # ---------------------------------------------------------
    # Structure
    # ---------------------------------------------------------

    def months_in_year(self, year: int) -> int:
        return self.descriptor().months

    def month_labels(self, year: int) -> Sequence[int]:
        """Valid month numbers of a year, in calendar order."""
        return range(1, self.months_in_year(year) + 1)

    def days_in_month(self, year: int, month: int) -> int:
        raise NotImplementedError

    def is_leap_year(self, year: int) -> bool:
        lo, _ = self.descriptor().days_in_year
        return self.days_in_year(year) > lo

    def days_in_year(self, year: int) -> int:
        return sum(self.days_in_month(year, m) for m in self.month_labels(year))

    def date_key(self, d: CalendarDate) -> Tuple[int, int, int]:
        """
        Chronological sort key: (year, position of the month in its year, day).

        Differs from d.key() where month numbers are not in calendar order
        (Hebrew years start at Tishrei = 7, Chinese leap months are month + 12).
        """
        return (d.year, list(self.month_labels(d.year)).index(d.month), d.day)

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------

    def is_valid(self, year: int, month: int, day: int) -> bool:
        if month not in self.month_labels(year):
            return False
        return 1 <= day <= self.days_in_month(year, month)

    def validate(self, year: int, month: int, day: int) -> None:
        if month not in self.month_labels(year):
            raise InvalidDateError(
                f"{self.descriptor().name}: month {month} does not exist in year {year}"
            )
        n = self.days_in_month(year, month)
        if not 1 <= day <= n:
            raise InvalidDateError(
                f"{self.descriptor().name}: day {day} out of range 1..{n} for {year}-{month}"
            )

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def date(self, year: int, month: int, day: int) -> CalendarDate:
        return CalendarDate(year, month, day, self.id, self.era_label(year) or None)

    def to_day_count(self, year: int, month: int, day: int) -> int:
        """JDN of a calendar date; raises InvalidDateError for non-existent dates."""
        self.validate(year, month, day)
        return self._to_jdn(year, month, day)

    def _to_jdn(self, year: int, month: int, day: int) -> int:
        raise NotImplementedError

    def from_day_count(self, jdn: int) -> CalendarDate:
        raise NotImplementedError

    # ---------------------------------------------------------
    # Text
    # ---------------------------------------------------------

    def format(self, d: CalendarDate, fmt: str = "YYYY-MM-DD") -> str:
        return formatting.format_date(self, d, fmt)

    def parse(self, text: str) -> Optional[CalendarDate]:
        return formatting.parse_date(self, text)
