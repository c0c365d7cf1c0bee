"""polycal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    get_converter,
    calendar_info,
    register_converter,
    set_registry,
    convert_date,
    calendar_date_to_jdn,
    jdn_to_calendar_date,
    date_to_calendar_date,
    calendar_date_to_date,
    format_calendar_date,
    parse_calendar_date,
)
from .bootstrap import build_registry
from .core.config import PolycalConfig
from .core.errors import InvalidDateError, PolycalError, UnknownCalendarError
from .core.types import CALENDAR_IDS, CalendarDate, CalendarDescriptor

__version__ = "0.1.0"

__all__ = [
    "list_calendars",
    "get_converter",
    "calendar_info",
    "register_converter",
    "set_registry",
    "build_registry",
    "convert_date",
    "calendar_date_to_jdn",
    "jdn_to_calendar_date",
    "date_to_calendar_date",
    "calendar_date_to_date",
    "format_calendar_date",
    "parse_calendar_date",
    "PolycalConfig",
    "PolycalError",
    "UnknownCalendarError",
    "InvalidDateError",
    "CALENDAR_IDS",
    "CalendarDate",
    "CalendarDescriptor",
]
