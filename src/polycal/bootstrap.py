from __future__ import annotations

from typing import Optional

from polycal.core.config import PolycalConfig
from polycal.core.engine import ConverterRegistry
from polycal.core.types import CALENDAR_IDS
from polycal.engines.factory import make_converter


def build_registry(config: Optional[PolycalConfig] = None) -> ConverterRegistry:
    converters = {}
    for calendar_id in CALENDAR_IDS:
        converters[calendar_id] = make_converter(calendar_id, config)
    return ConverterRegistry(converters)
