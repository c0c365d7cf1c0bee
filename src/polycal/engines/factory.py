"""
polycal.engines.factory
-----------------------
Maps calendar ids to converter classes and builds live converters.
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from ..core.config import DEFAULT_CONFIG, PolycalConfig
from ..core.errors import UnknownCalendarError
from .arithmetic import CopticConverter, EthiopianConverter
from .bahai import BahaiConverter
from .base import BaseConverter
from .chinese import ChineseConverter
from .gregorian import CherokeeConverter, GregorianConverter, JulianConverter, ThaiBuddhistConverter
from .hebrew import HebrewConverter
from .iroquois import IroquoisConverter
from .islamic import IslamicConverter
from .mesoamerican import AztecXiuhpohualliConverter, HaabConverter, LongCountConverter, TzolkinConverter
from .persian import PersianConverter
from .saka import IndianSakaConverter

CONVERTER_CLASSES: Dict[str, Type[BaseConverter]] = {
    cls.id: cls
    for cls in (
        GregorianConverter,
        JulianConverter,
        IslamicConverter,
        HebrewConverter,
        PersianConverter,
        ChineseConverter,
        EthiopianConverter,
        CopticConverter,
        IndianSakaConverter,
        BahaiConverter,
        ThaiBuddhistConverter,
        TzolkinConverter,
        HaabConverter,
        LongCountConverter,
        CherokeeConverter,
        IroquoisConverter,
        AztecXiuhpohualliConverter,
    )
}


def make_converter(calendar_id: str, config: Optional[PolycalConfig] = None) -> BaseConverter:
    """A fresh converter (with its own caches) for a built-in calendar id."""
    try:
        cls = CONVERTER_CLASSES[calendar_id]
    except KeyError:
        raise UnknownCalendarError(
            f"Unknown calendar '{calendar_id}'. Available: {sorted(CONVERTER_CLASSES)}"
        ) from None
    return cls(config or DEFAULT_CONFIG)
