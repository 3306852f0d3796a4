"""Islamic prayer times from astronomical formulas."""

from ezan.astronomy import Coordinates, julian_day
from ezan.methods import (
    Angle,
    AngleOrOffset,
    AsrJuristic,
    CalculationMethod,
    HighLatMethod,
    Method,
    MidnightMethod,
    Minutes,
    get_calculation_method,
)
from ezan.prayer_times import PrayerManager, PrayerTimes

__all__ = [
    "Angle",
    "AngleOrOffset",
    "AsrJuristic",
    "CalculationMethod",
    "Coordinates",
    "HighLatMethod",
    "Method",
    "MidnightMethod",
    "Minutes",
    "PrayerManager",
    "PrayerTimes",
    "get_calculation_method",
    "julian_day",
]

__version__ = "1.0.0"
