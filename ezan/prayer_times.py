"""
Prayer times from astronomical formulas (USNO solar coordinates).
Every time is a fractional UTC hour; values may fall outside [0, 24)
(e.g. Isha after 00:00 UTC is 24+) and are NaN where the sun never reaches
the required angle and no high latitude method is set.
"""

import datetime
import logging
import math
from dataclasses import dataclass
from typing import NamedTuple

from ezan import trig
from ezan.astronomy import (
    Coordinates,
    angle_crossing_time,
    horizon_dip_angle,
    julian_day,
    solar_noon,
    solar_position,
)
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

logger = logging.getLogger(__name__)


class PrayerTimes(NamedTuple):
    imsak: float
    fajr: float
    sunrise: float
    dhuhr: float
    asr: float
    sunset: float
    maghrib: float
    isha: float
    midnight: float

    def is_valid(self) -> bool:
        """False when any time could not be computed for this place and date."""
        return all(math.isfinite(t) for t in self)


def _time_diff(time1: float, time2: float) -> float:
    """Hours from time1 forward to time2, in [0, 24)."""
    return trig.normalize_hour(time2 - time1)


def asr_time(jd: float, latitude: float, juristic: AsrJuristic, time_fraction: float) -> float:
    """Asr: shadow of an object = factor × its height + its noon shadow."""
    decl = solar_position(jd + time_fraction)[0]
    angle = -trig.arccot(juristic.factor + trig.tan(abs(latitude - decl)))
    return angle_crossing_time(jd, latitude, angle, time_fraction, before_noon=False)


@dataclass(frozen=True)
class PrayerManager:
    """
    Calculation settings, built once and reused for any date and place.

    >>> manager = PrayerManager(Method.MWL, HighLatMethod.NIGHT_MIDDLE)
    >>> times = manager.get_times(datetime.date(2021, 4, 12), Coordinates(38.8976763, -77.036529, 18.0))
    """

    method: Method | CalculationMethod
    high_lats: HighLatMethod | None = None
    ramadan: bool = False

    @property
    def parameters(self) -> CalculationMethod:
        return get_calculation_method(self.method, self.ramadan)

    def get_times(self, day: datetime.date, coords: Coordinates) -> PrayerTimes:
        """Prayer times for a UTC calendar date at the given coordinates."""
        params = self.parameters
        lat, lng = coords.latitude, coords.longitude
        # Seed the ephemeris near local time, then shift results back to UTC
        jd = julian_day(day) - lng / (15.0 * 24.0)
        adjust = lng / 15.0
        rise_set = horizon_dip_angle(coords.elevation)
        logger.debug("Computing prayer times for %s at %s with %s", day, coords, params)

        def twilight(param: AngleOrOffset, time_fraction: float, before_noon: bool) -> float:
            # Minutes are derived from another time below
            if isinstance(param, Minutes):
                return math.nan
            return angle_crossing_time(jd, lat, param.value, time_fraction, before_noon) - adjust

        imsak = twilight(params.imsak, 5.0 / 24.0, True)
        fajr = twilight(Angle(params.fajr), 5.0 / 24.0, True)
        sunrise = angle_crossing_time(jd, lat, rise_set, 6.0 / 24.0, True) - adjust
        dhuhr = solar_noon(jd, 12.0 / 24.0) - adjust + params.dhuhr / 60.0
        asr = asr_time(jd, lat, params.asr, 13.0 / 24.0) - adjust
        sunset = angle_crossing_time(jd, lat, rise_set, 18.0 / 24.0, False) - adjust
        maghrib = twilight(params.maghrib, 18.0 / 24.0, False)
        isha = twilight(params.isha, 18.0 / 24.0, False)

        if self.high_lats is not None:
            night = _time_diff(sunset, sunrise)
            if isinstance(params.imsak, Angle):
                imsak = self._adjust_high_lat_time(imsak, sunrise, params.imsak.value, night, True)
            fajr = self._adjust_high_lat_time(fajr, sunrise, params.fajr, night, True)
            if isinstance(params.maghrib, Angle):
                maghrib = self._adjust_high_lat_time(maghrib, sunset, params.maghrib.value, night, False)
            if isinstance(params.isha, Angle):
                isha = self._adjust_high_lat_time(isha, sunset, params.isha.value, night, False)

        if isinstance(params.imsak, Minutes):
            imsak = fajr - params.imsak.value / 60.0
        if isinstance(params.maghrib, Minutes):
            maghrib = sunset + params.maghrib.value / 60.0
        if isinstance(params.isha, Minutes):
            isha = maghrib + params.isha.value / 60.0

        if params.midnight is MidnightMethod.JAFARI:
            midnight = sunset + _time_diff(sunset, fajr) / 2.0
        else:
            midnight = sunset + _time_diff(sunset, sunrise) / 2.0

        return PrayerTimes(
            imsak=imsak,
            fajr=fajr,
            sunrise=sunrise,
            dhuhr=dhuhr,
            asr=asr,
            sunset=sunset,
            maghrib=maghrib,
            isha=isha,
            midnight=midnight,
        )

    def _adjust_high_lat_time(
        self,
        time: float,
        base: float,
        angle: float,
        night: float,
        before_base: bool,
    ) -> float:
        """
        Keep `time` within its night portion of `base` (sunrise for Imsak/Fajr,
        sunset for Maghrib/Isha); a NaN time is replaced by the portion bound.
        """
        portion = self.high_lats.night_portion(angle, night)
        diff = _time_diff(time, base) if before_base else _time_diff(base, time)
        if not math.isnan(time) and diff <= portion:
            return time
        adjusted = base - portion if before_base else base + portion
        logger.debug("High latitude adjustment (%s): %s -> %s", self.high_lats.value, time, adjusted)
        return adjusted
