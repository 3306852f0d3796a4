"""
Low-order solar ephemeris (USNO approximate solar coordinates) and the
hour-angle solver used for every prayer time.
All times are fractional hours; angles are degrees.
"""

import datetime
import math
from typing import NamedTuple

from ezan import trig

EARTH_RADIUS = 6371008.7714  # meters
# Refraction plus apparent solar radius at the horizon
RISE_SET_ANGLE = 0.833


class Coordinates(NamedTuple):
    """Latitude and longitude in signed degrees (north/east positive), elevation in meters."""

    latitude: float
    longitude: float
    elevation: float = 0.0


def julian_day(day: datetime.date) -> float:
    """Julian day at 00:00 UTC of the given (Gregorian) calendar date."""
    if isinstance(day, datetime.datetime):
        day = day.date()
    year, month = day.year, day.month
    if month <= 2:
        year -= 1
        month += 12
    A = math.floor(year / 100)
    B = 2 - A + math.floor(A / 4)
    return math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day.day + B - 1524.5


def solar_position(jd: float) -> tuple[float, float]:
    """
    Returns (declination in degrees, equation of time in hours) for a Julian day.
    """
    D = jd - 2451545.0
    q = trig.normalize_angle(280.46061837 + 0.98564736 * D)
    g = trig.normalize_angle(357.528 + 0.98560028 * D)
    L = trig.normalize_angle(q + 1.915 * trig.sin(g) + 0.020 * trig.sin(2 * g))
    e = 23.439 - 0.00000036 * D

    decl = trig.arcsin(trig.sin(e) * trig.sin(L))
    # Right ascension in hours, same quadrant as L
    ra = trig.normalize_hour(trig.arctan2(trig.cos(e) * trig.sin(L), trig.cos(L)) / 15.0)
    eqt = q / 15.0 - ra
    return decl, eqt


def solar_noon(jd: float, time_fraction: float) -> float:
    """Solar noon (UTC at longitude 0) using the ephemeris sampled at jd + time_fraction."""
    eqt = solar_position(jd + time_fraction)[1]
    return trig.normalize_hour(12.0 - eqt)


def angle_crossing_time(
    jd: float,
    latitude: float,
    angle: float,
    time_fraction: float,
    before_noon: bool,
) -> float:
    """
    Hour at which the sun is `angle` degrees below the horizon (negative = above),
    before or after solar noon. NaN when the sun never reaches that angle.
    time_fraction: day fraction near the event, e.g. 5/24 for dawn, 18/24 for dusk.
    """
    decl, eqt = solar_position(jd + time_fraction)
    t = trig.arccos(
        (-trig.sin(angle) - trig.sin(decl) * trig.sin(latitude))
        / (trig.cos(decl) * trig.cos(latitude))
    ) / 15.0
    noon = trig.normalize_hour(12.0 - eqt)
    return noon - t if before_noon else noon + t


def horizon_dip_angle(elevation: float = 0.0) -> float:
    """Sunrise/sunset depression angle for an observer `elevation` meters above sea level."""
    return RISE_SET_ANGLE + trig.arccos(EARTH_RADIUS / (EARTH_RADIUS + elevation))
