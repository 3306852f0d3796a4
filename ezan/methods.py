"""
Calculation methods: the parameter presets published by the major
organizations, plus the strategies used at higher latitudes.

Angles are twilight depressions in degrees; minutes are offsets from another
prayer time (Imsak before Fajr, Maghrib after Sunset, Isha after Maghrib).
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Angle:
    """Sun depression angle in degrees."""

    value: float

    def unwrap(self) -> float:
        return self.value


@dataclass(frozen=True)
class Minutes:
    """Fixed offset in minutes from a reference prayer time."""

    value: float

    def unwrap(self) -> float:
        return self.value


AngleOrOffset = Angle | Minutes


class AsrJuristic(Enum):
    """Asr shadow factor: shadow length = factor × object height + noon shadow."""

    STANDARD = 1  # Shafi, Maliki, Hanbali
    HANAFI = 2

    @property
    def factor(self) -> int:
        return self.value


class MidnightMethod(Enum):
    STANDARD = "Standard"  # mid Sunset to Sunrise
    JAFARI = "Jafari"  # mid Sunset to Fajr


@dataclass(frozen=True)
class CalculationMethod:
    fajr: float
    isha: AngleOrOffset
    imsak: AngleOrOffset = Minutes(10.0)
    dhuhr: float = 0.0  # minutes after solar noon
    asr: AsrJuristic = AsrJuristic.STANDARD
    maghrib: AngleOrOffset = Minutes(0.0)
    midnight: MidnightMethod = MidnightMethod.STANDARD

    @classmethod
    def from_angles(cls, fajr: float, isha: float) -> "CalculationMethod":
        """Method defined only by its Fajr and Isha twilight angles."""
        return cls(fajr=fajr, isha=Angle(isha))


class Method(Enum):
    MWL = "MWL"  # Muslim World League
    ISNA = "ISNA"  # Islamic Society of North America
    EGYPT = "Egypt"  # Egyptian General Authority of Survey
    MAKKAH = "Makkah"  # Umm Al-Qura University, Makkah
    KARACHI = "Karachi"  # University of Islamic Sciences, Karachi
    TEHRAN = "Tehran"  # Institute of Geophysics, University of Tehran
    JAFARI = "Jafari"  # Shia Ithna-Ashari, Leva Institute, Qum
    FRANCE = "France"  # Muslims of France


MAKKAH_ISHA_MINUTES = 90.0
MAKKAH_RAMADAN_ISHA_MINUTES = 120.0

METHODS: dict[Method, CalculationMethod] = {
    Method.MWL: CalculationMethod.from_angles(18.0, 17.0),
    Method.ISNA: CalculationMethod.from_angles(15.0, 15.0),
    Method.EGYPT: CalculationMethod.from_angles(19.5, 17.5),
    Method.MAKKAH: CalculationMethod(fajr=18.5, isha=Minutes(MAKKAH_ISHA_MINUTES)),
    Method.KARACHI: CalculationMethod.from_angles(18.0, 18.0),
    Method.TEHRAN: CalculationMethod(
        fajr=17.7,
        isha=Angle(14.0),
        maghrib=Angle(4.5),
        midnight=MidnightMethod.JAFARI,
    ),
    Method.JAFARI: CalculationMethod(
        fajr=16.0,
        isha=Angle(14.0),
        maghrib=Angle(4.0),
        midnight=MidnightMethod.JAFARI,
    ),
    Method.FRANCE: CalculationMethod.from_angles(12.0, 12.0),
}


def get_calculation_method(
    method: Method | CalculationMethod,
    ramadan: bool = False,
) -> CalculationMethod:
    """
    Parameters for a named method. A CalculationMethod is returned unchanged.
    ramadan only matters for Umm Al-Qura, whose Isha is 120 minutes after
    Maghrib during Ramadan and 90 minutes otherwise.
    """
    if isinstance(method, CalculationMethod):
        return method
    if method is Method.MAKKAH and ramadan:
        return CalculationMethod(fajr=18.5, isha=Minutes(MAKKAH_RAMADAN_ISHA_MINUTES))
    return METHODS[method]


class HighLatMethod(Enum):
    """
    How far Fajr/Imsak may precede sunrise and Isha/Maghrib may follow sunset
    when the twilight angle gives no usable time.
    """

    NIGHT_MIDDLE = "NightMiddle"  # half of the night
    ANGLE_BASED = "AngleBased"  # angle/60 of the night
    ONE_SEVENTH = "OneSeventh"  # one seventh of the night

    def night_portion(self, angle: float, night: float) -> float:
        if self is HighLatMethod.ANGLE_BASED:
            portion = angle / 60.0
        elif self is HighLatMethod.ONE_SEVENTH:
            portion = 1.0 / 7.0
        else:
            portion = 1.0 / 2.0
        return portion * night
