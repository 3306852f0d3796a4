from __future__ import annotations

import datetime

import pytest

from ezan import Coordinates

# Reference place and date for the Muslim World League times
WASHINGTON = Coordinates(38.8976763, -77.036529, 18.0)
REFERENCE_DAY = datetime.date(2021, 4, 12)

# Twilight never ends here around the June solstice
LONDON = Coordinates(51.5074, -0.1278)
SOLSTICE_DAY = datetime.date(2021, 6, 21)


@pytest.fixture
def washington() -> Coordinates:
    return WASHINGTON


@pytest.fixture
def reference_day() -> datetime.date:
    return REFERENCE_DAY


@pytest.fixture
def london() -> Coordinates:
    return LONDON


@pytest.fixture
def solstice_day() -> datetime.date:
    return SOLSTICE_DAY
