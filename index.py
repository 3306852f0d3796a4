import logging
import math
import os
from datetime import datetime, timedelta

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from ezan import Coordinates, HighLatMethod, Method, PrayerManager

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_METHOD = os.environ.get("EZAN_METHOD", Method.MWL.value)
DEFAULT_HIGH_LATS = os.environ.get("EZAN_HIGH_LATS") or None

app = FastAPI(
    title="Prayer Times API",
    description="API service for calculating Islamic prayer times",
    version="1.0.0"
)

@app.get("/")
def root():
    return {
        "service": "Prayer Times API",
        "status": "online",
        "endpoints": {
            "/api/timesForGPS": "Get prayer times (fractional UTC hours) for GPS coordinates"
        },
        "methods": [m.value for m in Method],
        "highLats": [h.value for h in HighLatMethod],
    }

def get_prayer_manager(calculation_method: str, high_lats: str | None, ramadan: bool) -> PrayerManager:
    try:
        method = Method(calculation_method)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown calculation method: {calculation_method}")
    try:
        high_lat_method = HighLatMethod(high_lats) if high_lats else None
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown high latitude method: {high_lats}")
    return PrayerManager(method, high_lat_method, ramadan)

@app.get("/api/timesForGPS")
def get_times_for_gps(
    lat: float,
    lng: float,
    date: str,
    days: int = 1,
    elevation: float = 0.0,
    calculationMethod: str | None = None,
    highLats: str | None = None,
    ramadan: bool = False,
):
    try:
        start_date = datetime.strptime(date, "%Y-%m-%d").date()
    except ValueError:
        raise HTTPException(status_code=400, detail="date must be YYYY-MM-DD")
    if days < 1:
        raise HTTPException(status_code=400, detail="days must be at least 1")

    manager = get_prayer_manager(
        calculationMethod or DEFAULT_METHOD,
        highLats or DEFAULT_HIGH_LATS,
        ramadan,
    )
    coords = Coordinates(lat, lng, elevation)

    response_times = {}
    invalid = []

    for i in range(days):
        current_day = start_date + timedelta(days=i)
        date_key = current_day.strftime("%Y-%m-%d")

        times = manager.get_times(current_day, coords)
        if not times.is_valid():
            logger.warning("No valid prayer times at %s on %s", coords, date_key)
            invalid.append(date_key)

        # JSON has no NaN: times that do not exist here are null
        response_times[date_key] = {
            name: (value if math.isfinite(value) else None)
            for name, value in times._asdict().items()
        }

    return {"times": response_times, "invalid": invalid}
