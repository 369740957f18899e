# simglass/runway/weather.py
"""
Surface wind for runway selection, from the Aviation Weather Center METAR API.

The provider never raises to its caller: a failed or unreadable request falls
back to the last report seen for the station, then to the simulated wind
table, and the returned report is flagged as degraded.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Optional

import requests
import requests_cache

from ..constants.connection import WebServiceConstants
from .constants import RunwayConstants
from .data_models import WeatherReport, WindObservation
from .exceptions import WeatherUnavailableError


@dataclass
class WeatherConfig:
    """Configuration for METAR retrieval."""
    api_url: str = WebServiceConstants.AVIATION_WEATHER_URL
    timeout: int = WebServiceConstants.REQUEST_TIMEOUT_SEC
    cache_enabled: bool = True
    # METARs are issued hourly; ten minutes keeps specials visible
    cache_expire_sec: int = 600


def parse_metar_wind(station: str, report: Dict) -> WindObservation:
    """Reads wdir/wspd/wgst from one AWC JSON METAR. wdir may be "VRB"."""
    raw_dir = report.get("wdir")
    raw_speed = report.get("wspd")
    if raw_speed is None:
        raise WeatherUnavailableError(station, "report has no wind speed")
    try:
        speed = float(raw_speed)
        direction = None if str(raw_dir).upper() == "VRB" or raw_dir is None else float(raw_dir) % 360
        gust = float(report["wgst"]) if report.get("wgst") is not None else None
    except (TypeError, ValueError) as e:
        raise WeatherUnavailableError(station, f"unreadable wind group: {e}") from e
    return WindObservation(direction_deg=direction, speed_kts=speed, gust_kts=gust)


class WeatherProvider:
    """Fetches and caches station winds, degrading gracefully when offline."""

    def __init__(self, config: Optional[WeatherConfig] = None):
        self.config = config or WeatherConfig()
        if self.config.cache_enabled:
            self.session = requests_cache.CachedSession(
                'metar_cache',
                backend='sqlite',
                expire_after=self.config.cache_expire_sec
            )
        else:
            self.session = requests.Session()
        self._last_known: Dict[str, WeatherReport] = {}
        logging.info(f"WeatherProvider initialized. Cache enabled: {self.config.cache_enabled}")

    def get_wind(self, station: str) -> WeatherReport:
        station = station.strip().upper()
        try:
            report = self._fetch(station)
            self._last_known[station] = report
            return report
        except WeatherUnavailableError as e:
            logging.warning(str(e))
            return self._fallback(station)

    def _fetch(self, station: str) -> WeatherReport:
        try:
            response = self.session.get(
                self.config.api_url,
                params={"ids": station, "format": "json"},
                timeout=self.config.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise WeatherUnavailableError(station, f"request failed: {e}") from e
        except ValueError as e:
            raise WeatherUnavailableError(station, f"response is not JSON: {e}") from e

        if not isinstance(data, list) or not data:
            raise WeatherUnavailableError(station, "no METAR returned")

        metar = data[0]
        observed_at = None
        if metar.get("obsTime") is not None:
            try:
                observed_at = datetime.fromtimestamp(int(metar["obsTime"]), tz=timezone.utc)
            except (TypeError, ValueError, OverflowError):
                observed_at = None
        return WeatherReport(
            station=station,
            wind=parse_metar_wind(station, metar),
            source="metar",
            observed_at=observed_at,
        )

    def _fallback(self, station: str) -> WeatherReport:
        last = self._last_known.get(station)
        if last is not None:
            return WeatherReport(station=station, wind=last.wind, source="last-known",
                                 degraded=True, observed_at=last.observed_at)
        direction, speed, gust = RunwayConstants.SIMULATED_WINDS.get(station, (0, 0, None))
        return WeatherReport(
            station=station,
            wind=WindObservation(direction_deg=direction, speed_kts=speed, gust_kts=gust),
            source="simulated",
            degraded=True,
        )
