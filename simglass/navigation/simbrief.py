# simglass/navigation/simbrief.py
"""
Fetches the latest SimBrief operational flight plan for a pilot and turns its
navlog into plan waypoints with altitude constraints.
"""
import logging
from typing import Any, Dict, List, Optional

import requests
import requests_cache

from ..constants.connection import WebServiceConstants
from .data_models import ImportResult, Waypoint, WaypointType
from .plan_io import MIN_IMPORT_WAYPOINTS

# SimBrief ICAO type code -> local aircraft profile id
SIMBRIEF_AIRCRAFT_MAP = {
    "C172": "c172",
    "C182": "c182",
    "C152": "c152",
    "PA28": "pa28",
    "SR22": "sr22",
    "BE36": "be36",
    "DA40": "da40",
    "BE58": "be58",
    "PA44": "pa44",
    "C525": "c525",
}

_FIX_TYPES = {
    "apt": WaypointType.AIRPORT,
    "airport": WaypointType.AIRPORT,
    "vor": WaypointType.VOR,
    "ndb": WaypointType.NDB,
}


def navlog_to_waypoints(ofp: Dict[str, Any]) -> ImportResult:
    """Converts a SimBrief OFP (JSON form) into an ImportResult."""
    fixes = ofp.get("navlog", {}).get("fix", [])
    # A single-fix navlog is serialized as a dict rather than a list
    if isinstance(fixes, dict):
        fixes = [fixes]

    waypoints: List[Waypoint] = []
    skipped = []
    seen = set()
    for i, fix in enumerate(fixes, start=1):
        ident = str(fix.get("ident", "")).strip().upper()
        try:
            lat = float(fix["pos_lat"])
            lon = float(fix["pos_long"])
        except (KeyError, TypeError, ValueError):
            skipped.append((i, f"{ident or '<blank>'}: missing coordinates"))
            continue
        if not ident or ident in seen:
            # SimBrief repeats some fixes (TOC/TOD markers share idents with the route)
            skipped.append((i, f"{ident or '<blank>'}: blank or repeated identifier"))
            continue
        try:
            altitude = int(float(fix.get("altitude_feet")))
        except (TypeError, ValueError):
            altitude = None
        seen.add(ident)
        waypoints.append(Waypoint(
            identifier=ident,
            lat=lat,
            lon=lon,
            waypoint_type=_FIX_TYPES.get(str(fix.get("type", "")).lower(), WaypointType.FIX),
            altitude_ft=altitude,
        ))

    icao = str(ofp.get("aircraft", {}).get("icaocode", "")).upper()
    return ImportResult(
        waypoints=waypoints,
        skipped=skipped,
        source="simbrief",
        aircraft_id=SIMBRIEF_AIRCRAFT_MAP.get(icao),
    )


class SimBriefClient:
    """Thin cached client for the SimBrief XML fetcher API (JSON output)."""

    def __init__(self, timeout: int = WebServiceConstants.REQUEST_TIMEOUT_SEC,
                 cache_enabled: bool = True):
        self.timeout = timeout
        if cache_enabled:
            # OFPs change when the pilot re-plans, so keep the cache short
            self.session = requests_cache.CachedSession(
                'simbrief_cache',
                backend='sqlite',
                expire_after=300
            )
        else:
            self.session = requests.Session()

    def fetch_latest(self, pilot_id: str) -> Optional[ImportResult]:
        """
        Fetches the pilot's most recent OFP.

        Returns:
            An ImportResult, or None when the request fails or the OFP does
            not contain a usable route. Failures are logged, never raised.
        """
        if not pilot_id or not str(pilot_id).strip():
            logging.warning("SimBrief fetch skipped: no pilot id configured")
            return None

        params = {"username": str(pilot_id).strip(), "json": 1}
        try:
            response = self.session.get(WebServiceConstants.SIMBRIEF_URL, params=params, timeout=self.timeout)
            response.raise_for_status()
            ofp = response.json()
        except requests.exceptions.RequestException as e:
            logging.error(f"Failed to fetch SimBrief flight plan: {e}")
            return None
        except ValueError as e:
            logging.error(f"SimBrief returned an unreadable response: {e}")
            return None

        if not isinstance(ofp, dict):
            logging.error("SimBrief response is not an OFP document")
            return None
        fetch_status = ofp.get("fetch", {}).get("status")
        if fetch_status and fetch_status != "Success":
            logging.error(f"SimBrief fetch failed: {fetch_status}")
            return None

        result = navlog_to_waypoints(ofp)
        if len(result.waypoints) < MIN_IMPORT_WAYPOINTS:
            logging.error(f"SimBrief flight plan has only {len(result.waypoints)} usable fixes")
            return None
        logging.info(f"Loaded SimBrief flight plan with {len(result.waypoints)} fixes "
                     f"(aircraft: {result.aircraft_id or 'unmapped'})")
        return result
