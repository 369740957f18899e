# simglass/runway/runway_loader.py
"""
Loads runway pairs for an airport from FlightGear's apt.dat file.

End headings are true bearings computed from the threshold coordinates.
Airports missing from apt.dat (or machines without FlightGear) fall back to
the built-in table, where headings come from the runway designators.
"""
import os
import gzip
import platform
import logging
from typing import Dict, List, Optional

from ..navigation.utils.coordinates import calculate_bearing
from .constants import RunwayConstants
from .data_models import Runway, RunwayEnd


def builtin_runways(icao: str) -> List[Runway]:
    pairs = RunwayConstants.BUILTIN_RUNWAYS.get(icao.upper(), [])
    return [
        Runway(runway_id=f"{first}/{second}", ends=(RunwayEnd(first), RunwayEnd(second)))
        for first, second in pairs
    ]


class AptDatRunwayLoader:
    """Extracts runway pairs per airport from FlightGear apt.dat files."""

    SURFACE_TYPES = {
        1: "Asphalt", 2: "Concrete", 3: "Turf", 4: "Dirt", 5: "Gravel",
        12: "Dry Lakebed", 13: "Water", 14: "Snow/Ice"
    }

    def __init__(self, apt_dat_path: Optional[str] = None):
        self.apt_dat_path = apt_dat_path or self._find_apt_dat()
        self._cache: Dict[str, List[Runway]] = {}
        logging.info(f"AptDatRunwayLoader initialized. Path: {self.apt_dat_path}")

    def get_runways(self, icao: str) -> List[Runway]:
        icao = icao.upper()
        if icao not in self._cache:
            runways = self._load_from_apt_dat(icao)
            if not runways:
                runways = builtin_runways(icao)
                if not runways:
                    logging.warning(f"No runway data for {icao}")
            self._cache[icao] = runways
        return self._cache[icao]

    def _load_from_apt_dat(self, icao: str) -> List[Runway]:
        if not self.apt_dat_path or not os.path.exists(self.apt_dat_path):
            return []
        try:
            with self._open(self.apt_dat_path) as f:
                runways = self._parse_airport(f, icao)
            logging.info(f"Found {len(runways)} runways for {icao} in apt.dat.")
            return runways
        except (OSError, EOFError) as e:
            logging.error(f"Failed to load or parse runway data: {e}")
            return []

    def _open(self, path: str):
        if path.endswith(".gz"):
            return gzip.open(path, 'rt', encoding='utf-8', errors='ignore')
        return open(path, 'r', encoding='utf-8', errors='ignore')

    def _parse_airport(self, lines, icao: str) -> List[Runway]:
        runways = []
        in_airport = False
        for line in lines:
            parts = line.split()
            if not parts:
                continue
            if parts[0] in RunwayConstants.APT_DAT_AIRPORT_CODES and len(parts) >= 5:
                if in_airport:
                    break  # Past the airport we wanted
                in_airport = parts[4].upper() == icao
            elif in_airport and parts[0] == RunwayConstants.APT_DAT_LAND_RUNWAY:
                runway = self._parse_runway_line(parts)
                if runway:
                    runways.append(runway)
        return runways

    def _parse_runway_line(self, parts: List[str]) -> Optional[Runway]:
        try:
            if len(parts) < 20: return None

            surface_code = int(parts[2])
            runway_id1 = parts[8]
            lat1 = float(parts[9])
            lon1 = float(parts[10])
            runway_id2 = parts[17]
            lat2 = float(parts[18])
            lon2 = float(parts[19])

            if not (self._is_valid_coord(lat1, lon1) and self._is_valid_coord(lat2, lon2)): return None
            if abs(lat1 - lat2) < 1e-6 and abs(lon1 - lon2) < 1e-6: return None

            return Runway(
                runway_id=f"{runway_id1}/{runway_id2}",
                ends=(
                    RunwayEnd(runway_id1, calculate_bearing(lat1, lon1, lat2, lon2)),
                    RunwayEnd(runway_id2, calculate_bearing(lat2, lon2, lat1, lon1)),
                ),
                surface=self.SURFACE_TYPES.get(surface_code, "Unknown"),
            )
        except (ValueError, IndexError):
            return None

    def _is_valid_coord(self, lat: float, lon: float) -> bool:
        return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0

    def _find_apt_dat(self) -> Optional[str]:
        system = platform.system()
        paths = []
        if system == "Linux":
            paths = ["/usr/share/games/flightgear/Airports/apt.dat.gz", "/usr/share/flightgear/Airports/apt.dat.gz", os.path.expanduser("~/.fgfs/Airports/apt.dat.gz")]
        elif system == "Windows":
            paths = [os.path.join(os.environ.get("ProgramFiles", "C:\\Program Files"), "FlightGear", "data", "Airports", "apt.dat.gz")]
        elif system == "Darwin":
            paths = ["/Applications/FlightGear.app/Contents/Resources/data/Airports/apt.dat.gz"]

        for path in paths:
            if os.path.exists(path):
                return path
        return None
