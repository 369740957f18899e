# simglass/navigation/plan_io.py
"""
Flight-plan import and export.

Supported sources:
- Garmin .fpl (GTN/GNS XML flight-plan format)
- Text/CSV, one waypoint per line as IDENT,LAT,LNG (comma or tab separated)

Only identifiers and coordinates are read. Any track or distance the source
carries is ignored; the plan recomputes them.
"""
import logging
import re
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from .data_models import ImportResult, Waypoint, WaypointType
from .exceptions import InvalidPlanError, PlanImportError
from .flight_plan import FlightPlan

GARMIN_NS = "http://www8.garmin.com/xmlschemas/FlightPlan/v1"
MIN_IMPORT_WAYPOINTS = 2

_EXPORT_TYPES = {
    WaypointType.AIRPORT: "AIRPORT",
    WaypointType.VOR: "VOR",
    WaypointType.NDB: "NDB",
    WaypointType.FIX: "INT",
    WaypointType.USER: "USER WAYPOINT",
}
_US_AIRPORT = re.compile(r"^K[A-Z]{3}$")


def _garmin_type(raw: str) -> WaypointType:
    raw = (raw or "").strip().upper()
    if "AIRPORT" in raw:
        return WaypointType.AIRPORT
    if "VOR" in raw:
        return WaypointType.VOR
    if "NDB" in raw:
        return WaypointType.NDB
    if "USER" in raw:
        return WaypointType.USER
    return WaypointType.FIX


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if _local(child.tag) == name:
            return child
    return None


def _child_text(element: ET.Element, name: str) -> str:
    child = _child(element, name)
    return (child.text or "").strip() if child is not None else ""


def _require_minimum(waypoints: List[Waypoint], source: str) -> None:
    if len(waypoints) < MIN_IMPORT_WAYPOINTS:
        raise InvalidPlanError(
            f"{source} import needs at least {MIN_IMPORT_WAYPOINTS} waypoints, found {len(waypoints)}"
        )


def parse_text_plan(text: str) -> ImportResult:
    """Parses IDENT,LAT,LNG lines. Bad rows are skipped and reported by line number."""
    waypoints: List[Waypoint] = []
    skipped: List[Tuple[int, str]] = []

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#") or line.startswith("//"):
            continue
        parts = [p.strip() for p in re.split(r"[,\t]+", line) if p.strip()]
        if not parts:
            skipped.append((line_no, "empty row"))
            continue
        ident = parts[0].upper()
        if len(parts) < 3:
            skipped.append((line_no, f"{ident}: missing coordinates"))
            continue
        try:
            lat, lon = float(parts[1]), float(parts[2])
        except ValueError:
            skipped.append((line_no, f"{ident}: unreadable coordinates"))
            continue
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
            skipped.append((line_no, f"{ident}: coordinates out of range"))
            continue
        wp_type = WaypointType.AIRPORT if _US_AIRPORT.match(ident) else WaypointType.FIX
        waypoints.append(Waypoint(identifier=ident, lat=lat, lon=lon, waypoint_type=wp_type))

    if skipped:
        logging.warning(f"Text plan import skipped {len(skipped)} row(s)")
    _require_minimum(waypoints, "Text")
    return ImportResult(waypoints=waypoints, skipped=skipped, source="text")


def parse_garmin_fpl(xml_text: str) -> ImportResult:
    """Parses a Garmin .fpl document. A structurally invalid file fails as a whole."""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise PlanImportError(f"Could not parse Garmin FPL file: {e}") from e

    table = _child(root, "waypoint-table")
    route = _child(root, "route")
    if table is None or route is None:
        raise PlanImportError("Garmin FPL file has no waypoint-table or route")

    lookup: Dict[str, Tuple[float, float, WaypointType]] = {}
    for wp in table:
        if _local(wp.tag) != "waypoint":
            continue
        ident = _child_text(wp, "identifier")
        try:
            lookup[ident] = (float(_child_text(wp, "lat")), float(_child_text(wp, "lon")),
                             _garmin_type(_child_text(wp, "type")))
        except ValueError:
            # Left out of the lookup; the route point referencing it is reported below
            continue

    waypoints: List[Waypoint] = []
    skipped: List[Tuple[int, str]] = []
    route_points = [rp for rp in route if _local(rp.tag) == "route-point"]
    if not route_points:
        raise PlanImportError("Garmin FPL route has no route points")

    for i, rp in enumerate(route_points, start=1):
        ident = _child_text(rp, "waypoint-identifier")
        if ident not in lookup:
            skipped.append((i, f"{ident or '<blank>'}: not in waypoint table"))
            continue
        lat, lon, wp_type = lookup[ident]
        waypoints.append(Waypoint(identifier=ident, lat=lat, lon=lon, waypoint_type=wp_type))

    if skipped:
        logging.warning(f"Garmin FPL import skipped {len(skipped)} route point(s)")
    _require_minimum(waypoints, "Garmin FPL")
    return ImportResult(waypoints=waypoints, skipped=skipped, source="fpl")


def import_plan(content: str, filename: Optional[str] = None) -> ImportResult:
    """Picks a parser by file extension, or tries FPL then text for unknown sources."""
    name = (filename or "").lower()
    if name.endswith((".fpl", ".xml")):
        return parse_garmin_fpl(content)
    if name.endswith((".txt", ".csv")):
        return parse_text_plan(content)
    if content.lstrip().startswith("<"):
        return parse_garmin_fpl(content)
    return parse_text_plan(content)


def export_garmin_fpl(flight_plan: FlightPlan, created: Optional[datetime] = None) -> str:
    """
    Serializes a plan as Garmin .fpl XML. Coordinates are written with full
    float precision so a re-import reproduces the same legs exactly.
    """
    ET.register_namespace("", GARMIN_NS)
    q = lambda name: f"{{{GARMIN_NS}}}{name}"
    waypoints = flight_plan.waypoints
    created = created or datetime.now(timezone.utc)

    root = ET.Element(q("flight-plan"))
    ET.SubElement(root, q("created")).text = created.strftime("%Y-%m-%dT%H:%M:%SZ")

    table = ET.SubElement(root, q("waypoint-table"))
    for wp in waypoints:
        entry = ET.SubElement(table, q("waypoint"))
        ET.SubElement(entry, q("identifier")).text = wp.identifier
        ET.SubElement(entry, q("type")).text = _EXPORT_TYPES[wp.waypoint_type]
        ET.SubElement(entry, q("country-code"))
        ET.SubElement(entry, q("lat")).text = repr(float(wp.lat))
        ET.SubElement(entry, q("lon")).text = repr(float(wp.lon))
        ET.SubElement(entry, q("comment"))

    route = ET.SubElement(root, q("route"))
    ET.SubElement(route, q("route-name")).text = f"{waypoints[0].identifier} - {waypoints[-1].identifier}"
    ET.SubElement(route, q("route-description")).text = "Exported from SimGlass Avionics"
    for wp in waypoints:
        point = ET.SubElement(route, q("route-point"))
        ET.SubElement(point, q("waypoint-identifier")).text = wp.identifier
        ET.SubElement(point, q("waypoint-type")).text = _EXPORT_TYPES[wp.waypoint_type]
        ET.SubElement(point, q("waypoint-country-code"))

    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" encoding="utf-8"?>\n{body}\n'


def export_filename(flight_plan: FlightPlan) -> str:
    waypoints = flight_plan.waypoints
    return f"{waypoints[0].identifier}_{waypoints[-1].identifier}.fpl"
