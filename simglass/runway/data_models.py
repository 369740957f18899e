# simglass/runway/data_models.py
"""
Data structures for wind observations, runways and crosswind assessments.
"""
import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple


class RunwayCondition(Enum):
    DRY = "dry"
    WET = "wet"
    SNOW = "snow"
    ICE = "ice"


class CrosswindStatus(Enum):
    NOMINAL = "nominal"
    CAUTION = "caution"
    EXCEEDED = "exceeded"


@dataclass(frozen=True)
class WindObservation:
    """Wind from direction_deg at speed_kts. A None direction means variable."""
    direction_deg: Optional[float]
    speed_kts: float
    gust_kts: Optional[float] = None

    @property
    def is_variable(self) -> bool:
        return self.direction_deg is None


@dataclass(frozen=True)
class WeatherReport:
    """A wind observation plus where it came from."""
    station: str
    wind: WindObservation
    source: str = "metar"  # metar | last-known | simulated
    degraded: bool = False
    observed_at: Optional[datetime] = None


@dataclass(frozen=True)
class RunwayEnd:
    designator: str
    heading_deg: Optional[float] = None

    @property
    def heading(self) -> float:
        """Known heading, else the designator number times ten ("28L" -> 280)."""
        if self.heading_deg is not None:
            return self.heading_deg
        digits = re.sub(r"[^0-9]", "", self.designator)
        return float((int(digits) * 10) % 360) if digits else 0.0


@dataclass(frozen=True)
class Runway:
    runway_id: str
    ends: Tuple[RunwayEnd, RunwayEnd]
    condition: RunwayCondition = RunwayCondition.DRY
    surface: str = "Unknown"


@dataclass(frozen=True)
class CrosswindAssessment:
    runway_id: str
    end: str
    crosswind_kt: int
    gust_crosswind_kt: Optional[int]
    headwind_kt: int
    effective_limit_kt: int
    effective_caution_kt: int
    condition: RunwayCondition
    status: CrosswindStatus

    @property
    def exceeded(self) -> bool:
        return self.status is CrosswindStatus.EXCEEDED

    @property
    def caution(self) -> bool:
        return self.status is CrosswindStatus.CAUTION
