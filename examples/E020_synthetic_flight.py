#!/usr/bin/env python3
# examples/E020_synthetic_flight.py

import sys
import time
import logging
from pathlib import Path

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

# Third-Party Libraries
import numpy as np

# Local Imports
from simglass.cockpit import AvionicsSession, TelemetrySource
from simglass.navigation import snapshot_to_dict
from simglass.simulator import FlightProgressSimulator, SimulatorConfig


def main(seed: int = 42, fast: bool = True):
    """Flies the demonstration route KSNS -> KMRY with the synthetic source."""
    session = AvionicsSession(simulator=FlightProgressSimulator(np.random.default_rng(seed)))
    session.set_source(TelemetrySource.SYNTHETIC)

    ticks = 0
    while session.context is not None and not session.context.finished:
        readout = session.tick(SimulatorConfig.TICK_INTERVAL_SEC)
        ticks += 1
        if ticks % 40 == 0:
            nav = snapshot_to_dict(readout.navigation)
            print(f"[{ticks:4d}] {nav['current_waypoint']} -> {nav['next_waypoint']}  "
                  f"DIS {nav['distance_to_next']:5.1f} NM  DTK {nav['dtk']:03d}  "
                  f"REM {nav['distance_remaining']:5.1f} NM  ETA {nav['eta']}  "
                  f"FUEL {readout.fuel.endurance}")
        if not fast:
            time.sleep(SimulatorConfig.TICK_INTERVAL_SEC)

    print(f"\nArrived after {ticks} ticks. Fuel on board: {session.fuel.current_lbs:.0f} lbs")
    session.stop()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    main()
