#!/usr/bin/env python3
# examples/E030_monitor_fuel.py

import time
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).parent.parent))

from simglass.fg_interface import FGConnection
from simglass.airplane.systems.fuel import FuelSystem, fuel_status, range_nm
from simglass.airplane.constants import FuelConstants
from simglass.airplane.exceptions import FuelSystemException

def main():
    print("Connecting to FlightGear...")
    fg = FGConnection()
    conn_result = fg.connect()

    if not conn_result['success']:
        print(f"Connection failed: {conn_result['message']}")
        return

    fuel_monitor = FuelSystem(fg)
    print("Monitoring fuel levels. Press Ctrl+C to stop...")
    print(f"Fuel density: {FuelConstants.DENSITY_LBS_PER_GAL} lbs/gal")

    try:
        while True:
            try:
                fuel = fuel_monitor.update()
            except FuelSystemException as e:
                print(f"Error: {e}")
            else:
                status = fuel_status(fuel)
                print("\n=== FUEL STATUS ===")
                print(f"On board: {fuel.current_lbs:.0f} / {fuel.max_lbs:.0f} lbs ({status['percent_remaining']:.0f}%)")
                print(f"Flow: {fuel.flow_pph:.0f} pph")
                print(f"Endurance: {fuel.endurance}")
                print(f"Range at 120 kt: {range_nm(fuel, 120):.0f} NM")
                print(f"Status: {status['status']}")

            time.sleep(2)

    except KeyboardInterrupt:
        print("\nMonitoring stopped.")
    finally:
        fg.disconnect()

if __name__ == "__main__":
    main()
