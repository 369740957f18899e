# helpers/telemetry.py
import logging
import time
import threading
import os
import sys

# --- Path Correction ---
HELPER_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(HELPER_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# --- Core Project Imports ---
from simglass.simulator.config import SimulatorConfig


def telemetry_worker(state: dict, interval: float = SimulatorConfig.TICK_INTERVAL_SEC):
    """
    Host scheduler: ticks the avionics session every `interval` seconds until
    state['stop_event'] is set or the session is stopped.
    """
    session = state['session']
    stop_event: threading.Event = state['stop_event']
    last_tick = time.monotonic()

    while not stop_event.is_set() and session.running:
        try:
            now = time.monotonic()
            session.tick(now - last_tick)
            last_tick = now
        except Exception as e:
            logging.error(f"Error in telemetry_worker tick: {e}", exc_info=True)
        stop_event.wait(interval)

    logging.info("Telemetry worker stopped.")
