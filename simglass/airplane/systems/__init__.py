#!/usr/bin/env python3
"""
Airplane Systems Package
Fuel and flight-state readers plus the pure fuel-planning functions
"""
from .fuel import FuelSystem
from .flight import FlightSystem

# Public API
__all__ = [
    'FuelSystem',
    'FlightSystem'
]
