"""
SimGlass - navigation and flight-performance engine for a simulated
glass-cockpit avionics suite.
"""

__version__ = "0.3.0"
