# simglass/fg_interface/core.py

import logging
import time
from typing import Any, Dict, Iterable

from .protocols.telnet import TelnetProtocol
from .exceptions import FGCommError
from ..constants.connection import FGConnectionConstants


class FGConnection:
    """FlightGear property bridge returning standardized response dicts."""

    def __init__(self, host: str = FGConnectionConstants.DEFAULT_HOST,
                 port: int = FGConnectionConstants.DEFAULT_PORT,
                 timeout: float = FGConnectionConstants.DEFAULT_TIMEOUT_SEC):
        self.host = host
        self.port = port
        self.timeout = timeout
        self._protocol = None

    @property
    def is_connected(self) -> bool:
        return self._protocol is not None

    def connect(self) -> Dict[str, Any]:
        try:
            self._protocol = TelnetProtocol(self.host, self.port, self.timeout)
            logging.info(f"Connected to FlightGear at {self.host}:{self.port}")
            return self._format_response(
                success=True,
                message=f"Connected to FlightGear via Telnet ({self.host}:{self.port})",
                data={"protocol": "telnet", "host": self.host, "port": self.port}
            )
        except FGCommError as e:
            logging.warning(f"FlightGear connection failed: {e}")
            return self._format_response(
                success=False, message=str(e),
                data={"error_type": type(e).__name__, "host": self.host, "port": self.port,
                      "solution": f"Start FlightGear with --telnet={FGConnectionConstants.DEFAULT_TELNET_CONFIG}"}
            )

    def disconnect(self):
        """Closes the connection. Safe to call when already disconnected."""
        if self._protocol:
            self._protocol.close()
            self._protocol = None
            logging.info("FlightGear connection closed.")

    def get(self, property_path: str) -> Dict[str, Any]:
        if not self._protocol:
            return self._format_response(success=False, message="Not connected")

        try:
            value = self._protocol.get(property_path)
            return self._format_response(
                success=True, message=f"Read {property_path}",
                data={"property": property_path, "value": value}
            )
        except FGCommError as e:
            return self._format_response(
                success=False, message=f"Failed to read {property_path}",
                data={"property": property_path, "error_details": str(e)}
            )

    def get_many(self, property_paths: Iterable[str]) -> Dict[str, Dict[str, Any]]:
        return {path: self.get(path) for path in property_paths}

    def _format_response(self, success: bool, message: str, data: Dict = None) -> Dict[str, Any]:
        """Standardized response format for all methods."""
        return {
            "module": "fg_interface", "success": success, "message": message,
            "data": data or {}, "timestamp": time.time()
        }
