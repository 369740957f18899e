# simglass/fg_interface/protocols/telnet.py

import re
import socket

from ..exceptions import ConnectionTimeout, FGCommError, ProtocolError
from ...constants.connection import FGConnectionConstants

# "/position/latitude-deg = '36.58' (double)"
_QUOTED_VALUE = re.compile(r"'([^']*)'")


class TelnetProtocol:
    """Line-oriented client for the FlightGear telnet property server."""

    def __init__(self, host: str, port: int, timeout: float = FGConnectionConstants.DEFAULT_TIMEOUT_SEC):
        self.timeout = timeout
        try:
            self.socket = socket.create_connection((host, port), timeout=timeout)
        except socket.timeout as e:
            raise ConnectionTimeout(f"No answer from FlightGear at {host}:{port}") from e
        except OSError as e:
            raise FGCommError(f"Cannot connect to FlightGear at {host}:{port}: {e}") from e
        self._buffer = b""

    def get(self, property_path: str) -> float:
        """Sends 'get <property>' and returns the numeric value."""
        self._send(f"get {property_path}")
        return self.parse_response(self._read_line())

    def _send(self, command: str):
        try:
            self.socket.sendall(f"{command}\r\n".encode())
        except socket.timeout as e:
            raise ConnectionTimeout(f"Timed out sending '{command}'") from e
        except OSError as e:
            raise FGCommError(f"Send failed: {e}") from e

    def _read_line(self) -> str:
        while b"\n" not in self._buffer:
            try:
                chunk = self.socket.recv(1024)
            except socket.timeout as e:
                raise ConnectionTimeout("Timed out waiting for FlightGear") from e
            except OSError as e:
                raise FGCommError(f"Receive failed: {e}") from e
            if not chunk:
                raise FGCommError("FlightGear closed the connection")
            self._buffer += chunk
        line, self._buffer = self._buffer.split(b"\n", 1)
        return line.decode(errors="ignore")

    @staticmethod
    def parse_response(response: str) -> float:
        """Accepts both the bare value and the "path = 'value' (type)" forms."""
        text = response.strip()
        match = _QUOTED_VALUE.search(text)
        candidate = match.group(1) if match else (text.split(" ")[0] if text else "")
        try:
            return float(candidate)
        except ValueError as e:
            raise ProtocolError(f"Failed to parse response: {response!r}") from e

    def close(self):
        """Closes the socket connection."""
        self.socket.close()
