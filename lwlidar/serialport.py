"""A serial port configured for LightWare devices: 8 data bits, no parity, one stop bit."""

from __future__ import annotations

import serial

__all__ = ["SerialPortError", "SerialPort", "supported_baud_rate", "hex_dump"]

DEFAULT_BAUD_RATE = 115200
_SUPPORTED_RATES = frozenset({115200, 230400, 460800, 500000, 576000, 921600})


class SerialPortError(OSError):
    """Raised when the serial port cannot be opened, read or written."""


def supported_baud_rate(baud_rate: int) -> int:
    """Return the rate if it is one the devices support, otherwise 115200."""
    return baud_rate if baud_rate in _SUPPORTED_RATES else DEFAULT_BAUD_RATE


def hex_dump(data: bytes) -> str:
    """Render bytes as space separated upper-case hex pairs."""
    return " ".join(f"{byte:02X}" for byte in data)


class SerialPort:
    """A raw, non-canonical serial connection with a short read timeout."""

    def __init__(self, name: str, baud_rate: int = DEFAULT_BAUD_RATE, timeout: float = 0.1):
        self.name = name
        self.baud_rate = supported_baud_rate(baud_rate)
        self.timeout = timeout
        self._port = None

    @property
    def is_open(self) -> bool:
        return self._port is not None

    def open(self) -> "SerialPort":
        """Open the port; raises SerialPortError if it cannot be opened."""
        self.close()
        try:
            self._port = serial.Serial(
                port=self.name,
                baudrate=self.baud_rate,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                rtscts=False,
                xonxoff=False,
                timeout=self.timeout,
            )
        except (serial.SerialException, OSError, ValueError) as exc:
            raise SerialPortError(f"Couldn't open serial port {self.name}: {exc}") from exc
        return self

    def close(self) -> None:
        """Close the port if it is open."""
        port, self._port = self._port, None
        if port is not None:
            port.close()

    def _require_open(self, action: str):
        if self._port is None:
            raise SerialPortError(f"Can't {action} a serial port that is not open")
        return self._port

    def write(self, data: bytes) -> int:
        """Write all of data; raises SerialPortError if not every byte was sent."""
        port = self._require_open("write to")
        payload = bytes(data)
        try:
            written = port.write(payload)
        except (serial.SerialException, OSError) as exc:
            raise SerialPortError(f"Write to {self.name} failed: {exc}") from exc
        if written != len(payload):
            raise SerialPortError(f"Could not send all bytes! ({written} of {len(payload)})")
        return written

    def read(self, size: int = 1) -> bytes:
        """Read up to size bytes, returning fewer (possibly none) on timeout."""
        port = self._require_open("read from")
        try:
            return bytes(port.read(size))
        except (serial.SerialException, OSError) as exc:
            raise SerialPortError(f"Read from {self.name} failed: {exc}") from exc

    def __enter__(self) -> "SerialPort":
        if not self.is_open:
            self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()