"""SF30 USB sample: read the distance lines the device streams over USB."""

from __future__ import annotations

import argparse
import os

from .serialport import SerialPort, SerialPortError
from .textnum import parse_float

__all__ = ["ReadingParser", "get_next_reading", "main"]

DEFAULT_PORT = "COM3" if os.name == "nt" else "/dev/ttyUSB0"
# The baud rate is ignored by the device over USB.
BAUD_RATE = 115200
LINE_CAPACITY = 64


class ReadingParser:
    """Builds distances from digits and dots, one reading per newline.

    Any other character is ignored; a line that reaches the capacity is discarded.
    """

    def __init__(self):
        self._chars: list[str] = []

    def feed(self, data: bytes) -> list[float]:
        """Consume data and return the distances in metres it completed."""
        readings = []
        for char in bytes(data).decode("latin-1"):
            if char == "\n":
                readings.append(parse_float("".join(self._chars)))
                self._chars.clear()
            elif char.isdigit() or char == ".":
                self._chars.append(char)
                if len(self._chars) == LINE_CAPACITY:
                    self._chars.clear()
        return readings


def get_next_reading(port) -> float:
    """Read the port a byte at a time until one distance in metres is complete."""
    parser = ReadingParser()
    while True:
        readings = parser.feed(port.read(1))
        if readings:
            return readings[0]


def _exit_with_message(message: str) -> int:
    print(f"{message}\nPress any key to Exit...")
    try:
        input()
    except (EOFError, OSError):
        pass
    return 1


def main(argv: list[str] | None = None) -> int:
    """Print every distance the SF30 streams over USB."""
    parser = argparse.ArgumentParser(description="Read distances from an SF30 over USB.")
    parser.add_argument("--port", default=DEFAULT_PORT, help="serial port device")
    args = parser.parse_args(argv)

    print("SF30 USB sample")
    print(f"Attempt com connection: {args.port}")
    port = SerialPort(args.port, BAUD_RATE)
    try:
        port.open()
    except SerialPortError:
        print("Couldn't open serial port!")
        return _exit_with_message("Could not establish serial connection\n")

    with port:
        print("Connected")
        try:
            while True:
                print(f"Distance: {get_next_reading(port):.2f} m")
        except SerialPortError as exc:
            return _exit_with_message(str(exc))