"""SF11 sample: read distances over the USB (human) or serial (machine) interface."""

from __future__ import annotations

import argparse
from collections.abc import Iterator

from .clock import sleep_ms
from .serialport import SerialPort, SerialPortError
from .textnum import parse_float, scan_usb_packet

__all__ = [
    "LineAssembler",
    "usb_readings",
    "serial_readings",
    "run_usb_sample",
    "run_serial_sample",
    "main",
]

DEFAULT_PORT = "/dev/ttyUSB0"
BAUD_RATE = 115200
READ_SIZE = 64
LINE_CAPACITY = 64
POLL_INTERVAL_MS = 50
DISTANCE_REQUEST = b"d"


class LineAssembler:
    """Collects bytes into newline-terminated lines, dropping carriage returns.

    A line keeps at most ``capacity - 1`` characters; anything beyond that is
    discarded until the next newline.
    """

    def __init__(self, capacity: int = LINE_CAPACITY):
        if capacity < 1:
            raise ValueError(f"line capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._chars: list[str] = []

    def feed(self, data: bytes) -> list[str]:
        """Consume data and return every line it completed."""
        lines = []
        for char in bytes(data).decode("latin-1"):
            if char == "\n":
                lines.append("".join(self._chars))
                self._chars.clear()
            elif char == "\r":
                continue
            elif len(self._chars) < self.capacity - 1:
                self._chars.append(char)
        return lines


def usb_readings(port) -> Iterator[float]:
    """Yield distances in metres from the USB interface's '<d> m <v> V <s>' lines.

    Lines that do not hold all three values are skipped.
    """
    assembler = LineAssembler()
    while True:
        sleep_ms(POLL_INTERVAL_MS)
        for line in assembler.feed(port.read(READ_SIZE)):
            packet = scan_usb_packet(line)
            if packet is not None:
                yield packet[0]


def serial_readings(port) -> Iterator[float]:
    """Request and yield distances in metres from the serial interface."""
    assembler = LineAssembler()
    while True:
        port.write(DISTANCE_REQUEST)
        sleep_ms(POLL_INTERVAL_MS)
        for line in assembler.feed(port.read(READ_SIZE)):
            yield parse_float(line)


def _connect(port_name: str) -> SerialPort | None:
    print(f"Attempt com connection: {port_name}")
    port = SerialPort(port_name, BAUD_RATE)
    try:
        port.open()
    except SerialPortError:
        print("Couldn't open serial port!")
        return None
    print("Connected")
    return port


def _print_distances(port_name: str, readings) -> None:
    port = _connect(port_name)
    if port is None:
        return
    with port:
        try:
            for distance in readings(port):
                print(f"Distance: {distance:.2f} m")
        except SerialPortError as exc:
            print(exc)


def run_usb_sample(port_name: str = DEFAULT_PORT) -> None:
    """Print distances from the USB interface until the port fails."""
    print("Connecting on USB interface...")
    _print_distances(port_name, usb_readings)


def run_serial_sample(port_name: str = DEFAULT_PORT) -> None:
    """Print distances from the serial interface until the port fails."""
    print("Connecting on serial interface...")
    _print_distances(port_name, serial_readings)


def main(argv: list[str] | None = None) -> int:
    """Run the SF11 sample on the chosen interface."""
    parser = argparse.ArgumentParser(description="Read distances from an SF11 lidar.")
    parser.add_argument("--port", default=DEFAULT_PORT, help="serial port device")
    parser.add_argument(
        "--serial",
        action="store_true",
        help="use the machine serial interface instead of the USB interface",
    )
    args = parser.parse_args(argv)

    print("SF11 sample")
    if args.serial:
        run_serial_sample(args.port)
    else:
        run_usb_sample(args.port)
    return 0