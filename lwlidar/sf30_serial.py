"""SF30 sample: configure the serial output and decode the binary distance stream."""

from __future__ import annotations

import argparse

from .clock import sleep_ms
from .serialport import SerialPort, SerialPortError

__all__ = ["DistanceDecoder", "configure", "main", "LOST_SIGNAL"]

DEFAULT_PORT = "/dev/ttyS0"
DEFAULT_BAUD_RATE = 460800
READ_SIZE = 1024
POLL_INTERVAL_MS = 1
LOST_SIGNAL = 16000

# Exposure 156 readings/s, serial output 156 readings/s, last return, zero offset 0 m.
CONFIGURATION_COMMANDS = (b"#R7:", b"#U7:", b"#S1:", b"#Z0:")


class DistanceDecoder:
    """Decodes two-byte distances: a high byte with bit 7 set, then a low byte."""

    def __init__(self):
        self._have_high = False
        self._high = 0

    def feed(self, data: bytes) -> list[int]:
        """Consume data and return the distances in centimetres it completed."""
        distances = []
        for byte in bytes(data):
            if byte & 0x80:
                self._have_high = True
                self._high = byte & 0x7F
            elif self._have_high:
                self._have_high = False
                distances.append((self._high << 7) | byte)
        return distances


def configure(port) -> None:
    """Send the rate, return mode and zero offset settings to the device."""
    for command in CONFIGURATION_COMMANDS:
        port.write(command)


def main(argv: list[str] | None = None) -> int:
    """Configure the SF30 and print every distance it sends."""
    parser = argparse.ArgumentParser(description="Read distances from an SF30 serial port.")
    parser.add_argument("--port", default=DEFAULT_PORT, help="serial port device")
    parser.add_argument("--baud", type=int, default=DEFAULT_BAUD_RATE, help="baud rate")
    args = parser.parse_args(argv)

    print("SF30 serial sample")
    print(f"Attempt com connection: {args.port}")
    port = SerialPort(args.port, args.baud)
    try:
        port.open()
    except SerialPortError:
        print("Couldn't open serial port!")
        print("Program terminated")
        return 0

    with port:
        print("Connected")
        decoder = DistanceDecoder()
        try:
            configure(port)
            while True:
                sleep_ms(POLL_INTERVAL_MS)
                for distance in decoder.feed(port.read(READ_SIZE)):
                    if distance == LOST_SIGNAL:
                        print("Lost signal")
                    else:
                        print(f"{distance} cm")
        except SerialPortError:
            print("Error reading serial port")

    print("Program terminated")
    return 0