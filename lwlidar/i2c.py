"""Reading distances from a LightWare lidar on an I2C bus."""

from __future__ import annotations

import argparse
import os

from .clock import sleep_ms

__all__ = ["I2CDevice", "decode_distance", "main"]

DEFAULT_BUS = "/dev/i2c-1"
DEFAULT_ADDRESS = 0x55
_I2C_SLAVE = 0x0703


def decode_distance(data: bytes) -> int:
    """Decode the two-byte big-endian distance in centimetres."""
    if len(data) != 2:
        raise ValueError(f"expected 2 bytes of distance data, got {len(data)}")
    return int.from_bytes(data, "big")


class I2CDevice:
    """A lidar at one address on a Linux I2C bus device file."""

    def __init__(self, bus_path: str = DEFAULT_BUS, address: int = DEFAULT_ADDRESS):
        self.bus_path = bus_path
        self.address = address
        self.fd: int | None = None

    def open(self) -> "I2CDevice":
        """Open the bus and select the device address."""
        import fcntl

        self.close()
        fd = os.open(self.bus_path, os.O_RDWR)
        try:
            fcntl.ioctl(fd, _I2C_SLAVE, self.address)
        except OSError:
            os.close(fd)
            raise
        self.fd = fd
        return self

    def close(self) -> None:
        """Close the bus if it is open."""
        fd, self.fd = self.fd, None
        if fd is not None:
            os.close(fd)

    def read_distance_cm(self) -> int:
        """Read one distance in centimetres; raises OSError if the device does not answer."""
        if self.fd is None:
            raise OSError("I2C bus is not open")
        try:
            data = os.read(self.fd, 2)
        except OSError as exc:
            raise OSError(f"I2C device with address {self.address} was not available") from exc
        if len(data) != 2:
            raise OSError(f"I2C device with address {self.address} was not available")
        return decode_distance(data)

    def __enter__(self) -> "I2CDevice":
        if self.fd is None:
            self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Print distances read from the I2C lidar four times a second."""
    parser = argparse.ArgumentParser(description="Read distances from an I2C lidar.")
    parser.add_argument("--bus", default=DEFAULT_BUS, help="I2C bus device file")
    parser.add_argument("--address", type=lambda s: int(s, 0), default=DEFAULT_ADDRESS)
    parser.add_argument("--interval", type=int, default=250, help="milliseconds between reads")
    parser.add_argument("--count", type=int, default=None, help="stop after this many reads")
    args = parser.parse_args(argv)

    device = I2CDevice(args.bus, args.address)
    try:
        device.open()
    except OSError:
        print("I2C Bus file could not be opened")
        return 1

    with device:
        print(f"I2C Bus opened on FD: {device.fd}")
        reads = 0
        while args.count is None or reads < args.count:
            try:
                print(f"Distance: {device.read_distance_cm()}cm")
            except OSError:
                print(f"I2C Device with address {device.address} was not available")
            reads += 1
            sleep_ms(args.interval)
    return 0