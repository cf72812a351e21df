"""Lenient number parsing for the text the lidars send."""

from __future__ import annotations

import re

__all__ = ["parse_float", "scan_usb_packet"]

_FLOAT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_SPACE = re.compile(r"\s*")


def _scan_float(text: str, pos: int) -> tuple[float, int] | None:
    pos = _SPACE.match(text, pos).end()
    match = _FLOAT.match(text, pos)
    if match is None:
        return None
    return float(match.group()), match.end()


def parse_float(text: str) -> float:
    """Parse the longest leading number in text, giving 0.0 when there is none."""
    scanned = _scan_float(text, 0)
    return scanned[0] if scanned is not None else 0.0


def scan_usb_packet(text: str) -> tuple[float, float, float] | None:
    """Parse a '<distance> m <voltage> V <strength>' line, or return None."""
    values = []
    pos = 0
    for separator in ("m", "V", None):
        scanned = _scan_float(text, pos)
        if scanned is None:
            return None
        value, pos = scanned
        values.append(value)
        if separator is not None:
            pos = _SPACE.match(text, pos).end()
            if not text.startswith(separator, pos):
                return None
            pos += len(separator)
    return values[0], values[1], values[2]