"""Readers for LightWare laser rangefinders over serial, USB and I2C."""

__version__ = "0.1.0"