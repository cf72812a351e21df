# lwlidar

Read distances from LightWare laser rangefinders: the SF11 over its USB or
serial interface, the SF30 over its serial output or its USB port, and the
SF02, SF10, SF11 and LW20/SF20 over I2C.

## Installing

    pip install lwlidar

Serial access uses pyserial. The I2C reader talks to a Linux I2C bus device
file (such as `/dev/i2c-1`) and works on Linux only.

## Commands

Each command connects to a device and prints what it reads. Run any of them
with `--help` for the full list of options.

    lwlidar-sf11          # SF11 on /dev/ttyUSB0, 115200 baud
    lwlidar-sf30-serial   # SF30 serial output on /dev/ttyS0, 460800 baud
    lwlidar-sf30-usb      # SF30 USB port
    lwlidar-i2c           # I2C rangefinder at address 0x55 on /dev/i2c-1

- `lwlidar-sf11` reads the USB interface's `<distance> m <voltage> V
  <strength>` lines by default. With `--serial` it uses the machine
  interface instead, sending a `d` request every 50 ms. `--port` chooses the
  device.
- `lwlidar-sf30-serial` first sends the settings `#R7:`, `#U7:`, `#S1:` and
  `#Z0:` (156 readings per second, last return, zero offset), then prints each
  distance in centimetres, or `Lost signal` for a reading of 16000.
  `--port` and `--baud` choose the device and rate; rates other than 115200,
  230400, 460800, 500000, 576000 and 921600 fall back to 115200.
- `lwlidar-sf30-usb` prints each distance in metres. Its default port is
  `/dev/ttyUSB0`, or `COM3` on Windows; `--port` chooses another.
- `lwlidar-i2c` reads every 250 ms. `--bus`, `--address` (decimal or `0x`
  hex), `--interval` (milliseconds) and `--count` (stop after that many
  reads) change its behaviour; without `--count` it runs until interrupted.

The serial commands run until the port fails or they are interrupted with
Ctrl+C.

## Library use

Serial connections go through `lwlidar.serialport.SerialPort`, a context
manager (8 data bits, no parity, one stop bit, 0.1 s read timeout by default)
that raises `SerialPortError` when the port cannot be opened, read or
written:

```python
from lwlidar.serialport import SerialPort
from lwlidar.sf30_usb import get_next_reading

with SerialPort("/dev/ttyUSB0", 115200, 0.1) as port:
    print(get_next_reading(port))
```

The protocol decoders take raw bytes and return what they found, so they can
be fed from any source:

```python
from lwlidar.sf30_serial import DistanceDecoder

decoder = DistanceDecoder()
print(decoder.feed(bytes([0x81, 0x10])))  # [144], distances in centimetres
```

- `lwlidar.sf11.LineAssembler` splits incoming bytes into lines, dropping
  carriage returns; `usb_readings` and `serial_readings` are generators that
  yield SF11 distances in metres from an open port.
- `lwlidar.sf30_serial.configure` sends the SF30 serial settings listed above.
- `lwlidar.sf30_usb.ReadingParser` turns the SF30 USB text stream into
  distances in metres.
- `lwlidar.i2c.I2CDevice` reads two-byte distances in centimetres, and
  `decode_distance` decodes them.
- `lwlidar.textnum.parse_float` and `scan_usb_packet` read the numbers in
  the devices' text output.
- `lwlidar.serialport.hex_dump` renders bytes as hex pairs for debugging;
  `lwlidar.clock` has millisecond and microsecond clocks and `sleep_ms`.

## What it does not do

The package does not change an SF30's USB output settings or an SF11's menu
options: set the output type, active data port and output rates with a
terminal program first. It only reads and prints distances; it does not log,
store or plot them.