import random

from lwlidar.sf30_serial import LOST_SIGNAL, DistanceDecoder, configure, main


class RecordingPort:
    def __init__(self):
        self.written = []

    def write(self, data):
        self.written.append(bytes(data))
        return len(data)


def test_decodes_low_byte_only_value():
    assert DistanceDecoder().feed(bytes([0x80, 0x05])) == [5]


def test_lost_signal_value():
    assert DistanceDecoder().feed(bytes([0xFD, 0x00])) == [LOST_SIGNAL]
    assert LOST_SIGNAL == 16000


def test_low_byte_without_high_is_ignored():
    assert DistanceDecoder().feed(bytes([0x05, 0x10, 0x7F])) == []


def test_state_carries_across_feeds():
    decoder = DistanceDecoder()
    assert decoder.feed(bytes([0x80])) == []
    assert decoder.feed(bytes([0x05])) == [5]


def test_only_first_low_byte_after_high_counts():
    assert len(DistanceDecoder().feed(bytes([0x81, 0x02, 0x03]))) == 1


def test_later_high_byte_replaces_earlier():
    overridden = DistanceDecoder().feed(bytes([0x81, 0x82, 0x00]))
    direct = DistanceDecoder().feed(bytes([0x82, 0x00]))
    assert overridden == direct


def test_high_bits_dominate_ordering():
    small = DistanceDecoder().feed(bytes([0x80, 0x7F]))
    large = DistanceDecoder().feed(bytes([0x81, 0x00]))
    assert small[0] < large[0]


def test_split_feeding_matches_whole():
    rng = random.Random(7)
    data = bytes(rng.randrange(256) for _ in range(500))
    whole = DistanceDecoder().feed(data)
    decoder = DistanceDecoder()
    pieces = []
    for start in range(0, len(data), 13):
        pieces.extend(decoder.feed(data[start:start + 13]))
    assert pieces == whole
    assert all(0 <= value < 1 << 14 for value in whole)


def test_configure_sends_settings_in_order():
    port = RecordingPort()
    configure(port)
    assert port.written == [b"#R7:", b"#U7:", b"#S1:", b"#Z0:"]


def test_main_reports_missing_port(tmp_path, capsys):
    assert main(["--port", str(tmp_path / "missing")]) == 0
    out = capsys.readouterr().out
    assert out.startswith("SF30 serial sample")
    assert "Couldn't open serial port!" in out
    assert out.rstrip().endswith("Program terminated")