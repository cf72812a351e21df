from lwlidar.sf30_usb import ReadingParser, get_next_reading, main


class ByteStreamPort:
    def __init__(self, data):
        self._data = bytes(data)
        self.reads = 0

    def read(self, size=1):
        self.reads += 1
        chunk, self._data = self._data[:size], self._data[size:]
        return chunk


def test_parser_reads_plain_line():
    assert ReadingParser().feed(b"12.50\n") == [12.5]


def test_parser_ignores_other_characters():
    assert ReadingParser().feed(b"Distance: 3.75 m\r\n") == [3.75]


def test_parser_multiple_lines_and_partial():
    parser = ReadingParser()
    assert parser.feed(b"1.25\n2.") == [1.25]
    assert parser.feed(b"5\n") == [2.5]


def test_parser_empty_line_gives_zero():
    assert ReadingParser().feed(b"\n") == [0.0]


def test_parser_discards_overlong_line():
    assert ReadingParser().feed(b"9" * 64 + b"7\n") == [7.0]


def test_get_next_reading_consumes_one_line():
    port = ByteStreamPort(b"ab1.25\n9\n")
    assert get_next_reading(port) == 1.25
    assert port.reads == len(b"ab1.25\n")
    assert get_next_reading(port) == 9.0


def test_main_reports_missing_port(tmp_path, capsys):
    assert main(["--port", str(tmp_path / "missing")]) == 1
    out = capsys.readouterr().out
    assert out.startswith("SF30 USB sample")
    assert "Could not establish serial connection" in out
    assert "Press any key to Exit..." in out