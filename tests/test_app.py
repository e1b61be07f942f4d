"""
Tests for the command line and the line sources
"""
import io
from itertools import islice
from unittest.mock import MagicMock, patch

import pytest
import serial

from nmeadump.app import main, parse_options
from nmeadump.services import console_lines, file_lines, get_baud_rate, serial_lines

from .conftest import GGA_BODY, HDT_BODY, fragment_line, sentence_line


class TestParseOptions:

    def test_defaults_to_console(self):
        args = parse_options([])

        assert args.port is None
        assert args.file is None

    def test_port_with_valid_speed(self):
        args = parse_options(['-p', '/dev/ttyUSB0', '-s', '38400'])

        assert args.port == '/dev/ttyUSB0'
        assert args.speed == 38400

    def test_port_and_file_are_exclusive(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_options(['-p', '/dev/ttyUSB0', '-s', '4800', '-f', 'log.nmea'])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize("argv", [
        ['-p', '/dev/ttyUSB0'],
        ['-p', '/dev/ttyUSB0', '-s', '9600'],
    ])
    def test_invalid_port_speed(self, argv):
        with pytest.raises(SystemExit) as exc_info:
            parse_options(argv)
        assert exc_info.value.code == 2

    def test_help_exits_successfully(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_options(['--help'])

        assert exc_info.value.code == 0
        assert "stdin is used to read data from" in capsys.readouterr().out


class TestMain:

    @pytest.fixture
    def log_file(self, tmp_path):
        path = tmp_path / "capture.nmea"
        path.write_text("\n".join([
            "# recorded on deck",
            sentence_line(GGA_BODY),
            fragment_line(2, 1, "xxx"),
            "",
            sentence_line(HDT_BODY),
        ]) + "\n")
        return path

    def test_dump_file(self, log_file, capsys):
        assert main(['-f', str(log_file), '--plain']) == 0

        out = capsys.readouterr().out
        assert out.startswith(sentence_line(GGA_BODY) + "\n\tGGA\n")
        assert "\tHDT\n" in out
        assert "✅" not in out

    def test_markers_are_shown_by_default(self, log_file, capsys):
        main(['-f', str(log_file)])

        out = capsys.readouterr().out
        assert "✅ " + sentence_line(GGA_BODY) in out
        assert "📡 " + fragment_line(2, 1, "xxx") in out

    def test_stats_go_to_stderr(self, log_file, capsys):
        main(['-f', str(log_file), '--stats'])

        captured = capsys.readouterr()
        assert "sentence_count: 2" in captured.err
        assert "sentence_count" not in captured.out

    def test_missing_file(self, tmp_path, capsys):
        assert main(['-f', str(tmp_path / "missing.nmea")]) == 1
        assert "Cannot open input" in capsys.readouterr().err

    def test_console_input(self, capsys):
        with patch('sys.stdin', io.StringIO(sentence_line(HDT_BODY) + "\n")):
            assert main(['--plain']) == 0

        assert "\tHDT\n" in capsys.readouterr().out

    def test_console_input_with_undecodable_bytes(self, capsys):
        data = b"\xff\xfe garbage\n" + sentence_line(HDT_BODY).encode('ascii') + b"\n"

        with patch('sys.stdin', io.TextIOWrapper(io.BytesIO(data), encoding='utf-8')):
            assert main(['--plain']) == 0

        out = capsys.readouterr().out
        assert "garbage\n\terror: " in out
        assert "\tHDT\n" in out

    def test_serial_open_failure(self, capsys):
        with patch('nmeadump.services.line_sources.serial.Serial',
                   side_effect=serial.SerialException("could not open port")):
            assert main(['-p', '/dev/ttyUSB9', '-s', '4800']) == 1

        assert "could not open port" in capsys.readouterr().err

    def test_interrupt(self, capsys):
        with patch('nmeadump.app.console_lines', return_value=self._interrupted()):
            assert main([]) == 130

        assert "Interrupted" in capsys.readouterr().err

    @staticmethod
    def _interrupted():
        yield sentence_line(HDT_BODY)
        raise KeyboardInterrupt


class TestLineSources:

    def test_get_baud_rate(self):
        assert get_baud_rate(4800) == 4800
        assert get_baud_rate(38400) == 38400
        with pytest.raises(ValueError):
            get_baud_rate(9600)

    def test_file_lines(self, tmp_path):
        path = tmp_path / "capture.nmea"
        path.write_text("a\nb\n")

        assert list(file_lines(path)) == ["a\n", "b\n"]

    def test_file_lines_fails_before_reading(self, tmp_path):
        with pytest.raises(OSError):
            file_lines(tmp_path / "missing.nmea")

    def test_console_lines(self):
        assert list(console_lines(io.StringIO("a\nb\n"))) == ["a\n", "b\n"]

    def test_console_lines_skip_undecodable_bytes(self):
        stdin = io.TextIOWrapper(io.BytesIO(b"\xff\xfe garbage\nb\n"), encoding='utf-8')

        with patch('sys.stdin', stdin):
            assert list(console_lines()) == [" garbage\n", "b\n"]

    def test_serial_lines(self):
        device = MagicMock()
        device.__enter__.return_value = device
        device.readline.side_effect = [b"", b"$HEHDT,274.07,T*03\r\n", b"\xff!AIVDM\r\n"]

        with patch('nmeadump.services.line_sources.serial.Serial', return_value=device) as serial_cls:
            lines = list(islice(serial_lines('/dev/ttyUSB0', 4800), 2))

        assert lines == ["$HEHDT,274.07,T*03\r\n", "!AIVDM\r\n"]
        assert serial_cls.call_args.kwargs['baudrate'] == 4800
        assert serial_cls.call_args.kwargs['parity'] == serial.PARITY_NONE

    def test_serial_lines_rejects_speed(self):
        with pytest.raises(ValueError):
            serial_lines('/dev/ttyUSB0', 9600)


class TestNamedConfig:

    def test_plain_config_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv('NMEADUMP_CONFIG', 'plain')

        with patch('sys.stdin', io.StringIO(sentence_line(HDT_BODY) + "\n")):
            assert main([]) == 0

        assert capsys.readouterr().out.startswith(sentence_line(HDT_BODY) + "\n")

    def test_unknown_config_name(self, monkeypatch, capsys):
        monkeypatch.setenv('NMEADUMP_CONFIG', 'staging')

        assert main([]) == 2

        captured = capsys.readouterr()
        assert "Unknown configuration: staging" in captured.err
        assert captured.out == ""
