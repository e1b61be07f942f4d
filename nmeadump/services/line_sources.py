import io
import sys

import serial

from nmeadump.config import Config


def get_baud_rate(speed, valid_speeds=Config.VALID_PORT_SPEEDS):
    """Validate a port speed against the supported baud rates."""
    if speed not in valid_speeds:
        raise ValueError(f"invalid baud rate: {speed}")
    return speed


def _read_stream(stream):
    with stream:
        yield from stream


def file_lines(path, encoding=Config.FILE_ENCODING):
    """Lines of a file. The file is opened right away so errors surface before reading starts."""
    return _read_stream(open(path, encoding=encoding, errors='ignore'))


def console_lines(stream=None, encoding=Config.FILE_ENCODING):
    """Lines from stdin (or any text stream)."""
    if stream is None:
        stream = sys.stdin
        if hasattr(stream, 'buffer'):
            # undecodable bytes are dropped, as for files and serial ports
            stream = io.TextIOWrapper(stream.buffer, encoding=encoding, errors='ignore')
    yield from stream


def _read_serial(device):
    with device:
        while True:
            raw = device.readline()
            if not raw:
                # read timeout, keep waiting
                continue
            yield raw.decode('ascii', errors='ignore')


def serial_lines(port, speed, timeout=Config.SERIAL_TIMEOUT):
    """Lines from a serial device, 8N1. Blocks until data arrives."""
    device = serial.Serial(
        port,
        baudrate=get_baud_rate(speed),
        bytesize=serial.EIGHTBITS,
        parity=serial.PARITY_NONE,
        stopbits=serial.STOPBITS_ONE,
        timeout=timeout,
    )
    return _read_serial(device)
