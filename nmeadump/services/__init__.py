from .dump_service import DumpService
from .line_sources import console_lines, file_lines, get_baud_rate, serial_lines

__all__ = [
    'DumpService',
    'console_lines',
    'file_lines',
    'get_baud_rate',
    'serial_lines'
]
