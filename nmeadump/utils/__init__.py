# Utils package for stream parsing and reassembly

from .ais_decoder import AISDecoder
from .fragment_buffer import FragmentBuffer
from .nmea_parser import LineKind, NMEAParser
from .reporter import Reporter

__all__ = [
    'AISDecoder',
    'FragmentBuffer',
    'LineKind',
    'NMEAParser',
    'Reporter'
]
