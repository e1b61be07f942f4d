from pyais import decode

from nmeadump.exceptions import MessageDecodeError
from .nmea_parser import NMEAParser


class AISDecoder:
    """Decodes assembled AIS payloads into pyais message objects."""

    TALKER = 'AI'
    CHANNELS = ('A', 'B')

    def make_sentence(self, assembled):
        """Wrap the complete payload into a single-fragment sentence for pyais."""
        channel = assembled.channel if assembled.channel in self.CHANNELS else self.CHANNELS[0]
        body = (f"{self.TALKER}{assembled.sentence_id.value},1,1,,{channel},"
                f"{assembled.payload},{assembled.fill_bits}")
        return NMEAParser.make_line(body)

    def decode(self, assembled):
        try:
            return decode(self.make_sentence(assembled))
        except Exception as decode_error:
            raise MessageDecodeError(str(decode_error) or type(decode_error).__name__) from decode_error
