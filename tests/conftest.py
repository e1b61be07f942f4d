"""
Pytest configuration and fixtures
"""
import io

import pytest

from nmeadump.utils import NMEAParser, Reporter


def sentence_line(body):
    """A standalone sentence with a valid checksum."""
    return NMEAParser.make_line(body, NMEAParser.START_TOKEN)


def fragment_line(n_fragments, fragment, payload, tag='VDM', seq_id='3', channel='A', fill_bits=0):
    """An AIS fragment sentence with a valid checksum."""
    return NMEAParser.make_line(f"AI{tag},{n_fragments},{fragment},{seq_id},{channel},{payload},{fill_bits}")


def fragment(n_fragments, fragment_number, payload='xxx', **kwargs):
    return NMEAParser.parse(fragment_line(n_fragments, fragment_number, payload, **kwargs))


def corrupt(line):
    """Flip one bit of the checksum."""
    return line[:-2] + f"{int(line[-2:], 16) ^ 1:02X}"


GGA_BODY = "GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,"
HDT_BODY = "HEHDT,274.07,T"
TXT_BODY = "GPTXT,01,01,02,ANTENNA OK"

# Type 1 position report, single fragment
TYPE_1_PAYLOAD = "15NG6V0P01G?cFhE`R2IU?wn28R>"
# Type 5 static and voyage data, two fragments
TYPE_5_PAYLOADS = ("55O0W7`00001L@gCWGA2uItLth@DqtL5@F22220j1h742t0Ht0000000", "000000000000000")


@pytest.fixture
def output():
    """Captured dump output"""
    return io.StringIO()


@pytest.fixture
def reporter(output):
    """Reporter writing plain lines into the captured output"""
    return Reporter(stream=output, use_markers=False)
