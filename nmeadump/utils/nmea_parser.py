from datetime import date, time
from enum import Enum
from functools import reduce

from nmeadump.exceptions import ChecksumMismatch, MalformedField, UnknownSentenceType
from nmeadump.models import AIS_FRAGMENT_IDS, AISFragment, Sentence, SentenceID


class LineKind(Enum):
    SENTENCE = 'sentence'
    FRAGMENT = 'fragment'
    UNRECOGNIZED = 'unrecognized'


def _text(value):
    return value


def _char(value):
    if len(value) != 1:
        raise ValueError(f"expected a single character, got '{value}'")
    return value


def _time(value):
    """hhmmss[.sss] to datetime.time"""
    if len(value) < 6:
        raise ValueError(f"time too short: '{value}'")
    seconds = float(value[4:])
    micro = min(int(round((seconds % 1) * 1000000)), 999999)
    return time(int(value[0:2]), int(value[2:4]), int(seconds), micro)


def _date(value):
    """ddmmyy to datetime.date"""
    if len(value) != 6:
        raise ValueError(f"date must be ddmmyy: '{value}'")
    year = int(value[4:6])
    year += 2000 if year < 80 else 1900
    return date(year, int(value[2:4]), int(value[0:2]))


def _angle(limit):
    def convert(value):
        # [d]ddmm.mmmm, hemisphere is a separate field
        raw = float(value)
        degrees = int(raw // 100)
        minutes = raw - degrees * 100
        if raw < 0 or minutes >= 60.0 or degrees > limit:
            raise ValueError(f"coordinate out of range: '{value}'")
        return degrees + minutes / 60.0
    return convert


_latitude = _angle(90)
_longitude = _angle(180)

_POSITION = (
    ('lat', _latitude),
    ('lat_hem', _char),
    ('lon', _longitude),
    ('lon_hem', _char),
)

# Positional field layouts per sentence. A name starting with '*' collects
# all remaining non-empty values into a tuple.
SENTENCE_FIELDS = {
    SentenceID.AAM: (
        ('arrival_circle_entered', _char),
        ('perpendicular_passed', _char),
        ('arrival_circle_radius', float),
        ('arrival_circle_radius_unit', _char),
        ('waypoint_id', _text),
    ),
    SentenceID.APB: (
        ('loran_c_blink_warning', _char),
        ('loran_c_cycle_lock_warning', _char),
        ('cross_track_error_magnitude', float),
        ('direction_to_steer', _char),
        ('cross_track_unit', _char),
        ('status_arrival', _char),
        ('status_perpendicular_passing', _char),
        ('bearing_origin_to_destination', float),
        ('bearing_origin_to_destination_ref', _char),
        ('waypoint_id', _text),
        ('bearing_pos_to_destination', float),
        ('bearing_pos_to_destination_ref', _char),
        ('heading_to_steer_to_destination', float),
        ('heading_to_steer_to_destination_ref', _char),
        ('mode_ind', _char),
    ),
    SentenceID.BOD: (
        ('bearing_true', float),
        ('bearing_true_ref', _char),
        ('bearing_magn', float),
        ('bearing_magn_ref', _char),
        ('waypoint_to', _text),
        ('waypoint_from', _text),
    ),
    SentenceID.BWC: (
        ('time_utc', _time),
        *_POSITION,
        ('bearing_true', float),
        ('bearing_true_ref', _char),
        ('bearing_mag', float),
        ('bearing_mag_ref', _char),
        ('distance', float),
        ('distance_unit', _char),
        ('waypoint_id', _text),
        ('mode_ind', _char),
    ),
    SentenceID.DBT: (
        ('depth_feet', float),
        ('depth_feet_unit', _char),
        ('depth_meter', float),
        ('depth_meter_unit', _char),
        ('depth_fathom', float),
        ('depth_fathom_unit', _char),
    ),
    SentenceID.DTM: (
        ('ref', _text),
        ('subcode', _text),
        ('lat_offset', float),
        ('lat_hem', _char),
        ('lon_offset', float),
        ('lon_hem', _char),
        ('altitude', float),
        ('name', _text),
    ),
    SentenceID.GGA: (
        ('time', _time),
        *_POSITION,
        ('quality_indicator', int),
        ('n_satellites', int),
        ('hor_dilution', float),
        ('altitude', float),
        ('altitude_unit', _char),
        ('geodial_separation', float),
        ('geodial_separation_unit', _char),
        ('dgps_age', float),
        ('dgps_ref', _text),
    ),
    SentenceID.GLL: (
        *_POSITION,
        ('time_utc', _time),
        ('data_valid', _char),
        ('mode_ind', _char),
    ),
    SentenceID.GSA: (
        ('sel_mode', _char),
        ('mode', int),
        *((f'satellite_id_{i:02d}', int) for i in range(12)),
        ('pdop', float),
        ('hdop', float),
        ('vdop', float),
    ),
    SentenceID.GSV: (
        ('n_messages', int),
        ('message_number', int),
        ('n_satellites_in_view', int),
        *((f'sat_{i}_{part}', int) for i in range(4) for part in ('id', 'elevation', 'azimuth', 'snr')),
    ),
    SentenceID.HDG: (
        ('heading', float),
        ('magn_dev', float),
        ('magn_dev_hem', _char),
        ('magn_var', float),
        ('magn_var_hem', _char),
    ),
    SentenceID.HDM: (
        ('heading', float),
        ('heading_ref', _char),
    ),
    SentenceID.HDT: (
        ('heading', float),
        ('heading_ref', _char),
    ),
    SentenceID.MTW: (
        ('temperature', float),
        ('temperature_unit', _char),
    ),
    SentenceID.MWV: (
        ('angle', float),
        ('angle_ref', _char),
        ('speed', float),
        ('speed_unit', _char),
        ('data_valid', _char),
    ),
    SentenceID.RMB: (
        ('active', _char),
        ('cross_track_error', float),
        ('direction_to_steer', _char),
        ('waypoint_to', _text),
        ('waypoint_from', _text),
        *_POSITION,
        ('range', float),
        ('bearing', float),
        ('dst_velocity', float),
        ('arrival_status', _char),
        ('mode_ind', _char),
    ),
    SentenceID.RMC: (
        ('time_utc', _time),
        ('status', _char),
        *_POSITION,
        ('sog', float),
        ('heading', float),
        ('date', _date),
        ('mag', float),
        ('mag_hem', _char),
        ('mode_ind', _char),
    ),
    SentenceID.RTE: (
        ('n_messages', int),
        ('message_number', int),
        ('message_mode', _char),
        ('*waypoints', _text),
    ),
    SentenceID.VHW: (
        ('heading_true', float),
        ('heading_true_ref', _char),
        ('heading_magn', float),
        ('heading_magn_ref', _char),
        ('speed_knots', float),
        ('speed_knots_unit', _char),
        ('speed_kmh', float),
        ('speed_kmh_unit', _char),
    ),
    SentenceID.VLW: (
        ('distance_cum', float),
        ('distance_cum_unit', _char),
        ('distance_reset', float),
        ('distance_reset_unit', _char),
    ),
    SentenceID.VTG: (
        ('track_true', float),
        ('track_true_ref', _char),
        ('track_magn', float),
        ('track_magn_ref', _char),
        ('speed_kn', float),
        ('speed_kn_unit', _char),
        ('speed_kmh', float),
        ('speed_kmh_unit', _char),
        ('mode_ind', _char),
    ),
    SentenceID.VWR: (
        ('angle', float),
        ('angle_side', _char),
        ('speed_knots', float),
        ('speed_knots_unit', _char),
        ('speed_mps', float),
        ('speed_mps_unit', _char),
        ('speed_kmh', float),
        ('speed_kmh_unit', _char),
    ),
    SentenceID.ZDA: (
        ('time_utc', _time),
        ('day', int),
        ('month', int),
        ('year', int),
        ('local_zone_hours', int),
        ('local_zone_minutes', int),
    ),
    SentenceID.PGRME: (
        ('horizontal_position_error', float),
        ('horizontal_position_error_unit', _char),
        ('vertical_position_error', float),
        ('vertical_position_error_unit', _char),
        ('overall_spherical_equiv_position_error', float),
        ('overall_spherical_equiv_position_error_unit', _char),
    ),
    SentenceID.PGRMM: (
        ('map_datum', _text),
    ),
    SentenceID.PGRMZ: (
        ('altitude', float),
        ('altitude_unit', _char),
        ('fix', int),
    ),
}

AIS_FRAGMENT_FIELDS = (
    ('n_fragments', int),
    ('fragment', int),
    ('seq_id', int),
    ('channel', _text),
    ('payload', _text),
    ('fill_bits', int),
)

for _ais_id in AIS_FRAGMENT_IDS:
    SENTENCE_FIELDS[_ais_id] = AIS_FRAGMENT_FIELDS


class NMEAParser:
    """Handles parsing of NMEA 0183 sentences."""

    START_TOKEN = '$'
    START_TOKEN_AIS = '!'
    CHECKSUM_SEPARATOR = '*'

    @staticmethod
    def classify(line):
        """Route a trimmed line by its start token."""
        if line.startswith(NMEAParser.START_TOKEN):
            return LineKind.SENTENCE
        if line.startswith(NMEAParser.START_TOKEN_AIS):
            return LineKind.FRAGMENT
        return LineKind.UNRECOGNIZED

    @staticmethod
    def checksum(body):
        """XOR of all characters between the start token and '*'."""
        return reduce(lambda acc, ch: acc ^ ord(ch), body, 0)

    @staticmethod
    def make_line(body, start_token=START_TOKEN_AIS):
        """Build a complete sentence from its body, appending the checksum."""
        return f"{start_token}{body}*{NMEAParser.checksum(body):02X}"

    @staticmethod
    def parse_address(address):
        """Split the address field into talker and sentence id."""
        if address.startswith('P'):
            talker, tag = None, address
        else:
            talker, tag = address[:2], address[2:]
        try:
            return talker, SentenceID(tag)
        except ValueError:
            raise UnknownSentenceType(address) from None

    @staticmethod
    def parse_nmea_fields(sentence_id, values):
        """Decode positional values according to the sentence layout."""
        layout = SENTENCE_FIELDS.get(sentence_id)
        if layout is None:
            return {'values': tuple(values)}

        fields = {}
        for index, (name, convert) in enumerate(layout):
            try:
                if name.startswith('*'):
                    fields[name[1:]] = tuple(convert(v) for v in values[index:] if v)
                    break
                raw = values[index] if index < len(values) else ''
                fields[name] = convert(raw) if raw else None
            except ValueError as e:
                raise MalformedField(f"{sentence_id.value}: invalid field '{name.lstrip('*')}': {e}") from e
        return fields

    @staticmethod
    def parse(line):
        """Parse a raw line into a Sentence or AISFragment."""
        line = line.strip()
        if NMEAParser.classify(line) is LineKind.UNRECOGNIZED:
            raise MalformedField(f"invalid start token: {line[:1]!r}", line)

        body, separator, checksum = line[1:].rpartition(NMEAParser.CHECKSUM_SEPARATOR)
        if not separator:
            raise MalformedField("missing checksum", line)
        try:
            received = int(checksum, 16)
        except ValueError:
            raise ChecksumMismatch(f"invalid checksum field '{checksum}'", line) from None
        expected = NMEAParser.checksum(body)
        if len(checksum) != 2 or received != expected:
            raise ChecksumMismatch(f"expected {expected:02X}, got {checksum}", line)

        address, *values = body.split(',')
        try:
            talker, sentence_id = NMEAParser.parse_address(address)
            fields = NMEAParser.parse_nmea_fields(sentence_id, values)
        except (UnknownSentenceType, MalformedField) as e:
            e.line = line
            raise

        if sentence_id in AIS_FRAGMENT_IDS:
            return NMEAParser._make_fragment(sentence_id, talker, fields, line)
        return Sentence(sentence_id, talker, fields, line)

    @staticmethod
    def _make_fragment(sentence_id, talker, fields, line):
        n_fragments = fields['n_fragments']
        fragment = fields['fragment']
        fill_bits = fields['fill_bits'] or 0

        if n_fragments is None or n_fragments < 1:
            raise MalformedField(f"invalid number of fragments: {n_fragments}", line)
        if fragment is None or not 1 <= fragment <= n_fragments:
            raise MalformedField(f"invalid fragment number {fragment} of {n_fragments}", line)
        if not fields['payload']:
            raise MalformedField("missing payload", line)
        if not 0 <= fill_bits <= 5:
            raise MalformedField(f"invalid number of fill bits: {fill_bits}", line)

        return AISFragment(
            sentence_id=sentence_id,
            talker=talker,
            fields=fields,
            raw=line,
            n_fragments=n_fragments,
            fragment=fragment,
            seq_id=fields['seq_id'],
            channel=fields['channel'],
            payload=fields['payload'],
            fill_bits=fill_bits,
        )
