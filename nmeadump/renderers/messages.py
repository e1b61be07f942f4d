from nmeadump.models import MessageID, message_name
from .formatting import MISSING, render, render_latitude, render_longitude, render_mmsi
from .registry import DispatchRegistry

# pyais reports these when the value is not available
LATITUDE_NOT_AVAILABLE = 91.0
LONGITUDE_NOT_AVAILABLE = 181.0


def _value(msg, attr):
    value = getattr(msg, attr, None)
    if isinstance(value, str):
        value = value.strip('@').strip() or None
    return value


def _fields(msg, out, fields):
    for attr, label in fields:
        out.field(label, render(_value(msg, attr)))


def _header(msg, out):
    out.field("Repeat Indicator", render(_value(msg, 'repeat')))
    out.field("MMSI", render_mmsi(_value(msg, 'mmsi')))


def _position(msg, out):
    lat = _value(msg, 'lat')
    lon = _value(msg, 'lon')
    out.field("Latitude", MISSING if lat == LATITUDE_NOT_AVAILABLE else render_latitude(lat))
    out.field("Longitude", MISSING if lon == LONGITUDE_NOT_AVAILABLE else render_longitude(lon))


def _dimensions(msg, out):
    to_bow, to_stern = _value(msg, 'to_bow'), _value(msg, 'to_stern')
    to_port, to_starboard = _value(msg, 'to_port'), _value(msg, 'to_starboard')
    out.field("Length", MISSING if None in (to_bow, to_stern) else render(to_bow + to_stern))
    out.field("Width", MISSING if None in (to_port, to_starboard) else render(to_port + to_starboard))


def is_auxiliary_vessel(mmsi):
    """Auxiliary craft associated with a parent ship use 98XXXYYYY."""
    return mmsi is not None and f"{int(mmsi):09d}".startswith('98')


def render_position_report(msg, out):
    """Messages 1, 2 and 3 share one layout."""
    _header(msg, out)
    _fields(msg, out, [
        ('status', 'Nav Status'),
        ('turn', 'ROT'),
        ('speed', 'SOG'),
        ('accuracy', 'Pos Accuracy'),
    ])
    _position(msg, out)
    _fields(msg, out, [
        ('course', 'COG'),
        ('heading', 'HDG'),
        ('second', 'Time Stamp'),
        ('raim', 'RAIM'),
        ('radio', 'Radio Status'),
    ])


def render_base_station_report(msg, out):
    """Messages 4 and 11 share one layout."""
    _header(msg, out)
    _fields(msg, out, [
        ('year', 'Year'),
        ('month', 'Month'),
        ('day', 'Day'),
        ('hour', 'Hour'),
        ('minute', 'Minute'),
        ('second', 'Second'),
        ('accuracy', 'Pos Accuracy'),
    ])
    _position(msg, out)
    _fields(msg, out, [
        ('epfd', 'EPFD Fix'),
        ('raim', 'RAIM'),
        ('radio', 'Radio Status'),
    ])


def render_static_and_voyage_data(msg, out):
    _header(msg, out)
    _fields(msg, out, [
        ('ais_version', 'AIS Version'),
        ('imo', 'IMO'),
        ('callsign', 'Callsign'),
        ('shipname', 'Shipname'),
        ('ship_type', 'Shiptype'),
    ])
    _dimensions(msg, out)
    _fields(msg, out, [
        ('draught', 'Draught'),
        ('epfd', 'EPFD Fix'),
        ('month', 'ETA Month'),
        ('day', 'ETA Day'),
        ('hour', 'ETA Hour'),
        ('minute', 'ETA Minute'),
        ('destination', 'Destination'),
        ('dte', 'DTE'),
    ])


def render_class_b_position_report(msg, out):
    _header(msg, out)
    _fields(msg, out, [
        ('speed', 'SOG'),
        ('accuracy', 'Pos Accuracy'),
    ])
    _position(msg, out)
    _fields(msg, out, [
        ('course', 'COG'),
        ('heading', 'HDG'),
        ('second', 'Time Stamp'),
        ('cs', 'CS Unit'),
        ('display', 'Display Flag'),
        ('dsc', 'DSC Flag'),
        ('band', 'Band Flag'),
        ('msg22', 'Message 22 Flag'),
        ('assigned', 'Assigned'),
        ('raim', 'RAIM'),
        ('radio', 'Radio Status'),
    ])


def render_aid_to_navigation_report(msg, out):
    _header(msg, out)
    _fields(msg, out, [
        ('aid_type', 'Aid Type'),
        ('name', 'Name'),
        ('accuracy', 'Pos Accuracy'),
    ])
    _position(msg, out)
    _dimensions(msg, out)
    _fields(msg, out, [
        ('epfd', 'EPFD Fix'),
        ('second', 'UTC Second'),
    ])
    off_position = _value(msg, 'off_position')
    out.field("Off Pos Indicator", MISSING if off_position is None
              else ("Off Position" if off_position else "On Position"))
    out.field("Regional", render(_value(msg, 'reserved_1')))
    out.field("RAIM", render(_value(msg, 'raim')))
    virtual_aid = _value(msg, 'virtual_aid')
    out.field("Virtual Aid Flag", MISSING if virtual_aid is None
              else ("Virtual Aid" if virtual_aid else "Real Aid"))
    _fields(msg, out, [
        ('assigned', 'Assigned'),
        ('name_ext', 'Name Extension'),
    ])


def render_static_data_report(msg, out):
    _header(msg, out)
    partno = _value(msg, 'partno')
    out.field("Part", {0: "A", 1: "B"}.get(partno, MISSING))
    if partno == 0:
        out.field("Ship Name", render(_value(msg, 'shipname')))
        return

    _fields(msg, out, [
        ('ship_type', 'Ship Type'),
        ('vendorid', 'Vendor ID'),
        ('model', 'Model'),
        ('serial', 'Serial'),
        ('callsign', 'Callsign'),
    ])
    if is_auxiliary_vessel(_value(msg, 'mmsi')):
        out.field("Mothership MMSI", render_mmsi(_value(msg, 'mothership_mmsi')))
    else:
        _dimensions(msg, out)


MESSAGE_REGISTRY = DispatchRegistry({
    MessageID.POSITION_REPORT_CLASS_A: render_position_report,
    MessageID.POSITION_REPORT_CLASS_A_ASSIGNED_SCHEDULE: render_position_report,
    MessageID.POSITION_REPORT_CLASS_A_RESPONSE_TO_INTERROGATION: render_position_report,
    MessageID.BASE_STATION_REPORT: render_base_station_report,
    MessageID.STATIC_AND_VOYAGE_RELATED_DATA: render_static_and_voyage_data,
    MessageID.UTC_AND_DATE_RESPONSE: render_base_station_report,
    MessageID.STANDARD_CLASS_B_CS_POSITION_REPORT: render_class_b_position_report,
    MessageID.AID_TO_NAVIGATION_REPORT: render_aid_to_navigation_report,
    MessageID.STATIC_DATA_REPORT: render_static_data_report,
}, namer=message_name)
