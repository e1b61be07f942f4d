from datetime import date, time
from enum import Enum

MISSING = '-'

STATUS = {'A': 'ok', 'V': 'warning'}
MODE_INDICATOR = {
    'A': 'autonomous',
    'D': 'differential',
    'E': 'estimated',
    'F': 'float RTK',
    'M': 'manual input',
    'N': 'data not valid',
    'P': 'precise',
    'R': 'RTK',
    'S': 'simulated',
}
QUALITY = {
    0: 'invalid',
    1: 'gps fix',
    2: 'dgps fix',
    3: 'guess',
    4: 'real time kinematic',
    5: 'float rtk',
    6: 'estimated',
    7: 'manual input',
    8: 'simulation',
}
SELECTION_MODE = {'M': 'manual', 'A': 'automatic'}
REFERENCE = {'T': 'true', 'M': 'magnetic', 'R': 'relative'}
SIDE = {'L': 'left', 'R': 'right'}
ROUTE = {'c': 'complete', 'w': 'working'}
UNIT = {
    'C': 'celsius',
    'F': 'fathom',
    'K': 'km/h',
    'M': 'meter',
    'N': 'knots',
    'f': 'feet',
}
DISTANCE_UNIT = {'N': 'nm', 'M': 'meter', 'K': 'km', 'f': 'feet', 'F': 'fathom'}


def render(value):
    """Render a single field value."""
    if value is None:
        return MISSING
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, float):
        return f"{value:<8.3f}"
    if isinstance(value, time):
        return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (tuple, list)):
        return ', '.join(render(item) for item in value) or MISSING
    return str(value).strip()


def named(table, value):
    if value is None:
        return MISSING
    return table.get(value, str(value))


def with_unit(value, unit, table=UNIT):
    return f"{render(value)} {named(table, unit)}"


def _dms(value):
    degrees = int(value)
    minutes_total = (value - degrees) * 60.0
    minutes = int(minutes_total)
    return degrees, minutes, (minutes_total - minutes) * 60.0


def render_latitude(value, hemisphere=None):
    """Unsigned degrees plus hemisphere, or signed degrees when hemisphere is None."""
    if value is None or abs(value) > 90.0:
        return MISSING
    if hemisphere is None:
        hemisphere = 'N' if value >= 0 else 'S'
    degrees, minutes, seconds = _dms(abs(value))
    return f" {degrees:02d}°{minutes:02d}'{seconds:04.1f}{hemisphere}"


def render_longitude(value, hemisphere=None):
    if value is None or abs(value) > 180.0:
        return MISSING
    if hemisphere is None:
        hemisphere = 'E' if value >= 0 else 'W'
    degrees, minutes, seconds = _dms(abs(value))
    return f"{degrees:03d}°{minutes:02d}'{seconds:04.1f}{hemisphere}"


def render_mmsi(value):
    return MISSING if value is None else f"{int(value):09d}"
