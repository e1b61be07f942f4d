from nmeadump.models import SentenceID
from .formatting import (
    DISTANCE_UNIT, MODE_INDICATOR, QUALITY, REFERENCE, ROUTE, SELECTION_MODE, SIDE, STATUS,
    named, render, render_latitude, render_longitude, with_unit,
)
from .registry import DispatchRegistry


def _latitude(s, out):
    out.field("Latitude", render_latitude(s.get('lat'), s.get('lat_hem')))


def _longitude(s, out):
    out.field("Longitude", render_longitude(s.get('lon'), s.get('lon_hem')))


def render_aam(s, out):
    out.field("Arrival Circle Entered", named(STATUS, s.get('arrival_circle_entered')))
    out.field("Perpendicular Passed", named(STATUS, s.get('perpendicular_passed')))
    out.field("Arrival Circle Radius",
              with_unit(s.get('arrival_circle_radius'), s.get('arrival_circle_radius_unit'), DISTANCE_UNIT))
    out.field("Waypoint", render(s.get('waypoint_id')))


def render_apb(s, out):
    out.field("Loran C blink warn", named(STATUS, s.get('loran_c_blink_warning')))
    out.field("Loran C cycle lock warn", named(STATUS, s.get('loran_c_cycle_lock_warning')))
    out.field("Cross Track Error Magnitude", render(s.get('cross_track_error_magnitude')))
    out.field("Direction to Steer", named(SIDE, s.get('direction_to_steer')))
    out.field("Cross Track Unit", named(DISTANCE_UNIT, s.get('cross_track_unit')))
    out.field("Status Arrival", named(STATUS, s.get('status_arrival')))
    out.field("Status Perpendicular Pass", named(STATUS, s.get('status_perpendicular_passing')))
    out.field("Bearing Org to Dest", render(s.get('bearing_origin_to_destination')))
    out.field("Bearing Org to Dest Ref", named(REFERENCE, s.get('bearing_origin_to_destination_ref')))
    out.field("Waypoint", render(s.get('waypoint_id')))
    out.field("Bearing Pos to Dest", render(s.get('bearing_pos_to_destination')))
    out.field("Bearing Pos to Dest Ref", named(REFERENCE, s.get('bearing_pos_to_destination_ref')))
    out.field("Heading to Steer to Dest", render(s.get('heading_to_steer_to_destination')))
    out.field("Heading to Steer to Dest Ref", named(REFERENCE, s.get('heading_to_steer_to_destination_ref')))
    out.field("Mode Indicator", named(MODE_INDICATOR, s.get('mode_ind')))


def render_bod(s, out):
    out.field("Bearing True", render(s.get('bearing_true')))
    out.field("Bearing Magn", render(s.get('bearing_magn')))
    out.field("Waypoint To", render(s.get('waypoint_to')))
    out.field("Waypoint From", render(s.get('waypoint_from')))


def render_bwc(s, out):
    out.field("Time UTC", render(s.get('time_utc')))
    _latitude(s, out)
    _longitude(s, out)
    out.field("Bearing True", render(s.get('bearing_true')))
    out.field("Bearing Magnetic", render(s.get('bearing_mag')))
    out.field("Distance", with_unit(s.get('distance'), s.get('distance_unit'), DISTANCE_UNIT))
    out.field("Waypoint", render(s.get('waypoint_id')))
    out.field("Mode Indicator", named(MODE_INDICATOR, s.get('mode_ind')))


def render_dbt(s, out):
    out.field("Depth Feet", render(s.get('depth_feet')))
    out.field("Depth Meter", render(s.get('depth_meter')))
    out.field("Depth Fathom", render(s.get('depth_fathom')))


def render_dtm(s, out):
    out.field("Ref", render(s.get('ref')))
    out.field("Subcode", render(s.get('subcode')))
    out.field("Latitude Offset", render(s.get('lat_offset')))
    out.field("Latitude Hem", render(s.get('lat_hem')))
    out.field("Longitude Offset", render(s.get('lon_offset')))
    out.field("Longitude Hem", render(s.get('lon_hem')))
    out.field("Altitude", render(s.get('altitude')))
    out.field("Name", render(s.get('name')))


def render_gga(s, out):
    out.field("Time", render(s.get('time')))
    _latitude(s, out)
    _longitude(s, out)
    out.field("Quality Ind", named(QUALITY, s.get('quality_indicator')))
    out.field("Num Satellites", render(s.get('n_satellites')))
    out.field("Horiz Dilution", render(s.get('hor_dilution')))
    out.field("Altitude", with_unit(s.get('altitude'), s.get('altitude_unit')))
    out.field("Geodial Sep", with_unit(s.get('geodial_separation'), s.get('geodial_separation_unit')))
    out.field("DGPS Age", render(s.get('dgps_age')))
    out.field("DGPS Ref", render(s.get('dgps_ref')))


def render_gll(s, out):
    _latitude(s, out)
    _longitude(s, out)
    out.field("Time UTC", render(s.get('time_utc')))
    out.field("Status", named(STATUS, s.get('data_valid')))
    out.field("Mode Indicator", named(MODE_INDICATOR, s.get('mode_ind')))


def render_gsa(s, out):
    out.field("Selection Mode", named(SELECTION_MODE, s.get('sel_mode')))
    out.field("Mode", render(s.get('mode')))
    for i in range(12):
        out.field(f"Satellite {i:02d}", render(s.get(f'satellite_id_{i:02d}')))
    out.field("PDOP", render(s.get('pdop')))
    out.field("HDOP", render(s.get('hdop')))
    out.field("VDOP", render(s.get('vdop')))


def render_gsv(s, out):
    out.field("Num Messages", render(s.get('n_messages')))
    out.field("Messages Number", render(s.get('message_number')))
    out.field("Num Sat in View", render(s.get('n_satellites_in_view')))
    for i in range(4):
        sat_id = s.get(f'sat_{i}_id')
        if sat_id is None:
            continue
        elevation = s.get(f'sat_{i}_elevation', 0)
        azimuth = s.get(f'sat_{i}_azimuth', 0)
        snr = s.get(f'sat_{i}_snr', 0)
        out.field("Sat", f"ID:{sat_id:02d} ELEV:{elevation:02d} AZIMUTH:{azimuth:03d} SNR:{snr:02d}")


def render_hdg(s, out):
    out.field("Heading", render(s.get('heading')))
    out.field("Magn Deviation", f"{render(s.get('magn_dev'))} {render(s.get('magn_dev_hem'))}")
    out.field("Magn Variation", f"{render(s.get('magn_var'))} {render(s.get('magn_var_hem'))}")


def render_heading(s, out):
    out.field("Heading", render(s.get('heading')))


def render_mtw(s, out):
    out.field("Water Temperature", with_unit(s.get('temperature'), s.get('temperature_unit')))


def render_mwv(s, out):
    out.field("Angle", with_unit(s.get('angle'), s.get('angle_ref'), REFERENCE))
    out.field("Speed", with_unit(s.get('speed'), s.get('speed_unit')))
    out.field("Data Valid", named(STATUS, s.get('data_valid')))


def render_rmb(s, out):
    out.field("Active", named(STATUS, s.get('active')))
    out.field("Cross Track Error", render(s.get('cross_track_error')))
    out.field("Waypoint To", render(s.get('waypoint_to')))
    out.field("Waypoint From", render(s.get('waypoint_from')))
    _latitude(s, out)
    _longitude(s, out)
    out.field("Range", render(s.get('range')))
    out.field("Bearing", render(s.get('bearing')))
    out.field("Dest. Velocity", render(s.get('dst_velocity')))
    out.field("Arrival Status", named(STATUS, s.get('arrival_status')))
    out.field("Mode Indicator", named(MODE_INDICATOR, s.get('mode_ind')))


def render_rmc(s, out):
    out.field("Time UTC", render(s.get('time_utc')))
    out.field("Status", named(STATUS, s.get('status')))
    _latitude(s, out)
    _longitude(s, out)
    out.field("SOG", render(s.get('sog')))
    out.field("Heading", render(s.get('heading')))
    out.field("Date", render(s.get('date')))
    out.field("Magn Dev", f"{render(s.get('mag'))} {render(s.get('mag_hem'))}")
    out.field("Mode Ind", named(MODE_INDICATOR, s.get('mode_ind')))


def render_rte(s, out):
    out.field("Number of Messages", render(s.get('n_messages')))
    out.field("Message Number", render(s.get('message_number')))
    out.field("Message Mode", named(ROUTE, s.get('message_mode')))
    for i, waypoint in enumerate(s.get('waypoints', ())):
        out.field(f"Waypoint {i}", render(waypoint))


def render_vhw(s, out):
    out.field("Heading True", render(s.get('heading_true')))
    out.field("Heading Magn", render(s.get('heading_magn')))
    out.field("Speed kn", render(s.get('speed_knots')))
    out.field("Speed km/h", render(s.get('speed_kmh')))


def render_vlw(s, out):
    out.field("Distance Cumulative nm", render(s.get('distance_cum')))
    out.field("Distance since Reset nm", render(s.get('distance_reset')))


def render_vtg(s, out):
    out.field("Track True", render(s.get('track_true')))
    out.field("Track Magn", render(s.get('track_magn')))
    out.field("Speed Knots", render(s.get('speed_kn')))
    out.field("Speed kmh", render(s.get('speed_kmh')))
    out.field("Mode Indicator", named(MODE_INDICATOR, s.get('mode_ind')))


def render_vwr(s, out):
    out.field("Angle", with_unit(s.get('angle'), s.get('angle_side'), SIDE))
    out.field("Speed Knots", render(s.get('speed_knots')))
    out.field("Speed m/s", render(s.get('speed_mps')))
    out.field("Speed km/h", render(s.get('speed_kmh')))


def render_zda(s, out):
    out.field("Time UTC", render(s.get('time_utc')))
    out.field("Day", render(s.get('day')))
    out.field("Month", render(s.get('month')))
    out.field("Year", render(s.get('year')))
    out.field("Local Zone Hours", render(s.get('local_zone_hours')))
    out.field("Local Zone Min", render(s.get('local_zone_minutes')))


def render_pgrme(s, out):
    out.field("HPE", render(s.get('horizontal_position_error')))
    out.field("VPE", render(s.get('vertical_position_error')))
    out.field("O.sph.eq.pos err", render(s.get('overall_spherical_equiv_position_error')))


def render_pgrmm(s, out):
    out.field("Map Datum", render(s.get('map_datum')))


def render_pgrmz(s, out):
    out.field("Altitude", with_unit(s.get('altitude'), s.get('altitude_unit')))
    out.field("Fix Type", render(s.get('fix')))


SENTENCE_REGISTRY = DispatchRegistry({
    # standard
    SentenceID.AAM: render_aam,
    SentenceID.APB: render_apb,
    SentenceID.BOD: render_bod,
    SentenceID.BWC: render_bwc,
    SentenceID.DBT: render_dbt,
    SentenceID.DTM: render_dtm,
    SentenceID.GGA: render_gga,
    SentenceID.GLL: render_gll,
    SentenceID.GSA: render_gsa,
    SentenceID.GSV: render_gsv,
    SentenceID.HDG: render_hdg,
    SentenceID.HDM: render_heading,
    SentenceID.HDT: render_heading,
    SentenceID.MTW: render_mtw,
    SentenceID.MWV: render_mwv,
    SentenceID.RMB: render_rmb,
    SentenceID.RMC: render_rmc,
    SentenceID.RTE: render_rte,
    SentenceID.VHW: render_vhw,
    SentenceID.VLW: render_vlw,
    SentenceID.VTG: render_vtg,
    SentenceID.VWR: render_vwr,
    SentenceID.ZDA: render_zda,

    # proprietary
    SentenceID.PGRME: render_pgrme,
    SentenceID.PGRMM: render_pgrmm,
    SentenceID.PGRMZ: render_pgrmz,
}, namer=lambda sentence_id: sentence_id.display_name)
