from enum import IntEnum


class MessageID(IntEnum):
    """AIS message types (ITU-R M.1371)."""

    POSITION_REPORT_CLASS_A = 1
    POSITION_REPORT_CLASS_A_ASSIGNED_SCHEDULE = 2
    POSITION_REPORT_CLASS_A_RESPONSE_TO_INTERROGATION = 3
    BASE_STATION_REPORT = 4
    STATIC_AND_VOYAGE_RELATED_DATA = 5
    BINARY_ADDRESSED_MESSAGE = 6
    BINARY_ACKNOWLEDGE = 7
    BINARY_BROADCAST_MESSAGE = 8
    STANDARD_SAR_AIRCRAFT_POSITION_REPORT = 9
    UTC_AND_DATE_INQUIRY = 10
    UTC_AND_DATE_RESPONSE = 11
    ADDRESSED_SAFETY_RELATED_MESSAGE = 12
    SAFETY_RELATED_ACKNOWLEDGEMENT = 13
    SAFETY_RELATED_BROADCAST_MESSAGE = 14
    INTERROGATION = 15
    ASSIGNMENT_MODE_COMMAND = 16
    DGNSS_BINARY_BROADCAST_MESSAGE = 17
    STANDARD_CLASS_B_CS_POSITION_REPORT = 18
    EXTENDED_CLASS_B_EQUIPMENT_POSITION_REPORT = 19
    DATA_LINK_MANAGEMENT = 20
    AID_TO_NAVIGATION_REPORT = 21
    CHANNEL_MANAGEMENT = 22
    GROUP_ASSIGNMENT_COMMAND = 23
    STATIC_DATA_REPORT = 24
    SINGLE_SLOT_BINARY_MESSAGE = 25
    MULTIPLE_SLOT_BINARY_MESSAGE = 26
    POSITION_REPORT_FOR_LONG_RANGE_APPLICATIONS = 27

    @property
    def display_name(self):
        return self.name.lower()


def message_name(msg_type):
    """Display name for a raw message type, known or not."""
    try:
        return MessageID(msg_type).display_name
    except ValueError:
        return f"message_{msg_type:02d}"
