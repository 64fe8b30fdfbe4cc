"""Numbers and lookup tables defined by the Linking beacon format."""

from enum import IntEnum
from typing import Optional


LINKING_COMPANY_ID = 0x02E2
UNKNOWN_COMPANY = 'Unknown'

LINKING_HEADER_LENGTH = 6
BEACON_CHUNK_LENGTH = 2

_COMPANY_NAMES = {
    LINKING_COMPANY_ID: 'NTT docomo'
}


class ServiceId(IntEnum):
    """The beacon services that a Linking device can broadcast.

    Each beacon data chunk starts with a 4-bit service id.  Ids 9-15 are
    reserved and are decoded as records without a name.
    """

    GENERAL = 0
    TEMPERATURE = 1
    HUMIDITY = 2
    AIR_PRESSURE = 3
    BATTERY = 4
    BUTTON = 5
    OPENING = 6
    HUMAN_DETECTION = 7
    VIBRATION = 8


SERVICE_NAMES = {
    ServiceId.GENERAL: 'General',
    ServiceId.TEMPERATURE: 'Temperature',
    ServiceId.HUMIDITY: 'Humidity',
    ServiceId.AIR_PRESSURE: 'Air pressure',
    ServiceId.BATTERY: 'Remaining battery power',
    ServiceId.BUTTON: 'Pressed button',
    ServiceId.OPENING: 'Opening/closing',
    ServiceId.HUMAN_DETECTION: 'Human detection',
    ServiceId.VIBRATION: 'Vibration'
}

# (sign bits, exponent bits, mantissa bits) of the 12-bit sensor floats
TEMPERATURE_FORMAT = (1, 4, 7)
HUMIDITY_FORMAT = (0, 4, 8)
PRESSURE_FORMAT = (0, 5, 7)

_BUTTON_NAMES = {
    0x00: 'Power',
    0x01: 'Return',
    0x02: 'SingleClick',
    0x03: 'Home',
    0x04: 'DoubleClick',
    0x05: 'VolumeUp',
    0x06: 'VolumeDown',
    0x07: 'LongClick',
    0x08: 'Pause',
    0x09: 'LongClickRelease',
    0x0A: 'FastForward',
    0x0B: 'ReWind',
    0x0C: 'Shutter',
    0x0D: 'Up',
    0x0E: 'Down',
    0x0F: 'Left',
    0x10: 'Right',
    0x11: 'Enter',
    0x12: 'Menu',
    0x13: 'Play',
    0x14: 'Stop'
}


def company_name(company_id: int) -> str:
    """Return the name of a bluetooth company id or 'Unknown'."""

    return _COMPANY_NAMES.get(company_id, UNKNOWN_COMPANY)


def button_name(code: int) -> Optional[str]:
    """Return the name of a pressed button code, or None if the code is not assigned."""

    return _BUTTON_NAMES.get(code)
