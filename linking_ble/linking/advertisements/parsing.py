"""This module contains functions for parsing Linking advertising packets."""

import math
import struct
from typing import Optional
from typedargs.exceptions import ArgumentError
from ..constants import (ServiceId, SERVICE_NAMES, LINKING_HEADER_LENGTH, BEACON_CHUNK_LENGTH,
                         TEMPERATURE_FORMAT, HUMIDITY_FORMAT, PRESSURE_FORMAT, company_name, button_name)
from ..ieee754 import decode_float
from ...exceptions import MalformedAdvertisement
from .records import RawAdvertisement, ParsedAdvertisement, BeaconServiceRecord

_FLAG_BIT = 1 << 11
_COUNT_MASK = _FLAG_BIT - 1


def parse_linking_advertisement(raw: RawAdvertisement) -> ParsedAdvertisement:
    """Decode the manufacturer data of a Linking beacon advertisement.

    The manufacturer data starts with a 6 byte header:
     - bytes 0-1: company id, little-endian
     - bytes 2-5: big-endian; version (4 bits), vendor id (8 bits) and
       individual number (20 bits)

    It is followed by any number of 2 byte beacon service chunks.  A single
    trailing byte that cannot form a chunk is ignored.

    Raises:
        MalformedAdvertisement: The manufacturer data is missing or shorter
            than the header.
    """

    manu = raw.manufacturer_data
    if manu is None or len(manu) < LINKING_HEADER_LENGTH:
        raise MalformedAdvertisement("Manufacturer data too short to contain a Linking header",
                                     expected=LINKING_HEADER_LENGTH, length=0 if manu is None else len(manu))

    company_id, = struct.unpack_from("<H", manu, 0)
    packed_id, = struct.unpack_from(">L", manu, 2)

    version = packed_id >> 28
    vendor_id = (packed_id >> 20) & 0xFF
    individual_number = packed_id & ((1 << 20) - 1)

    beacon_data = []
    for offset in range(LINKING_HEADER_LENGTH, len(manu) - 1, BEACON_CHUNK_LENGTH):
        beacon_data.append(parse_beacon_service_data(manu[offset:offset + BEACON_CHUNK_LENGTH]))

    return ParsedAdvertisement(raw.identifier, raw.address, raw.local_name, raw.service_uuids,
                               raw.tx_power_level, raw.rssi, estimate_distance(raw.tx_power_level, raw.rssi),
                               company_id, company_name(company_id), version, vendor_id, individual_number,
                               tuple(beacon_data))


def parse_linking_manufacturer_data(data: bytes, rssi: Optional[int] = None,
                                    tx_power_level: Optional[int] = None) -> ParsedAdvertisement:
    """Decode bare manufacturer data when no other advertisement fields are known."""

    return parse_linking_advertisement(RawAdvertisement(data, tx_power_level=tx_power_level, rssi=rssi))


def estimate_distance(tx_power_level: Optional[int], rssi: Optional[int]) -> float:
    """Estimate the distance to a transmitter in meters from its path loss.

    Uses ``10 ** ((tx_power_level - rssi) / 20)`` without any clamping.
    Returns NaN if either power is unknown.
    """

    if tx_power_level is None or rssi is None:
        return math.nan

    try:
        return math.pow(10.0, (tx_power_level - rssi) / 20.0)
    except OverflowError:
        return math.inf


def parse_beacon_service_data(chunk: bytes) -> BeaconServiceRecord:
    """Decode a single 2 byte beacon service chunk.

    The chunk is a big-endian 16-bit value whose top 4 bits are the service
    id and whose low 12 bits are the service specific payload.  Every
    service id produces a record; ids without a known service only carry
    their id.
    """

    if len(chunk) != BEACON_CHUNK_LENGTH:
        raise ArgumentError("Beacon service data must be exactly 2 bytes", length=len(chunk))

    value, = struct.unpack(">H", chunk)
    service_id = value >> 12
    payload = value & 0x0FFF

    decoder = _SERVICE_DECODERS.get(service_id)
    if decoder is None:
        return BeaconServiceRecord(service_id)

    return BeaconServiceRecord(service_id, SERVICE_NAMES[service_id], decoder(payload).items())


def _flag_and_count(payload):
    return bool(payload & _FLAG_BIT), payload & _COUNT_MASK


def _decode_general(_payload):
    return {}


def _decode_temperature(payload):
    return {'temperature': decode_float(payload, *TEMPERATURE_FORMAT)}


def _decode_humidity(payload):
    return {'humidity': decode_float(payload, *HUMIDITY_FORMAT)}


def _decode_pressure(payload):
    return {'pressure': decode_float(payload, *PRESSURE_FORMAT)}


def _decode_battery(payload):
    required, level = _flag_and_count(payload)
    return {'charge_required': required, 'charge_level': min(level / 10.0, 100.0)}


def _decode_button(payload):
    name = button_name(payload)
    if name is None:
        name = ''

    return {'button_id': payload, 'button_name': name}


def _decode_opening(payload):
    status, count = _flag_and_count(payload)
    return {'opening_status': status, 'opening_count': count}


def _decode_human_detection(payload):
    response, count = _flag_and_count(payload)
    return {'human_detection_response': response, 'human_detection_count': count}


def _decode_vibration(payload):
    response, count = _flag_and_count(payload)
    return {'move_response': response, 'move_count': count}


_SERVICE_DECODERS = {
    ServiceId.GENERAL: _decode_general,
    ServiceId.TEMPERATURE: _decode_temperature,
    ServiceId.HUMIDITY: _decode_humidity,
    ServiceId.AIR_PRESSURE: _decode_pressure,
    ServiceId.BATTERY: _decode_battery,
    ServiceId.BUTTON: _decode_button,
    ServiceId.OPENING: _decode_opening,
    ServiceId.HUMAN_DETECTION: _decode_human_detection,
    ServiceId.VIBRATION: _decode_vibration
}
