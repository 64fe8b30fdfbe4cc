"""Routines for building Linking advertisement packets.

These are the inverse of the parsing routines for the header and chunk
layout.  Sensor payloads are passed in already packed into their 12 bits.
"""

import struct
from typing import Iterable, Optional, Tuple
from typedargs.exceptions import ArgumentError
from ..constants import LINKING_COMPANY_ID
from ...defines import AdElementType, GAPAdFlags

_MAX_ADVERTISEMENT_LENGTH = 31


def build_beacon_chunk(service_id: int, payload: int) -> bytes:
    """Pack a service id and its 12-bit payload into a 2 byte beacon chunk."""

    if not 0 <= service_id <= 0xF:
        raise ArgumentError("Service id must fit in 4 bits", service_id=service_id)

    if not 0 <= payload <= 0xFFF:
        raise ArgumentError("Beacon payload must fit in 12 bits", payload=payload)

    return struct.pack(">H", (service_id << 12) | payload)


def generate_linking_manufacturer_data(version: int, vendor_id: int, individual_number: int,
                                       beacon_data: Iterable[Tuple[int, int]] = (),
                                       company_id: int = LINKING_COMPANY_ID) -> bytes:
    """Build the manufacturer specific data of a Linking advertisement.

    Args:
        version: 4-bit format version.
        vendor_id: 8-bit vendor identifier.
        individual_number: 20-bit device serial number.
        beacon_data: (service_id, payload) pairs to append as beacon chunks.
        company_id: The bluetooth company id to put in front.

    Returns:
        The manufacturer data including the 2 byte company id.
    """

    if not 0 <= company_id <= 0xFFFF:
        raise ArgumentError("Company id must fit in 16 bits", company_id=company_id)

    if not 0 <= version <= 0xF:
        raise ArgumentError("Version must fit in 4 bits", version=version)

    if not 0 <= vendor_id <= 0xFF:
        raise ArgumentError("Vendor id must fit in 8 bits", vendor_id=vendor_id)

    if not 0 <= individual_number < (1 << 20):
        raise ArgumentError("Individual number must fit in 20 bits", individual_number=individual_number)

    packed_id = (version << 28) | (vendor_id << 20) | individual_number
    header = struct.pack("<H", company_id) + struct.pack(">L", packed_id)

    return header + b''.join(build_beacon_chunk(service_id, payload) for service_id, payload in beacon_data)


def generate_linking_advertisement(manufacturer_data: bytes, local_name: Optional[str] = None,
                                   tx_power: Optional[int] = None) -> bytes:
    """Wrap Linking manufacturer data into a complete advertisement packet.

    The packet contains a flags element, the optional complete local name
    and TX power level elements and finally the manufacturer data.
    """

    flags = GAPAdFlags.LE_GENERAL_DISC_MODE | GAPAdFlags.BR_EDR_NOT_SUPPORTED
    packet = _ad_element(AdElementType.FLAGS, bytes([flags]))

    if local_name is not None:
        packet += _ad_element(AdElementType.COMPLETE_LOCAL_NAME, local_name.encode('utf-8'))

    if tx_power is not None:
        if not -128 <= tx_power <= 127:
            raise ArgumentError("TX power must fit in a signed byte", tx_power=tx_power)

        packet += _ad_element(AdElementType.TX_POWER_LEVEL, struct.pack("<b", tx_power))

    packet += _ad_element(AdElementType.MANUFACTURER_DATA, manufacturer_data)

    if len(packet) > _MAX_ADVERTISEMENT_LENGTH:
        raise ArgumentError("Advertisement does not fit in a single packet", length=len(packet),
                            max_length=_MAX_ADVERTISEMENT_LENGTH)

    return packet


def _ad_element(ad_type, contents):
    return bytes([len(contents) + 1, ad_type]) + contents
