"""Tests of splitting raw advertisement packets into ad elements."""

import uuid
import pytest
from typedargs.exceptions import ArgumentError
from linking_ble.defines import AdElementType, expand_uuid
from linking_ble.interface import BLEAdvertisement
from linking_ble.linking import LINKING_COMPANY_ID
from linking_ble.linking.advertisements import (RawAdvertisement, generate_linking_advertisement,
                                                generate_linking_manufacturer_data)

BATTERY_SERVICE = uuid.UUID('0000180f-0000-1000-8000-00805f9b34fb')


def _linking_packet(**kwargs):
    manu = generate_linking_manufacturer_data(1, 0x12, 0x34567, [(4, 0)])
    return manu, generate_linking_advertisement(manu, **kwargs)


def test_generated_packet():
    """Make sure a generated Linking packet has the expected layout."""

    manu, packet = _linking_packet(local_name='Tukeru', tx_power=-59)

    assert manu == b'\xe2\x02\x11\x23\x45\x67\x40\x00'
    assert packet == b'\x02\x01\x06' + b'\x07\x09Tukeru' + b'\x02\x0a\xc5' + b'\x09\xff' + manu


def test_element_fields():
    """Make sure the local name, tx power and manufacturer data are extracted."""

    manu, packet = _linking_packet(local_name='Tukeru', tx_power=-59)
    advert = BLEAdvertisement('00:11:22:33:44:55', 0, -55, packet)

    assert advert.local_name == 'Tukeru'
    assert advert.tx_power == -59
    assert advert.raw_manufacturer_data() == manu
    assert advert.manufacturer_data(LINKING_COMPANY_ID) == manu[2:]
    assert advert.manufacturer_data(0x004C) is None
    assert len(advert) == len(packet)


def test_missing_fields():
    """Optional elements that are not present come back as None."""

    _manu, packet = _linking_packet()
    advert = BLEAdvertisement('00:11:22:33:44:55', 0, -55, packet)

    assert advert.local_name is None
    assert advert.tx_power is None


def test_scan_response_merged():
    """Elements in the scan response are visible together with the advertisement."""

    manu, packet = _linking_packet()
    scan_response = b'\x05\x08Tuke'
    advert = BLEAdvertisement('00:11:22:33:44:55', 0, -55, packet, scan_response)

    assert advert.local_name == 'Tuke'
    assert advert.raw_manufacturer_data() == manu


def test_truncated_element():
    """An element running past the end of the packet stops parsing."""

    advert = BLEAdvertisement('00:11:22:33:44:55', 0, -55, b'\x02\x01\x06\x05\xff\xe2\x02')
    assert list(advert.elements) == [AdElementType.FLAGS]
    assert advert.raw_manufacturer_data() is None


def test_services():
    """16-bit service lists are expanded to full uuids."""

    advert = BLEAdvertisement('00:11:22:33:44:55', 0, -55, b'\x03\x03\x0f\x18')

    assert advert.services == {BATTERY_SERVICE}


def test_raw_from_ble_advertisement():
    """Make sure a RawAdvertisement collects everything from a received packet."""

    manu, packet = _linking_packet(local_name='Tukeru', tx_power=-59)
    advert = BLEAdvertisement('00:11:22:33:44:55', 0, -65, packet + b'\x03\x03\x0f\x18')

    raw = RawAdvertisement.FromBLEAdvertisement(advert)
    assert raw.manufacturer_data == manu
    assert raw.identifier == '00:11:22:33:44:55'
    assert raw.address == '00:11:22:33:44:55'
    assert raw.local_name == 'Tukeru'
    assert raw.service_uuids == (BATTERY_SERVICE,)
    assert raw.tx_power_level == -59
    assert raw.rssi == -65

    raw = RawAdvertisement.FromBLEAdvertisement(advert, identifier='dev1')
    assert raw.identifier == 'dev1'


def test_uuid_expansion():
    """Make sure 2, 4 and 16 byte uuids expand to full uuids."""

    assert expand_uuid(b'\x0f\x18') == BATTERY_SERVICE
    assert expand_uuid(uint16=0x180F) == BATTERY_SERVICE
    assert expand_uuid(b'\x78\x56\x34\x12') == uuid.UUID('12345678-0000-1000-8000-00805f9b34fb')

    full = uuid.UUID('b3b36901-50d3-4044-808d-50835b13a6cd')
    assert expand_uuid(bytes(reversed(full.bytes))) == full

    with pytest.raises(ValueError):
        expand_uuid(b'\x01\x02\x03')

    with pytest.raises(ValueError):
        expand_uuid()


def test_generation_limits():
    """Out of range fields are rejected."""

    with pytest.raises(ArgumentError):
        generate_linking_manufacturer_data(0x10, 0, 0)

    with pytest.raises(ArgumentError):
        generate_linking_manufacturer_data(0, 0x100, 0)

    with pytest.raises(ArgumentError):
        generate_linking_manufacturer_data(0, 0, 1 << 20)

    with pytest.raises(ArgumentError):
        generate_linking_manufacturer_data(0, 0, 0, [(16, 0)])

    with pytest.raises(ArgumentError):
        generate_linking_manufacturer_data(0, 0, 0, [(1, 0x1000)])

    with pytest.raises(ArgumentError):
        generate_linking_advertisement(bytes(30))
