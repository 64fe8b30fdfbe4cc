"""Tests of decoding individual 2 byte beacon service chunks."""

import pytest
from typedargs.exceptions import ArgumentError
from linking_ble.linking import ServiceId, button_name
from linking_ble.linking.advertisements import parse_beacon_service_data, build_beacon_chunk


def test_general():
    """The general service has no values."""

    record = parse_beacon_service_data(b'\x01\x23')
    assert record.service_id == ServiceId.GENERAL
    assert record.name == 'General'
    assert dict(record.values) == {}
    assert record.asdict() == {'name': 'General', 'serviceId': 0}


def test_sensor_floats():
    """Temperature, humidity and pressure are packed floats."""

    temp = parse_beacon_service_data(b'\x15\xc8')
    assert temp.service_id == 1
    assert temp.name == 'Temperature'
    assert temp.temperature == 25.0

    cold = parse_beacon_service_data(b'\x1d\xc8')
    assert cold['temperature'] == -25.0

    humidity = parse_beacon_service_data(b'\x2c\x90')
    assert humidity.name == 'Humidity'
    assert humidity.humidity == 50.0

    pressure = parse_beacon_service_data(b'\x3c\x7a')
    assert pressure.name == 'Air pressure'
    assert pressure.pressure == 1000.0


def test_battery():
    """Battery level is in tenths of a percent and capped at 100."""

    empty = parse_beacon_service_data(b'\x40\x00')
    assert empty.service_id == 4
    assert empty.name == 'Remaining battery power'
    assert empty.charge_required is False
    assert empty.charge_level == 0

    low = parse_beacon_service_data(build_beacon_chunk(4, 0x800 | 500))
    assert low.charge_required is True
    assert low.charge_level == 50.0

    full = parse_beacon_service_data(b'\x47\xff')
    assert full.charge_required is False
    assert full.charge_level == 100.0

    assert low.asdict() == {'name': 'Remaining battery power', 'chargeRequired': True, 'chargeLevel': 50.0,
                            'serviceId': 4}


def test_button():
    """Pressed buttons are looked up by code, unknown codes have an empty name."""

    click = parse_beacon_service_data(build_beacon_chunk(5, 0x02))
    assert click.name == 'Pressed button'
    assert click.button_id == 2
    assert click.button_name == 'SingleClick'

    unknown = parse_beacon_service_data(build_beacon_chunk(5, 0xFF))
    assert unknown.button_id == 0xFF
    assert unknown.button_name == ''
    assert unknown.asdict()['buttonName'] == ''


def test_button_table():
    """Make sure the whole button table is assigned."""

    assert button_name(0x00) == 'Power'
    assert button_name(0x04) == 'DoubleClick'
    assert button_name(0x09) == 'LongClickRelease'
    assert button_name(0x0B) == 'ReWind'
    assert button_name(0x14) == 'Stop'
    assert button_name(0x15) is None

    names = [button_name(x) for x in range(0x15)]
    assert None not in names
    assert len(set(names)) == 21


def test_flag_and_count_services():
    """Opening, human detection and vibration share a flag + counter layout."""

    opening = parse_beacon_service_data(b'\x68\x03')
    assert opening.name == 'Opening/closing'
    assert opening.opening_status is True
    assert opening.opening_count == 3

    human = parse_beacon_service_data(b'\x70\x05')
    assert human.name == 'Human detection'
    assert human.human_detection_response is False
    assert human.human_detection_count == 5

    vibration = parse_beacon_service_data(b'\x8f\xff')
    assert vibration.name == 'Vibration'
    assert vibration.move_response is True
    assert vibration.move_count == 0x7FF
    assert vibration.asdict() == {'name': 'Vibration', 'moveResponse': True, 'moveCount': 2047, 'serviceId': 8}


@pytest.mark.parametrize("service_id", range(9, 16))
def test_unknown_services(service_id):
    """Reserved service ids decode to a record with only the id."""

    record = parse_beacon_service_data(build_beacon_chunk(service_id, 0xABC))
    assert record.service_id == service_id
    assert record.name is None
    assert record.asdict() == {'serviceId': service_id}

    with pytest.raises(AttributeError):
        record.temperature


def test_records_are_immutable():
    """Decoded records cannot be modified."""

    record = parse_beacon_service_data(b'\x15\xc8')

    with pytest.raises(AttributeError):
        record.temperature = 10.0

    with pytest.raises(TypeError):
        record.values['temperature'] = 10.0


def test_invalid_chunk():
    """Chunks must be exactly 2 bytes."""

    with pytest.raises(ArgumentError):
        parse_beacon_service_data(b'\x15')

    with pytest.raises(ArgumentError):
        parse_beacon_service_data(b'\x15\xc8\x00')


def test_record_fields():
    """Decoded values are kept in order and reachable by key."""

    record = parse_beacon_service_data(build_beacon_chunk(4, 0x800 | 500))

    assert record.fields == (('charge_required', True), ('charge_level', 50.0))
    assert record['charge_level'] == 50.0
    assert record.get('humidity') is None
    assert record.get('charge_required') is True
