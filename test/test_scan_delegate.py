"""Tests of decoding advertisements as a scanner reports them."""

import logging
from linking_ble.interface import BLEAdvertisement
from linking_ble.linking import LinkingScanDelegate
from linking_ble.linking.advertisements import generate_linking_advertisement, generate_linking_manufacturer_data


def _advert(manu, rssi=-59):
    return BLEAdvertisement('00:11:22:33:44:55', 0, rssi, generate_linking_advertisement(manu, tx_power=-59))


def test_linking_advertisement():
    """Linking advertisements are decoded and passed to the callback."""

    seen = []
    delegate = LinkingScanDelegate(seen.append)

    delegate.scan_started()
    delegate.on_advertisement(_advert(generate_linking_manufacturer_data(1, 0x12, 0x34567, [(5, 0x02)])))
    delegate.scan_stopped()

    assert len(seen) == 1
    parsed = seen[0]
    assert parsed.company_name == 'NTT docomo'
    assert parsed.address == '00:11:22:33:44:55'
    assert parsed.distance == 1.0
    assert parsed.beacon_data_list[0].button_name == 'SingleClick'


def test_other_companies():
    """Other manufacturers are skipped unless linking_only is turned off."""

    manu = generate_linking_manufacturer_data(1, 0x12, 0x34567, company_id=0x004C)

    seen = []
    LinkingScanDelegate(seen.append).on_advertisement(_advert(manu))
    assert seen == []

    LinkingScanDelegate(seen.append, linking_only=False).on_advertisement(_advert(manu))
    assert len(seen) == 1
    assert seen[0].company_name == 'Unknown'


def test_no_manufacturer_data():
    """Advertisements without manufacturer data are ignored."""

    seen = []
    delegate = LinkingScanDelegate(seen.append, linking_only=False)
    delegate.on_advertisement(BLEAdvertisement('00:11:22:33:44:55', 0, -59, b'\x02\x01\x06'))

    assert seen == []


def test_malformed_dropped(caplog):
    """Malformed advertisements are logged and dropped."""

    seen = []
    delegate = LinkingScanDelegate(seen.append)

    with caplog.at_level(logging.WARNING):
        delegate.on_advertisement(_advert(b'\xe2\x02\x11'))

    assert seen == []
    assert "Dropping malformed advertisement" in caplog.text
