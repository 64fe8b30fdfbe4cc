"""Decoding of Linking beacon advertisements.

Linking devices are small bluetooth sensors and buttons that broadcast
their readings inside manufacturer specific advertisement data.  This
package turns such advertisements into typed records:

    >>> from linking_ble import parse_linking_manufacturer_data
    >>> parsed = parse_linking_manufacturer_data(data, rssi=-60, tx_power_level=-59)
    >>> [x.name for x in parsed.beacon_data_list]

The generic bluetooth pieces (advertisement element parsing, scan delegate
interface) live in ``linking_ble.interface`` and ``linking_ble.defines`` and
know nothing about the Linking format, which is isolated in
``linking_ble.linking``.
"""

from .__version__ import __version__
from .exceptions import LinkingError, DataError, MalformedAdvertisement
from .interface import BLEAdvertisement
from .linking.advertisements import (RawAdvertisement, ParsedAdvertisement, BeaconServiceRecord,
                                     parse_linking_advertisement, parse_linking_manufacturer_data,
                                     parse_beacon_service_data)
from .linking import LinkingScanDelegate

__all__ = ['__version__', 'LinkingError', 'DataError', 'MalformedAdvertisement', 'BLEAdvertisement',
           'RawAdvertisement', 'ParsedAdvertisement', 'BeaconServiceRecord', 'parse_linking_advertisement',
           'parse_linking_manufacturer_data', 'parse_beacon_service_data', 'LinkingScanDelegate']
