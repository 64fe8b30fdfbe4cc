"""Parsing and generation of Linking beacon advertisements.

Linking devices broadcast a manufacturer specific data element with company
id 0x02E2.  After the company id come 4 bytes identifying the device:

 - version (4 bits)
 - vendor id (8 bits)
 - individual number (20 bits)

and then any number of 2 byte beacon service chunks.  Each chunk carries a
4-bit service id followed by a 12-bit payload whose meaning depends on the
service: a packed float for temperature, humidity and air pressure, a flag
plus counter for battery and the event sensors, or a button code.
"""

from .records import RawAdvertisement, ParsedAdvertisement, BeaconServiceRecord
from .parsing import (parse_linking_advertisement, parse_linking_manufacturer_data, parse_beacon_service_data,
                      estimate_distance)
from .generation import build_beacon_chunk, generate_linking_manufacturer_data, generate_linking_advertisement

__all__ = ['RawAdvertisement', 'ParsedAdvertisement', 'BeaconServiceRecord', 'parse_linking_advertisement',
           'parse_linking_manufacturer_data', 'parse_beacon_service_data', 'estimate_distance',
           'build_beacon_chunk', 'generate_linking_manufacturer_data', 'generate_linking_advertisement']
