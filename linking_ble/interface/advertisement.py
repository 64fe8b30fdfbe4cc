"""Generic wrapper around a Bluetooth advertisement including optional scan response data.

All bluetooth advertisements are a list of length prefixed, typed ad
elements.  ``BLEAdvertisement`` splits them apart and decodes the handful of
element types that a beacon decoder needs: service lists, local name, TX
power level and manufacturer specific data.
"""

import struct
import uuid
from typing import Optional, Set, Dict
from ..defines import AdElementType, expand_uuid


class BLEAdvertisement:
    """Data class for a Bluetooth 4.0+ advertisement packet.

    If the advertisement was followed by a scan response packet, both are
    stored together and their ad elements are merged.

    Args:
        sender: The MAC address of the device sending this advertisement
        kind: The BLE defined advertisement packet type
        rssi: The RSSI signal strength of the received packet in dBm
        advert: The raw advertisement data contents
        scan_response: If there was a scan request performed, the scan response contents.
    """

    def __init__(self, sender: str, kind: int, rssi: Optional[int], advert: bytes,
                 scan_response: Optional[bytes] = None):
        self.sender = sender
        self.rssi = rssi
        self.advertisement = advert
        self.scan_response = scan_response
        self.kind = kind
        self._elements = None  # type: Optional[Dict[int, bytes]]
        self._services = None  # type: Optional[Set[uuid.UUID]]

    def __len__(self):
        length = len(self.advertisement)
        if self.scan_response is not None:
            length += len(self.scan_response)

        return length

    @property
    def elements(self) -> Dict[int, bytes]:
        """The parsed bluetooth ad elements in the advertisement."""

        if self._elements is None:
            self._elements = {}
            for ad_type, contents in self._iter_elements():
                if ad_type not in self._elements:
                    self._elements[ad_type] = contents
                else:
                    extra_content = _prepare_join(ad_type, contents)
                    if extra_content is not None:
                        self._elements[ad_type] += extra_content

        return self._elements

    @property
    def services(self) -> Set[uuid.UUID]:
        """Return the set of services mentioned in the advertisement."""

        if self._services is None:
            self._services = set(_extract_services(self.elements))

        return self._services

    @property
    def local_name(self) -> Optional[str]:
        """The device's local name, preferring the complete name over the shortened one."""

        name = self.elements.get(AdElementType.COMPLETE_LOCAL_NAME)
        if name is None:
            name = self.elements.get(AdElementType.SHORTENED_LOCAL_NAME)

        if name is None:
            return None

        return name.decode('utf-8', errors='replace')

    @property
    def tx_power(self) -> Optional[int]:
        """The advertised transmit power level in dBm, if the device sent one."""

        data = self.elements.get(AdElementType.TX_POWER_LEVEL)
        if not data:
            return None

        power, = struct.unpack_from("<b", data)
        return power

    def raw_manufacturer_data(self) -> Optional[bytes]:
        """Return the whole manufacturer data element, including its 2 byte company id."""

        return self.elements.get(AdElementType.MANUFACTURER_DATA)

    def manufacturer_data(self, manufacturer: int) -> Optional[bytes]:
        """Fetch the manufacturer data from a specific manufacturer.

        The 2 byte company id is stripped.  If the given manufacturer is not
        present, None is returned.
        """

        manu = self.raw_manufacturer_data()
        if manu is None or len(manu) < 2:
            return None

        manu_id, = struct.unpack_from("<H", manu)
        if manu_id != manufacturer:
            return None

        return manu[2:]

    def _iter_elements(self):
        yield from _iter_elements(self.advertisement)

        if self.scan_response is not None:
            yield from _iter_elements(self.scan_response)


_SERVICE_ELEMENTS = {
    # AD element type: size of each UUID, is it an array?
    AdElementType.INCOMPLETE_UUID_16_LIST: (2, True),
    AdElementType.COMPLETE_UUID_16_LIST: (2, True),
    AdElementType.INCOMPLETE_UUID_32_LIST: (4, True),
    AdElementType.COMPLETE_UUID_32_LIST: (4, True),
    AdElementType.INCOMPLETE_UUID_128_LIST: (16, True),
    AdElementType.COMPLETE_UUID_128_LIST: (16, True),
    AdElementType.SERVICE_DATA_UUID_16: (2, False),
    AdElementType.SERVICE_DATA_UUID_32: (4, False),
    AdElementType.SERVICE_DATA_UUID_128: (16, False)
}


def _extract_services(elements):
    for ad_type, contents in elements.items():
        if ad_type not in _SERVICE_ELEMENTS:
            continue

        size, is_list = _SERVICE_ELEMENTS[ad_type]

        for compressed_service in _iter_chunks(contents, size, is_list):
            yield expand_uuid(compressed_service)


def _iter_chunks(contents, size, allow_many=True):
    """Iterate over fixed size chunks of an array, dropping a short final chunk."""

    for i in range(0, len(contents), size):
        chunk = contents[i:i + size]
        if len(chunk) != size:
            return

        yield chunk

        if not allow_many:
            return


def _iter_elements(data: bytes):
    """Yield (type, contents) for every complete ad element in data.

    A zero length byte ends the list (the rest is padding) and so does an
    element whose declared length runs past the end of the packet.
    """

    i = 0

    while i < len(data):
        length = data[i]
        if length == 0:
            return

        end = i + length + 1
        if end > len(data):
            return

        ad_type = data[i + 1]
        try:
            ad_type = AdElementType(ad_type)
        except ValueError:
            pass

        yield ad_type, data[i + 2:end]

        i = end


# Map of joinable AD types and the prefix discard length for each one
_JOINABLE_AD_TYPES = {
    AdElementType.MANUFACTURER_DATA: 2
}


def _prepare_join(ad_type, contents):
    """Strip redundant information from a repeated ad element before concatenation.

    A second manufacturer data element repeats the company id, which is
    dropped so the payloads can be joined.  Element types that may not be
    repeated are discarded.
    """

    join_size = _JOINABLE_AD_TYPES.get(ad_type)
    if join_size is None:
        return None

    return contents[join_size:]
