"""Immutable records passed into and returned from the Linking advertisement parser."""

from collections import namedtuple
from types import MappingProxyType
from typing import Optional
from ...interface import BLEAdvertisement


_RawAdvertisementBase = namedtuple('_RawAdvertisementBase', ['manufacturer_data', 'identifier', 'address',
                                                             'local_name', 'service_uuids', 'tx_power_level',
                                                             'rssi'])


class RawAdvertisement(_RawAdvertisementBase):
    """Everything the scanning layer knows about one received advertisement.

    Args:
        manufacturer_data (bytes): The complete manufacturer specific data
            element, starting with the little-endian 16-bit company id.
        identifier (str): An opaque identifier for the sending peripheral.
        address (str): The sender's bluetooth address.
        local_name (str): The advertised local name, if any.
        service_uuids (tuple): The advertised service uuids.
        tx_power_level (int): The advertised transmit power in dBm, if any.
        rssi (int): The received signal strength in dBm.
    """

    __slots__ = ()

    def __new__(cls, manufacturer_data, identifier=None, address=None, local_name=None, service_uuids=(),
                tx_power_level=None, rssi=None):
        return super(RawAdvertisement, cls).__new__(cls, manufacturer_data, identifier, address, local_name,
                                                    tuple(service_uuids), tx_power_level, rssi)

    @classmethod
    def FromBLEAdvertisement(cls, advert: BLEAdvertisement, identifier: Optional[str] = None):
        """Collect the fields of a received BLEAdvertisement.

        Args:
            advert: The advertisement as received by the scanner.
            identifier: An optional peripheral identifier, defaults to the
                sender's address.

        Returns:
            RawAdvertisement: The extracted advertisement.  Its
            manufacturer_data is None if the packet had none.
        """

        if identifier is None:
            identifier = advert.sender

        services = tuple(sorted(advert.services, key=str))

        return cls(advert.raw_manufacturer_data(), identifier, advert.sender, advert.local_name, services,
                   advert.tx_power, advert.rssi)


# Python attribute names of beacon values and their names in asdict() output
_VALUE_KEYS = {
    'temperature': 'temperature',
    'humidity': 'humidity',
    'pressure': 'pressure',
    'charge_required': 'chargeRequired',
    'charge_level': 'chargeLevel',
    'button_id': 'buttonId',
    'button_name': 'buttonName',
    'opening_status': 'openingStatus',
    'opening_count': 'openingCount',
    'human_detection_response': 'humanDetectionResponse',
    'human_detection_count': 'humanDetectionCount',
    'move_response': 'moveResponse',
    'move_count': 'moveCount'
}


_BeaconServiceRecordBase = namedtuple('_BeaconServiceRecordBase', ['service_id', 'name', 'fields'])


class BeaconServiceRecord(_BeaconServiceRecordBase):
    """One decoded 2-byte beacon service chunk.

    The record is tagged by ``service_id``.  Known services carry a
    ``name`` and their decoded values, which are available as attributes
    (``record.temperature``) or by key (``record['temperature']``).
    Unknown service ids produce a record with only the id.

    Args:
        service_id (int): The 4-bit service id.
        name (str): The service name, None for unknown services.
        fields (tuple): (key, value) pairs of the decoded values, in order.
    """

    __slots__ = ()

    def __new__(cls, service_id, name=None, fields=()):
        fields = tuple((key, value) for key, value in fields)

        unknown = set(key for key, _value in fields) - set(_VALUE_KEYS)
        if unknown:
            raise TypeError("Unknown beacon service values: %s" % ", ".join(sorted(unknown)))

        return super(BeaconServiceRecord, cls).__new__(cls, service_id, name, fields)

    @property
    def values(self):
        """Read-only mapping of the decoded values of this service."""

        return MappingProxyType(dict(self.fields))

    def __getattr__(self, attr):
        if attr.startswith('_'):
            raise AttributeError(attr)

        for key, value in self.fields:
            if key == attr:
                return value

        raise AttributeError(attr)

    def __getitem__(self, key):
        if isinstance(key, str):
            return self.values[key]

        return super(BeaconServiceRecord, self).__getitem__(key)

    def get(self, key, default=None):
        return self.values.get(key, default)

    def __repr__(self):
        values = "".join(", %s=%r" % item for item in self.fields)
        return "BeaconServiceRecord(service_id=%d, name=%r%s)" % (self.service_id, self.name, values)

    def asdict(self):
        """Encode this record into a dictionary using the interoperable key names.

        Returns:
            dict: serviceId, name (only for known services) and the service's values.
        """

        out = {}
        if self.name is not None:
            out['name'] = self.name

        for key, value in self.fields:
            out[_VALUE_KEYS[key]] = value

        out['serviceId'] = self.service_id
        return out


_ParsedAdvertisementBase = namedtuple('_ParsedAdvertisementBase', ['identifier', 'address', 'local_name',
                                                                   'service_uuids', 'tx_power_level', 'rssi',
                                                                   'distance', 'company_id', 'company_name',
                                                                   'version', 'vendor_id', 'individual_number',
                                                                   'beacon_data_list'])


class ParsedAdvertisement(_ParsedAdvertisementBase):
    """The decoded contents of one Linking advertisement.

    The identity fields are copied from the RawAdvertisement.  ``distance``
    is an estimate in meters, ``beacon_data_list`` is a tuple of
    BeaconServiceRecord in the order they appeared in the packet.
    """

    __slots__ = ()

    def asdict(self):
        """Encode this advertisement into a dictionary using the interoperable key names."""

        service_uuids = self.service_uuids
        if service_uuids is not None:
            service_uuids = [str(x) for x in service_uuids]

        return {
            'id': self.identifier,
            'address': self.address,
            'localName': self.local_name,
            'serviceUuids': service_uuids,
            'txPowerLevel': self.tx_power_level,
            'rssi': self.rssi,
            'distance': self.distance,
            'companyId': self.company_id,
            'companyName': self.company_name,
            'version': self.version,
            'vendorId': self.vendor_id,
            'individualNumber': self.individual_number,
            'beaconDataList': [x.asdict() for x in self.beacon_data_list]
        }
