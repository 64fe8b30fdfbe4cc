"""Constant enumerations and values used in BLE advertisements."""

from enum import IntEnum


class AdvertisementType:
    """Defined types of BLE advertisement packets."""

    CONNECTABLE = 0x00
    NONCONNECTABLE = 0x02
    SCAN_RESPONSE = 0x04
    SCANNABLE = 0x06


class AdElementType(IntEnum):
    """Types of data elements that can be found in an advertisement.

    Only the element types that a beacon decoder needs to look at are
    listed.  Unknown element types are passed through as plain integers.
    """

    FLAGS = 0x01
    INCOMPLETE_UUID_16_LIST = 0x02
    COMPLETE_UUID_16_LIST = 0x03
    INCOMPLETE_UUID_32_LIST = 0x04
    COMPLETE_UUID_32_LIST = 0x05
    INCOMPLETE_UUID_128_LIST = 0x06
    COMPLETE_UUID_128_LIST = 0x07
    SHORTENED_LOCAL_NAME = 0x08
    COMPLETE_LOCAL_NAME = 0x09
    TX_POWER_LEVEL = 0x0A

    SERVICE_DATA_UUID_16 = 0x16
    SERVICE_DATA_UUID_32 = 0x20
    SERVICE_DATA_UUID_128 = 0x21

    MANUFACTURER_DATA = 0xFF


class GAPAdFlags(IntEnum):
    """Bits of the FLAGS ad element."""

    LE_LIMITED_DISC_MODE = 0x01
    LE_GENERAL_DISC_MODE = 0x02
    BR_EDR_NOT_SUPPORTED = 0x04
    LE_BR_EDR_CONTROLLER = 0x08
    LE_BR_EDR_HOST = 0x10
