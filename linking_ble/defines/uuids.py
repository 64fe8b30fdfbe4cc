"""Expansion of 2, 4 and 16 byte bluetooth UUIDs into full 128-bit UUIDs.

All UUIDs inside advertisement packets are sent least significant byte
first, so a 128-bit UUID is the reverse of ``uuid.UUID.bytes`` and a 16-bit
alias such as ``0x180F`` appears as ``b'\\x0f\\x18'``.
"""

import binascii
import uuid
from typing import Optional


# 00000000-0000-1000-8000-00805f9b34fb
_BLUETOOTH_BASE = uuid.UUID('00000000-0000-1000-8000-00805f9b34fb')
_ALIAS_SHIFT = 96
_BASE_MASK = (1 << _ALIAS_SHIFT) - 1


def expand_uuid(data: Optional[bytes] = None, uint16: Optional[int] = None) -> uuid.UUID:
    """Turn a 2, 4 or 16 byte little-endian UUID into a ``uuid.UUID``.

    Short UUIDs are aliases for the bluetooth base UUID with the top 32 bits
    replaced.
    """

    if data is None:
        if uint16 is None:
            raise ValueError("One of data or uint16 must be passed")

        data = uint16.to_bytes(2, 'little')

    if len(data) not in (2, 4, 16):
        raise ValueError("Invalid uuid length %d, must be 2, 4 or 16. Data=%s" %
                         (len(data), binascii.hexlify(data).decode('utf-8')))

    if len(data) == 16:
        return uuid.UUID(bytes=bytes(reversed(data)))

    alias = int.from_bytes(data, 'little')
    return uuid.UUID(int=(alias << _ALIAS_SHIFT) | _BLUETOOTH_BASE.int)

