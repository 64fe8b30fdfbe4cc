"""Exceptions raised while decoding Linking advertisements.

All exceptions follow the typedargs convention of a message plus keyword
parameters that describe what went wrong, so ``err.format()`` prints both.
"""

from typedargs.exceptions import KeyValueException
from typedargs.exceptions import ArgumentError


class LinkingError(KeyValueException):
    """Base class for all errors raised by this package."""


class DataError(LinkingError):
    """The data passed in to be decoded was invalid.

    The parameters passed with this exception provide more detail on which
    data was wrong and how.
    """


class MalformedAdvertisement(DataError):
    """The manufacturer data was too short to contain the Linking header.

    The ``expected`` and ``length`` parameters give the minimum required
    length and the length that was received.
    """


__all__ = ['LinkingError', 'DataError', 'MalformedAdvertisement', 'ArgumentError']
