"""Generic bluetooth constants and helpers that know nothing about Linking devices."""

from .constants import AdElementType, AdvertisementType, GAPAdFlags
from .uuids import expand_uuid

__all__ = ['AdElementType', 'AdvertisementType', 'GAPAdFlags', 'expand_uuid']
