"""Scan delegate that decodes Linking advertisements as they are received."""

import logging
from typing import Callable
from ..exceptions import MalformedAdvertisement
from ..interface import BLEAdvertisement
from .advertisements import RawAdvertisement, ParsedAdvertisement, parse_linking_advertisement
from .constants import LINKING_COMPANY_ID


class LinkingScanDelegate:
    """Decode every Linking advertisement seen during a scan.

    This object can be handed to a bluetooth scanner as its BLEScanDelegate.
    Each advertisement is decoded on its own and the result passed to
    ``callback``.  Advertisements that cannot be decoded are logged and
    dropped.

    Args:
        callback: Called with a ParsedAdvertisement for every decoded packet.
        linking_only: Only decode advertisements whose company id is the
            Linking (NTT docomo) id.  If False, any advertisement with
            manufacturer data is decoded using the Linking layout.
    """

    def __init__(self, callback: Callable[[ParsedAdvertisement], None], linking_only: bool = True):
        self._callback = callback
        self._linking_only = linking_only
        self._logger = logging.getLogger(__name__)

    def scan_started(self):
        self._logger.debug("Scan started, decoding Linking advertisements")

    def scan_stopped(self):
        self._logger.debug("Scan stopped")

    def on_advertisement(self, advert: BLEAdvertisement):
        raw = RawAdvertisement.FromBLEAdvertisement(advert)

        if raw.manufacturer_data is None:
            self._logger.debug("Ignoring advertisement from %s without manufacturer data", advert.sender)
            return

        if self._linking_only and advert.manufacturer_data(LINKING_COMPANY_ID) is None:
            self._logger.debug("Ignoring non-Linking advertisement from %s", advert.sender)
            return

        try:
            parsed = parse_linking_advertisement(raw)
        except MalformedAdvertisement as err:
            self._logger.warning("Dropping malformed advertisement from %s: %s", advert.sender, err.format())
            return

        self._callback(parsed)
