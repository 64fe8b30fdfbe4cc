"""Interface of an object that is told about every advertisement a scanner receives."""

from typing_extensions import Protocol
from .advertisement import BLEAdvertisement


class BLEScanDelegate(Protocol):
    """Callbacks invoked by a bluetooth scanner while it is scanning."""

    def scan_started(self):
        pass

    def scan_stopped(self):
        pass

    def on_advertisement(self, advert: BLEAdvertisement):
        pass

