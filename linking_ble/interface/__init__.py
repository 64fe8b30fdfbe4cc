"""Generic types wrapping what a bluetooth scanner hands to its clients.

Nothing in this subpackage is specific to Linking devices; the scanning
layer builds ``BLEAdvertisement`` objects and passes them to a
``BLEScanDelegate``.
"""

from .advertisement import BLEAdvertisement
from .scan_delegate import BLEScanDelegate

__all__ = ['BLEAdvertisement', 'BLEScanDelegate']
