"""All Linking specific definitions go in here.

This subpackage isolates the Linking beacon format so that the rest of the
package stays generic to bluetooth advertisements.
"""

from .constants import LINKING_COMPANY_ID, ServiceId, company_name, button_name
from .ieee754 import decode_float
from .scan_delegate import LinkingScanDelegate

__all__ = ['LINKING_COMPANY_ID', 'ServiceId', 'company_name', 'button_name', 'decode_float',
           'LinkingScanDelegate']
