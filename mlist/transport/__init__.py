"""
Transport Module

REST transports the membership service talks through.
"""

from .base_transport import RestTransport, TransportError
from .http_transport import MailchimpTransport

__all__ = ['RestTransport', 'TransportError', 'MailchimpTransport']
