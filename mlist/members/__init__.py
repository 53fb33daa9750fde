"""
Membership management module.

Provides the list context binding and the member lifecycle service:
- List ID validation and resource path derivation
- Member key derivation and status resolution
- Add, update, unsubscribe, soft and hard delete
"""

from .list_context import ListContext
from .service import MembershipService
from .types import MemberRecord, ListIdValidation
from .exceptions import MembershipError, InvalidListIdError, ListNotBoundError

__all__ = [
    'ListContext',
    'MembershipService',
    'MemberRecord',
    'ListIdValidation',
    'MembershipError',
    'InvalidListIdError',
    'ListNotBoundError'
]
