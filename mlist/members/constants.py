"""
Constants shared across membership management.

Status enumeration, list ID validation pattern and resource path formats
used by the list context and the membership service.
"""

import re
from typing import Pattern, Tuple

# Member statuses recognised by the provider
STATUS_SUBSCRIBED = 'subscribed'
STATUS_UNSUBSCRIBED = 'unsubscribed'
STATUS_PENDING = 'pending'
STATUS_CLEANED = 'cleaned'

KNOWN_STATUSES: Tuple[str, ...] = (
    STATUS_SUBSCRIBED,
    STATUS_UNSUBSCRIBED,
    STATUS_PENDING,
    STATUS_CLEANED,
)

# List IDs are either exactly 10 characters or lowercase alphanumerics only
LIST_ID_LENGTH = 10
LIST_ID_PATTERN: Pattern = re.compile(r'[a-z0-9]+')

# Resource paths, relative to the API root
MEMBERS_PATH_FORMAT = 'lists/{list_id}/members'
MEMBER_PATH_FORMAT = 'lists/{list_id}/members/{member_key}'

# Merge field names
MERGE_FIRST_NAME = 'FNAME'
MERGE_LAST_NAME = 'LNAME'
