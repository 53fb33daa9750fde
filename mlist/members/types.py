"""
Type-safe dataclasses for membership results.

The provider speaks JSON; these immutable wrappers give the service and its
callers named fields while keeping the full payload available.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from .constants import KNOWN_STATUSES, MERGE_FIRST_NAME, MERGE_LAST_NAME


@dataclass(frozen=True)
class ListIdValidation:
    """Result of validating a list ID without raising."""

    is_valid: bool
    list_id: str
    error: Optional[str] = None

    def has_error(self) -> bool:
        """Check if validation produced an error."""
        return self.error is not None


@dataclass(frozen=True)
class MemberRecord:
    """A list member as reported by the provider."""

    # dict fields make records unhashable
    __hash__ = None

    email_address: str
    status: Any = None
    merge_fields: Dict[str, Any] = field(default_factory=dict)
    id: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def first_name(self) -> str:
        return self.merge_fields.get(MERGE_FIRST_NAME, '')

    @property
    def last_name(self) -> str:
        return self.merge_fields.get(MERGE_LAST_NAME, '')

    def has_known_status(self) -> bool:
        """Check if status is one of the four recognised labels."""
        return isinstance(self.status, str) and self.status in KNOWN_STATUSES

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the provider's JSON shape."""
        result = dict(self.raw)
        result.update({
            'email_address': self.email_address,
            'status': self.status,
            'merge_fields': dict(self.merge_fields),
        })
        if self.id is not None:
            result['id'] = self.id
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MemberRecord':
        """Create from a provider response body."""
        return cls(
            email_address=data.get('email_address', ''),
            status=data.get('status'),
            merge_fields=dict(data.get('merge_fields') or {}),
            id=data.get('id'),
            raw=dict(data)
        )
