"""
List context binding.

Holds the audience list ID every member operation is scoped to and
derives the resource paths from it.
"""

from typing import Optional

from .constants import (
    LIST_ID_LENGTH, LIST_ID_PATTERN, MEMBERS_PATH_FORMAT, MEMBER_PATH_FORMAT
)
from .exceptions import InvalidListIdError, ListNotBoundError
from .types import ListIdValidation


class ListContext:
    """Bound list ID and the member resource paths derived from it."""

    def __init__(self, list_id: Optional[str] = None):
        self._list_id = ''
        self._resource_path = ''
        if list_id is not None:
            self.bind(list_id)

    @staticmethod
    def validate(list_id: str) -> ListIdValidation:
        """
        Validate a list ID without raising.

        A list ID is accepted when it is exactly 10 characters long, or
        when it consists only of lowercase letters and digits.

        Args:
            list_id: Candidate list ID

        Returns:
            ListIdValidation describing the outcome
        """
        if not isinstance(list_id, str):
            return ListIdValidation(
                is_valid=False,
                list_id=str(list_id),
                error='List ID must be a string'
            )

        if len(list_id) == LIST_ID_LENGTH or LIST_ID_PATTERN.fullmatch(list_id):
            return ListIdValidation(is_valid=True, list_id=list_id)

        return ListIdValidation(
            is_valid=False,
            list_id=list_id,
            error=f'List ID must be {LIST_ID_LENGTH} characters or lowercase alphanumeric'
        )

    def bind(self, list_id: str) -> 'ListContext':
        """
        Bind this context to a list.

        Args:
            list_id: ID of the Mailchimp list

        Returns:
            self, for chaining

        Raises:
            InvalidListIdError: If the ID fails validation
        """
        result = self.validate(list_id)
        if not result.is_valid:
            raise InvalidListIdError(f"Invalid list ID: {result.error}", list_id=result.list_id)

        self._list_id = list_id
        self._resource_path = MEMBERS_PATH_FORMAT.format(list_id=list_id)
        return self

    @property
    def list_id(self) -> str:
        return self._list_id

    @property
    def is_bound(self) -> bool:
        return bool(self._list_id)

    def require_bound(self, operation: Optional[str] = None) -> None:
        """Raise ListNotBoundError unless a list ID is bound."""
        if not self.is_bound:
            raise ListNotBoundError(operation=operation)

    @property
    def resource_path(self) -> str:
        """Member collection path, e.g. ``lists/{id}/members``."""
        self.require_bound('resource_path')
        return self._resource_path

    def member_path(self, member_key: str) -> str:
        """Path of a single member resource."""
        self.require_bound('member_path')
        return MEMBER_PATH_FORMAT.format(list_id=self._list_id, member_key=member_key)

    def __repr__(self):
        return f"<ListContext(list_id='{self._list_id}')>"
