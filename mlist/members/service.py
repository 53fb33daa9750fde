"""
Membership Service

Member lifecycle operations against a bound list:
- Member key derivation (subscriber hash)
- Lookup and status resolution against the known status set
- Creation with merge-field payloads
- Field-level fallback updates reconciled with remote state
- Soft (cleaned) and hard (permanent) deletion

NotFound is a routine outcome and is returned as None, never raised.
Transport failures propagate to the caller unchanged.
"""

import hashlib
from typing import Dict, Any, Optional

from mlist.transport.base_transport import RestTransport
from .constants import (
    STATUS_SUBSCRIBED, STATUS_UNSUBSCRIBED, STATUS_CLEANED,
    MERGE_FIRST_NAME, MERGE_LAST_NAME
)
from .list_context import ListContext
from .logging import MemberLogger
from .types import MemberRecord


class MembershipService:
    """Manage members of a single Mailchimp list through a REST transport."""

    def __init__(self, transport: RestTransport, context: ListContext):
        """
        Initialize membership service.

        Args:
            transport: REST transport used for every provider call
            context: List context the operations are scoped to
        """
        self.transport = transport
        self.context = context
        self.logger = MemberLogger('membership')

    @staticmethod
    def derive_member_key(email: str) -> str:
        """MD5 hex digest of the lower-cased email address."""
        return hashlib.md5(email.lower().encode('utf-8')).hexdigest()

    def fetch_member(self, email: str) -> Optional[MemberRecord]:
        """
        Fetch existing member data.

        Args:
            email: Member email address

        Returns:
            MemberRecord, or None if the member does not exist
        """
        self.context.require_bound('fetch_member')

        member_key = self.derive_member_key(email)
        response = self.transport.get(self.context.member_path(member_key))

        if not response:
            self.logger.debug("Member not found", {'member_key': member_key})
            return None

        return MemberRecord.from_dict(response)

    def resolve_status(self, email: str) -> Optional[str]:
        """
        Get an existing member's status.

        Any status outside the known set (including an HTTP status code
        leaking into the field) is treated as absence.

        Returns:
            Status string, or None if the member does not exist
        """
        self.context.require_bound('resolve_status')

        record = self.fetch_member(email)
        if record is None:
            return None

        if not record.has_known_status():
            self.logger.warning("Unrecognised member status treated as not found", {
                'member_key': self.derive_member_key(email),
                'status': record.status
            })
            return None

        return record.status

    def add_member(
        self,
        email: str,
        status: str = STATUS_SUBSCRIBED,
        last_name: str = '',
        first_name: str = '',
        extra_fields: Optional[Dict[str, Any]] = None
    ) -> Optional[str]:
        """
        Add a new email to the list.

        Extra fields are shallow-merged over the core payload, so a key
        present in both takes the caller's value. See
        https://mailchimp.com/developer/marketing/api/list-members/ for the
        member schema.

        Args:
            email: Member email address
            status: Initial status
            last_name: LNAME merge field
            first_name: FNAME merge field
            extra_fields: Additional top-level member data

        Returns:
            Status of the created member, or None if creation did not
            yield a member
        """
        self.context.require_bound('add_member')

        member_data = {
            'email_address': email,
            'merge_fields': {
                MERGE_FIRST_NAME: first_name or '',
                MERGE_LAST_NAME: last_name or ''
            },
            'status': status,
        }
        if extra_fields:
            member_data.update(extra_fields)

        with self.logger.time_operation('add_member', {'member_key': self.derive_member_key(email)}):
            response = self.transport.post(self.context.resource_path, member_data)

        if not response or not response.get('email_address'):
            self.logger.warning("Create response carried no member", {
                'member_key': self.derive_member_key(email)
            })
            return None

        self.logger.info("Member added", {'member_key': self.derive_member_key(email), 'status': status})
        return self.resolve_status(response['email_address'])

    def update_member(
        self,
        email: str,
        status: str,
        last_name: str = '',
        first_name: str = '',
        extra_fields: Optional[Dict[str, Any]] = None
    ) -> Optional[MemberRecord]:
        """
        Update a list member.

        Blank arguments fall back to the member's current remote values.
        Updates never create a member.

        Args:
            email: Member email address
            status: New status, or blank to keep the current one
            last_name: New LNAME, or blank to keep the current one
            first_name: New FNAME, or blank to keep the current one
            extra_fields: Additional top-level member data

        Returns:
            Updated MemberRecord from the provider, or None if the member
            does not exist
        """
        self.context.require_bound('update_member')

        if not self.resolve_status(email):
            return None

        existing = self.fetch_member(email)
        if existing is None:
            return None

        member_update_data = {
            'email_address': existing.email_address,
            'merge_fields': {
                MERGE_FIRST_NAME: first_name or existing.first_name,
                MERGE_LAST_NAME: last_name or existing.last_name
            },
            'status': status or existing.status,
        }
        if extra_fields:
            member_update_data.update(extra_fields)

        remote_id = existing.id or self.derive_member_key(email)
        with self.logger.time_operation('update_member', {'member_key': remote_id}):
            response = self.transport.patch(self.context.member_path(remote_id), member_update_data)

        self.logger.info("Member updated", {
            'member_key': remote_id,
            'status': member_update_data['status']
        })
        return MemberRecord.from_dict(response) if response else None

    def delete_member(self, email: str, hard_delete: bool = False) -> None:
        """
        Archive a member, optionally deleting it permanently first.

        A hard delete is followed by the soft delete (status ``cleaned``)
        in every case.
        """
        self.context.require_bound('delete_member')

        if hard_delete:
            member_key = self.derive_member_key(email)
            with self.logger.time_operation('hard_delete', {'member_key': member_key}):
                self.transport.delete(self.context.member_path(member_key))
            self.logger.info("Member permanently deleted", {'member_key': member_key})

        # archive runs even after a hard delete
        self.update_member(email, STATUS_CLEANED)

    def unsubscribe_member(self, email: str) -> Optional[MemberRecord]:
        """Set a member to unsubscribed."""
        return self.update_member(email, STATUS_UNSUBSCRIBED)

