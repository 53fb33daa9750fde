"""
Shared fixtures: an in-memory Mailchimp-like transport that records calls.
"""

import hashlib
import pytest

from mlist.members import ListContext, MembershipService
from mlist.transport import RestTransport, TransportError


class RecordingTransport(RestTransport):
    """In-memory stand-in for the Mailchimp members API."""

    def __init__(self):
        self.members = {}
        self.calls = []

    @staticmethod
    def _key_from_path(path):
        return path.rstrip('/').rsplit('/', 1)[1]

    def seed(self, email, status='subscribed', first_name='', last_name='', **extra):
        key = hashlib.md5(email.lower().encode('utf-8')).hexdigest()
        self.members[key] = {
            'id': key,
            'email_address': email,
            'status': status,
            'merge_fields': {'FNAME': first_name, 'LNAME': last_name},
            **extra
        }
        return self.members[key]

    def get(self, path):
        self.calls.append(('GET', path, None))
        member = self.members.get(self._key_from_path(path))
        return dict(member) if member else None

    def post(self, path, body):
        self.calls.append(('POST', path, body))
        key = hashlib.md5(body['email_address'].lower().encode('utf-8')).hexdigest()
        if key in self.members:
            raise TransportError("Mailchimp API error: Member Exists", status_code=400, method='POST', path=path)
        self.members[key] = {'id': key, **body}
        return dict(self.members[key])

    def patch(self, path, body):
        self.calls.append(('PATCH', path, body))
        key = self._key_from_path(path)
        if key not in self.members:
            raise TransportError("Mailchimp API error: Resource Not Found", status_code=404, method='PATCH', path=path)
        self.members[key].update(body)
        return dict(self.members[key])

    def delete(self, path):
        self.calls.append(('DELETE', path, None))
        key = self._key_from_path(path)
        if key not in self.members:
            raise TransportError("Mailchimp API error: Resource Not Found", status_code=404, method='DELETE', path=path)
        del self.members[key]

    def methods(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def context():
    return ListContext().bind('a1b2c3d4e5')


@pytest.fixture
def service(transport, context):
    return MembershipService(transport, context)
