"""
Mailchimp HTTP Transport

Implements RestTransport over the Mailchimp Marketing API v3 with:
- Datacenter resolution from the API key suffix
- HTTP basic authentication
- JSON request and response bodies
- Not-found detection on reads
- Last response and last error tracking
"""

import requests
from typing import Dict, Any, Optional

from mlist import __version__
from mlist.members.logging import MemberLogger
from .base_transport import RestTransport, TransportError

API_ROOT_FORMAT = 'https://{dc}.api.mailchimp.com/3.0'


class MailchimpTransport(RestTransport):
    """Execute Mailchimp API calls with requests."""

    def __init__(
        self,
        api_key: str,
        timeout: int = 10,
        user_agent: str = f'mlist/{__version__}',
        verify_ssl: bool = True,
        api_root: Optional[str] = None
    ):
        """
        Initialize Mailchimp transport.

        Args:
            api_key: Mailchimp API key in ``<key>-<dc>`` form
            timeout: Request timeout in seconds
            user_agent: User-Agent header for requests
            verify_ssl: Verify TLS certificates
            api_root: Override the API root (defaults to the key's datacenter)
        """
        if not api_key or '-' not in api_key:
            raise TransportError("Invalid Mailchimp API key, expected '<key>-<dc>' format")

        self.api_key = api_key
        self.timeout = timeout
        self.user_agent = user_agent
        self.verify_ssl = verify_ssl

        if api_root is None:
            datacenter = api_key.rsplit('-', 1)[1]
            api_root = API_ROOT_FORMAT.format(dc=datacenter)
        self.api_root = api_root.rstrip('/')

        self.last_response: Dict[str, Any] = {}
        self.last_error: Optional[str] = None
        self.logger = MemberLogger('transport')

    def get_endpoint(self, path: str) -> str:
        """Build full endpoint URL."""
        return f"{self.api_root}/{path.lstrip('/')}"

    def get(self, path: str) -> Optional[Dict[str, Any]]:
        return self._request('GET', path, not_found_ok=True)

    def post(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return self._request('POST', path, body)

    def patch(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return self._request('PATCH', path, body)

    def delete(self, path: str) -> None:
        self._request('DELETE', path)

    def success(self) -> bool:
        """Whether the most recent call returned a 2xx status."""
        status_code = self.last_response.get('status_code')
        return status_code is not None and 200 <= status_code < 300

    def _request(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        not_found_ok: bool = False
    ) -> Optional[Dict[str, Any]]:
        self.last_error = None
        self.last_response = {}

        headers = {
            'User-Agent': self.user_agent,
            'Accept': 'application/vnd.api+json',
        }

        try:
            response = requests.request(
                method,
                self.get_endpoint(path),
                auth=('mlist', self.api_key),
                headers=headers,
                json=body,
                timeout=self.timeout,
                verify=self.verify_ssl
            )

        except requests.exceptions.Timeout as e:
            self.last_error = f'Request timed out after {self.timeout} seconds'
            raise TransportError(self.last_error, method=method, path=path) from e

        except requests.exceptions.RequestException as e:
            self.last_error = f'Connection error: {e}'
            raise TransportError(self.last_error, method=method, path=path) from e

        payload = self._parse_body(response)
        self.last_response = {
            'status_code': response.status_code,
            'body': payload
        }
        self.logger.debug(f"{method} {path}", {'status_code': response.status_code})

        if response.status_code == 404 and not_found_ok:
            return None

        if not 200 <= response.status_code < 300:
            title = payload.get('title', 'Unknown error') if payload else response.reason
            detail = payload.get('detail') if payload else None
            self.last_error = f"{response.status_code}: {title}" + (f": {detail}" if detail else '')
            raise TransportError(
                f"Mailchimp API error: {title}",
                status_code=response.status_code,
                method=method,
                path=path,
                detail=detail
            )

        return payload or None

    @staticmethod
    def _parse_body(response: requests.Response) -> Dict[str, Any]:
        """Decode a JSON body, treating empty or non-JSON bodies as empty."""
        if not response.content:
            return {}
        try:
            payload = response.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}
