"""
Base REST Transport

Defines the capability the membership service consumes: signed
GET/POST/PATCH/DELETE calls against an API root, returning parsed JSON.
Transports own HTTP mechanics (authentication, timeouts, TLS); the service
only sees paths and JSON bodies.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional


class TransportError(Exception):
    """Raised when a transport call fails (network, auth, provider error)."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        method: Optional[str] = None,
        path: Optional[str] = None,
        detail: Optional[str] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.method = method
        self.path = path
        self.detail = detail

    def __str__(self) -> str:
        base_message = super().__str__()
        context_parts = []

        if self.method and self.path:
            context_parts.append(f"request={self.method} {self.path}")
        if self.status_code is not None:
            context_parts.append(f"status_code={self.status_code}")
        if self.detail:
            context_parts.append(f"detail={self.detail}")

        if context_parts:
            return f"{base_message} ({', '.join(context_parts)})"
        return base_message


class RestTransport(ABC):
    """
    Abstract REST transport.

    Paths are relative to the API root (e.g. ``lists/abc/members``).
    Implementations raise TransportError on failure.
    """

    @abstractmethod
    def get(self, path: str) -> Optional[Dict[str, Any]]:
        """
        Read a resource.

        Returns:
            Parsed JSON body, or None when the resource does not exist
        """
        pass

    @abstractmethod
    def post(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """Create a resource and return the parsed response body."""
        pass

    @abstractmethod
    def patch(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """Modify a resource and return the parsed response body."""
        pass

    @abstractmethod
    def delete(self, path: str) -> None:
        """Permanently remove a resource."""
        pass
