"""
Exceptions for membership management with structured error context.
"""

from typing import Optional


class MembershipError(Exception):
    """Base exception for membership management errors."""
    pass


class InvalidListIdError(MembershipError):
    """Raised when a list ID fails format validation at bind time."""
    
    def __init__(self, message: str, list_id: Optional[str] = None):
        super().__init__(message)
        self.list_id = list_id
    
    def __str__(self) -> str:
        base_message = super().__str__()
        if self.list_id is not None:
            return f"{base_message} (list_id={self.list_id!r})"
        return base_message


class ListNotBoundError(MembershipError):
    """Raised when a member operation is attempted before a list is bound."""
    
    def __init__(self, message: str = "List ID not set, bind one with bind()", operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
    
    def __str__(self) -> str:
        base_message = super().__str__()
        if self.operation:
            return f"{base_message} (operation={self.operation})"
        return base_message
