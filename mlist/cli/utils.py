"""
Common utilities for CLI commands.

Shared helpers used across command modules.
"""

import click

from mlist.config import Config
from mlist.members import ListContext, MembershipService
from mlist.members.logging import configure_member_logging
from mlist.transport import MailchimpTransport


list_id_option = click.option(
    '--list-id', envvar='MAILCHIMP_LIST_ID', required=True,
    help='Mailchimp list ID (defaults to $MAILCHIMP_LIST_ID)'
)


def get_membership_service(list_id: str) -> MembershipService:
    """
    Build a membership service bound to a list.
    
    Args:
        list_id: Mailchimp list ID to bind
        
    Returns:
        MembershipService using the configured Mailchimp transport
        
    Raises:
        ValueError: If the API key is not configured
        InvalidListIdError: If the list ID is malformed
        TransportError: If the API key has no datacenter suffix
    """
    Config.validate(['MAILCHIMP_API_KEY'])
    configure_member_logging(
        level=Config.LOG_LEVEL,
        format=Config.LOG_FORMAT,
        output='both' if Config.LOG_FILE else 'console',
        filename=Config.LOG_FILE
    )
    
    context = ListContext().bind(list_id)
    transport = MailchimpTransport(
        Config.MAILCHIMP_API_KEY,
        timeout=Config.REQUEST_TIMEOUT,
        verify_ssl=Config.VERIFY_SSL
    )
    return MembershipService(transport, context)


def describe_member(record) -> str:
    """One-line summary of a member record for terminal output."""
    name = ' '.join(part for part in (record.first_name, record.last_name) if part)
    summary = f"{record.email_address} [{record.status}]"
    return f"{summary} {name}" if name else summary
