"""
Member commands for the list membership manager.

Handles status lookup, add, update, unsubscribe and delete operations.
"""

import click

from mlist.members.exceptions import MembershipError
from mlist.transport import TransportError
from ..utils import get_membership_service, describe_member, list_id_option

STATUS_CHOICES = click.Choice(['subscribed', 'unsubscribed', 'pending', 'cleaned'])


def _service_or_abort(list_id):
    try:
        return get_membership_service(list_id)
    except (ValueError, MembershipError, TransportError) as e:
        click.secho(f"✗ Error: {e}", fg='red')
        raise click.Abort()


@click.command('status')
@list_id_option
@click.option('--email', required=True, help='Member email address')
def status(list_id, email):
    """
    Show a member's subscription status.
    
    Example:
        python main.py status --list-id a1b2c3d4e5 --email user@example.com
    """
    service = _service_or_abort(list_id)
    
    try:
        member_status = service.resolve_status(email)
    except TransportError as e:
        click.secho(f"✗ Lookup failed: {e}", fg='red')
        raise click.Abort()
    
    if member_status is None:
        click.echo(f"{email}: not found")
        return
    
    click.echo(f"{email}: {member_status}")


@click.command('add')
@list_id_option
@click.option('--email', required=True, help='Member email address')
@click.option('--status', 'member_status', type=STATUS_CHOICES, default='subscribed',
              help='Initial status')
@click.option('--first-name', default='', help='First name (FNAME merge field)')
@click.option('--last-name', default='', help='Last name (LNAME merge field)')
def add(list_id, email, member_status, first_name, last_name):
    """
    Add a member to the list.
    
    Example:
        python main.py add --list-id a1b2c3d4e5 --email user@example.com --first-name Ada
    """
    service = _service_or_abort(list_id)
    
    try:
        result = service.add_member(email, member_status, last_name, first_name)
    except TransportError as e:
        click.secho(f"✗ Add failed: {e}", fg='red')
        raise click.Abort()
    
    if result is None:
        click.secho(f"✗ {email} was not added", fg='red')
        raise click.Abort()
    
    click.secho(f"✓ Added {email} ({result})", fg='green')


@click.command('update')
@list_id_option
@click.option('--email', required=True, help='Member email address')
@click.option('--status', 'member_status', type=STATUS_CHOICES, default=None,
              help='New status (unchanged if omitted)')
@click.option('--first-name', default='', help='New first name (unchanged if omitted)')
@click.option('--last-name', default='', help='New last name (unchanged if omitted)')
def update(list_id, email, member_status, first_name, last_name):
    """
    Update an existing member. Omitted fields keep their current values.
    
    Example:
        python main.py update --list-id a1b2c3d4e5 --email user@example.com --last-name Lovelace
    """
    service = _service_or_abort(list_id)
    
    try:
        record = service.update_member(email, member_status or '', last_name, first_name)
    except TransportError as e:
        click.secho(f"✗ Update failed: {e}", fg='red')
        raise click.Abort()
    
    if record is None:
        click.secho(f"✗ Error: Member {email} not found", fg='red')
        raise click.Abort()
    
    click.secho(f"✓ Updated {describe_member(record)}", fg='green')


@click.command('unsubscribe')
@list_id_option
@click.option('--email', required=True, help='Member email address')
def unsubscribe(list_id, email):
    """
    Unsubscribe a member from the list.
    
    Example:
        python main.py unsubscribe --list-id a1b2c3d4e5 --email user@example.com
    """
    service = _service_or_abort(list_id)
    
    try:
        record = service.unsubscribe_member(email)
    except TransportError as e:
        click.secho(f"✗ Unsubscribe failed: {e}", fg='red')
        raise click.Abort()
    
    if record is None:
        click.secho(f"✗ Error: Member {email} not found", fg='red')
        raise click.Abort()
    
    click.secho(f"✓ Unsubscribed {email}", fg='green')


@click.command('delete')
@list_id_option
@click.option('--email', required=True, help='Member email address')
@click.option('--hard', is_flag=True, help='Permanently delete, then archive')
def delete(list_id, email, hard):
    """
    Archive a member (status 'cleaned'). With --hard, permanently delete it first, then archive.
    
    Example:
        python main.py delete --list-id a1b2c3d4e5 --email user@example.com
        python main.py delete --list-id a1b2c3d4e5 --email user@example.com --hard
    """
    service = _service_or_abort(list_id)
    
    try:
        member_status = service.resolve_status(email)
    except TransportError as e:
        click.secho(f"✗ Lookup failed: {e}", fg='red')
        raise click.Abort()
    
    if member_status is None:
        click.secho(f"✗ Error: Member {email} not found", fg='red')
        raise click.Abort()
    
    if hard:
        click.confirm(f"Permanently delete {email}? This cannot be undone", abort=True)
    
    try:
        service.delete_member(email, hard_delete=hard)
    except TransportError as e:
        click.secho(f"✗ Delete failed: {e}", fg='red')
        raise click.Abort()
    
    action = 'Deleted' if hard else 'Archived'
    click.secho(f"✓ {action} {email}", fg='green')
