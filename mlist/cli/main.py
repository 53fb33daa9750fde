"""
Main CLI group for the list membership manager.

Integrates all commands into a single CLI application.
"""

import click

from mlist import __version__
from mlist.config import load_config_from_env_file
from .commands.members import status, add, update, unsubscribe, delete


@click.group()
@click.version_option(version=__version__, prog_name='mlist')
def cli():
    """
    mlist - Manage members of a Mailchimp list.
    
    Looks up, adds, updates, unsubscribes and deletes list members
    without hand-building subscriber hashes or merge-field payloads.
    """
    load_config_from_env_file()


cli.add_command(status, name='status')
cli.add_command(add, name='add')
cli.add_command(update, name='update')
cli.add_command(unsubscribe, name='unsubscribe')
cli.add_command(delete, name='delete')


if __name__ == '__main__':
    cli()
