#!/usr/bin/env python3
"""
Command-line entry point for the list membership manager.

Equivalent to the installed ``mlist`` console script.
"""

from mlist.cli import cli


if __name__ == '__main__':
    cli()
