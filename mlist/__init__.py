"""
mlist - Mailchimp list membership management.

Binds to a single audience list and manages member lifecycle operations
(lookup, add, update, unsubscribe, soft and hard delete) on top of an
abstract REST transport.
"""

__version__ = '0.1.0'
