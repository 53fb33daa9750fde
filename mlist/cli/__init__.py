"""
CLI module for the list membership manager.

Provides the click-based command-line interface.
"""

from .main import cli

__all__ = ['cli']
