"""Adapters — command interfaces onto the fnm executable.

Public re-exports for convenient access.
"""

from fnm_desk.adapters.base import CommandError, CommandInterface, error_message
from fnm_desk.adapters.fnm import FnmCommandInterface
from fnm_desk.adapters.mock import MockCommandInterface

__all__ = [
    "CommandError",
    "CommandInterface",
    "FnmCommandInterface",
    "MockCommandInterface",
    "error_message",
]
