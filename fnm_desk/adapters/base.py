"""
Command interface — the contract between stores and the fnm tool.

Stores never talk to the fnm executable directly: they call
``invoke(command, args)`` and get text (or a model) back, or a
``CommandError``. The real bridge and the test double both implement
this protocol.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class CommandError(Exception):
    """Raised when an external command fails.

    ``str(err)`` is the display message (usually the tool's stderr).
    """

    def __init__(self, message: str, command: str = ""):
        super().__init__(message)
        self.message = message
        self.command = command


def error_message(exc: BaseException | object) -> str:
    """Coerce a failure value into a display string. Never raises."""
    if isinstance(exc, BaseException):
        text = str(exc)
        return text if text else exc.__class__.__name__
    try:
        return str(exc)
    except Exception:
        return object.__repr__(exc)


class CommandInterface(ABC):
    """Abstract async command interface.

    To create a new implementation:
        1. Subclass CommandInterface
        2. Implement name and invoke
        3. Raise CommandError on failure, never return error values
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Interface identifier (e.g., 'fnm', 'mock')."""

    @abstractmethod
    async def invoke(self, command: str, args: dict[str, Any] | None = None) -> Any:
        """Run ``command`` with ``args`` and return its result.

        Raises:
            CommandError: The command failed or is unknown.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
