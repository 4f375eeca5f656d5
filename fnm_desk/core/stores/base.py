"""
Store base — shared error slot and change notification for stores.

Stores are the error boundary of the package: a failed external call
is recorded in ``error`` (one shared slot, last failure wins), logged,
and published; it is never raised to the caller.
"""

from __future__ import annotations

import logging
from typing import Any

from fnm_desk.adapters.base import CommandInterface, error_message
from fnm_desk.core.services.event_bus import EventBus, bus as default_bus


class StateStore:
    """Base class holding the command interface, bus and error slot."""

    domain: str = "store"

    def __init__(self, commands: CommandInterface, bus: EventBus | None = None):
        self.commands = commands
        self.bus = bus if bus is not None else default_bus
        self.error: str | None = None
        self._logger = logging.getLogger(self.__class__.__module__)

    def _notify(self, action: str, key: str = "", data: dict[str, Any] | None = None) -> None:
        self.bus.publish(f"{self.domain}:{action}", key=key or action, data=data)

    def _fail(self, operation: str, exc: BaseException) -> None:
        self.error = error_message(exc)
        self._logger.error("Failed to %s: %s", operation, self.error)
        self.bus.publish(
            f"{self.domain}:error",
            key="error",
            data={"operation": operation},
            error=self.error,
        )
