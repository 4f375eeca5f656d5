"""
Mock command interface — scripted test double for the fnm bridge.

Returns canned results per command, records every call, and can be
told to fail specific commands. Handlers may be callables so a test
can model state that shifts between calls.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable

from fnm_desk.adapters.base import CommandError, CommandInterface


class MockCommandInterface(CommandInterface):
    """Universal mock for testing stores.

    By default every command returns ``None``. Configure results with
    ``set_response`` and failures with ``set_failure``.
    """

    def __init__(self, interface_name: str = "mock"):
        self._name = interface_name
        self._responses: dict[str, Any] = {}
        self._failures: dict[str, BaseException] = {}
        self._call_log: list[tuple[str, dict[str, Any]]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[tuple[str, dict[str, Any]]]:
        """All ``(command, args)`` pairs this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def calls_to(self, command: str) -> int:
        """Number of times ``command`` was invoked."""
        return sum(1 for name, _ in self._call_log if name == command)

    def set_response(self, command: str, result: Any | Callable[[dict[str, Any]], Any]) -> None:
        """Set the result for a command (a value, or a callable taking args)."""
        self._responses[command] = result
        self._failures.pop(command, None)

    def set_failure(self, command: str, error: str | BaseException = "Mock failure") -> None:
        """Configure a command to fail."""
        if isinstance(error, str):
            error = CommandError(error, command=command)
        self._failures[command] = error

    async def invoke(self, command: str, args: dict[str, Any] | None = None) -> Any:
        args = dict(args or {})
        self._call_log.append((command, args))
        # Yield like a real external call would
        await asyncio.sleep(0)

        if command in self._failures:
            raise self._failures[command]

        result = self._responses.get(command)
        if callable(result):
            return result(args)
        return result

    def reset(self) -> None:
        """Clear call log, responses and failures."""
        self._call_log.clear()
        self._responses.clear()
        self._failures.clear()
