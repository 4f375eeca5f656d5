"""
Shared test fixtures and sample fnm output.
"""

import textwrap

import pytest

from fnm_desk.adapters.mock import MockCommandInterface
from fnm_desk.core.services.event_bus import EventBus

INSTALLED_OUTPUT = textwrap.dedent("""\
    * v22.21.1 default
    * v20.12.2 lts-latest work
    * v18.20.8
    * system
""")

REMOTE_OUTPUT = textwrap.dedent("""\
    v18.20.8 (Hydrogen)
    v20.12.2 (Iron)
    v21.7.3
    v22.21.1 (Jod)
""")


@pytest.fixture
def bus() -> EventBus:
    """A private event bus per test."""
    return EventBus()


@pytest.fixture
def commands() -> MockCommandInterface:
    """Mock fnm with three installed versions, v22.21.1 current."""
    mock = MockCommandInterface()
    mock.set_response("list_installed_versions", INSTALLED_OUTPUT)
    mock.set_response("get_current_version", "v22.21.1\n")
    mock.set_response("list_remote_versions", REMOTE_OUTPUT)
    return mock
