"""Shared fixtures and host doubles for typeahead tests."""

import asyncio
from typing import Any, Optional

import pytest

from typeahead.config import TypeaheadConfig
from typeahead.core.controller import TypeaheadController
from typeahead.domain.types import Option


class HostCallbacks:
    """Records every host callback invocation."""

    def __init__(self):
        self.selected: list[tuple[Optional[Option], str]] = []
        self.created: list[str] = []

    def on_select(self, option: Optional[Option], value: str) -> None:
        self.selected.append((option, value))

    def on_create(self, query: str) -> None:
        self.created.append(query)


class ScriptedFetch:
    """
    Async ``fetch_data`` whose responses are released by the test.

    Each call waits on its own ``asyncio.Event`` so a test decides in which
    order queries resolve.
    """

    def __init__(self, results: Optional[dict[str, list[Any]]] = None, default: Optional[list[Any]] = None):
        self.results = results or {}
        self.default = default or []
        self.calls: list[str] = []
        self._gates: dict[str, asyncio.Event] = {}

    def gate(self, query: str) -> asyncio.Event:
        return self._gates.setdefault(query, asyncio.Event())

    def release(self, query: str) -> None:
        self.gate(query).set()

    async def __call__(self, query: str) -> list[Any]:
        self.calls.append(query)
        await self.gate(query).wait()
        return self.results.get(query, self.default)


FRUITS = [
    Option(id="f1", value="Apple", label="Apple"),
    Option(id="f2", value="Apricot", label="Apricot"),
    Option(id="f3", value="Banana", label="Banana"),
    Option(id="f4", value="Cherry", label="Cherry"),
    Option(id="f5", value="Grape", label="Grape"),
]


@pytest.fixture
def fruits() -> list[Option]:
    return list(FRUITS)


@pytest.fixture
def host() -> HostCallbacks:
    return HostCallbacks()


@pytest.fixture
def make_config(host):
    """Build a TypeaheadConfig wired to the recording host."""

    def _make(**overrides) -> TypeaheadConfig:
        values: dict[str, Any] = {
            "id": "fruit",
            "on_select": host.on_select,
            "on_create": host.on_create,
            "debounce_delay": 0,
        }
        values.update(overrides)
        return TypeaheadConfig(**values)

    return _make


@pytest.fixture
def make_controller(make_config):
    """Build controllers that are torn down when the test finishes."""
    controllers: list[TypeaheadController] = []

    def _make(exit_timeout: float = 0.3, event_bus=None, **overrides) -> TypeaheadController:
        controller = TypeaheadController(make_config(**overrides), event_bus=event_bus, exit_timeout=exit_timeout)
        controllers.append(controller)
        return controller

    yield _make

    for controller in controllers:
        controller.teardown()


@pytest.fixture
def scripted_fetch():
    """Factory for ScriptedFetch doubles."""
    return ScriptedFetch
