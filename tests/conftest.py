from __future__ import annotations

import asyncio
from collections import defaultdict
from typing import Any

import pytest


class FakeDriver:
    """In-memory stand-in for a DevTools session."""

    def __init__(
        self,
        *,
        node_ids: list[int] | None = None,
        listeners: dict[Any, list[dict[str, Any]]] | None = None,
        descriptions: dict[Any, str] | None = None,
        scripts_on_enable: list[dict[str, Any]] | None = None,
        failures: dict[str, Exception] | None = None,
        failing_targets: set[Any] | None = None,
    ) -> None:
        self.node_ids = list(node_ids or [])
        self.listeners = listeners or {}
        self.descriptions = descriptions or {"document": "#document", "window": "Window"}
        self.scripts_on_enable = list(scripts_on_enable or [])
        self.failures = failures or {}
        self.failing_targets = failing_targets or set()
        self.handlers: dict[str, list[Any]] = defaultdict(list)
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.selectors: list[str] = []
        self._objects: dict[str, Any] = {}
        self.in_flight = 0
        self.max_in_flight = 0

    def on(self, event: str, handler: Any) -> None:
        self.handlers[event].append(handler)

    def off(self, event: str, handler: Any) -> None:
        if handler in self.handlers[event]:
            self.handlers[event].remove(handler)

    def emit(self, event: str, params: dict[str, Any]) -> None:
        for handler in list(self.handlers[event]):
            handler(params)

    def _remote(self, target: Any) -> dict[str, Any]:
        object_id = f"obj:{target}"
        self._objects[object_id] = target
        return {"type": "object", "objectId": object_id, "description": self.descriptions.get(target, f"div#n{target}")}

    async def send_command(self, method: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        params = dict(params or {})
        self.calls.append((method, params))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            if method in self.failures:
                raise self.failures[method]
            if method == "Debugger.enable":
                for script in self.scripts_on_enable:
                    self.emit("Debugger.scriptParsed", script)
                return {"debuggerId": "debugger-1"}
            if method == "Runtime.evaluate":
                return {"result": self._remote(params["expression"])}
            if method == "DOM.resolveNode":
                return {"object": self._remote(params["nodeId"])}
            if method == "DOMDebugger.getEventListeners":
                target = self._objects[params["objectId"]]
                if target in self.failing_targets:
                    raise RuntimeError(f"listener query failed for {target}")
                return {"listeners": list(self.listeners.get(target, []))}
            return {}
        finally:
            self.in_flight -= 1

    async def query_selector_all(self, selector: str) -> list[int]:
        self.selectors.append(selector)
        if "querySelectorAll" in self.failures:
            raise self.failures["querySelectorAll"]
        return list(self.node_ids)

    def methods(self) -> list[str]:
        return [method for method, _ in self.calls]


def listener(script_id: str, line: int = 0, column: int = 0, event_type: str = "click", **extra: Any) -> dict[str, Any]:
    return {"type": event_type, "scriptId": script_id, "lineNumber": line, "columnNumber": column, **extra}


def script(script_id: str, url: str = "", **extra: Any) -> dict[str, Any]:
    return {"scriptId": script_id, "url": url, **extra}


@pytest.fixture()
def make_driver():
    return FakeDriver


@pytest.fixture()
def make_listener():
    return listener


@pytest.fixture()
def make_script():
    return script
