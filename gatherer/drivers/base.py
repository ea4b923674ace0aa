from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

EventHandler = Callable[[dict[str, Any]], None]


class Driver(Protocol):
    async def send_command(self, method: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Send one protocol command and return its result."""

    def on(self, event: str, handler: EventHandler) -> None:
        """Subscribe a handler to a protocol event."""

    def off(self, event: str, handler: EventHandler) -> None:
        """Remove a handler previously passed to on()."""

    async def query_selector_all(self, selector: str) -> list[int]:
        """Return matching element node ids in document order, shadow trees included."""


@dataclass(frozen=True, slots=True)
class Subscription:
    event: str
    handler: EventHandler

    def cancel(self, driver: Driver) -> None:
        driver.off(self.event, self.handler)


def subscribe(driver: Driver, event: str, handler: EventHandler) -> Subscription:
    driver.on(event, handler)
    return Subscription(event=event, handler=handler)
