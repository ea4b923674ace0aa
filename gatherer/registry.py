from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from gatherer.drivers.base import Driver, Subscription, subscribe
from gatherer.errors import TrackingError
from shared.constants import SCRIPT_PARSED_EVENT
from shared.enums import ProtocolMethod
from shared.schemas import ParsedScript

logger = logging.getLogger("event_listener_gatherer.registry")


class ScriptRegistry:
    """Scripts parsed while tracking was active, keyed by script id.

    Written only between start_tracking() and stop_tracking(); read-only after.
    A script parsed after stop_tracking() stays unknown.
    """

    def __init__(self, driver: Driver) -> None:
        self.driver = driver
        self._scripts: dict[str, ParsedScript] = {}
        self._subscription: Subscription | None = None

    @property
    def tracking(self) -> bool:
        return self._subscription is not None

    @property
    def scripts(self) -> Mapping[str, ParsedScript]:
        return MappingProxyType(self._scripts)

    def get(self, script_id: str) -> ParsedScript | None:
        return self._scripts.get(script_id)

    def __contains__(self, script_id: object) -> bool:
        return script_id in self._scripts

    def __len__(self) -> int:
        return len(self._scripts)

    def _on_script_parsed(self, params: dict[str, Any]) -> None:
        if self._subscription is None:
            return
        try:
            script = ParsedScript.model_validate(params)
        except ValidationError:
            logger.warning("ignoring malformed %s notification", SCRIPT_PARSED_EVENT)
            return
        self._scripts[script.script_id] = script

    async def start_tracking(self) -> None:
        if self._subscription is not None:
            return
        self._subscription = subscribe(self.driver, SCRIPT_PARSED_EVENT, self._on_script_parsed)
        try:
            await self.driver.send_command(ProtocolMethod.DEBUGGER_ENABLE.value)
        except Exception as exc:
            self._unsubscribe()
            raise TrackingError(f"unable to enable script tracking: {exc}") from exc
        logger.debug("script tracking enabled")

    async def stop_tracking(self) -> None:
        self._unsubscribe()
        try:
            await self.driver.send_command(ProtocolMethod.DEBUGGER_DISABLE.value)
        except Exception as exc:
            raise TrackingError(f"unable to disable script tracking: {exc}") from exc
        logger.debug("script tracking stopped with %d scripts", len(self._scripts))

    def _unsubscribe(self) -> None:
        subscription, self._subscription = self._subscription, None
        if subscription is not None:
            subscription.cancel(self.driver)
