from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from gatherer.drivers.base import Driver
from gatherer.errors import FetchError, ResolutionError
from shared.constants import OBJECT_GROUP
from shared.enums import ProtocolMethod
from shared.schemas import ListenerFetch, TargetReference

logger = logging.getLogger("event_listener_gatherer.fetcher")


class ListenerFetcher:
    def __init__(self, driver: Driver, object_group: str = OBJECT_GROUP) -> None:
        self.driver = driver
        # the object group makes the backend populate handler details
        self.object_group = object_group

    async def _resolve(self, target: TargetReference) -> dict[str, Any]:
        try:
            if isinstance(target, str):
                result = await self.driver.send_command(
                    ProtocolMethod.RUNTIME_EVALUATE.value,
                    {"expression": getattr(target, "value", target), "objectGroup": self.object_group},
                )
            else:
                result = await self.driver.send_command(
                    ProtocolMethod.DOM_RESOLVE_NODE.value,
                    {"nodeId": target, "objectGroup": self.object_group},
                )
        except Exception as exc:
            raise ResolutionError(f"unable to resolve {target!r}: {exc}") from exc

        if result.get("exceptionDetails"):
            raise ResolutionError(f"evaluating {target!r} threw an exception")
        remote = result.get("object") or result.get("result")
        if not isinstance(remote, dict) or not remote.get("objectId"):
            raise ResolutionError(f"{target!r} did not resolve to a remote object")
        return remote

    async def fetch(self, target: TargetReference) -> ListenerFetch:
        remote = await self._resolve(target)
        try:
            result = await self.driver.send_command(
                ProtocolMethod.GET_EVENT_LISTENERS.value,
                {"objectId": remote["objectId"]},
            )
        except Exception as exc:
            raise FetchError(f"listener query for {target!r} failed: {exc}") from exc

        try:
            fetched = ListenerFetch.model_validate(
                {
                    "listeners": result.get("listeners", []),
                    "targetLabel": str(remote.get("description") or getattr(target, "value", target)),
                }
            )
        except ValidationError as exc:
            raise FetchError(f"malformed listener list for {target!r}") from exc
        logger.debug("fetched %d listeners for %s", len(fetched.listeners), fetched.target_label)
        return fetched
