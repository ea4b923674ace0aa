from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from playwright.async_api import CDPSession, Page

from gatherer.drivers.base import EventHandler
from shared.enums import ProtocolMethod

logger = logging.getLogger("event_listener_gatherer.cdp")

ELEMENT_NODE = 1


def _walk(node: dict[str, Any], matched: set[int], deep: bool) -> Iterator[int]:
    node_id = node.get("nodeId")
    included = deep or node_id in matched
    if node.get("nodeType") == ELEMENT_NODE and included:
        yield int(node_id)
    for shadow_root in node.get("shadowRoots") or []:
        yield from _walk(shadow_root, matched, deep=included and node.get("nodeType") == ELEMENT_NODE)
    for child in node.get("children") or []:
        yield from _walk(child, matched, deep=deep)


def ordered_node_ids(root: dict[str, Any], matched: set[int]) -> list[int]:
    """Node ids of a pierced DOM tree in document order.

    Light-DOM elements are kept when matched; every element inside a shadow
    root hosted by a kept element is kept too. Frame documents are skipped.
    """
    return list(_walk(root, matched, deep=False))


class PlaywrightDriver:
    def __init__(self, session: CDPSession) -> None:
        self.session = session

    @classmethod
    async def for_page(cls, page: Page) -> "PlaywrightDriver":
        session = await page.context.new_cdp_session(page)
        return cls(session)

    async def send_command(self, method: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        result = await self.session.send(method, params or {})
        return result or {}

    def on(self, event: str, handler: EventHandler) -> None:
        self.session.on(event, handler)

    def off(self, event: str, handler: EventHandler) -> None:
        self.session.remove_listener(event, handler)

    async def query_selector_all(self, selector: str) -> list[int]:
        document = await self.send_command(ProtocolMethod.DOM_GET_DOCUMENT.value, {"depth": -1, "pierce": True})
        root = document["root"]
        result = await self.send_command(
            ProtocolMethod.DOM_QUERY_SELECTOR_ALL.value,
            {"nodeId": root["nodeId"], "selector": selector},
        )
        node_ids = ordered_node_ids(root, set(result.get("nodeIds", [])))
        logger.debug("selector %r matched %d nodes", selector, len(node_ids))
        return node_ids

    async def detach(self) -> None:
        await self.session.detach()
