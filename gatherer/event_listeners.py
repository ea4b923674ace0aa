from __future__ import annotations

import logging
from dataclasses import dataclass

from gatherer.aggregator import collect_listeners
from gatherer.config import GathererConfig
from gatherer.drivers.base import Driver
from gatherer.errors import PassStateError
from gatherer.fetcher import ListenerFetcher
from gatherer.registry import ScriptRegistry
from shared.enums import PassState
from shared.schemas import FAILURE_SENTINEL, Artifact, CorrelatedListener, TargetReference

logger = logging.getLogger("event_listener_gatherer.pass")

_ACTIVE_STATES = {PassState.TRACKING, PassState.FETCHING}


@dataclass(frozen=True, slots=True)
class PassContext:
    driver: Driver
    url: str | None = None


class EventListenersGatherer:
    """Inventory of the event listeners attached during one page-load pass.

    before_pass() starts recording parsed scripts; after_pass() stops, queries
    listeners for every matched element plus the configured globals, and
    commits either the correlated list or FAILURE_SENTINEL.
    """

    def __init__(self, config: GathererConfig | None = None) -> None:
        self.config = config or GathererConfig()
        self.state = PassState.IDLE
        self._registry: ScriptRegistry | None = None
        self._artifact: Artifact | None = None

    @property
    def artifact(self) -> Artifact | None:
        return self._artifact

    async def before_pass(self, context: PassContext) -> None:
        if self.state in _ACTIVE_STATES:
            raise PassStateError(f"a pass is already active ({self.state.value})")
        self._artifact = None
        registry = ScriptRegistry(context.driver)
        try:
            await registry.start_tracking()
        except Exception:
            self.state = PassState.IDLE
            raise
        self._registry = registry
        self.state = PassState.TRACKING
        logger.info("tracking scripts for %s", context.url or "<page>")

    async def after_pass(self, context: PassContext) -> None:
        try:
            listeners = await self._gather(context)
        except Exception:
            logger.warning("listener collection failed for %s", context.url or "<page>", exc_info=True)
            self._commit(FAILURE_SENTINEL, PassState.COMMITTED_FAILURE)
        else:
            logger.info("collected %d listeners for %s", len(listeners), context.url or "<page>")
            self._commit(listeners, PassState.COMMITTED_SUCCESS)

    async def _gather(self, context: PassContext) -> list[CorrelatedListener]:
        registry = self._registry
        if self.state != PassState.TRACKING or registry is None:
            raise PassStateError(f"after_pass called in state {self.state.value}")
        self.state = PassState.FETCHING
        await registry.stop_tracking()
        targets = await self._targets(context.driver)
        fetcher = ListenerFetcher(context.driver, object_group=self.config.object_group)
        return await collect_listeners(fetcher, registry.scripts, targets)

    async def _targets(self, driver: Driver) -> list[TargetReference]:
        targets: list[TargetReference] = list(await driver.query_selector_all(self.config.selector))
        logger.debug("matched %d elements for %r", len(targets), self.config.selector)
        targets.extend(self.config.global_targets)
        return targets

    def _commit(self, artifact: Artifact, state: PassState) -> None:
        self._artifact = artifact
        self.state = state
        self._registry = None
