from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from core.correlate import correlate_listeners
from gatherer.fetcher import ListenerFetcher
from shared.schemas import CorrelatedListener, ParsedScript, TargetReference

logger = logging.getLogger("event_listener_gatherer.aggregator")


async def collect_listeners(
    fetcher: ListenerFetcher,
    scripts: Mapping[str, ParsedScript],
    targets: Sequence[TargetReference],
) -> list[CorrelatedListener]:
    # One target at a time: at most one protocol request is ever in flight.
    collected: list[CorrelatedListener] = []
    for target in targets:
        fetched = await fetcher.fetch(target)
        collected.extend(correlate_listeners(fetched, scripts))
    logger.debug("correlated %d listeners across %d targets", len(collected), len(targets))
    return collected
