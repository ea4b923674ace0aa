from __future__ import annotations

import logging
from collections.abc import Mapping

from shared.schemas import CorrelatedListener, ListenerFetch, ParsedScript

logger = logging.getLogger("event_listener_gatherer.correlate")


def correlate_listeners(fetch: ListenerFetch, scripts: Mapping[str, ParsedScript]) -> list[CorrelatedListener]:
    """Join one target's listeners with the scripts that defined them.

    Listeners whose script was never seen are dropped. Output order follows
    the order the listeners were returned in.
    """
    matched: list[CorrelatedListener] = []
    for record in fetch.listeners:
        script = scripts.get(record.script_id)
        if script is None:
            logger.debug("no parsed script %s for %s listener on %s", record.script_id, record.type, fetch.target_label)
            continue
        merged = {**record.to_payload(), **script.to_payload(), "objectName": fetch.target_label}
        # protocol positions are zero-indexed
        merged["line"] = merged["lineNumber"] + 1
        merged["col"] = merged["columnNumber"] + 1
        matched.append(CorrelatedListener.model_validate(merged))
    return matched
