"""Event listener inventory for a single page-load pass."""

from gatherer.config import GathererConfig, load_config
from gatherer.errors import FetchError, GathererError, PassStateError, ResolutionError, TrackingError
from gatherer.event_listeners import EventListenersGatherer, PassContext

__all__ = [
    "EventListenersGatherer",
    "FetchError",
    "GathererConfig",
    "GathererError",
    "PassContext",
    "PassStateError",
    "ResolutionError",
    "TrackingError",
    "load_config",
]
