"""Pure listener correlation."""

from core.correlate import correlate_listeners

__all__ = ["correlate_listeners"]
