from gatherer.drivers.base import Driver, EventHandler, Subscription, subscribe

__all__ = ["Driver", "EventHandler", "Subscription", "subscribe"]
