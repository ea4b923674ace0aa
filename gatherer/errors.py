from __future__ import annotations


class GathererError(RuntimeError):
    """Base class for failures while gathering event listeners."""


class TrackingError(GathererError):
    """Script-parse notifications could not be enabled or disabled."""


class ResolutionError(GathererError):
    """A target reference could not be resolved to a remote object."""


class FetchError(GathererError):
    """The listener query for a resolved object failed."""


class PassStateError(GathererError):
    """A lifecycle call arrived in a state that does not allow it."""
