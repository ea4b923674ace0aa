"""Shared protocol schemas and helpers for the event listener gatherer."""

from shared.enums import GlobalTarget, PassState, ProtocolMethod
from shared.schemas import (
    FAILURE_SENTINEL,
    Artifact,
    CorrelatedListener,
    FailureSentinel,
    ListenerFetch,
    ParsedScript,
    RawListenerRecord,
    TargetReference,
    artifact_payload,
)

__all__ = [
    "Artifact",
    "CorrelatedListener",
    "FAILURE_SENTINEL",
    "FailureSentinel",
    "GlobalTarget",
    "ListenerFetch",
    "ParsedScript",
    "PassState",
    "ProtocolMethod",
    "RawListenerRecord",
    "TargetReference",
    "artifact_payload",
]
