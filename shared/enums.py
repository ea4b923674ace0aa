from __future__ import annotations

from enum import Enum


class GlobalTarget(str, Enum):
    DOCUMENT = "document"
    WINDOW = "window"


class ProtocolMethod(str, Enum):
    DEBUGGER_ENABLE = "Debugger.enable"
    DEBUGGER_DISABLE = "Debugger.disable"
    RUNTIME_EVALUATE = "Runtime.evaluate"
    DOM_RESOLVE_NODE = "DOM.resolveNode"
    DOM_GET_DOCUMENT = "DOM.getDocument"
    DOM_QUERY_SELECTOR_ALL = "DOM.querySelectorAll"
    GET_EVENT_LISTENERS = "DOMDebugger.getEventListeners"


class PassState(str, Enum):
    IDLE = "idle"
    TRACKING = "tracking"
    FETCHING = "fetching"
    COMMITTED_SUCCESS = "committed_success"
    COMMITTED_FAILURE = "committed_failure"
