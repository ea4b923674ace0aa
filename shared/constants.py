from __future__ import annotations

MAX_STRING_LEN = 2048

OBJECT_GROUP = "event-listeners-gatherer"
DEFAULT_SELECTOR = "body, body *"

FAILURE_RAW_VALUE = -1
FAILURE_DEBUG_STRING = "Unable to collect passive events listener usage."

SCRIPT_PARSED_EVENT = "Debugger.scriptParsed"
