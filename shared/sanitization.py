from __future__ import annotations

import re
from typing import Any

from shared.constants import MAX_STRING_LEN

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def sanitize_text(value: Any, max_len: int = MAX_STRING_LEN) -> str:
    text = _CONTROL_RE.sub("", str(value))
    if len(text) > max_len:
        return text[:max_len]
    return text
