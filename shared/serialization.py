from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel


def _plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        to_payload = getattr(value, "to_payload", None)
        if to_payload is not None:
            return to_payload()
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def canonical_json_bytes(value: BaseModel | dict[str, Any] | list[Any]) -> bytes:
    encoded = json.dumps(_plain(value), sort_keys=True, separators=(",", ":"), ensure_ascii=True)
    return encoded.encode("utf-8")


def canonical_json_text(value: BaseModel | dict[str, Any] | list[Any]) -> str:
    return canonical_json_bytes(value).decode("utf-8")
