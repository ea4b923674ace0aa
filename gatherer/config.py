from __future__ import annotations

import os
import re
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from shared.constants import DEFAULT_SELECTOR, OBJECT_GROUP
from shared.enums import GlobalTarget

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class GathererConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    selector: str = DEFAULT_SELECTOR
    global_targets: list[str] = Field(default_factory=lambda: [item.value for item in GlobalTarget])
    object_group: str = OBJECT_GROUP
    headless: bool = True
    navigation_timeout_seconds: int = Field(default=30, ge=1, le=300)
    wait_until: Literal["load", "domcontentloaded", "networkidle"] = "load"

    @field_validator("selector", "object_group")
    @classmethod
    def validate_non_empty(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("field cannot be empty")
        return cleaned

    @field_validator("global_targets", mode="before")
    @classmethod
    def normalize_global_targets(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("global_targets")
    @classmethod
    def validate_identifiers(cls, value: list[str]) -> list[str]:
        for name in value:
            if not _IDENTIFIER_RE.match(name):
                raise ValueError(f"global target {name!r} is not a plain identifier")
        return value


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"invalid boolean: {raw}")


def _env_overrides() -> dict[str, Any]:
    mapping: dict[str, tuple[str, str]] = {
        "ELG_SELECTOR": ("selector", "str"),
        "ELG_GLOBAL_TARGETS": ("global_targets", "list"),
        "ELG_OBJECT_GROUP": ("object_group", "str"),
        "ELG_HEADLESS": ("headless", "bool"),
        "ELG_NAVIGATION_TIMEOUT": ("navigation_timeout_seconds", "int"),
        "ELG_WAIT_UNTIL": ("wait_until", "str"),
    }
    out: dict[str, Any] = {}
    for env_name, (field_name, kind) in mapping.items():
        raw = os.getenv(env_name)
        if raw is None:
            continue
        if kind == "int":
            out[field_name] = int(raw)
        elif kind == "bool":
            out[field_name] = _parse_bool(raw)
        elif kind == "list":
            out[field_name] = [item.strip() for item in raw.split(",") if item.strip()]
        else:
            out[field_name] = raw
    return out


def default_config_toml() -> str:
    return (
        f'selector = "{DEFAULT_SELECTOR}"\n'
        'global_targets = ["document", "window"]\n'
        f'object_group = "{OBJECT_GROUP}"\n'
        "headless = true\n"
        "navigation_timeout_seconds = 30\n"
        'wait_until = "load"\n'
    )


def load_config(config_path: Path | None = None) -> GathererConfig:
    parsed: dict[str, Any] = {}
    path: Path | None = None
    if config_path is not None:
        path = config_path.expanduser().resolve(strict=False)
        try:
            with path.open("rb") as handle:
                parsed = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ValueError(f"unable to read config at {path}: {exc}") from exc
    try:
        parsed.update(_env_overrides())
        return GathererConfig.model_validate(parsed)
    except ValidationError as exc:
        raise ValueError(f"invalid config at {path or '<defaults>'}: {exc}") from exc
