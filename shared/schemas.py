from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shared.constants import FAILURE_DEBUG_STRING, FAILURE_RAW_VALUE
from shared.sanitization import sanitize_text

TargetReference = Union[int, str]


class ProtocolModel(BaseModel):
    """Protocol payload: camelCase aliases, unknown protocol fields kept as-is."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class ParsedScript(ProtocolModel):
    script_id: str = Field(alias="scriptId", min_length=1)
    url: str = ""


class RawListenerRecord(ProtocolModel):
    type: str
    use_capture: bool = Field(default=False, alias="useCapture")
    passive: bool = False
    once: bool = False
    script_id: str = Field(alias="scriptId")
    line_number: int = Field(alias="lineNumber", ge=0)
    column_number: int = Field(alias="columnNumber", ge=0)


class ListenerFetch(ProtocolModel):
    listeners: list[RawListenerRecord] = Field(default_factory=list)
    target_label: str = Field(alias="targetLabel")

    @field_validator("target_label")
    @classmethod
    def clean_label(cls, value: str) -> str:
        return sanitize_text(value)


class CorrelatedListener(ProtocolModel):
    type: str
    script_id: str = Field(alias="scriptId")
    line_number: int = Field(alias="lineNumber", ge=0)
    column_number: int = Field(alias="columnNumber", ge=0)
    url: str = ""
    object_name: str = Field(alias="objectName")
    line: int = Field(ge=1)
    col: int = Field(ge=1)

    @model_validator(mode="after")
    def validate_one_indexed(self) -> "CorrelatedListener":
        if self.line != self.line_number + 1 or self.col != self.column_number + 1:
            raise ValueError("line/col must be the 1-indexed lineNumber/columnNumber")
        return self


class FailureSentinel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    raw_value: Literal[-1] = Field(default=FAILURE_RAW_VALUE, alias="rawValue")
    debug_string: Literal["Unable to collect passive events listener usage."] = Field(
        default=FAILURE_DEBUG_STRING, alias="debugString"
    )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


FAILURE_SENTINEL = FailureSentinel()

Artifact = Union[list[CorrelatedListener], FailureSentinel]


def artifact_payload(artifact: Artifact) -> list[dict[str, Any]] | dict[str, Any]:
    if isinstance(artifact, FailureSentinel):
        return artifact.to_payload()
    return [listener.to_payload() for listener in artifact]
