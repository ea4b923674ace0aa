from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from shared.schemas import (
    FAILURE_SENTINEL,
    CorrelatedListener,
    FailureSentinel,
    ParsedScript,
    RawListenerRecord,
    artifact_payload,
)
from shared.serialization import canonical_json_text


def test_sentinel_payload_is_fixed() -> None:
    assert artifact_payload(FAILURE_SENTINEL) == {
        "rawValue": -1,
        "debugString": "Unable to collect passive events listener usage.",
    }
    with pytest.raises(ValidationError):
        FailureSentinel(rawValue=0)


def test_record_payload_only_carries_supplied_fields() -> None:
    record = RawListenerRecord.model_validate({"type": "wheel", "scriptId": "1", "lineNumber": 0, "columnNumber": 2})

    assert record.passive is False
    assert record.to_payload() == {"type": "wheel", "scriptId": "1", "lineNumber": 0, "columnNumber": 2}


def test_negative_positions_are_rejected() -> None:
    with pytest.raises(ValidationError):
        RawListenerRecord.model_validate({"type": "wheel", "scriptId": "1", "lineNumber": -1, "columnNumber": 0})


def test_parsed_script_requires_an_id_and_is_frozen() -> None:
    with pytest.raises(ValidationError):
        ParsedScript.model_validate({"url": "a.js"})
    script = ParsedScript.model_validate({"scriptId": "3", "url": "a.js", "hash": "abc"})
    with pytest.raises(ValidationError):
        script.url = "b.js"  # type: ignore[misc]


def test_correlated_listener_positions_must_agree() -> None:
    with pytest.raises(ValidationError):
        CorrelatedListener.model_validate(
            {"type": "click", "scriptId": "1", "lineNumber": 4, "columnNumber": 0, "objectName": "body", "line": 4, "col": 1}
        )


def test_canonical_json_of_an_artifact() -> None:
    listener = CorrelatedListener.model_validate(
        {"type": "click", "scriptId": "1", "lineNumber": 0, "columnNumber": 0, "url": "a.js", "objectName": "body", "line": 1, "col": 1}
    )

    assert json.loads(canonical_json_text([listener])) == [listener.to_payload()]
    assert canonical_json_text(FAILURE_SENTINEL) == (
        '{"debugString":"Unable to collect passive events listener usage.","rawValue":-1}'
    )
