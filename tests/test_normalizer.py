# ===============================================
# tests/test_normalizer.py
# Fence stripping, JSON parsing, required fields
# ===============================================

import json

import pytest

from signal_writer.signal import GenerationRecord, ParseError, normalize, strip_fences
from signal_writer.signal.prompts import RECORD_FIELDS

RECORD = {
    "title": "Elevated withdrawal rate at Site 202",
    "description": "Site 202 shows withdrawals above protocol expectation.",
    "risk": "Potential bias in efficacy population.",
    "rootCause": "Possible consent process gaps.",
    "actions": "CRA to retrain site staff within two weeks.",
    "comments": "Withdrawals concentrated in recent enrollments.",
    "monitoring": "Review withdrawal listings monthly.",
}


def record_to_dict(record):
    dumped = record.model_dump(by_alias=True)
    return {k: dumped[k] for k in RECORD_FIELDS}


def test_plain_json():
    rec = normalize(json.dumps(RECORD))
    assert isinstance(rec, GenerationRecord)
    assert rec.root_cause == RECORD["rootCause"]
    assert record_to_dict(rec) == RECORD


@pytest.mark.parametrize(
    "raw",
    [
        "```json\n{body}\n```",
        "```\n{body}\n```",
        "```JSON   \n{body}```",
        "\n\n  ```json\n{body}\n```  \n",
        "```json{body}```",
    ],
)
def test_fenced_equals_unfenced(raw):
    body = json.dumps(RECORD, indent=2)
    assert normalize(raw.format(body=body)) == normalize(body)


def test_strip_fences_leaves_inner_text():
    assert strip_fences("```python\nx = 1\n```") == "x = 1"
    assert strip_fences("  no fences  ") == "no fences"


def test_extra_keys_ignored():
    rec = normalize(json.dumps({**RECORD, "confidence": "high"}))
    assert record_to_dict(rec) == RECORD


@pytest.mark.parametrize("missing", list(RECORD))
def test_missing_field_rejected(missing):
    data = {k: v for k, v in RECORD.items() if k != missing}
    with pytest.raises(ParseError) as exc:
        normalize(json.dumps(data))
    assert missing in str(exc.value)


def test_non_string_field_rejected():
    with pytest.raises(ParseError, match="non-string"):
        normalize(json.dumps({**RECORD, "actions": ["call site", "retrain"]}))


@pytest.mark.parametrize(
    "raw",
    [
        "I could not produce a signal for this input.",
        "Here is your signal:\n" + json.dumps(RECORD),
        json.dumps(RECORD) + "\nLet me know if you need changes.",
        "",
        "   ",
    ],
)
def test_prose_rejected(raw):
    with pytest.raises(ParseError):
        normalize(raw)


def test_non_object_rejected():
    with pytest.raises(ParseError, match="object"):
        normalize(json.dumps([RECORD]))


def test_snake_case_key_does_not_stand_in_for_root_cause():
    data = {k: v for k, v in RECORD.items() if k != "rootCause"}
    data["root_cause"] = RECORD["rootCause"]
    with pytest.raises(ParseError, match="missing required field\\(s\\): rootCause"):
        normalize(json.dumps(data))
