# Turns the raw model reply into a GenerationRecord, or fails loudly.

from __future__ import annotations
import json
import re
from typing import Any, List

from pydantic import ValidationError

from .errors import ParseError
from .types import GenerationRecord

_LEADING_FENCE = re.compile(r"^\s*```[A-Za-z0-9_+-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```\s*$")


def strip_fences(raw: str) -> str:
    """Drop a surrounding markdown code fence (and its language tag), then trim."""
    text = _LEADING_FENCE.sub("", raw, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def _field_problems(err: ValidationError) -> List[str]:
    missing, wrong = [], []
    for e in err.errors():
        name = str(e["loc"][0]) if e.get("loc") else "?"
        (missing if e["type"] == "missing" else wrong).append(name)
    problems = []
    if missing:
        problems.append("missing required field(s): " + ", ".join(missing))
    if wrong:
        problems.append("non-string field(s): " + ", ".join(wrong))
    return problems


def normalize(raw: str) -> GenerationRecord:
    if raw is None or not str(raw).strip():
        raise ParseError("Empty response from generation service")

    text = strip_fences(str(raw))
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Response is not valid JSON ({e.msg} at line {e.lineno} column {e.colno})") from e

    if not isinstance(data, dict):
        raise ParseError(f"Response JSON must be an object, got {type(data).__name__}")

    try:
        return GenerationRecord.model_validate(data)
    except ValidationError as e:
        raise ParseError("Response JSON " + "; ".join(_field_problems(e))) from e

