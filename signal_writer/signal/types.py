# Data models for a generation cycle: form snapshot, request, parsed record, result.

from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

MAX_WORDS = 50
MAX_CHARS = 350


class Severity(str, Enum):
    """Categorical risk level attached to a signal."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, value: "Severity | str") -> "Severity":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().capitalize())
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown severity {value!r}; expected one of: {allowed}") from None


DEFAULT_SEVERITY = Severity.MEDIUM


def clean_site_info(site_info: Optional[str]) -> Optional[str]:
    """Blank site text counts as absent."""
    if site_info is None:
        return None
    site_info = site_info.strip()
    return site_info or None


@dataclass(frozen=True)
class FormState:
    """Immutable snapshot of the form values."""
    description: str = ""
    site_info: Optional[str] = None
    severity: Severity = DEFAULT_SEVERITY
    max_words: int = MAX_WORDS
    max_chars: int = MAX_CHARS

    def __post_init__(self):
        object.__setattr__(self, "severity", Severity.parse(self.severity))

    @property
    def word_count(self) -> int:
        return len(self.description.split())

    @property
    def over_word_limit(self) -> bool:
        return self.word_count > self.max_words

    @property
    def over_char_limit(self) -> bool:
        return len(self.description) > self.max_chars

    @property
    def can_submit(self) -> bool:
        return bool(self.description.strip()) and not self.over_word_limit and not self.over_char_limit

    @property
    def site(self) -> Optional[str]:
        return clean_site_info(self.site_info)

    def with_changes(self, **changes: Any) -> "FormState":
        return replace(self, **changes)


@dataclass(frozen=True)
class GenerationRequest:
    """Instruction payload plus the output schema it asks for."""
    payload: str
    schema: Dict[str, str] = field(default_factory=dict)


class GenerationRecord(BaseModel):
    """The seven-field record the model must reply with."""
    # wire keys only: a snake_case "root_cause" does not count as "rootCause"
    model_config = ConfigDict(extra="ignore", frozen=True)

    title: StrictStr
    description: StrictStr
    risk: StrictStr
    root_cause: StrictStr = Field(alias="rootCause")
    actions: StrictStr
    comments: StrictStr
    monitoring: StrictStr


@dataclass(frozen=True)
class ResultState:
    """Outcome of one cycle: the document, or the error text shown in its place."""
    text: str
    ok: bool
    generated_at: Optional[datetime] = None
    meta: Dict[str, Any] = field(default_factory=dict)
