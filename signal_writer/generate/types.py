# Typed dataclasses shared by the model clients.

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class Message:
    """Single chat turn: user or assistant."""
    role: str
    content: str


@dataclass
class ModelParams:
    """LLM parameters per request."""
    model: Optional[str] = None
    max_tokens: Optional[int] = None
    timeout: Optional[float] = None
