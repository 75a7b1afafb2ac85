# Client for the Anthropic Messages API.
# Same interface as EchoDevClient: generate(messages, params) -> (text, meta).

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple

import requests

from signal_writer.log import get_logger
from signal_writer.settings import settings
from signal_writer.signal.errors import NetworkError, ServiceError
from ..config import load_config
from ..types import Message, ModelParams

# model, max_tokens, timeout
DEFAULTS = load_config()

logger = get_logger("signal_writer.anthropic")


class AnthropicClient:
    def __init__(
        self,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        api_version: Optional[str] = None,
    ):
        self.model = model or DEFAULTS.get("model")
        self.api_key = api_key if api_key is not None else settings.ANTHROPIC_API_KEY
        self.api_url = api_url or settings.ANTHROPIC_API_URL
        self.api_version = api_version or settings.ANTHROPIC_VERSION

    def set_model(self, model: str):
        self.model = model

    def _headers(self) -> Dict[str, str]:
        headers = {
            "content-type": "application/json",
            "anthropic-version": self.api_version,
        }
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    def build_envelope(self, messages: List[Message], params: ModelParams) -> Dict[str, Any]:
        return {
            "model": params.model or self.model,
            "max_tokens": int(params.max_tokens or DEFAULTS["max_tokens"]),
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        payload = self.build_envelope(messages, params)
        timeout = float(params.timeout or DEFAULTS["timeout"])
        logger.info("POST %s model=%s max_tokens=%s", self.api_url, payload["model"], payload["max_tokens"])

        try:
            resp = requests.post(self.api_url, json=payload, headers=self._headers(), timeout=timeout)
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            raise NetworkError(f"Generation service returned HTTP {status}: {_error_detail(e.response)}", cause=e) from e
        except requests.RequestException as e:
            raise NetworkError(f"Could not reach generation service: {e}", cause=e) from e

        try:
            data = resp.json()
        except ValueError as e:
            raise ServiceError("Generation service returned a non-JSON body", cause=e) from e

        text = extract_text(data)
        meta = {
            "engine": "anthropic",
            "model": data.get("model", payload["model"]),
            "stop_reason": data.get("stop_reason"),
            "usage": data.get("usage"),
        }
        return text, meta


def extract_text(data: Any) -> str:
    """Text of the first content part of a Messages API reply envelope."""
    if not isinstance(data, dict):
        raise ServiceError(f"Unexpected reply envelope of type {type(data).__name__}")
    if data.get("type") == "error":
        err = data.get("error") or {}
        if not isinstance(err, dict):
            err = {"message": str(err)}
        raise ServiceError(f"Generation service error: {err.get('type', 'error')}: {err.get('message', '')}".rstrip(": "))
    content = data.get("content")
    if not isinstance(content, list) or not content:
        raise ServiceError("Reply envelope has no content parts")
    first = content[0]
    text = first.get("text") if isinstance(first, dict) else None
    if not isinstance(text, str):
        raise ServiceError("First content part has no text")
    return text


def _error_detail(resp: Optional[requests.Response]) -> str:
    if resp is None:
        return "no response"
    try:
        err = resp.json().get("error") or {}
        if err.get("message"):
            return err["message"]
    except (ValueError, AttributeError):
        pass
    return (resp.reason or "").strip() or "request failed"
