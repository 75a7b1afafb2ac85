# SignalGenerator: one generation cycle.
#   build payload -> call model client -> normalize reply -> assemble document
# Works with any client exposing generate(messages, params) -> (text, meta).

from __future__ import annotations
import asyncio
import os
from datetime import date, datetime
from typing import Optional

from signal_writer.generate.config import CONFIG_PATH, load_config
from signal_writer.generate.types import Message, ModelParams
from signal_writer.log import get_logger
from signal_writer.settings import settings
from .document import assemble
from .errors import SignalError, error_message
from .normalizer import normalize
from .prompts import build_request
from .types import FormState, GenerationRequest, ResultState

logger = get_logger("signal_writer.generator")


class SignalGenerator:
    def __init__(self, model_client, config_path: str | os.PathLike = CONFIG_PATH):
        self.model_client = model_client
        self.config_path = config_path
        self.cfg = load_config(config_path)

    def model_params(self) -> ModelParams:
        """Settings win over config.yaml; config.yaml over client defaults."""
        return ModelParams(
            model=settings.SIGNAL_MODEL or self.cfg.get("model"),
            max_tokens=settings.SIGNAL_MAX_TOKENS or self.cfg.get("max_tokens"),
            timeout=settings.REQUEST_TIMEOUT or self.cfg.get("timeout"),
        )

    def request_for(self, form: FormState) -> GenerationRequest:
        return build_request(form.description, form.site, form.severity)

    def call_model(self, request: GenerationRequest) -> str:
        messages = [Message(role="user", content=request.payload)]
        text, meta = self.model_client.generate(messages, self.model_params())
        logger.info("reply received engine=%s model=%s chars=%d", meta.get("engine"), meta.get("model"), len(text))
        return text

    def generate(self, form: FormState, today: Optional[date] = None) -> str:
        """Run the cycle and return the document. Errors propagate."""
        logger.info("generation cycle start severity=%s site=%s words=%d",
                    form.severity.value, "yes" if form.site else "no", form.word_count)
        raw = self.call_model(self.request_for(form))
        record = normalize(raw)
        return assemble(record, form.site, form.severity, today=today)

    def run(self, form: FormState, today: Optional[date] = None) -> ResultState:
        """Run the cycle; a failure yields its error text instead of a document."""
        meta = {"engine": type(self.model_client).__name__, "model": getattr(self.model_client, "model", None)}
        try:
            text = self.generate(form, today=today)
        except SignalError as e:
            logger.error("generation cycle failed: %s: %s", type(e).__name__, e)
            return ResultState(text=error_message(e), ok=False, meta={**meta, "error": type(e).__name__})
        logger.info("generation cycle done chars=%d", len(text))
        return ResultState(text=text, ok=True, generated_at=datetime.now(), meta=meta)

    async def arun(self, form: FormState, today: Optional[date] = None) -> ResultState:
        """Async variant; the blocking call runs in a worker thread and is not cancellable."""
        return await asyncio.to_thread(self.run, form, today)
