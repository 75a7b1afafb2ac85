# ============================================================
# Clinical Signal Writer FastAPI App
# ------------------------------------------------------------
# HTTP surface for the single-page form:
#   - Form validation (word / character caps) before a cycle
#   - One generation cycle per request (prompt -> model -> parse -> document)
#   - Anthropic client when a key is configured, Echo client otherwise
# ============================================================

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Dict, Any

# --- Local imports ---
from signal_writer.settings import settings
from signal_writer.log import get_logger
from signal_writer.signal import FormState, ResultState, Severity, SignalGenerator, build_prompt
from signal_writer.signal.types import DEFAULT_SEVERITY
from signal_writer.generate.clients.echo_dev_client import EchoDevClient

logger = get_logger("signal_writer.app")

# ------------------------------------------------------------
# 🔧 Model client selection
# ------------------------------------------------------------
if settings.use_anthropic:
    from signal_writer.generate.clients.anthropic_client import AnthropicClient
    model_client = AnthropicClient()
else:
    model_client = EchoDevClient()

signal_gen = SignalGenerator(model_client=model_client)
logger.info("model client: %s", type(model_client).__name__)

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Clinical Signal Writer API", version="0.1")

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class SignalRequest(BaseModel):
    description: str = Field(..., max_length=settings.MAX_CHARS)
    site_info: Optional[str] = None
    severity: Severity = DEFAULT_SEVERITY

    @field_validator("description")
    @classmethod
    def description_within_limits(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("description must not be empty")
        words = len(v.split())
        if words > settings.MAX_WORDS:
            raise ValueError(f"description has {words} words; the limit is {settings.MAX_WORDS}")
        return v

    def to_form(self) -> FormState:
        return FormState(
            description=self.description,
            site_info=self.site_info,
            severity=self.severity,
            max_words=settings.MAX_WORDS,
            max_chars=settings.MAX_CHARS,
        )

class SignalPayload(BaseModel):
    text: str
    ok: bool
    meta: Dict[str, Any]

class PromptPayload(BaseModel):
    prompt: str

class SeveritiesPayload(BaseModel):
    levels: List[str]
    default: str

def _payload(result: ResultState) -> SignalPayload:
    meta = dict(result.meta)
    if result.generated_at:
        meta["generated_at"] = result.generated_at.isoformat(timespec="seconds")
    return SignalPayload(text=result.text, ok=result.ok, meta=meta)

# ------------------------------------------------------------
# ✍️ Signal routes
# ------------------------------------------------------------
@app.post("/signals", response_model=SignalPayload)
async def create_signal(req: SignalRequest):
    try:
        result = await signal_gen.arun(req.to_form())
    except Exception as e:
        logger.exception("unexpected failure in generation cycle")
        raise HTTPException(status_code=500, detail=str(e))
    return _payload(result)

@app.post("/signals/download", response_class=PlainTextResponse)
async def download_signal(req: SignalRequest):
    try:
        result = await signal_gen.arun(req.to_form())
    except Exception as e:
        logger.exception("unexpected failure in generation cycle")
        raise HTTPException(status_code=500, detail=str(e))
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.text)
    return PlainTextResponse(
        result.text,
        headers={"Content-Disposition": f'attachment; filename="{settings.EXPORT_FILENAME}"'},
    )

@app.post("/prompt", response_model=PromptPayload)
def preview_prompt(req: SignalRequest):
    form = req.to_form()
    return PromptPayload(prompt=build_prompt(form.description, form.site, form.severity))

@app.get("/severities", response_model=SeveritiesPayload)
def list_severities():
    return SeveritiesPayload(levels=[s.value for s in Severity], default=DEFAULT_SEVERITY.value)

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
        "engine": type(model_client).__name__,
    }

@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}

@app.get("/")
def hello():
    return {"message": f"{settings.app_name} service running."}
