# Signal package: prompt building, reply normalizing, document assembly
# and the generation cycle that ties them together.

from .types import FormState, GenerationRecord, GenerationRequest, ResultState, Severity
from .errors import GenerationError, NetworkError, ParseError, ServiceError, SignalError
from .prompts import build_prompt, build_request
from .normalizer import normalize, strip_fences
from .document import assemble
from .generator import SignalGenerator

__all__ = [
    "FormState",
    "GenerationRecord",
    "GenerationRequest",
    "ResultState",
    "Severity",
    "GenerationError",
    "NetworkError",
    "ParseError",
    "ServiceError",
    "SignalError",
    "build_prompt",
    "build_request",
    "normalize",
    "strip_fences",
    "assemble",
    "SignalGenerator",
]
