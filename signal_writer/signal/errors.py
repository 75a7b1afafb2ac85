from __future__ import annotations
from typing import Optional


class SignalError(Exception):
    """Base class for failures that end a generation cycle."""


class GenerationError(SignalError):
    """The generation service could not produce a reply."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class NetworkError(GenerationError):
    """Transport failure or non-success HTTP status."""


class ServiceError(GenerationError):
    """Malformed or error envelope returned by the service."""


class ParseError(SignalError):
    """The reply could not be turned into a GenerationRecord."""


ERROR_TEMPLATE = "Error generating signal: {message}. Please try again or check your input."


def error_message(exc: BaseException) -> str:
    """Text shown in place of the document when a cycle fails."""
    return ERROR_TEMPLATE.format(message=str(exc).rstrip("."))
