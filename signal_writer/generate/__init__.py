# Generator package

# Model clients and the types they share.

from .types import Message, ModelParams
from .clients.echo_dev_client import EchoDevClient
from .clients.anthropic_client import AnthropicClient

__all__ = ["Message", "ModelParams", "EchoDevClient", "AnthropicClient"]
