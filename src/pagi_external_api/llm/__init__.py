"""LLM package initialization."""

from pagi_external_api.llm.openrouter_provider import OpenRouterProvider
from pagi_external_api.llm.provider import LLMProvider

__all__ = [
    "LLMProvider",
    "OpenRouterProvider",
]
