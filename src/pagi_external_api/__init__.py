"""PAGI external API and LLM provider library.

Centralizes:
- configuration loaded from `.env` and environment variables
- outbound network I/O to external providers
- LLM chat completions through OpenRouter
"""

__version__ = "0.1.0"

from pagi_external_api.config import PAGIConfig, load_config
from pagi_external_api.errors import (
    ConfigurationError,
    LLMProviderError,
    MissingCredentialError,
    PAGIError,
)
from pagi_external_api.integrations import (
    CrowdstrikeClient,
    HostIsolator,
    IssueTracker,
    JiraClient,
)
from pagi_external_api.llm import LLMProvider, OpenRouterProvider
from pagi_external_api.logging import configure_logging

__all__ = [
    "__version__",
    "ConfigurationError",
    "CrowdstrikeClient",
    "HostIsolator",
    "IssueTracker",
    "JiraClient",
    "LLMProvider",
    "LLMProviderError",
    "MissingCredentialError",
    "OpenRouterProvider",
    "PAGIConfig",
    "PAGIError",
    "configure_logging",
    "load_config",
]
