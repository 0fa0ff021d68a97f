"""Exception types raised by the library."""

from __future__ import annotations

from dataclasses import dataclass


class PAGIError(Exception):
    """Base class for all library errors."""


class ConfigurationError(PAGIError):
    """Raised when configuration cannot be loaded.

    This is a startup error. Callers are not expected to recover from it.
    """


@dataclass(frozen=True, slots=True)
class MissingCredentialError(PAGIError):
    """Raised when an integration is used without its API token."""

    variable: str

    def __str__(self) -> str:
        return f"{self.variable} is not set"


class LLMProviderError(PAGIError):
    """Raised when a chat completion call fails.

    Covers transport failures, non-success HTTP statuses and response bodies
    that cannot be parsed. The original exception is chained as ``__cause__``.
    """
