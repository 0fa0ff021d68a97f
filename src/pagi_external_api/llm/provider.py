"""Abstract base class for LLM providers."""

from abc import ABC, abstractmethod


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    This interface allows the chat backend to be swapped without touching callers.
    """

    @abstractmethod
    def generate_response(
        self,
        prompt: str,
        system_prompt: str,
        model: str | None = None,
    ) -> str:
        """Generate a chat response for a single user prompt.

        Args:
            prompt: The user message.
            system_prompt: The system message sent before the user message.
            model: Model identifier overriding the configured default.

        Returns:
            Text of the first completion, or an empty string if there is none.

        Raises:
            LLMProviderError: If the request or response handling fails.
        """
        pass
