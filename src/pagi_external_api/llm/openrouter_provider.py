"""OpenRouter LLM provider implementation."""

from __future__ import annotations

import logging
from types import TracebackType

import requests

from pagi_external_api.config import PAGIConfig, load_config
from pagi_external_api.errors import LLMProviderError
from pagi_external_api.llm.models import ChatCompletionsRequest, ChatCompletionsResponse
from pagi_external_api.llm.provider import LLMProvider

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_URL = "https://openrouter.ai/api/v1/chat/completions"

# Attribution headers recommended by OpenRouter.
HTTP_REFERER = "https://localhost"
X_TITLE = "pagi-external-api-lib"


class OpenRouterProvider(LLMProvider):
    """OpenRouter chat-completions provider.

    A single `requests.Session` is reused for every call and the configuration
    is immutable. `requests` does not document `Session` as thread-safe, so
    threaded callers should create one provider (or pass one session) per thread.
    """

    def __init__(
        self,
        config: PAGIConfig | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the OpenRouter provider.

        Args:
            config: Configuration to use. Loaded from the environment if omitted.
            session: HTTP session to reuse. A new one is created if omitted.

        Raises:
            ConfigurationError: If config is omitted and OPENROUTER_API_KEY is missing.
        """
        self.config = (config or load_config()).model_copy()
        self._session = session or requests.Session()

        logger.debug(
            "OpenRouter provider initialized", extra={"default_model": self.config.default_model}
        )

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.openrouter_api_key}",
            "HTTP-Referer": HTTP_REFERER,
            "X-Title": X_TITLE,
        }

    def generate_response(
        self,
        prompt: str,
        system_prompt: str,
        model: str | None = None,
    ) -> str:
        """Call OpenRouter chat completions and return the raw text response.

        Args:
            prompt: The user message.
            system_prompt: The system message sent before the user message.
            model: Model identifier overriding the configured default.

        Returns:
            Text of the first choice. An empty `choices` list yields "".

        Raises:
            LLMProviderError: On transport failure, a non-success HTTP status,
                or a response body that does not match the expected shape.
        """
        body = ChatCompletionsRequest.for_prompt(
            model=model if model is not None else self.config.default_model,
            prompt=prompt,
            system_prompt=system_prompt,
        )

        logger.debug(
            "Requesting chat completion",
            extra={"model": body.model, "messages": len(body.messages)},
        )

        try:
            resp = self._session.post(
                CHAT_COMPLETIONS_URL,
                json=body.model_dump(),
                headers=self._headers(),
            )
            resp.raise_for_status()
            parsed = ChatCompletionsResponse.model_validate(resp.json())
        except ValueError as e:
            # Covers pydantic ValidationError and JSON decode errors.
            raise LLMProviderError(f"Unexpected chat completion response: {e}") from e
        except requests.RequestException as e:
            raise LLMProviderError(f"Chat completion request failed: {e}") from e

        content = parsed.first_content()
        logger.debug(
            "Chat completion received",
            extra={"choices": len(parsed.choices), "characters": len(content)},
        )
        return content

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> OpenRouterProvider:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
