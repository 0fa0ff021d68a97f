"""Wire models for the OpenRouter chat-completions endpoint."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    role: Literal["system", "user"]
    content: str


class ChatCompletionsRequest(BaseModel):
    """Request body: the model and the ordered system/user messages."""

    model: str
    messages: list[ChatMessage]

    @classmethod
    def for_prompt(cls, *, model: str, prompt: str, system_prompt: str) -> ChatCompletionsRequest:
        # The API expects the system message before the user message.
        return cls(
            model=model,
            messages=[
                ChatMessage(role="system", content=system_prompt),
                ChatMessage(role="user", content=prompt),
            ],
        )


class ChoiceMessage(BaseModel):
    content: str


class ChatChoice(BaseModel):
    message: ChoiceMessage


class ChatCompletionsResponse(BaseModel):
    """Subset of the response body we rely on. Unknown fields are ignored."""

    id: str | None = Field(default=None)
    choices: list[ChatChoice]

    def first_content(self) -> str:
        """Return the first choice's text, or "" when there are no choices."""

        if not self.choices:
            return ""
        return self.choices[0].message.content
