"""Request and response envelopes for the chat-completion endpoint.

Only the HTTP envelope is modelled. The review text inside the first choice is
passed through as free text, even when the prompt asks for JSON.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ReviewStatus(StrEnum):
    """Terminal state of a successful review run."""

    NO_CHANGES = "no_changes"
    REVIEWED = "reviewed"


class ChatMessage(BaseModel):
    """One role-tagged chat message."""

    model_config = ConfigDict(extra="ignore")

    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(BaseModel):
    """Body of the review request."""

    model_config = ConfigDict(extra="forbid")

    model: str = Field(min_length=1)
    messages: list[ChatMessage] = Field(min_length=1)


class ChatChoiceMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str | None = None


class ChatChoice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: ChatChoiceMessage


class ChatCompletionResponse(BaseModel):
    """Subset of the completion response the reviewer consumes."""

    model_config = ConfigDict(extra="ignore")

    choices: list[ChatChoice] = Field(default_factory=list)
