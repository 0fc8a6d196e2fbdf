"""Chat-completion client used to request the code review."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from diff_reviewer.config import OPENAI_API_KEY_ENV_VAR, ReviewConfig, Settings
from diff_reviewer.errors import MissingApiKeyError, ReviewRequestError
from diff_reviewer.output import format_error_body
from diff_reviewer.prompts import build_review_prompt
from diff_reviewer.schema import ChatCompletionRequest, ChatCompletionResponse, ChatMessage


def build_openai_client(settings: Settings) -> httpx.Client:
    """Build an authenticated HTTP client for the review endpoint.

    No timeout is configured; an unresponsive endpoint blocks the run.
    """
    if not settings.api_key:
        raise MissingApiKeyError(f"Missing API key. Set {OPENAI_API_KEY_ENV_VAR}.")
    headers = {
        "Authorization": f"Bearer {settings.api_key}",
        "Content-Type": "application/json",
    }
    return httpx.Client(headers=headers, timeout=None)


def build_review_request(diff: str, review: ReviewConfig) -> ChatCompletionRequest:
    """Build the single-message request body for a diff."""
    content = build_review_prompt(diff, review.prompt_template)
    return ChatCompletionRequest(
        model=review.model,
        messages=[ChatMessage(role="user", content=content)],
    )


def _decode_error_body(response: httpx.Response) -> Any:
    """Return the JSON error payload if there is one, else the raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _raise_http_error(response: httpx.Response, endpoint: str) -> None:
    """Raise a typed error for a non-success response, keeping its error body."""
    error_body = _decode_error_body(response)
    message = f"Review request failed with status {response.status_code} for '{endpoint}'."
    if error_body is not None:
        message += f" Response: {format_error_body(error_body)}"
    raise ReviewRequestError(
        message,
        status_code=response.status_code,
        error_body=error_body,
    )


def request_code_review(*, client: httpx.Client, diff: str, review: ReviewConfig) -> str:
    """Send one review request and return the first completion's message content."""
    body = build_review_request(diff, review)
    try:
        response = client.post(review.api_url, json=body.model_dump())
    except httpx.HTTPError as error:
        raise ReviewRequestError(f"Review request failed: network error ({error}).") from error

    if not response.is_success:
        _raise_http_error(response, review.api_url)

    try:
        payload = ChatCompletionResponse.model_validate(response.json())
    except (ValueError, ValidationError) as error:
        raise ReviewRequestError(
            "Review endpoint returned an unexpected response body.",
            status_code=response.status_code,
            error_body=response.text,
        ) from error

    if not payload.choices:
        raise ReviewRequestError(
            "Review endpoint returned no completion choices.",
            status_code=response.status_code,
        )
    content = payload.choices[0].message.content
    if content is None:
        raise ReviewRequestError(
            "Review endpoint returned a completion without message content.",
            status_code=response.status_code,
        )
    return content
