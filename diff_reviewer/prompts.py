"""Prompt templates sent alongside the diff."""

from __future__ import annotations

CRITIQUE_INSTRUCTION = (
    "Give me a code review based on the git diff above. Be as critical as possible."
)

REVIEW_CATEGORIES = (
    "code_quality",
    "readability",
    "maintainability",
    "performance",
    "security",
    "accessibility",
)

_CATEGORY_SHAPE = '{ "score": <0-10>, "feedback": "<text>", "suggestions": ["<text>", ...] }'

STRUCTURED_RESPONSE_INSTRUCTION = "\n".join(
    [
        "Respond only with JSON in exactly this shape:",
        "{",
        '  "overall": { "score": <0-10>, "summary": "<text>", "verdict": "<text>" },',
        '  "categories": {',
        ",\n".join(f'    "{category}": {_CATEGORY_SHAPE}' for category in REVIEW_CATEGORIES),
        "  }",
        "}",
        "Every score is a number from 0 to 10.",
    ]
)

CRITIQUE_PROMPT = CRITIQUE_INSTRUCTION
STRUCTURED_CRITIQUE_PROMPT = f"{CRITIQUE_INSTRUCTION}\n{STRUCTURED_RESPONSE_INSTRUCTION}"


def build_review_prompt(diff: str, template: str = STRUCTURED_CRITIQUE_PROMPT) -> str:
    """Concatenate the diff with the review instruction."""
    return f"{diff}\n{template}"
