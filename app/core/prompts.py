import json
from typing import Any, List

from app.models.interview import ExtractedParameters


def build_extraction_prompt(messages: List[Any]) -> str:
    """
    Prompt for the extraction call.

    Args:
        messages: Conversation transcript exactly as the caller sent it.

    Returns:
        Prompt asking for a single JSON object with role, level, techstack,
        type and amount.
    """
    conversation = json.dumps(messages, indent=2, ensure_ascii=False, default=str)
    return (
        "You will be given a conversation between a user and an assistant.\n"
        "Extract ONLY the following fields from the conversation and return exactly one "
        "valid JSON object (no extra text):\n\n"
        "- role (job role)\n"
        "- level (experience level)\n"
        "- techstack (comma separated)\n"
        "- type (behavioural or technical focus)\n"
        "- amount (number of questions)\n\n"
        "If a field is missing, return an empty string for text fields and null for amount.\n\n"
        f"Conversation:\n{conversation}\n"
    )


def build_questions_prompt(params: ExtractedParameters) -> str:
    """Prompt for the generation call; empty fields render as 'unspecified'."""
    return (
        "You MUST return ONLY valid JSON.\n\n"
        f"Generate exactly {params.amount} interview questions based on:\n"
        f"- Role: \"{params.role or 'unspecified'}\"\n"
        f"- Level: \"{params.level or 'unspecified'}\"\n"
        f"- Techstack: \"{params.techstack or 'unspecified'}\"\n"
        f"- Focus: \"{params.type or 'mixed'}\"\n\n"
        "Return ONLY a JSON array of strings.\n"
        "No explanation, no markdown, no notes, no extra text.\n\n"
        "Example format:\n"
        "[\n"
        "  \"Question 1\",\n"
        "  \"Question 2\"\n"
        "]\n"
    )
