"""Input sanitization utilities."""
import re
from typing import Optional

from meetgrid.core.constants import (
    MAX_COMMENT_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_PARTICIPANT_NAME_LENGTH,
    MAX_TITLE_LENGTH,
)


def sanitize_text(text: str, max_length: Optional[int] = None, strip_html: bool = True) -> str:
    """
    Sanitize text input to prevent XSS attacks.

    Strips HTML tags and normalizes whitespace, but does NOT escape HTML
    entities: the frontend escapes output when rendering.

    Args:
        text: The input text to sanitize
        max_length: Optional maximum length to enforce
        strip_html: Whether to strip HTML tags (default True)

    Returns:
        Sanitized text with HTML tags removed and whitespace normalized

    Raises:
        ValueError: If text exceeds max_length or contains dangerous patterns
    """
    if not isinstance(text, str):
        raise ValueError("Input must be a string")

    sanitized = text.strip()

    if strip_html:
        sanitized = re.sub(r'<[^>]*>', '', sanitized)

    # Malformed tags or encoded attacks left over after stripping
    if '<' in sanitized or '>' in sanitized:
        raise ValueError("Input contains invalid HTML-like patterns")

    sanitized = re.sub(r'\s+', ' ', sanitized).strip()

    if max_length and len(sanitized) > max_length:
        raise ValueError(f"Input exceeds maximum length of {max_length} characters")

    return sanitized


def sanitize_required(text: str, field: str, max_length: int) -> str:
    """Sanitize a required field; empty after sanitizing is an error."""
    sanitized = sanitize_text(text, max_length=max_length)
    if not sanitized:
        raise ValueError(f"{field} cannot be empty")
    return sanitized


def sanitize_optional(text: Optional[str], max_length: int) -> Optional[str]:
    """Sanitize an optional field, collapsing blank input to None."""
    if text is None:
        return None
    sanitized = sanitize_text(text, max_length=max_length)
    return sanitized or None


def sanitize_meeting_title(title: str) -> str:
    return sanitize_required(title, "Meeting title", MAX_TITLE_LENGTH)


def sanitize_meeting_description(description: Optional[str]) -> Optional[str]:
    return sanitize_optional(description, MAX_DESCRIPTION_LENGTH)


def sanitize_participant_name(name: str) -> str:
    return sanitize_required(name, "Name", MAX_PARTICIPANT_NAME_LENGTH)


def sanitize_comment(comment: Optional[str]) -> Optional[str]:
    return sanitize_optional(comment, MAX_COMMENT_LENGTH)
