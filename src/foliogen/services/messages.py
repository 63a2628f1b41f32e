"""User-facing messages for generation failures."""

from __future__ import annotations

from foliogen.services.llm_providers import LLMConfigurationError

MISSING_KEY_MESSAGE = (
    "No Gemini API key is configured. Select an API key or set GEMINI_API_KEY, then try again."
)
GENERATION_FAILED_MESSAGE = (
    "We encountered an error contacting the AI architect. Please ensure you have selected "
    "a valid API Key with billing enabled for Gemini Pro Image models."
)


def user_message_for(error: Exception) -> str:
    """Return the message shown to the user for a failed generation.

    Parse failures currently share the generic message with transport errors.
    """
    if isinstance(error, LLMConfigurationError):
        return MISSING_KEY_MESSAGE
    return GENERATION_FAILED_MESSAGE
