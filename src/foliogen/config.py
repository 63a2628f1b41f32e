"""Runtime configuration read from the environment.

Values are looked up on every call rather than cached at import, so a key
exported (or written to ``.env`` and reloaded) between requests is picked up
without restarting the process.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load GEMINI_API_KEY, LLM_MODEL, IMAGE_MODEL from a local .env if present
load_dotenv()

DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "gemini-3-pro-image-preview"

__all__ = [
    "DEFAULT_IMAGE_MODEL",
    "DEFAULT_TEXT_MODEL",
    "get_api_key",
    "get_image_model",
    "get_text_model",
]


def get_api_key() -> str | None:
    """Return the Gemini API key, or None when no usable key is set.

    ``GEMINI_API_KEY`` takes precedence over the generic ``API_KEY``.
    Blank values are treated as missing.
    """
    for name in ("GEMINI_API_KEY", "API_KEY"):
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return None


def get_text_model() -> str:
    """Model used for the structured portfolio copy."""
    return os.environ.get("LLM_MODEL", DEFAULT_TEXT_MODEL)


def get_image_model() -> str:
    """Model used for the avatar image."""
    return os.environ.get("IMAGE_MODEL", DEFAULT_IMAGE_MODEL)
