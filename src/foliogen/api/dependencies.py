"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Header


def get_request_api_key(
    x_api_key: Annotated[
        str | None,
        Header(
            description=(
                "Gemini API key for this request. When omitted the server's "
                "GEMINI_API_KEY environment variable is used."
            )
        ),
    ] = None,
) -> str | None:
    """Return the caller-supplied API key, or None to fall back to the environment.

    Args:
        x_api_key: Key from the X-Api-Key header.

    Returns:
        str | None: The key, or None when the header is missing or blank.
    """
    if x_api_key and x_api_key.strip():
        return x_api_key.strip()
    return None
