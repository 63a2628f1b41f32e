from __future__ import annotations

import base64
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

"""LLM provider implementations."""


class LLMError(RuntimeError):
    """Raised when LLM service cannot be used or fails."""


class LLMConfigurationError(LLMError):
    """Raised when no API credential is available."""


class LLMResponseParseError(LLMError):
    """Raised when the model's text cannot be decoded into the expected record."""


@dataclass(slots=True, frozen=True)
class InlineImage:
    """Raw image bytes returned inline by an image model."""

    data: bytes | str
    mime_type: str = "image/png"

    def to_data_url(self) -> str:
        """Encode as a ``data:`` URL usable directly as an image source.

        ``data`` may already be base64 text when it came from a JSON payload.
        """
        if isinstance(self.data, str):
            encoded = self.data
        else:
            encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    async def generate_json(
        self,
        prompt: str,
        *,
        schema: dict[str, Any],
        system_instruction: str | None = None,
    ) -> str:
        """Request a JSON-only response constrained by *schema*.

        Args:
            prompt: The full prompt string.
            schema: Response schema the output must conform to.
            system_instruction: Optional system-level instruction.

        Returns:
            The raw JSON text returned by the model.
        """

    @abstractmethod
    async def generate_image(
        self,
        prompt: str,
        *,
        image_size: str,
        aspect_ratio: str = "1:1",
    ) -> InlineImage | None:
        """Request an image and return the first inline payload, if any."""


class GeminiProvider(LLMProvider):
    """Gemini implementation backed by the async ``google-genai`` client."""

    def __init__(
        self,
        api_key: str,
        *,
        text_model: str,
        image_model: str,
    ) -> None:
        """Build a client bound to *api_key*.

        Args:
            api_key: Gemini API key.
            text_model: Model used for structured text.
            image_model: Model used for image synthesis.

        Raises:
            LLMConfigurationError: If *api_key* is empty.
        """
        from google import genai

        if not api_key:
            raise LLMConfigurationError("Missing Gemini API key")

        self.api_key = api_key
        self.text_model = text_model
        self.image_model = image_model
        self.client = genai.Client(api_key=api_key)

    async def generate_json(
        self,
        prompt: str,
        *,
        schema: dict[str, Any],
        system_instruction: str | None = None,
    ) -> str:
        config: dict[str, Any] = {
            "response_mime_type": "application/json",
            "response_schema": schema,
        }
        if system_instruction:
            config["system_instruction"] = system_instruction

        try:
            response = await self.client.aio.models.generate_content(
                model=self.text_model, contents=prompt, config=config
            )
        except Exception as e:
            raise LLMError(f"Gemini API call failed: {e}") from e

        text = (response.text or "").strip()
        if not text:
            raise LLMError("Gemini returned an empty response")
        return text

    async def generate_image(
        self,
        prompt: str,
        *,
        image_size: str,
        aspect_ratio: str = "1:1",
    ) -> InlineImage | None:
        config = {
            "image_config": {
                "image_size": image_size,
                "aspect_ratio": aspect_ratio,
            }
        }
        try:
            response = await self.client.aio.models.generate_content(
                model=self.image_model, contents=prompt, config=config
            )
        except Exception as e:
            raise LLMError(f"Gemini image call failed: {e}") from e

        return first_inline_image(response)


def first_inline_image(response: Any) -> InlineImage | None:
    """Return the first inline image part of a Gemini response, or None."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    for part in getattr(content, "parts", None) or []:
        inline = getattr(part, "inline_data", None)
        if inline is None or not inline.data:
            continue
        return InlineImage(data=inline.data, mime_type=inline.mime_type or "image/png")
    return None
