"""Portfolio generation: one structured-text call and one image call, run together.

The text call decides success or failure of the whole generation. The image
call is best effort; any failure there leaves ``hero_image`` unset.
"""

from __future__ import annotations

import asyncio
import json
import logging

from pydantic import ValidationError

from foliogen import config
from foliogen.models import GeneratedPortfolio, UserInput
from foliogen.services.llm_providers import (
    GeminiProvider,
    InlineImage,
    LLMConfigurationError,
    LLMError,
    LLMProvider,
    LLMResponseParseError,
)
from foliogen.services.prompts import (
    IMAGE_ASPECT_RATIO,
    PORTFOLIO_RESPONSE_SCHEMA,
    SYSTEM_INSTRUCTION,
    build_enrichment_prompt,
    build_image_prompt,
)

logger = logging.getLogger(__name__)

__all__ = ["generate_portfolio", "parse_portfolio_response", "resolve_api_key"]

_LOG_PREVIEW_CHARS = 500


def resolve_api_key(api_key: str | None = None) -> str:
    """Return *api_key* if given, otherwise re-read it from the environment.

    Raises:
        LLMConfigurationError: If no key is available.
    """
    key = (api_key or "").strip() or config.get_api_key()
    if not key:
        raise LLMConfigurationError(
            "API key is missing. Set GEMINI_API_KEY or pass an API key with the request."
        )
    return key


def parse_portfolio_response(text: str) -> GeneratedPortfolio:
    """Decode the model's JSON text into a GeneratedPortfolio.

    Any syntax error or schema violation (missing field, wrong type) is
    reported as LLMResponseParseError. ``heroImage`` in the payload is ignored.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response: %s", text[:_LOG_PREVIEW_CHARS])
        raise LLMResponseParseError("Failed to parse AI response.") from e

    if not isinstance(payload, dict):
        logger.error("Gemini response is not a JSON object: %s", text[:_LOG_PREVIEW_CHARS])
        raise LLMResponseParseError("Failed to parse AI response.")

    payload.pop("heroImage", None)
    payload.pop("hero_image", None)
    try:
        return GeneratedPortfolio.model_validate(payload)
    except ValidationError as e:
        logger.error("Gemini response does not match the portfolio schema: %s", e)
        raise LLMResponseParseError("AI response is missing required portfolio fields.") from e


async def _generate_hero_image(provider: LLMProvider, user_input: UserInput) -> InlineImage | None:
    prompt = build_image_prompt(user_input.current_role, user_input.skills_raw)
    try:
        return await provider.generate_image(
            prompt,
            image_size=user_input.image_size.value,
            aspect_ratio=IMAGE_ASPECT_RATIO,
        )
    except Exception:
        logger.warning("Image generation failed, continuing without an image", exc_info=True)
        return None


async def generate_portfolio(
    user_input: UserInput,
    *,
    api_key: str | None = None,
    provider: LLMProvider | None = None,
) -> GeneratedPortfolio:
    """Generate portfolio copy and an avatar image for *user_input*.

    Args:
        user_input: The submitted form data.
        api_key: Explicit Gemini key; when omitted the environment is re-read.
        provider: Pre-built provider, mainly for tests.

    Returns:
        The merged portfolio, with ``hero_image`` set only if an image came back.

    Raises:
        LLMConfigurationError: No API key available. Nothing is sent.
        LLMResponseParseError: The text response is not a valid portfolio.
        LLMError: The text call failed or returned nothing.
    """
    key = resolve_api_key(api_key)
    if provider is None:
        provider = GeminiProvider(
            key,
            text_model=config.get_text_model(),
            image_model=config.get_image_model(),
        )

    text_task = provider.generate_json(
        build_enrichment_prompt(user_input),
        schema=PORTFOLIO_RESPONSE_SCHEMA,
        system_instruction=SYSTEM_INSTRUCTION,
    )
    image_task = _generate_hero_image(provider, user_input)

    text_result, image_result = await asyncio.gather(
        text_task, image_task, return_exceptions=True
    )

    if isinstance(text_result, BaseException):
        if isinstance(text_result, LLMError) or not isinstance(text_result, Exception):
            raise text_result
        raise LLMError(f"Text generation failed: {text_result}") from text_result
    if not text_result or not text_result.strip():
        raise LLMError("No response generated from Gemini.")

    portfolio = parse_portfolio_response(text_result)

    if isinstance(image_result, InlineImage):
        portfolio = portfolio.model_copy(update={"hero_image": image_result.to_data_url()})
    else:
        logger.info("No hero image returned, rendering with initials")

    return portfolio
