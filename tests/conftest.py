from __future__ import annotations

import base64
import copy
import json
from typing import Any

import pytest

from foliogen.models import GeneratedPortfolio, UserInput
from foliogen.services.llm_providers import InlineImage, LLMProvider

# 1x1 transparent PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

PORTFOLIO_PAYLOAD: dict[str, Any] = {
    "personalBrand": {
        "tagline": "Shipping calm, fast backends",
        "professionalSummary": "Backend engineer with a focus on reliable APIs.",
        "keyStrengths": ["API design", "Observability"],
    },
    "skills": [
        {"category": "Backend", "items": ["Python", "FastAPI"]},
        {"category": "Tools", "items": ["Docker"]},
    ],
    "experience": [
        {
            "company": "Acme",
            "role": "Senior Engineer",
            "duration": "2022 - Present",
            "achievements": ["Cut p95 latency by 40%"],
        },
        {
            "company": "Globex",
            "role": "Engineer",
            "duration": "2016 - 2019",
            "achievements": ["Built the billing pipeline"],
        },
    ],
    "projects": [
        {
            "title": "Tracer",
            "description": "Distributed tracing for small teams.",
            "techStack": ["Python", "OpenTelemetry"],
            "impact": "Adopted by 3 internal teams",
        }
    ],
    "contact": {"ctaMessage": "Let's build something reliable."},
}


class FakeProvider(LLMProvider):
    """Provider returning canned results and recording calls."""

    def __init__(
        self,
        *,
        text: str | Exception | None = None,
        image: InlineImage | Exception | None = None,
    ) -> None:
        self.text = json.dumps(PORTFOLIO_PAYLOAD) if text is None else text
        self.image = image
        self.json_calls: list[dict[str, Any]] = []
        self.image_calls: list[dict[str, Any]] = []

    @property
    def call_count(self) -> int:
        return len(self.json_calls) + len(self.image_calls)

    async def generate_json(self, prompt, *, schema, system_instruction=None):
        self.json_calls.append(
            {"prompt": prompt, "schema": schema, "system_instruction": system_instruction}
        )
        if isinstance(self.text, Exception):
            raise self.text
        return self.text

    async def generate_image(self, prompt, *, image_size, aspect_ratio="1:1"):
        self.image_calls.append(
            {"prompt": prompt, "image_size": image_size, "aspect_ratio": aspect_ratio}
        )
        if isinstance(self.image, Exception):
            raise self.image
        return self.image


@pytest.fixture
def portfolio_payload() -> dict[str, Any]:
    return copy.deepcopy(PORTFOLIO_PAYLOAD)


@pytest.fixture
def user_input() -> UserInput:
    return UserInput.model_validate(
        {
            "fullName": "Ada Lovelace",
            "currentRole": "Backend Engineer",
            "bioRaw": "i build apis and like tracing",
            "skillsRaw": "Python, FastAPI, Docker",
            "contactEmail": "ada@example.com",
            "githubUrl": "https://github.com/ada",
            "imageSize": "2K",
            "experience": [
                {
                    "id": "1",
                    "company": "Acme",
                    "role": "Senior Engineer",
                    "duration": "2022 - Present",
                    "description": "backend stuff",
                }
            ],
            "projects": [
                {
                    "id": "p1",
                    "title": "Tracer",
                    "techStack": "Python, OpenTelemetry",
                    "description": "tracing tool",
                }
            ],
        }
    )


@pytest.fixture
def portfolio(portfolio_payload: dict[str, Any]) -> GeneratedPortfolio:
    return GeneratedPortfolio.model_validate(portfolio_payload)


@pytest.fixture
def no_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)


@pytest.fixture
def make_provider():
    """Factory for FakeProvider instances."""
    return FakeProvider


@pytest.fixture
def png_image() -> InlineImage:
    return InlineImage(data=PNG_BYTES, mime_type="image/png")
