"""Prompt text and response schema for portfolio generation."""

from __future__ import annotations

import json
from typing import Any

from foliogen.models import UserInput

__all__ = [
    "IMAGE_ASPECT_RATIO",
    "PORTFOLIO_RESPONSE_SCHEMA",
    "SYSTEM_INSTRUCTION",
    "build_enrichment_prompt",
    "build_image_prompt",
]

SYSTEM_INSTRUCTION = (
    "You are a JSON-only generator. You must return valid JSON matching the schema provided."
)

IMAGE_ASPECT_RATIO = "1:1"


def _string() -> dict[str, Any]:
    return {"type": "STRING"}


def _string_list() -> dict[str, Any]:
    return {"type": "ARRAY", "items": _string()}


def _object(properties: dict[str, Any]) -> dict[str, Any]:
    # Every property is required at every level.
    return {
        "type": "OBJECT",
        "properties": properties,
        "required": list(properties),
    }


# Mirrors GeneratedPortfolio without heroImage.
PORTFOLIO_RESPONSE_SCHEMA: dict[str, Any] = _object(
    {
        "personalBrand": _object(
            {
                "tagline": _string(),
                "professionalSummary": _string(),
                "keyStrengths": _string_list(),
            }
        ),
        "skills": {
            "type": "ARRAY",
            "items": _object({"category": _string(), "items": _string_list()}),
        },
        "experience": {
            "type": "ARRAY",
            "items": _object(
                {
                    "company": _string(),
                    "role": _string(),
                    "duration": _string(),
                    "achievements": _string_list(),
                }
            ),
        },
        "projects": {
            "type": "ARRAY",
            "items": _object(
                {
                    "title": _string(),
                    "description": _string(),
                    "techStack": _string_list(),
                    "impact": _string(),
                }
            ),
        },
        "contact": _object({"ctaMessage": _string()}),
    }
)


def build_enrichment_prompt(user_input: UserInput) -> str:
    """Build the instruction that turns raw user data into portfolio copy."""
    experience = json.dumps(
        [entry.model_dump(by_alias=True) for entry in user_input.experience],
        ensure_ascii=False,
    )
    projects = json.dumps(
        [project.model_dump(by_alias=True) for project in user_input.projects],
        ensure_ascii=False,
    )

    return (
        "You are an expert Career Coach and Senior Technical Recruiter.\n"
        "Transform the following raw user data into a world-class, high-impact "
        "professional portfolio structure.\n\n"
        "User Data:\n"
        f"Name: {user_input.full_name}\n"
        f"Role: {user_input.current_role}\n"
        f"Raw Bio: {user_input.bio_raw}\n"
        f"Raw Skills: {user_input.skills_raw}\n\n"
        "Experience:\n"
        f"{experience}\n\n"
        "Projects:\n"
        f"{projects}\n\n"
        "Directives:\n"
        "1. Create a catchy, professional 'tagline'.\n"
        "2. Rewrite the 'professionalSummary' to be engaging and impactful "
        "(approx 3-4 sentences).\n"
        "3. Categorize the skills logically (e.g., \"Frontend\", \"Backend\", "
        "\"Tools\", \"Soft Skills\").\n"
        "4. Enhance experience bullet points to focus on achievements and metrics "
        "if possible.\n"
        "5. Enhance project descriptions to sound professional and identify a "
        "specific \"impact\" or \"result\" for each project.\n"
        "6. Ensure the tone is confident and modern.\n"
    )


def build_image_prompt(current_role: str, skills_raw: str) -> str:
    """Build the avatar prompt; palette and lighting are fixed."""
    return (
        f"A high-quality, abstract, 3D artistic representation of a {current_role} "
        "professional.\n"
        f"The image should visually represent proficiency in {skills_raw}.\n"
        "Style: Modern, Minimalist, Tech-Noir, with a color palette of Deep Blue, "
        "Rust Orange, and Honey Gold.\n"
        "Lighting: Cinematic, Volumetric.\n"
        f"Aspect ratio: {IMAGE_ASPECT_RATIO}.\n"
        "This image will be used as a profile avatar for a professional portfolio."
    )
