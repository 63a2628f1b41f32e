"""Data models for the portfolio generator.

Field names are snake_case in Python and camelCase on the wire, matching the
browser form payload and the JSON schema sent to Gemini. Both spellings are
accepted on input.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ImageSize(str, Enum):
    """Resolution tiers supported by the image model."""

    SMALL = "1K"
    MEDIUM = "2K"
    LARGE = "4K"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ExperienceInput(_CamelModel):
    """A raw work-history entry as typed by the user.

    ``id`` only identifies the row while editing the form.
    """

    id: str = ""
    company: str = ""
    role: str = ""
    duration: str = ""
    description: str = ""


class ProjectInput(_CamelModel):
    """A raw project entry; ``tech_stack`` is free text, usually comma separated."""

    id: str = ""
    title: str = ""
    tech_stack: str = ""
    description: str = ""


class UserInput(_CamelModel):
    """Everything the user submits to generate a portfolio."""

    full_name: str = Field(..., description="Display name")
    current_role: str = Field(..., description="Current or target job title")
    bio_raw: str = Field(..., description="Unedited bio text")
    skills_raw: str = Field(..., description="Comma separated skills")
    contact_email: str = Field(..., description="Address used for the contact link")
    github_url: str | None = Field(None, description="GitHub profile URL")
    linkedin_url: str | None = Field(None, description="LinkedIn profile URL")
    image_size: ImageSize = Field(ImageSize.SMALL, description="Avatar resolution tier")
    experience: list[ExperienceInput] = Field(default_factory=list)
    projects: list[ProjectInput] = Field(default_factory=list)

    @field_validator("full_name", "current_role", "bio_raw", "skills_raw", "contact_email")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("github_url", "linkedin_url")
    @classmethod
    def _check_url(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        value = value.strip()
        if not value.startswith(("http://", "https://")) or "." not in value:
            raise ValueError("must be an http(s) URL")
        return value


class PersonalBrand(_CamelModel):
    tagline: str
    professional_summary: str
    key_strengths: list[str]


class SkillCategory(_CamelModel):
    category: str
    items: list[str]


class ExperienceEntry(_CamelModel):
    """An experience entry rewritten as achievement bullets."""

    company: str
    role: str
    duration: str
    achievements: list[str]


class ProjectEntry(_CamelModel):
    title: str
    description: str
    tech_stack: list[str]
    impact: str


class ContactBlock(_CamelModel):
    cta_message: str


class GeneratedPortfolio(_CamelModel):
    """AI-enriched portfolio content.

    Built once per generation; ``hero_image`` is a ``data:`` URL or None when
    image synthesis produced nothing.
    """

    personal_brand: PersonalBrand
    skills: list[SkillCategory]
    experience: list[ExperienceEntry]
    projects: list[ProjectEntry]
    contact: ContactBlock
    hero_image: str | None = None
