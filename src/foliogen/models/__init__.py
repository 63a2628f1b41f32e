"""Data models and type definitions"""

from foliogen.models.portfolio import (
    ContactBlock,
    ExperienceEntry,
    ExperienceInput,
    GeneratedPortfolio,
    ImageSize,
    PersonalBrand,
    ProjectEntry,
    ProjectInput,
    SkillCategory,
    UserInput,
)

__all__ = [
    "ContactBlock",
    "ExperienceEntry",
    "ExperienceInput",
    "GeneratedPortfolio",
    "ImageSize",
    "PersonalBrand",
    "ProjectEntry",
    "ProjectInput",
    "SkillCategory",
    "UserInput",
]
