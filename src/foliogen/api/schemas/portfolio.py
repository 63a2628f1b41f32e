"""Pydantic schemas for portfolio rendering endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from foliogen.models import GeneratedPortfolio, UserInput


class PortfolioRenderRequest(BaseModel):
    """Request body for rendering or exporting a generated portfolio."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_input: UserInput = Field(..., description="The form data the portfolio was generated from")
    portfolio: GeneratedPortfolio = Field(..., description="Output of the generate endpoint")


class ErrorResponse(BaseModel):
    """Error body returned when generation fails."""

    detail: str
