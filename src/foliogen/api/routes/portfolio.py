"""Portfolio generation, rendering and export routes for the API."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import HTMLResponse

from foliogen.api.dependencies import get_request_api_key
from foliogen.api.schemas.portfolio import ErrorResponse, PortfolioRenderRequest
from foliogen.models import GeneratedPortfolio, UserInput
from foliogen.rendering import PortfolioView, Theme, build_portfolio_view, render_portfolio_html
from foliogen.services import portfolio_generator
from foliogen.services.llm_providers import LLMConfigurationError, LLMError
from foliogen.services.messages import user_message_for
from foliogen.services.recency import parse_window
from foliogen.utils.export import attachment_header, export_portfolio_pdf

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/portfolio", tags=["portfolio"])

WindowQuery = Annotated[
    str,
    Query(description="Recency window for experience: all, 1, 3 or 5 (years)"),
]
ThemeQuery = Annotated[Theme, Query(description="Colour theme of the page")]


def _build_view(request: PortfolioRenderRequest, window: str, theme: Theme) -> PortfolioView:
    try:
        parsed_window = parse_window(window)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e
    return build_portfolio_view(
        request.user_input,
        request.portfolio,
        window=parsed_window,
        theme=theme,
    )


@router.post(
    "/generate",
    response_model=GeneratedPortfolio,
    responses={
        status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
        status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
    },
    summary="Generate portfolio content",
    description=(
        "Rewrite the submitted profile into portfolio copy and generate an avatar image. "
        "The image is optional: if it fails, heroImage is null and the request still succeeds."
    ),
)
async def generate(
    user_input: UserInput,
    api_key: Annotated[str | None, Depends(get_request_api_key)],
) -> GeneratedPortfolio:
    """Run both AI calls for *user_input* and return the merged portfolio."""
    try:
        return await portfolio_generator.generate_portfolio(user_input, api_key=api_key)
    except LLMConfigurationError as e:
        logger.warning("Portfolio generation refused: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=user_message_for(e),
        ) from e
    except LLMError as e:
        logger.exception("Portfolio generation failed")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=user_message_for(e),
        ) from e


@router.post(
    "/render",
    response_class=HTMLResponse,
    summary="Render a portfolio page",
    description="Render a generated portfolio as a single HTML page.",
)
def render(
    request: PortfolioRenderRequest,
    window: WindowQuery = "all",
    theme: ThemeQuery = Theme.DARK,
) -> HTMLResponse:
    """Return the portfolio page for the given window and theme."""
    view = _build_view(request, window, theme)
    return HTMLResponse(content=render_portfolio_html(view))


@router.post(
    "/export",
    response_class=Response,
    summary="Export a portfolio as PDF",
    description="Render a generated portfolio as a downloadable PDF document.",
)
def export(
    request: PortfolioRenderRequest,
    window: WindowQuery = "all",
    theme: ThemeQuery = Theme.DARK,
) -> Response:
    """Return the portfolio as a PDF attachment."""
    view = _build_view(request, window, theme)
    return Response(
        content=export_portfolio_pdf(view),
        media_type="application/pdf",
        headers={"Content-Disposition": attachment_header(view.user.full_name)},
    )
