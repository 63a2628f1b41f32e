"""Derived, display-ready view of a generated portfolio."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from foliogen.models import (
    ExperienceEntry,
    GeneratedPortfolio,
    UserInput,
)
from foliogen.services.recency import (
    ALL,
    WINDOW_OPTIONS,
    Window,
    filter_by_recency,
    matching_windows,
)
from foliogen.utils.export import portfolio_pdf_filename

__all__ = [
    "PortfolioView",
    "Theme",
    "build_portfolio_view",
    "empty_window_message",
    "first_name",
    "initials",
    "window_label",
]


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


def initials(name: str) -> str:
    """Return up to two uppercase initials, e.g. ``"Ada Lovelace"`` -> ``"AL"``."""
    return "".join(word[0] for word in name.split()[:2]).upper()


def first_name(name: str) -> str:
    words = name.split()
    return words[0] if words else ""


def window_label(window: Window) -> str:
    return "All" if window == ALL else f"{window}Y"


def empty_window_message(window: Window) -> str:
    if window == ALL:
        return "No experience listed yet."
    return f"No experience found within the last {window} years."


@dataclass(slots=True)
class PortfolioView:
    """Everything the page template needs, with all fallbacks resolved.

    Attributes:
        user: The original form input.
        portfolio: The generated content.
        theme: Active colour theme.
        window: Active recency window.
        experience: Experience entries inside the window, original order.
        hero_image: ``data:`` URL or None; use ``initials`` when None.
        timeline: Every experience entry paired with the year windows that
            keep it, so the page can refilter without a round trip.
    """

    user: UserInput
    portfolio: GeneratedPortfolio
    theme: Theme
    window: Window
    experience: list[ExperienceEntry]
    hero_image: str | None
    initials: str
    brand: str
    experience_count: int
    project_count: int
    pdf_filename: str
    timeline: list[tuple[ExperienceEntry, tuple[int, ...]]]
    window_options: tuple[str | int, ...] = WINDOW_OPTIONS

    @property
    def empty_experience_message(self) -> str | None:
        if self.experience:
            return None
        return empty_window_message(self.window)


def build_portfolio_view(
    user_input: UserInput,
    portfolio: GeneratedPortfolio,
    *,
    window: Window = ALL,
    theme: Theme = Theme.DARK,
    current_year: int | None = None,
) -> PortfolioView:
    """Resolve filters and fallbacks for rendering; never raises on empty content."""
    year = current_year if current_year is not None else date.today().year
    experience = list(filter_by_recency(portfolio.experience, window, current_year=year))

    return PortfolioView(
        user=user_input,
        portfolio=portfolio,
        theme=theme,
        window=window,
        experience=experience,
        hero_image=portfolio.hero_image or None,
        initials=initials(user_input.full_name),
        brand=first_name(user_input.full_name),
        # Counts come from the raw input, matching what the user entered.
        experience_count=len(user_input.experience),
        project_count=len(user_input.projects),
        pdf_filename=portfolio_pdf_filename(user_input.full_name),
        timeline=[
            (entry, matching_windows(entry.duration, year)) for entry in portfolio.experience
        ],
    )
