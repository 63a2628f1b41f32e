"""Recency window filter for experience entries.

Durations are free text ("Jan 2019 - Mar 2021", "2022 - Present",
"Summer Internship"), so the filter works from whatever years it can find
and keeps anything it cannot date.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import date
from typing import Literal, Protocol, TypeVar

__all__ = [
    "ALL",
    "ONGOING_TOKENS",
    "WINDOW_OPTIONS",
    "Window",
    "filter_by_recency",
    "is_within_window",
    "matching_windows",
    "parse_window",
]

ALL = "all"
ONGOING_TOKENS = ("present", "current", "now")
WINDOW_OPTIONS: tuple[str | int, ...] = (ALL, 1, 3, 5)

Window = Literal["all"] | int

_YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")


class _HasDuration(Protocol):
    duration: str


EntryT = TypeVar("EntryT", bound=_HasDuration)


def is_within_window(duration: str, window_years: int, current_year: int) -> bool:
    """Return True if an entry with *duration* falls in the last *window_years*."""
    text = duration.lower()
    if any(token in text for token in ONGOING_TOKENS):
        return True

    years = [int(match) for match in _YEAR_PATTERN.findall(text)]
    if not years:
        return True

    end_year = max(years)
    return (current_year - end_year) <= window_years


def matching_windows(duration: str, current_year: int) -> tuple[int, ...]:
    """Return the year windows in WINDOW_OPTIONS that keep *duration*."""
    return tuple(
        window
        for window in WINDOW_OPTIONS
        if window != ALL and is_within_window(duration, window, current_year)
    )


def filter_by_recency(
    entries: Sequence[EntryT],
    window_years: Window,
    *,
    current_year: int | None = None,
) -> Sequence[EntryT]:
    """Keep the entries that ended within the last *window_years* years.

    ``"all"`` returns *entries* itself. Otherwise order is preserved and a
    new list is returned.
    """
    if window_years == ALL:
        return entries

    year = current_year if current_year is not None else date.today().year
    return [entry for entry in entries if is_within_window(entry.duration, window_years, year)]


def parse_window(value: str | int) -> Window:
    """Parse a window selector such as ``"all"`` or ``"3"``.

    Raises:
        ValueError: If *value* is not one of WINDOW_OPTIONS.
    """
    if isinstance(value, str):
        value = value.strip().lower()
        if value != ALL:
            try:
                value = int(value)
            except ValueError:
                raise ValueError(f"Unknown recency window: {value!r}") from None
    if value not in WINDOW_OPTIONS:
        raise ValueError(f"Unknown recency window: {value!r}")
    return value
