"""Tests for the experience recency filter."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from foliogen.models import ExperienceEntry
from foliogen.services.recency import (
    WINDOW_OPTIONS,
    filter_by_recency,
    is_within_window,
    matching_windows,
    parse_window,
)


@dataclass
class _Entry:
    duration: str


def _entries(*durations: str) -> list[_Entry]:
    return [_Entry(d) for d in durations]


class TestAllWindow:
    def test_returns_input_unchanged(self) -> None:
        entries = _entries("2001 - 2003", "Summer Internship", "2024 - Present")
        result = filter_by_recency(entries, "all", current_year=2025)
        assert result is entries
        assert result == _entries("2001 - 2003", "Summer Internship", "2024 - Present")

    def test_empty_list(self) -> None:
        assert filter_by_recency([], "all") == []


class TestOngoingTokens:
    @pytest.mark.parametrize(
        "duration",
        ["2010 - Present", "2010 - PRESENT", "Current", "since 1999 (current)", "2005 - now"],
    )
    @pytest.mark.parametrize("window", [1, 3, 5])
    def test_ongoing_always_included(self, duration: str, window: int) -> None:
        assert filter_by_recency(_entries(duration), window, current_year=2025) == _entries(
            duration
        )


class TestYearWindow:
    def test_range_end_exactly_on_boundary_is_included(self) -> None:
        entries = _entries("2020 - 2022")
        assert filter_by_recency(entries, 3, current_year=2025) == entries

    def test_range_end_outside_window_is_excluded(self) -> None:
        assert filter_by_recency(_entries("2020 - 2022"), 2, current_year=2025) == []

    def test_single_year(self) -> None:
        entries = _entries("Jan 2019")
        assert filter_by_recency(entries, 5, current_year=2025) == []
        assert filter_by_recency(entries, 6, current_year=2025) == entries

    def test_uses_maximum_year_regardless_of_position(self) -> None:
        assert is_within_window("2024 to 2010", 1, 2025)

    def test_future_years_are_trusted(self) -> None:
        assert is_within_window("2020 - 2099", 1, 2025)

    def test_ignores_numbers_that_are_not_years(self) -> None:
        # 1850 and 20221 are not candidate years, so the entry is undated.
        assert is_within_window("1850 - 20221", 1, 2025)

    def test_years_adjacent_to_letters_are_not_matched(self) -> None:
        assert is_within_window("Q12019", 1, 2025)


class TestUndatedEntries:
    @pytest.mark.parametrize("window", [1, 3, 5])
    def test_unparseable_duration_is_kept(self, window: int) -> None:
        entries = _entries("Summer Internship")
        assert filter_by_recency(entries, window, current_year=2025) == entries

    def test_empty_duration_is_kept(self) -> None:
        entries = _entries("")
        assert filter_by_recency(entries, 1, current_year=2025) == entries


def test_preserves_relative_order() -> None:
    entries = _entries("2024", "2001", "Freelance", "2023 - Present", "1999")
    result = filter_by_recency(entries, 3, current_year=2025)
    assert [e.duration for e in result] == ["2024", "Freelance", "2023 - Present"]


def test_does_not_mutate_input() -> None:
    entries = _entries("2001", "2024")
    filter_by_recency(entries, 1, current_year=2025)
    assert entries == _entries("2001", "2024")


def test_defaults_to_current_calendar_year() -> None:
    entries = _entries("1990")
    assert filter_by_recency(entries, 1) == []


def test_works_with_generated_experience_entries() -> None:
    entries = [
        ExperienceEntry(company="A", role="R", duration="2015 - 2016", achievements=[]),
        ExperienceEntry(company="B", role="R", duration="2023 - Now", achievements=["x"]),
    ]
    result = filter_by_recency(entries, 5, current_year=2025)
    assert [e.company for e in result] == ["B"]


class TestMatchingWindows:
    @pytest.mark.parametrize(
        ("duration", "expected"),
        [
            ("2021 - Present", (1, 3, 5)),
            ("2020 - 2023", (3, 5)),
            ("2019 - 2020", (5,)),
            ("2010 - 2012", ()),
            ("Summer Internship", (1, 3, 5)),
        ],
    )
    def test_windows_that_keep_entry(self, duration: str, expected: tuple[int, ...]) -> None:
        assert matching_windows(duration, 2025) == expected

    def test_agrees_with_filter(self) -> None:
        entries = _entries("2024 - 2025", "2018 - 2021", "2001", "Freelance")
        for window in (1, 3, 5):
            kept = filter_by_recency(entries, window, current_year=2025)
            assert kept == [e for e in entries if window in matching_windows(e.duration, 2025)]


class TestParseWindow:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("all", "all"), ("ALL", "all"), ("1", 1), (" 3 ", 3), ("5", 5), (3, 3)],
    )
    def test_valid_values(self, raw: str | int, expected: str | int) -> None:
        assert parse_window(raw) == expected

    @pytest.mark.parametrize("raw", ["2", "ten", "", 7])
    def test_invalid_values(self, raw: str | int) -> None:
        with pytest.raises(ValueError, match="Unknown recency window"):
            parse_window(raw)

    def test_options(self) -> None:
        assert WINDOW_OPTIONS == ("all", 1, 3, 5)
