"""Tests for weekly period addressing."""

from __future__ import annotations

from pathlib import Path

import pytest

from planner.periods import format_period_name, previous_period, week_title, weekly_file_path
from planner.schemas import PeriodicNotes, PlannerConfig


@pytest.mark.parametrize(
    ("name_format", "year", "week", "expected"),
    [
        ("YYYY-[W]WW", 2024, 1, "2024-W01"),
        ("YYYY-[W]WW", 2023, 52, "2023-W52"),
        ("YY-W", 2024, 7, "24-7"),
        ("[Week] WW, YYYY", 2024, 9, "Week 09, 2024"),
        ("weekly", 2024, 1, "weekly"),
    ],
)
def test_format_period_name(name_format: str, year: int, week: int, expected: str) -> None:
    assert format_period_name(name_format, year, week) == expected


def test_weekly_file_path(tmp_path: Path) -> None:
    config = PlannerConfig(
        workspace_root=tmp_path,
        periodic_notes=PeriodicNotes(weekly_subdir="_periodic/weekly"),
    )

    assert weekly_file_path(config, 2024, 3) == tmp_path / "_periodic" / "weekly" / "2024-W03.md"


@pytest.mark.parametrize(
    ("year", "week", "expected"),
    [
        (2024, 2, (2024, 1)),
        (2024, 30, (2024, 29)),
        (2024, 1, (2023, 52)),
        (2021, 1, (2020, 52)),
    ],
)
def test_previous_period(year: int, week: int, expected: tuple[int, int]) -> None:
    assert previous_period(year, week) == expected


@pytest.mark.parametrize(("week", "expected"), [(1, "Week 01"), (12, "Week 12"), (53, "Week 53")])
def test_week_title(week: int, expected: str) -> None:
    assert week_title(week) == expected
