"""Test setup for planner."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from planner.habits import HabitService  # noqa: E402
from planner.schemas import PeriodicNotes, PlannerConfig  # noqa: E402


@pytest.fixture
def planner_config(tmp_path: Path) -> PlannerConfig:
    """Config rooted in a temporary workspace."""
    return PlannerConfig(
        workspace_root=tmp_path,
        periodic_notes=PeriodicNotes(weekly_subdir="weekly", weekly_name_format="YYYY-[W]WW"),
    )


@pytest.fixture
def service(planner_config: PlannerConfig) -> HabitService:
    return HabitService(planner_config)
