"""Workspace configuration models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


DEFAULT_WEEKLY_SUBDIR = "_periodic/weekly"
DEFAULT_WEEKLY_NAME_FORMAT = "YYYY-[W]WW"


class PeriodicNotes(BaseModel):
    """Where weekly notes live inside the workspace and how they are named."""

    weekly_subdir: str = DEFAULT_WEEKLY_SUBDIR
    weekly_name_format: str = DEFAULT_WEEKLY_NAME_FORMAT


class WeeklyViewComponents(BaseModel):
    habit_tracker: bool = True


class WeeklyViewConfig(BaseModel):
    enabled_components: WeeklyViewComponents = Field(default_factory=WeeklyViewComponents)


class PlannerConfig(BaseModel):
    """Planner workspace configuration.

    Attributes:
        workspace_root: Directory holding the user's notes.
        periodic_notes: Weekly note location and naming.
        weekly_view: Which weekly view components are enabled.
    """

    workspace_root: Path = Path(".")
    periodic_notes: PeriodicNotes = Field(default_factory=PeriodicNotes)
    weekly_view: WeeklyViewConfig = Field(default_factory=WeeklyViewConfig)
