"""Shared schemas for planner."""

from planner.schemas.config import (
    PeriodicNotes,
    PlannerConfig,
    WeeklyViewComponents,
    WeeklyViewConfig,
)
from planner.schemas.habits import Habit, WeeklyHabits

__all__ = [
    "Habit",
    "PeriodicNotes",
    "PlannerConfig",
    "WeeklyHabits",
    "WeeklyViewComponents",
    "WeeklyViewConfig",
]
