"""planner: weekly notes and habit tracking over plain Markdown files."""

from planner.exceptions import ConfigError, ParseError, PlannerError
from planner.habits import HabitService
from planner.markdown_parser import parse_markdown
from planner.markdown_writer import write_document
from planner.schemas import Habit, PlannerConfig, WeeklyHabits

__all__ = [
    "ConfigError",
    "Habit",
    "HabitService",
    "ParseError",
    "PlannerConfig",
    "PlannerError",
    "WeeklyHabits",
    "parse_markdown",
    "write_document",
]
