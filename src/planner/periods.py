"""Addressing of weekly periods: note file names and neighbouring weeks."""

from __future__ import annotations

import re
from pathlib import Path

from planner.schemas import PlannerConfig

# Week numbers are clamped to this when stepping back across a year
# boundary, so week 53 of ISO long years is never reached that way.
MAX_WEEKS_PER_YEAR = 52
NOTE_SUFFIX = ".md"

_NAME_TOKEN_RE = re.compile(r"\[([^\]]*)\]|YYYY|YY|WW|W")


def format_period_name(name_format: str, year: int, week: int) -> str:
    """Expand a moment-style name format for one week.

    Supported tokens are ``YYYY``, ``YY``, ``WW`` (zero padded), ``W`` and
    ``[literal]`` sections; anything else is copied through.

    >>> format_period_name("YYYY-[W]WW", 2024, 1)
    '2024-W01'
    """

    def _expand(match: re.Match[str]) -> str:
        literal = match.group(1)
        if literal is not None:
            return literal
        token = match.group(0)
        if token == "YYYY":
            return f"{year:04d}"
        if token == "YY":
            return f"{year % 100:02d}"
        if token == "WW":
            return f"{week:02d}"
        return str(week)

    return _NAME_TOKEN_RE.sub(_expand, name_format)


def weekly_file_path(config: PlannerConfig, year: int, week: int) -> Path:
    """Path of the weekly note for ``(year, week)`` inside the workspace."""
    periodic = config.periodic_notes
    filename = format_period_name(periodic.weekly_name_format, year, week) + NOTE_SUFFIX
    return Path(config.workspace_root).expanduser() / periodic.weekly_subdir / filename


def previous_period(year: int, week: int) -> tuple[int, int]:
    """Return the week before ``(year, week)``."""
    if week > 1:
        return year, week - 1
    return year - 1, MAX_WEEKS_PER_YEAR


def week_title(week: int) -> str:
    """Title of the top-level heading of a weekly note."""
    return f"Week {week:02d}"
