"""Habit tracking persisted in weekly Markdown notes.

Each week has one note. Its habits live as checkbox lines under::

    # Week NN
    ## Habits
    - [ ] Exercise
    - [x] Read

Every operation reads the note, changes the habit set, and writes the whole
note back. Content outside the ``Habits`` heading is kept; content inside it
is replaced by the current habit list on every save.

Lookup is lenient: the first ``Week NN`` heading is used wherever it sits in
the note, and the first ``Habits`` heading below it at any level. A missing
pair is created as a top-level ``#`` heading with a ``##`` child.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from planner.exceptions import ParseError
from planner.markdown_parser import parse_markdown
from planner.markdown_writer import write_document
from planner.nodes import Document, Heading, Task, find_heading_by_title, find_tasks
from planner.periods import previous_period, week_title, weekly_file_path
from planner.schemas import Habit, PlannerConfig, WeeklyHabits

logger = logging.getLogger(__name__)

HABITS_HEADING_TITLE = "Habits"


class HabitService:
    """Load, change, and save the habits of a week.

    No state is kept between calls: the note on disk is the only copy, and
    concurrent writers to the same week race (the last save wins).
    """

    def __init__(self, config: PlannerConfig) -> None:
        self.config = config

    def weekly_file_path(self, year: int, week_number: int) -> Path:
        return weekly_file_path(self.config, year, week_number)

    def load_weekly_habits(self, year: int, week_number: int) -> WeeklyHabits:
        """Load the habits of a week.

        A week without a note starts from the habit names of the week before,
        all incomplete. A note without a ``Habits`` section yields no habits.

        Raises:
            ParseError: If the note cannot be parsed.
            OSError: If the note cannot be read.
        """
        path = self.weekly_file_path(year, week_number)
        if not path.exists():
            logger.debug("No weekly note at %s, carrying over defaults", path)
            return self._new_weekly_habits(year, week_number)

        document = parse_markdown(path.read_bytes())
        return _extract_habits(document, year, week_number)

    def save_weekly_habits(self, habits: WeeklyHabits) -> None:
        """Write ``habits`` into the week's note, replacing its Habits section.

        The note is overwritten in place; an interrupted write can leave it
        truncated.

        Raises:
            ParseError: If the existing note cannot be parsed.
            OSError: If the note cannot be read or written.
        """
        path = self.weekly_file_path(habits.year, habits.week_number)
        path.parent.mkdir(parents=True, exist_ok=True)

        if path.exists():
            document = parse_markdown(path.read_bytes())
        else:
            document = _new_weekly_document(habits.week_number)

        _update_habits_section(document, habits)
        path.write_text(write_document(document), encoding="utf-8")
        logger.debug("Saved %d habits to %s", len(habits.habits), path)

    def toggle_habit(self, year: int, week_number: int, habit_name: str) -> None:
        habits = self.load_weekly_habits(year, week_number)
        habit = habits.habits.get(habit_name)
        if habit is not None:
            habit.completed = not habit.completed
        self.save_weekly_habits(habits)

    def add_habit(self, year: int, week_number: int, habit_name: str) -> None:
        """Append a new, incomplete habit after the existing ones."""
        habits = self.load_weekly_habits(year, week_number)
        if habit_name not in habits.habits:
            max_order = max((habit.order for habit in habits.habits.values()), default=-1)
            habits.habits[habit_name] = Habit(name=habit_name, order=max_order + 1)
        self.save_weekly_habits(habits)

    def remove_habit(self, year: int, week_number: int, habit_name: str) -> None:
        habits = self.load_weekly_habits(year, week_number)
        habits.habits.pop(habit_name, None)
        self.save_weekly_habits(habits)

    def reorder_habits(
        self, year: int, week_number: int, habit_names: Iterable[str]
    ) -> None:
        """Set each named habit's order to its position in ``habit_names``.

        Unknown names are ignored; habits not named keep their order.
        """
        habits = self.load_weekly_habits(year, week_number)
        for position, habit_name in enumerate(habit_names):
            habit = habits.habits.get(habit_name)
            if habit is not None:
                habit.order = position
        self.save_weekly_habits(habits)

    def _new_weekly_habits(self, year: int, week_number: int) -> WeeklyHabits:
        habits = WeeklyHabits(year=year, week_number=week_number)
        for position, habit_name in enumerate(self._default_habit_names(year, week_number)):
            habits.habits[habit_name] = Habit(name=habit_name, order=position)
        return habits

    def _default_habit_names(self, year: int, week_number: int) -> list[str]:
        """Habit names of the previous week's note, read directly.

        Only the single previous week is consulted, so a gap of one missing
        week resets the defaults.
        """
        prev_year, prev_week = previous_period(year, week_number)
        path = self.weekly_file_path(prev_year, prev_week)
        if not path.exists():
            return []

        try:
            document = parse_markdown(path.read_bytes())
        except (OSError, ParseError) as exc:
            logger.warning("Could not read previous weekly note %s: %s", path, exc)
            return []

        previous = _extract_habits(document, prev_year, prev_week)
        logger.debug(
            "Carrying over %d habits from %d-W%02d", len(previous.habits), prev_year, prev_week
        )
        return list(previous.habits)


def find_habits_heading(document: Document, week_number: int) -> Heading | None:
    """Locate ``Week NN`` → ``Habits`` in a weekly note."""
    week_heading = find_heading_by_title(document, week_title(week_number))
    if week_heading is None:
        return None
    return find_heading_by_title(week_heading, HABITS_HEADING_TITLE)


def _extract_habits(document: Document, year: int, week_number: int) -> WeeklyHabits:
    habits = WeeklyHabits(year=year, week_number=week_number)

    habits_heading = find_habits_heading(document, week_number)
    if habits_heading is None:
        return habits

    for position, task in enumerate(find_tasks(habits_heading)):
        if not task.content:
            continue
        # A repeated name overwrites the earlier entry, checkbox and position.
        habits.habits[task.content] = Habit(
            name=task.content, completed=task.checked, order=position
        )
    return habits


def _new_weekly_document(week_number: int) -> Document:
    document = Document()
    document.add_child(Heading(level=1, title=week_title(week_number)))
    return document


def _update_habits_section(document: Document, habits: WeeklyHabits) -> None:
    title = week_title(habits.week_number)
    week_heading = find_heading_by_title(document, title)
    if week_heading is None:
        week_heading = Heading(level=1, title=title)
        document.add_child(week_heading)

    habits_heading = find_heading_by_title(week_heading, HABITS_HEADING_TITLE)
    if habits_heading is None:
        habits_heading = Heading(level=2, title=HABITS_HEADING_TITLE)
        week_heading.add_child(habits_heading)
    else:
        # Anything under the heading, tasks or not, is replaced.
        habits_heading.clear_children()

    for habit in habits.sorted_habits():
        habits_heading.add_child(Task(checked=habit.completed, content=habit.name))
