"""Habit tracking models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Habit(BaseModel):
    """A single habit with a name, completion status, and order.

    Attributes:
        name: Habit name, also its key within a week.
        completed: Whether the habit is checked off for the week.
        order: Position among habits with the same completion status. Not
            unique; ties keep document order when written.
    """

    name: str
    completed: bool = False
    order: int = 0


class WeeklyHabits(BaseModel):
    """Habits for one ISO week.

    ``day_status`` is carried through unchanged; nothing in the service reads
    or writes it.
    """

    year: int
    week_number: int
    habits: dict[str, Habit] = Field(default_factory=dict)
    day_status: dict[str, bool] = Field(default_factory=dict)

    def sorted_habits(self) -> list[Habit]:
        """Return incomplete habits first, each group by ascending order."""
        return sorted(self.habits.values(), key=lambda habit: (habit.completed, habit.order))
