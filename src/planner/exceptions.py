"""Custom exceptions for planner."""


class PlannerError(Exception):
    """Base exception for planner operations."""


class ParseError(PlannerError):
    """Error during Markdown parsing."""


class ConfigError(PlannerError):
    """Invalid workspace or periodic notes configuration."""
