"""Local configuration for planner."""

from __future__ import annotations

import os
from pathlib import Path

from planner.exceptions import ConfigError
from planner.schemas import PeriodicNotes, PlannerConfig
from planner.schemas.config import DEFAULT_WEEKLY_NAME_FORMAT, DEFAULT_WEEKLY_SUBDIR


DEFAULT_CONFIG_DIR = "~/.notedown/planner"
CONFIG_FILENAME = "config.yaml"
_WRITE_PROBE_FILENAME = ".notedown_test"

PLANNER_WORKSPACE_ROOT = os.getenv("PLANNER_WORKSPACE_ROOT", "")
PLANNER_WEEKLY_SUBDIR = os.getenv("PLANNER_WEEKLY_SUBDIR", DEFAULT_WEEKLY_SUBDIR)
PLANNER_WEEKLY_NAME_FORMAT = os.getenv("PLANNER_WEEKLY_NAME_FORMAT", DEFAULT_WEEKLY_NAME_FORMAT)
PLANNER_CONFIG_DIR = Path(os.getenv("PLANNER_CONFIG_DIR", DEFAULT_CONFIG_DIR)).expanduser()


def config_with_defaults() -> PlannerConfig:
    """Build a config from the environment, falling back to the defaults."""
    return PlannerConfig(
        workspace_root=Path(PLANNER_WORKSPACE_ROOT or ".").expanduser(),
        periodic_notes=PeriodicNotes(
            weekly_subdir=PLANNER_WEEKLY_SUBDIR,
            weekly_name_format=PLANNER_WEEKLY_NAME_FORMAT,
        ),
    )


def config_path(config_dir: Path | None = None) -> Path:
    """Return the config file path, creating its directory if needed."""
    directory = config_dir or PLANNER_CONFIG_DIR
    directory.mkdir(parents=True, exist_ok=True)
    return directory / CONFIG_FILENAME


def validate_workspace_path(path: str | Path) -> None:
    """Check that ``path`` is an existing, writable directory.

    Raises:
        ConfigError: If the path is empty or not a directory.
        OSError: If the path cannot be read or written.
    """
    if not str(path):
        raise ConfigError("Workspace path is empty")

    workspace = Path(path)
    # Raises FileNotFoundError for a missing path.
    workspace.stat()
    if not workspace.is_dir():
        raise ConfigError(f"Workspace path is not a directory: {workspace}")

    probe = workspace / _WRITE_PROBE_FILENAME
    probe.touch()
    probe.unlink()
