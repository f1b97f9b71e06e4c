"""
Layered .env support for TASKTRACK_* settings.

Files are read lowest precedence first and later files win:

    ~/.config/tasktrack/.env  <  ./.env  <  ./.env.local

Only TASKTRACK_* keys are taken from these files, so a project .env
written for some other tool does not leak into the process environment.
Anything already exported in the shell is left alone.
"""

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from dotenv import dotenv_values

from .loader import get_xdg_config_home

logger = logging.getLogger(__name__)

ENV_PREFIX = "TASKTRACK_"


def get_env_files(project_dir: Path | None = None) -> list[Path]:
    """
    .env files to consult, lowest precedence first.

    Args:
        project_dir: Directory holding the project .env files (defaults to cwd)
    """
    if project_dir is None:
        project_dir = Path.cwd()
    return [
        get_xdg_config_home() / "tasktrack" / ".env",
        project_dir / ".env",
        project_dir / ".env.local",
    ]


def read_env_file(path: Path) -> dict[str, str]:
    """
    Read the TASKTRACK_* assignments from one .env file.

    Missing files and keys without a value yield nothing.
    """
    if not path.is_file():
        return {}
    return {
        key: value
        for key, value in dotenv_values(path).items()
        if key.startswith(ENV_PREFIX) and value is not None
    }


def load_layered_env(
    project_dir: Path | None = None,
    env_files: Sequence[Path] | None = None,
) -> dict[str, str]:
    """
    Export TASKTRACK_* values from layered .env files into os.environ.

    Args:
        project_dir: Directory holding the project .env files (defaults to cwd)
        env_files: Explicit files, lowest precedence first (overrides the
            default user/project lookup)

    Returns:
        The variables that were set
    """
    if env_files is None:
        env_files = get_env_files(project_dir)

    merged: dict[str, str] = {}
    for path in env_files:
        merged.update(read_env_file(Path(path)))

    applied = {key: value for key, value in merged.items() if key not in os.environ}
    os.environ.update(applied)

    if applied:
        logger.debug(f"Loaded {', '.join(sorted(applied))} from .env files")
    return applied
