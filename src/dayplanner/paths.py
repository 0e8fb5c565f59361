from __future__ import annotations

import os
from pathlib import Path

ENV_VAR = "DAYPLANNER_FILE"
DEFAULT_FILENAME = "my-planner.txt"


def default_data_path() -> Path:
    return Path.cwd() / DEFAULT_FILENAME


def resolve_data_path(data_arg: str | None) -> Path:
    if data_arg:
        return Path(data_arg).expanduser().resolve()
    env = os.environ.get(ENV_VAR)
    if env:
        return Path(env).expanduser().resolve()
    return default_data_path()
