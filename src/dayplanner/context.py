from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from .listing import ListView
from .messages import EN, Messages
from .storage import PlannerStorage


@dataclass
class PlannerContext:
    """Everything one planner run needs, built once at startup."""

    storage: PlannerStorage
    list_view: ListView
    messages: Messages = EN
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)

    @classmethod
    def build(
        cls,
        data_path: Path,
        messages: Messages = EN,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> "PlannerContext":
        stdout = stdout or sys.stdout
        storage = PlannerStorage(data_path, messages=messages, out=stdout)
        return cls(
            storage=storage,
            list_view=ListView(storage, messages),
            messages=messages,
            stdin=stdin or sys.stdin,
            stdout=stdout,
            stderr=stderr or sys.stderr,
        )
