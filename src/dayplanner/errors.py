from __future__ import annotations


class PlannerError(Exception):
    """Base class for conditions the planner handles itself."""


class InvalidTime(PlannerError, ValueError):
    def __init__(self, value: str = "") -> None:
        super().__init__("Invalid time.")
        self.value = value


class Cancelled(PlannerError):
    """Raised on an empty answer at any prompt; ends the add loop."""


class CorruptEntry(ValueError):
    """A stored time line that cannot be ordered."""
