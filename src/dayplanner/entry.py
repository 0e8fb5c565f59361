from __future__ import annotations

from dataclasses import dataclass

from .messages import EN, Messages
from .timeparse import parse_time, time_key


@dataclass(frozen=True)
class Entry:
    """
    One planned task.

    Entries built from keyboard input go through Entry.create(), which
    validates both fields. Entries read back from the planner file are
    plain data and are taken as stored.
    """

    time: str
    target: str

    @classmethod
    def create(cls, time: str, target: str) -> "Entry":
        target = target.strip()
        if not target:
            raise ValueError("Entry target must not be empty")
        return cls(time=parse_time(time), target=target)

    @property
    def sort_key(self) -> int:
        return time_key(self.time)

    def serialize(self) -> str:
        # target must not contain a blank line: it is written as-is
        return f"{self.time}\n{self.target}\n\n"

    def render(self, messages: Messages = EN) -> str:
        return f"{messages.time_label}: {self.time}\n{messages.task_label}: {self.target}\n"

    def __str__(self) -> str:
        return self.render()


def sort_entries(entries: list[Entry]) -> list[Entry]:
    # stable: equal times keep their current order
    return sorted(entries, key=lambda e: e.sort_key)
