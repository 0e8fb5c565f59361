from __future__ import annotations

from .entry import Entry
from .messages import BANNER, EN, RULE, Messages
from .storage import PlannerStorage


def render_listing(entries: list[Entry], messages: Messages = EN) -> str:
    output = RULE.join(e.render(messages) for e in entries)
    return f"{BANNER}\n{messages.title}\n\n{output}\n{BANNER}\n"


class ListView:
    def __init__(self, storage: PlannerStorage, messages: Messages = EN) -> None:
        self.storage = storage
        self.messages = messages

    def render(self) -> str:
        # read errors are not handled here
        return render_listing(self.storage.read(), self.messages)
