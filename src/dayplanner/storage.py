from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from .entry import Entry, sort_entries
from .messages import BANNER, EN, Messages

logger = logging.getLogger(__name__)


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def parse_entries(text: str) -> list[Entry]:
    """
    Split planner file text into entries, in file order.
    Blocks are separated by a blank line; each block is a time line followed
    by the task. Blocks without a second line are dropped.
    """
    entries: list[Entry] = []
    for block in text.split("\n\n"):
        parts = block.strip().split("\n", 1)
        if len(parts) != 2:
            if block.strip():
                logger.debug("skipping malformed block %r", block)
            continue
        entries.append(Entry(time=parts[0], target=parts[1]))
    return entries


def dump_entries(entries: list[Entry]) -> str:
    return "".join(e.serialize() for e in entries)


class PlannerStorage:
    """Flat-file store for planner entries, kept sorted by time."""

    def __init__(self, path: Path, messages: Messages = EN, out: TextIO | None = None) -> None:
        self.path = Path(path)
        self.messages = messages
        self.out = out

    def read(self) -> list[Entry]:
        """
        Safe read:
        - creates parent dirs
        - if missing -> writes an empty file
        Always returns a list.
        """
        if not self.path.exists():
            _ensure_parent(self.path)
            self.path.write_text("", encoding="utf-8")
            logger.debug("created empty planner file %s", self.path)
            return []

        entries = parse_entries(self.path.read_text(encoding="utf-8"))
        logger.debug("read %d entries from %s", len(entries), self.path)
        return entries

    def save(self, entry: Entry) -> None:
        """
        Merge entry into the file:
        - read current entries, append, stable sort by time
        - truncate and rewrite the whole file
        - flush + fsync
        Not atomic: a failed write can leave the file truncated.
        """
        entries = self.read()
        entries.append(entry)
        entries = sort_entries(entries)

        with open(self.path, "w", encoding="utf-8") as f:
            f.write(dump_entries(entries))
            f.flush()
            os.fsync(f.fileno())

        logger.debug("saved %d entries to %s", len(entries), self.path)

        out = self.out or sys.stdout
        print(self.messages.saved, file=out)
        print(BANNER, file=out)
