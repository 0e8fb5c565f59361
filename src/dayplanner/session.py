from __future__ import annotations

import logging

from .context import PlannerContext
from .entry import Entry
from .errors import Cancelled, InvalidTime

logger = logging.getLogger(__name__)


def _ask(ctx: PlannerContext, prompt: str) -> str:
    ctx.stdout.write(prompt)
    ctx.stdout.flush()
    # EOF reads as "", same as an empty answer
    return ctx.stdin.readline()


def read_entry(ctx: PlannerContext) -> Entry:
    """
    Prompt for one entry.
    Raises Cancelled on an empty task or an empty time answer.
    Invalid times are reported and asked again.
    """
    msgs = ctx.messages

    target = _ask(ctx, msgs.task_prompt).strip()
    if not target:
        raise Cancelled()

    while True:
        raw = _ask(ctx, msgs.time_prompt)
        if not raw.strip():
            raise Cancelled()
        try:
            return Entry.create(raw, target)
        except InvalidTime:
            print(f"{msgs.error}: {msgs.invalid_time}", file=ctx.stderr)


def run_add_loop(ctx: PlannerContext) -> int:
    """Collect and save entries until cancelled. Returns how many were saved."""
    saved = 0
    try:
        while True:
            entry = read_entry(ctx)
            ctx.storage.save(entry)
            saved += 1
    except Cancelled:
        logger.debug("add loop cancelled after %d entries", saved)
    return saved


def show_greeting(ctx: PlannerContext) -> None:
    print(ctx.messages.greeting, file=ctx.stdout)


def show_listing(ctx: PlannerContext) -> None:
    print(ctx.list_view.render(), file=ctx.stdout)


def run_session(ctx: PlannerContext) -> None:
    show_greeting(ctx)
    run_add_loop(ctx)
    show_listing(ctx)
