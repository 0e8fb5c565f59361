from __future__ import annotations

import argparse
import logging
import os

from .context import PlannerContext
from .messages import LANGUAGES, get_messages
from .paths import ENV_VAR, resolve_data_path
from .session import run_session, show_listing

LOG_LEVEL_ENV = "DAYPLANNER_LOG_LEVEL"


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = "DEBUG"
    else:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            level = "WARNING"

    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )


def _context(args: argparse.Namespace) -> PlannerContext:
    return PlannerContext.build(args.data_path, messages=get_messages(args.lang))


# -------------------------
# Commands
# -------------------------

def cmd_run(args: argparse.Namespace) -> None:
    run_session(_context(args))


def cmd_list(args: argparse.Namespace) -> None:
    show_listing(_context(args))


def cmd_where(args: argparse.Namespace) -> None:
    env = os.environ.get(ENV_VAR)
    if args.data_arg:
        reason = "because you passed --data"
    elif env:
        reason = f"because {ENV_VAR} is set"
    else:
        reason = "default file in the current directory"

    print(args.data_path)
    print(f"↳ using {reason}")


def main(argv=None) -> None:
    p = argparse.ArgumentParser(prog="planner", description="Console day planner")
    p.add_argument("--data", default=None, help=f"Path to planner file (overrides {ENV_VAR}/default)")
    p.add_argument("--lang", choices=sorted(LANGUAGES), default="en", help="Prompt and listing language")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    p.set_defaults(func=cmd_run)

    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("run", help="Add entries, then show the schedule (default)").set_defaults(func=cmd_run)
    sub.add_parser("list", help="Show the schedule").set_defaults(func=cmd_list)
    sub.add_parser("where", help="Show which planner file is active and why").set_defaults(func=cmd_where)

    args = p.parse_args(argv)
    args.data_arg = args.data
    args.data_path = resolve_data_path(args.data)

    _configure_logging(args.verbose)

    args.func(args)


if __name__ == "__main__":
    main()
