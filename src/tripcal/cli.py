from __future__ import annotations

import argparse
import os
import shlex
import sys
from typing import Iterable, List, TextIO
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from .agenda import format_event, render_agenda
from .config import CONFIG_PATH_DEFAULT, AppConfig, load_config
from .days import format_time, today_key
from .models import SchedulerError
from .session import SchedulerSession

HELP_TEXT = """commands:
  day [YYYY-MM-DD]                     pick a day (default: today)
  back                                 return to the calendar
  list                                 show the selected day
  days                                 show days that have events
  add                                  open a new event form
  edit ID                              open an event for editing
  save TITLE DESCRIPTION START END     save the open form (HH:MM times)
  cancel                               close the form or drop a pending delete
  delete ID                            ask to delete an event
  confirm                              delete the pending event
  state                                show the current state
  quit                                 leave"""


class CommandLoop:
    """Feeds text commands into a SchedulerSession and prints the results."""

    def __init__(self, cfg: AppConfig, session: SchedulerSession | None = None) -> None:
        self.cfg = cfg
        self.tz = ZoneInfo(cfg.timezone)
        self.session = session or SchedulerSession(
            default_start=cfg.form.default_start,
            default_end=cfg.form.default_end,
        )

    def run(self, lines: Iterable[str]) -> None:
        for raw_line in lines:
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if not self.handle(line):
                return

    def handle(self, line: str) -> bool:
        try:
            argv = shlex.split(line)
        except ValueError as e:
            print(f"error: {e}")
            return True
        if not argv:
            return True

        command, args = argv[0].lower(), argv[1:]
        if command in {"quit", "exit"}:
            return False

        try:
            self._dispatch(command, args)
        except (SchedulerError, ValueError) as e:
            print(f"error: {e}")
        return True

    def _dispatch(self, command: str, args: List[str]) -> None:
        session = self.session
        fmt = self.cfg.display.time_format

        if command == "help":
            print(HELP_TEXT)
        elif command == "day":
            key = args[0] if args else today_key(self.tz)
            print(f"Selected {session.pick_day(key)}")
        elif command == "back":
            session.back()
            print("Choose a Date")
        elif command == "list":
            self._print_agenda()
        elif command == "days":
            days = session.schedule.days()
            print("\n".join(days) if days else "No events scheduled.")
        elif command == "add":
            draft = session.start_add()
            print(f"Add Event ({format_time(draft.start_time, fmt)} - {format_time(draft.end_time, fmt)})")
        elif command == "edit":
            draft = session.start_edit(_one_arg(args, "edit ID"))
            print(f"Edit Event: {draft.title}")
        elif command == "save":
            if len(args) != 4:
                raise ValueError("usage: save TITLE DESCRIPTION START END")
            event = session.save(*args)
            print(f"Saved {format_event(event, fmt)}")
        elif command == "cancel":
            session.cancel()
            print("Cancelled")
        elif command == "delete":
            event = session.request_delete(_one_arg(args, "delete ID"))
            print(f"Delete '{event.title}'? Type 'confirm' or 'cancel'.")
        elif command == "confirm":
            event = session.confirm_delete()
            print(f"Deleted '{event.title}'")
        elif command == "state":
            day = session.selected_day or "-"
            print(f"{session.state.value} day={day}")
        else:
            raise ValueError(f"Unknown command '{command}'. Type 'help' for a list.")

    def _print_agenda(self) -> None:
        events = self.session.events()
        print(
            render_agenda(
                self.session.current_day(),
                events,
                time_format=self.cfg.display.time_format,
                empty_message=self.cfg.display.empty_message,
            )
        )


def _one_arg(args: List[str], usage: str) -> str:
    if len(args) != 1:
        raise ValueError(f"usage: {usage}")
    return args[0]


def main(argv: List[str] | None = None) -> int:
    load_dotenv()

    ap = argparse.ArgumentParser(description="Trip calendar: plan events day by day for one session")
    ap.add_argument("--config", default=os.environ.get("TRIPCAL_CONFIG", CONFIG_PATH_DEFAULT))
    ap.add_argument("--script", help="read commands from a file instead of stdin")
    args = ap.parse_args(argv)

    cfg = load_config(args.config)
    try:
        loop = CommandLoop(cfg)
    except ZoneInfoNotFoundError as e:
        print(f"Invalid timezone {cfg.timezone!r} in {args.config}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Invalid config {args.config}: {e}", file=sys.stderr)
        return 1

    if args.script:
        try:
            with open(args.script, encoding="utf-8") as f:
                loop.run(f.readlines())
        except (OSError, UnicodeDecodeError) as e:
            print(f"Could not read script {args.script}: {e}", file=sys.stderr)
            return 1
        return 0

    stream: TextIO = sys.stdin
    if stream.isatty():
        print("Type 'help' for commands.")
    loop.run(stream)
    return 0


if __name__ == "__main__":
    sys.exit(main())
