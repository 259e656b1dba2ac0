# src/taskstore/cli/commands.py

from __future__ import annotations

import inspect
import json
import logging
from collections.abc import Callable
from datetime import UTC, date, datetime, tzinfo
from typing import cast

from ..core.state import AppState
from ..errors import TaskNotFoundError
from ..tasks.task_models import Task, parse_timestamp

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument helpers ----


def _default_tz(state: AppState) -> tzinfo:
    return getattr(state.settings, "default_tz", None) or UTC


def _parse_id(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def _parse_due(raw: str, tz: tzinfo) -> datetime | None:
    """
    "-"                 -> None (no due date)
    "2024-01-05"        -> midnight of that day in `tz`
    ISO-8601 datetime   -> as given; `tz` is attached when it has no offset
    """
    if raw == "-":
        return None
    if len(raw) == 10:
        d = date.fromisoformat(raw)
        return datetime(d.year, d.month, d.day, tzinfo=tz)
    dt = parse_timestamp(raw)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz)
    return dt


def _format_task(task: Task) -> str:
    return json.dumps(task.to_dict(), ensure_ascii=False)


def _format_tasks(tasks: list[Task], empty: str) -> str:
    if not tasks:
        return empty
    # Store order is unspecified; sort for a stable display.
    return "\n".join(_format_task(t) for t in sorted(tasks, key=lambda t: t.id))


# ---- commands ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <due> <text...> [#tag ...]

    Words starting with "#" are tags (kept in order, duplicates allowed).
    """
    usage = "Usage: /add <YYYY-MM-DD | ISO datetime | -> <text...> [#tag ...]"
    if not args:
        return usage

    try:
        due = _parse_due(args[0], _default_tz(state))
    except ValueError:
        return f"Invalid due date: {args[0]!r}. {usage}"

    words: list[str] = []
    tags: list[str] = []
    for word in args[1:]:
        if word.startswith("#") and len(word) > 1:
            tags.append(word[1:])
        else:
            words.append(word)

    task_id = state.task_store.create_task(" ".join(words), tags, due)
    logger.debug("Console created task id=%s", task_id)
    return f"Created task {task_id}."


def cmd_get(state: AppState, args: list[str]) -> str:
    if len(args) != 1 or (task_id := _parse_id(args[0])) is None:
        return "Usage: /get <id>"
    try:
        task = state.task_store.get_task(task_id)
    except TaskNotFoundError as e:
        return f"Task {e.task_id} not found."
    return _format_task(task)


def cmd_del(state: AppState, args: list[str]) -> str:
    if len(args) != 1 or (task_id := _parse_id(args[0])) is None:
        return "Usage: /del <id>"
    try:
        state.task_store.delete_task(task_id)
    except TaskNotFoundError as e:
        return f"Task {e.task_id} not found."
    return f"Deleted task {task_id}."


def cmd_clear(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if emit:
        emit("[TASKS] Clearing all tasks...")
    removed = state.task_store.delete_all_tasks()
    return f"All tasks deleted ({removed} removed)."


def cmd_list(state: AppState, args: list[str]) -> str:
    return _format_tasks(state.task_store.get_all_tasks(), "No tasks.")


def cmd_tag(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /tag <tag>"
    tag = args[0][1:] if args[0].startswith("#") and len(args[0]) > 1 else args[0]
    return _format_tasks(state.task_store.get_tasks_by_tag(tag), f"No tasks tagged {tag!r}.")


def cmd_due(state: AppState, args: list[str]) -> str:
    usage = "Usage: /due <YYYY-MM-DD>"
    if len(args) != 1:
        return usage
    try:
        d = date.fromisoformat(args[0])
    except ValueError:
        return f"Invalid date: {args[0]!r}. {usage}"
    tasks = state.task_store.get_tasks_by_due_date(d.year, d.month, d.day)
    return _format_tasks(tasks, f"No tasks due on {d.isoformat()}.")


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.task_store
    return (
        "Status:\n"
        f"  Tasks: {store.count_tasks()}\n"
        f"  Next id: {store.next_id}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add", cmd_add, help_text="Create a task: /add <YYYY-MM-DD | datetime | -> <text> [#tag ...]."
)
registry.register("get", cmd_get, help_text="Show one task: /get <id>.")
registry.register("del", cmd_del, help_text="Delete one task: /del <id>.", aliases=["rm"])
registry.register("clear", cmd_clear, help_text="Delete all tasks.")
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
registry.register("tag", cmd_tag, help_text="Tasks with a tag: /tag <tag>.")
registry.register("due", cmd_due, help_text="Tasks due on a date: /due <YYYY-MM-DD>.")
registry.register("status", cmd_status, help_text="Show task count and next id.")
