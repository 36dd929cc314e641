"""Hooks a command dispatcher calls before running a Shark command.

Each hook only advises. The dispatcher decides what to print and whether
to stop.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass

from shark.core.config import SharkConfig
from shark.core.models import DangerReport, PathSuggestion, ReasonRecord
from shark.magic.commands import suggest_command
from shark.magic.danger import danger_report
from shark.magic.fs import DirectoryLister, path_exists
from shark.magic.paths import path_suggest

logger = logging.getLogger(__name__)

PATH_HINT_THRESHOLD = 0.7

KNOWN_COMMANDS = (
    "show", "move", "copy", "remove", "delete", "rename", "create",
    "search", "archive", "view", "compare", "info", "stat", "link",
    "sync", "watch", "help", "chat", "ask", "summery",
)

FORCE_FLAGS = ("-f", "--force")


def first_path_argument(args: Sequence[str]) -> str | None:
    """First argument that is not a flag."""
    for arg in args:
        if not arg.startswith("-"):
            return arg
    return None


def path_hint(bad_path: str, lister: DirectoryLister | None = None) -> PathSuggestion | None:
    """Suggestion worth showing for a path argument, if any.

    Only the first scanned candidate is considered, and it is surfaced only
    when it scores above 0.7 and does not already exist.
    """
    if not bad_path or path_exists(bad_path):
        return None

    base_dir, name = os.path.split(bad_path.rstrip("/\\") or bad_path)
    first = path_suggest(name, base_dir or ".", lister).first
    if first is None:
        return None
    if first.similarity_score > PATH_HINT_THRESHOLD and not first.exists:
        return first
    return None


@dataclass(frozen=True)
class CommandLineReview:
    """Everything the dispatcher hooks said about one command line."""

    command: str
    known: bool
    suggestion: str | None = None
    reason: ReasonRecord | None = None
    path_argument: str | None = None
    path_hint: PathSuggestion | None = None
    danger: DangerReport | None = None
    forced: bool = False

    @property
    def should_block(self) -> bool:
        return (
            self.danger is not None
            and self.danger.block_recommended
            and not self.forced
        )


def review_command_line(
    argv: Sequence[str],
    config: SharkConfig,
    lister: DirectoryLister | None = None,
) -> CommandLineReview:
    """Run the command, path and danger hooks over ``argv``.

    An unknown command gets a correction attempt and nothing else. For a
    known path command the first non-flag argument is checked for a path
    hint. Guarded commands get a danger report over their non-flag
    arguments unless a force flag is present.
    """
    if not argv:
        return CommandLineReview(command="", known=False)

    command, args = argv[0], list(argv[1:])
    vocabulary = list(KNOWN_COMMANDS) + list(config.suggest.extra_commands)

    if command not in vocabulary:
        suggestion, reason = suggest_command(command, vocabulary)
        return CommandLineReview(
            command=command, known=False, suggestion=suggestion, reason=reason
        )

    path_argument = hint = None
    if command in config.suggest.path_commands:
        path_argument = first_path_argument(args)
        if path_argument is not None:
            hint = path_hint(path_argument, lister)

    forced = any(arg in FORCE_FLAGS for arg in args)
    report = None
    if command in config.danger.guarded_commands and not forced:
        targets = [arg for arg in args if not arg.startswith("-")]
        report = danger_report(targets, lister)
        logger.debug(
            "Advisory for %s: %s", command, report.overall_level.name
        )

    return CommandLineReview(
        command=command,
        known=True,
        path_argument=path_argument,
        path_hint=hint,
        danger=report,
        forced=forced,
    )
