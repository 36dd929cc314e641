"""shark suggest command."""

from __future__ import annotations

import sys

import click

from shark.core.config import SharkConfig
from shark.core.output import make_console, print_reason
from shark.magic.commands import suggest_command
from shark.magic.hints import KNOWN_COMMANDS


@click.command()
@click.argument("token")
@click.option(
    "--candidate",
    "-c",
    "candidates",
    multiple=True,
    help="Candidate command (repeatable). Defaults to the Shark command set.",
)
@click.pass_obj
def suggest(config: SharkConfig, token: str, candidates: tuple[str, ...]):
    """Suggest a correction for a mistyped command TOKEN.

    Exits with status 1 when no candidate is confident enough.
    """
    console = make_console(config)
    vocabulary = list(candidates) or list(KNOWN_COMMANDS) + config.suggest.extra_commands

    suggestion, reason = suggest_command(token, vocabulary)
    print_reason(console, suggestion, reason)

    if suggestion is None:
        sys.exit(1)
