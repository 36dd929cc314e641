"""shark check command."""

from __future__ import annotations

import sys

import click

from shark.core.config import SharkConfig
from shark.core.output import (
    format_command_hint,
    make_console,
    print_danger_report,
    print_path_hint,
)
from shark.magic.hints import review_command_line


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("argv", nargs=-1, type=click.UNPROCESSED, required=True)
@click.pass_obj
def check(config: SharkConfig, argv: tuple[str, ...]):
    """Dry-run the dispatcher hooks over a Shark command line.

    Example: shark check remov -r ./build

    Exit status is 2 for an unknown command and 1 when blocking is
    recommended and no -f/--force flag was given.
    """
    console = make_console(config)
    review = review_command_line(argv, config)

    if not review.known:
        console.print(f"  [red]Unknown command: {review.command}[/red]")
        if review.suggestion and review.reason:
            console.print(f"  {format_command_hint(review.suggestion, review.reason)}", markup=False)
        sys.exit(2)

    if review.path_hint and review.path_argument:
        print_path_hint(console, review.path_argument, review.path_hint, config.danger.display_width)

    if review.danger is not None:
        print_danger_report(console, review.danger, config.danger.display_width)
    elif review.forced and review.command in config.danger.guarded_commands:
        console.print("  [dim]--force given: danger advisory skipped.[/dim]")

    if review.should_block:
        sys.exit(1)

    console.print(f"  [green]{review.command}: no blocking issues.[/green]")
