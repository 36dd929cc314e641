"""shark recover command."""

from __future__ import annotations

import click

from shark.core.config import SharkConfig
from shark.core.output import make_console, print_recovery
from shark.magic.recovery import autorecovery_token


@click.command()
@click.argument("token")
@click.argument("candidates", nargs=-1, required=True)
@click.pass_obj
def recover(config: SharkConfig, token: str, candidates: tuple[str, ...]):
    """Recover TOKEN against CANDIDATES, auto-applying confident matches."""
    result = autorecovery_token(token, list(candidates))
    print_recovery(make_console(config), result)
