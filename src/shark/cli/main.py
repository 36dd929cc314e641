"""Click CLI entry point for Shark."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from shark._version import __version__
from shark.core.config import COLOR_MODES, SharkConfig, load_config
from shark.core.output import format_command_hint
from shark.magic.commands import suggest_command


class SuggestingGroup(click.Group):
    """Group that answers an unknown subcommand with a 'Did you mean' hint."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        cmd_name = args[0] if args else None
        if cmd_name and not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
            vocabulary = list(self.list_commands(ctx))
            config = ctx.obj if isinstance(ctx.obj, SharkConfig) else load_config(Path.cwd())
            vocabulary += config.suggest.extra_commands

            suggestion, reason = suggest_command(cmd_name, vocabulary)
            message = f"Unknown command: {cmd_name}"
            if suggestion:
                message += "\n" + format_command_hint(suggestion, reason)
            ctx.fail(message)
        return super().resolve_command(ctx, args)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group(cls=SuggestingGroup)
@click.version_option(version=__version__, prog_name="shark")
@click.option("--verbose", "-v", is_flag=True, help="Enable detailed output")
@click.option("--color", type=click.Choice(COLOR_MODES), default=None, help="Set color mode")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, color: str | None):
    """Shark Tool - typo intelligence for file management.

    Correct mistyped commands and paths, and check targets for risk before
    destructive operations.
    """
    config = load_config(Path.cwd())
    if verbose:
        config.general.verbose = True
    if color is not None:
        config.general.color = color
    ctx.obj = config
    configure_logging(config.verbose)


# Import and register subcommands
from shark.cli.suggest_cmd import suggest  # noqa: E402
from shark.cli.paths_cmd import paths  # noqa: E402
from shark.cli.recover_cmd import recover  # noqa: E402
from shark.cli.danger_cmd import danger  # noqa: E402
from shark.cli.check_cmd import check  # noqa: E402

cli.add_command(suggest)
cli.add_command(paths)
cli.add_command(recover)
cli.add_command(danger)
cli.add_command(check)


if __name__ == "__main__":
    cli()
