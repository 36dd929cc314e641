"""shark paths command."""

from __future__ import annotations

import json

import click

from shark.core.config import SharkConfig
from shark.core.models import PathSuggestionSet
from shark.core.output import make_console, print_path_suggestions
from shark.magic.paths import path_suggest


@click.command()
@click.argument("bad_path")
@click.option("--base", "base_dir", default=".", show_default=True, help="Directory to scan")
@click.option("--json", "as_json", is_flag=True, help="Print suggestions as JSON")
@click.pass_obj
def paths(config: SharkConfig, bad_path: str, base_dir: str, as_json: bool):
    """List entries of the base directory that resemble BAD_PATH.

    Candidates are shown in scan order; at most 16 are collected.
    """
    suggestions = path_suggest(bad_path, base_dir)

    if as_json:
        click.echo(json.dumps(_suggestions_to_list(suggestions), indent=2))
        return

    print_path_suggestions(make_console(config), suggestions, config.danger.display_width)


def _suggestions_to_list(suggestions: PathSuggestionSet) -> list[dict]:
    return [
        {
            "candidate_path": s.candidate_path,
            "similarity_score": round(s.similarity_score, 4),
            "exists": s.exists,
        }
        for s in suggestions
    ]
