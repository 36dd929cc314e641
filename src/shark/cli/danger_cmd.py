"""shark danger command."""

from __future__ import annotations

import json
import sys

import click

from shark.core.config import SharkConfig
from shark.core.models import DangerLevel, DangerReport
from shark.core.output import make_console, print_danger_report
from shark.magic.danger import MAX_TARGETS, danger_report

LEVEL_NAMES = [level.label for level in DangerLevel]


@click.command()
@click.argument("targets", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option(
    "--fail-on",
    type=click.Choice(LEVEL_NAMES, case_sensitive=False),
    default=None,
    help="Exit 1 if the overall level reaches this level (for scripts/CI)",
)
@click.pass_obj
def danger(config: SharkConfig, targets: tuple[str, ...], as_json: bool, fail_on: str | None):
    """Classify TARGETS by destructive risk before a risky operation.

    Advisory only: nothing is modified. At most 8 targets are analysed.
    """
    report = danger_report(targets)

    if as_json:
        click.echo(json.dumps(_report_to_dict(report), indent=2))
    else:
        console = make_console(config)
        if len(targets) > MAX_TARGETS:
            console.print(
                f"  [yellow]Only the first {MAX_TARGETS} of {len(targets)} targets were analysed.[/yellow]"
            )
        print_danger_report(console, report, config.danger.display_width)

    if fail_on and report.overall_level >= DangerLevel[fail_on.upper()]:
        sys.exit(1)


def _report_to_dict(report: DangerReport) -> dict:
    """Convert a DangerReport to a JSON-serializable dict."""
    return {
        "overall_level": report.overall_level.label,
        "block_recommended": report.block_recommended,
        "warning_required": report.warning_required,
        "items": [
            {
                "target_path": item.target_path,
                "level": item.level.label,
                "is_directory": item.is_directory,
                "contains_code": item.contains_code,
                "contains_vcs": item.contains_vcs,
                "contains_secrets": item.contains_secrets,
                "large_size": item.large_size,
                "writable": item.writable,
                "is_symlink": item.is_symlink,
                "world_writable": item.world_writable,
                "suspicious_extension": item.suspicious_extension,
                "recently_modified": item.recently_modified,
                "contains_suspicious_files": item.contains_suspicious_files,
            }
            for item in report.items
        ],
    }
