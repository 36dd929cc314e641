"""Rich terminal formatting for Shark output."""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table

from shark.core.config import SharkConfig
from shark.core.models import (
    AutoRecoveryResult,
    DangerLevel,
    DangerReport,
    PathSuggestion,
    PathSuggestionSet,
    ReasonRecord,
)

TOKEN_DISPLAY_WIDTH = 256

DANGER_COLORS = {
    DangerLevel.NONE: "green",
    DangerLevel.LOW: "blue",
    DangerLevel.MEDIUM: "yellow",
    DangerLevel.HIGH: "red",
    DangerLevel.CRITICAL: "bold red",
}

DANGER_ICONS = {
    DangerLevel.NONE: "[green]●[/green]",
    DangerLevel.LOW: "[blue]●[/blue]",
    DangerLevel.MEDIUM: "[yellow]●[/yellow]",
    DangerLevel.HIGH: "[red]●[/red]",
    DangerLevel.CRITICAL: "[bold red]●[/bold red]",
}


def make_console(config: SharkConfig, stderr: bool = False) -> Console:
    """Build a console honouring the configured color mode."""
    if config.color == "disable":
        return Console(stderr=stderr, no_color=True, highlight=False)
    if config.color == "enable":
        return Console(stderr=stderr, force_terminal=True)
    return Console(stderr=stderr)


def truncate_display(text: str | None, width: int) -> str:
    """Cut ``text`` to ``width`` characters for rendering only."""
    text = text or ""
    if len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return text[: width - 3] + "..."


def confidence_bar(score: float, width: int = 12) -> str:
    filled = round(score * width)
    color = "green" if score >= 0.85 else "yellow" if score >= 0.70 else "red"
    return f"[{color}]{'█' * filled}{'░' * (width - filled)}[/{color}]"


def flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


def format_command_hint(suggestion: str, reason: ReasonRecord) -> str:
    """Plain-text 'Did you mean' hint with the reasoning metrics."""
    return (
        f"Did you mean: {truncate_display(suggestion, TOKEN_DISPLAY_WIDTH)}?  "
        f"(distance {reason.edit_distance}, "
        f"similarity {reason.confidence:.2f}, "
        f"jaccard {reason.jaccard_index}, "
        f"prefix {'yes' if reason.prefix_match else 'no'}, "
        f"suffix {'yes' if reason.suffix_match else 'no'}, "
        f"case {'yes' if reason.case_insensitive else 'no'}; "
        f"{reason.reason})"
    )


def print_reason(console: Console, suggestion: str | None, reason: ReasonRecord) -> None:
    """Print the full reasoning table for a command correction."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("Input", truncate_display(reason.input, TOKEN_DISPLAY_WIDTH))
    table.add_row("Best candidate", truncate_display(reason.suggested, TOKEN_DISPLAY_WIDTH) or "[dim]-[/dim]")
    table.add_row("Confidence", f"{confidence_bar(reason.confidence)} {reason.confidence:.2f}")
    table.add_row("Edit distance", str(reason.edit_distance) if reason.suggested else "[dim]-[/dim]")
    table.add_row("Jaccard", str(reason.jaccard_index))
    table.add_row("Prefix match", flag(reason.prefix_match))
    table.add_row("Suffix match", flag(reason.suffix_match))
    table.add_row("Case-insensitive", flag(reason.case_insensitive))
    table.add_row("Reason", reason.reason)

    if suggestion:
        title = f"[bold]Suggestion: {truncate_display(suggestion, TOKEN_DISPLAY_WIDTH)}[/bold]"
        border = "green"
    else:
        title = "[bold]No suggestion[/bold]"
        border = "red"
    console.print(Panel(table, title=title, border_style=border, padding=(0, 1)))


def print_path_suggestions(console: Console, suggestions: PathSuggestionSet, width: int = 512) -> None:
    """Print the scanned candidates in scan order."""
    if not suggestions:
        console.print("\n  No similar paths found.\n")
        return

    table = Table(title="Path suggestions (scan order)")
    table.add_column("#", justify="right")
    table.add_column("Candidate")
    table.add_column("Similarity", justify="right")
    table.add_column("Exists")
    for index, item in enumerate(suggestions, start=1):
        table.add_row(
            str(index),
            truncate_display(item.candidate_path, width),
            f"{item.similarity_score:.2f}",
            flag(item.exists),
        )
    console.print(table)


def print_path_hint(console: Console, bad_path: str, hint: PathSuggestion, width: int = 512) -> None:
    console.print(
        f"  [yellow]Path not found:[/yellow] {truncate_display(bad_path, width)}  "
        f"Did you mean: [bold cyan]{truncate_display(hint.candidate_path, width)}[/bold cyan]?  "
        f"[dim](similarity {hint.similarity_score:.2f})[/dim]"
    )


def print_recovery(console: Console, result: AutoRecoveryResult) -> None:
    original = truncate_display(result.original_token, TOKEN_DISPLAY_WIDTH)
    if result.applied:
        console.print(
            f"  [green]✅ {original} -> {truncate_display(result.recovered_token, TOKEN_DISPLAY_WIDTH)}[/green]  "
            f"{confidence_bar(result.confidence)} {result.confidence:.2f}"
        )
    else:
        console.print(f"  [yellow]No confident recovery for {original}[/yellow]")
    if result.second_best_token:
        console.print(
            f"     [dim]runner-up: {truncate_display(result.second_best_token, TOKEN_DISPLAY_WIDTH)} "
            f"({result.second_best_confidence:.2f})[/dim]"
        )


def print_danger_report(console: Console, report: DangerReport, width: int = 512) -> None:
    """Print the danger advisory as a table inside a colored panel."""
    table = Table(box=None, padding=(0, 1))
    table.add_column("")
    table.add_column("Target")
    table.add_column("Level")
    table.add_column("Signals")
    for item in report.items:
        signals = []
        if item.contains_secrets:
            signals.append("secrets")
        if item.contains_vcs:
            signals.append("vcs")
        elif item.contains_code:
            signals.append("code")
        if item.large_size:
            signals.append(">10 MiB")
        if item.writable:
            signals.append("writable")
        if item.is_symlink:
            signals.append("symlink")
        if item.world_writable:
            signals.append("world-writable")
        if item.suspicious_extension or item.contains_suspicious_files:
            signals.append("suspicious")
        if item.recently_modified:
            signals.append("recent")
        color = DANGER_COLORS[item.level]
        table.add_row(
            DANGER_ICONS[item.level],
            truncate_display(item.target_path, width) + ("/" if item.is_directory else ""),
            f"[{color}]{item.level.name}[/{color}]",
            ", ".join(signals) or "[dim]-[/dim]",
        )

    lines: list = [table, ""]
    if report.block_recommended:
        lines.append("[bold red]Blocking recommended: pass --force to proceed anyway.[/bold red]")
    elif report.warning_required:
        lines.append("[yellow]Review the targets above before proceeding.[/yellow]")
    else:
        lines.append("[green]No significant risk detected.[/green]")

    border = DANGER_COLORS[report.overall_level].split()[-1]
    console.print(Panel(
        Group(*lines),
        title=f"[bold]Danger Advisory: {report.overall_level.name}[/bold]",
        border_style=border,
        padding=(0, 1),
    ))
