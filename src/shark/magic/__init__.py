"""Typo intelligence: string metrics, suggesters and danger analysis."""

from shark.magic.commands import suggest_command
from shark.magic.danger import danger_analyze, danger_report
from shark.magic.metrics import jaccard_index, levenshtein_distance, similarity
from shark.magic.paths import path_ai_report, path_suggest
from shark.magic.recovery import autorecovery_token

__all__ = [
    "levenshtein_distance",
    "jaccard_index",
    "similarity",
    "suggest_command",
    "path_suggest",
    "path_ai_report",
    "autorecovery_token",
    "danger_analyze",
    "danger_report",
]
