"""Shark Tool - typo intelligence and danger advisories for file management."""

from shark._version import __version__
from shark.magic import (
    autorecovery_token,
    danger_analyze,
    danger_report,
    jaccard_index,
    levenshtein_distance,
    path_ai_report,
    path_suggest,
    similarity,
    suggest_command,
)

__all__ = [
    "__version__",
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
