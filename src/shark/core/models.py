"""Shared data models used across Shark modules.

Every model here is an immutable value object: built once by the engine call
that produced it and never mutated afterwards.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator


class DangerLevel(enum.IntEnum):
    """Five-point ordinal risk scale for a filesystem target."""

    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    @property
    def label(self) -> str:
        return self.name.lower()


class ReasonText:
    """Fixed explanation strings attached to a command suggestion."""

    STRONG = "Strong semantic and token match"
    CLOSE = "Close semantic match"
    PREFIX = "Prefix match"
    CASE_INSENSITIVE = "Case-insensitive match"
    LOW = "Low confidence match"

    ALL = (STRONG, CLOSE, PREFIX, CASE_INSENSITIVE, LOW)


@dataclass(frozen=True)
class ReasonRecord:
    """Diagnostics for one command-suggestion attempt."""

    input: str | None
    suggested: str | None
    edit_distance: int
    confidence: float
    jaccard_index: int
    prefix_match: bool
    suffix_match: bool
    case_insensitive: bool
    reason: str

    @property
    def accepted(self) -> bool:
        return self.suggested is not None and self.confidence >= 0.70


@dataclass(frozen=True)
class PathSuggestion:
    """A candidate path found while scanning a base directory."""

    candidate_path: str
    similarity_score: float
    exists: bool


@dataclass(frozen=True)
class PathSuggestionSet:
    """Suggestions in directory-iteration order, capped at 16 entries."""

    items: tuple[PathSuggestion, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[PathSuggestion]:
        return iter(self.items)

    def __getitem__(self, index: int) -> PathSuggestion:
        return self.items[index]

    @property
    def first(self) -> PathSuggestion | None:
        return self.items[0] if self.items else None


@dataclass(frozen=True)
class AutoRecoveryResult:
    """Outcome of recovering a token against a candidate list."""

    original_token: str
    recovered_token: str
    confidence: float
    applied: bool
    second_best_token: str = ""
    second_best_confidence: float = 0.0


@dataclass(frozen=True)
class DangerItem:
    """Risk classification of a single filesystem target.

    ``contains_code`` means "recognised source extension" for files and
    "has an immediate ``.git`` entry" for directories; ``contains_vcs``
    mirrors the directory case. The trailing flags are informational and
    never influence ``level``.
    """

    target_path: str
    level: DangerLevel = DangerLevel.NONE
    is_directory: bool = False
    contains_code: bool = False
    contains_vcs: bool = False
    contains_secrets: bool = False
    large_size: bool = False
    writable: bool = False
    is_symlink: bool = False
    world_writable: bool = False
    suspicious_extension: bool = False
    recently_modified: bool = False
    contains_suspicious_files: bool = False


@dataclass(frozen=True)
class DangerReport:
    """Aggregate advisory over up to eight targets."""

    items: tuple[DangerItem, ...] = field(default_factory=tuple)
    overall_level: DangerLevel = DangerLevel.NONE
    block_recommended: bool = False
    warning_required: bool = False

    @property
    def item_count(self) -> int:
        return len(self.items)
