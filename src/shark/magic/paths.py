"""Path correction: scan a base directory for names close to a bad path."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

from shark.core.models import PathSuggestion, PathSuggestionSet
from shark.magic.fs import DirectoryLister, default_lister, path_exists
from shark.magic.metrics import similarity

logger = logging.getLogger(__name__)

MIN_SCORE = 0.25
MAX_SUGGESTIONS = 16
MAX_REPORT_TOKENS = 8


def path_suggest(
    bad_path: str | None,
    base_dir: str,
    lister: DirectoryLister | None = None,
) -> PathSuggestionSet:
    """Collect up to 16 entries of ``base_dir`` resembling ``bad_path``.

    This is a first-found collection in directory-iteration order, not a
    top-16 ranking: scanning stops as soon as the cap is reached even if
    later entries would score higher. Entries scoring below 0.25 are
    skipped. An unreadable ``base_dir`` yields an empty set.
    """
    if bad_path is None:
        return PathSuggestionSet()

    lister = lister or default_lister()
    collected: list[PathSuggestion] = []

    try:
        for entry in lister.entries(base_dir):
            score = similarity(bad_path, entry.name)
            if score < MIN_SCORE:
                continue

            candidate = os.path.join(base_dir, entry.name)
            collected.append(
                PathSuggestion(
                    candidate_path=candidate,
                    similarity_score=score,
                    exists=path_exists(candidate),
                )
            )
            if len(collected) >= MAX_SUGGESTIONS:
                logger.debug("Path scan of %s stopped at %d entries", base_dir, MAX_SUGGESTIONS)
                break
    except (OSError, ValueError):
        logger.debug("Could not scan %s", base_dir, exc_info=True)

    return PathSuggestionSet(items=tuple(collected))


def path_ai_report(
    tokens: Sequence[str],
    base_dir: str,
    lister: DirectoryLister | None = None,
) -> tuple[PathSuggestionSet, ...]:
    """Run :func:`path_suggest` for at most eight tokens, one set per token."""
    return tuple(
        path_suggest(token, base_dir, lister) for token in tokens[:MAX_REPORT_TOKENS]
    )
