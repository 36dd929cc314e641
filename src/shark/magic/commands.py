"""Command correction: pick the best candidate for a mistyped command."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from shark.core.models import ReasonRecord, ReasonText
from shark.magic.metrics import MAX_DISTANCE, jaccard_index, levenshtein_distance

logger = logging.getLogger(__name__)

ACCEPT_THRESHOLD = 0.70
STRONG_THRESHOLD = 0.85

PREFIX_BONUS = 0.15
SUFFIX_BONUS = 0.10
CASE_BONUS = 0.05


def fuse_confidence(
    edit_distance: int,
    candidate_length: int,
    jaccard: int,
    prefix_match: bool,
    suffix_match: bool,
    case_insensitive: bool,
) -> float:
    """Combine distance, overlap and positional bonuses, clipped to [0, 1]."""
    score = 1.0 - edit_distance / max(candidate_length, 1)
    score += jaccard / 200.0
    if prefix_match:
        score += PREFIX_BONUS
    if suffix_match:
        score += SUFFIX_BONUS
    if case_insensitive:
        score += CASE_BONUS
    return max(0.0, min(1.0, score))


def explain(confidence: float, prefix_match: bool, case_insensitive: bool) -> str:
    if confidence >= STRONG_THRESHOLD:
        return ReasonText.STRONG
    if confidence >= ACCEPT_THRESHOLD:
        return ReasonText.CLOSE
    if prefix_match:
        return ReasonText.PREFIX
    if case_insensitive:
        return ReasonText.CASE_INSENSITIVE
    return ReasonText.LOW


def _empty_reason(token: str | None) -> ReasonRecord:
    return ReasonRecord(
        input=token,
        suggested=None,
        edit_distance=MAX_DISTANCE,
        confidence=0.0,
        jaccard_index=0,
        prefix_match=False,
        suffix_match=False,
        case_insensitive=False,
        reason=ReasonText.LOW,
    )


def suggest_command(
    token: str | None,
    candidates: Sequence[str | None],
) -> tuple[str | None, ReasonRecord]:
    """Propose the best correction for ``token`` among ``candidates``.

    Candidates are visited in order. One becomes the new best when it is a
    prefix match, when its distance beats the current best, or when it ties
    the distance with a strictly higher jaccard overlap. A later prefix
    match therefore overrides an earlier closer candidate.

    Returns ``(suggestion, reason)``. ``suggestion`` is ``None`` unless the
    fused confidence reaches 0.70; ``reason`` is always fully populated.
    """
    if token is None or not candidates:
        return None, _empty_reason(token)

    best: str | None = None
    best_distance = MAX_DISTANCE
    best_jaccard = 0
    best_prefix = best_suffix = best_case = False

    for candidate in candidates:
        if candidate is None:
            continue

        distance = levenshtein_distance(token, candidate)
        jaccard = jaccard_index(token, candidate)
        prefix = candidate.startswith(token)
        suffix = len(token) <= len(candidate) and candidate.endswith(token)
        case_insensitive = token.casefold() == candidate.casefold()

        if (
            prefix
            or distance < best_distance
            or (distance == best_distance and jaccard > best_jaccard)
        ):
            best = candidate
            best_distance = distance
            best_jaccard = jaccard
            best_prefix = prefix
            best_suffix = suffix
            best_case = case_insensitive

    if best is None:
        return None, _empty_reason(token)

    confidence = fuse_confidence(
        best_distance, len(best), best_jaccard, best_prefix, best_suffix, best_case
    )
    reason = ReasonRecord(
        input=token,
        suggested=best,
        edit_distance=best_distance,
        confidence=confidence,
        jaccard_index=best_jaccard,
        prefix_match=best_prefix,
        suffix_match=best_suffix,
        case_insensitive=best_case,
        reason=explain(confidence, best_prefix, best_case),
    )

    if confidence < ACCEPT_THRESHOLD:
        logger.debug(
            "Rejected suggestion %r for %r (confidence %.3f)", best, token, confidence
        )
        return None, reason
    return best, reason
