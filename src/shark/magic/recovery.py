"""Generic token recovery over an arbitrary candidate list."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from shark.core.models import AutoRecoveryResult
from shark.magic.metrics import similarity

logger = logging.getLogger(__name__)

APPLY_THRESHOLD = 0.83


def autorecovery_token(
    token: str | None,
    candidates: Sequence[str | None],
) -> AutoRecoveryResult:
    """Pick the most similar candidate and decide whether to auto-apply it.

    The first candidate to reach a new strict maximum wins ties. When the
    best similarity does not exceed 0.83 the result is not applied and
    carries an empty ``recovered_token`` with zero confidence. The runner-up
    is reported either way.
    """
    best_score = 0.0
    best_token: str | None = None
    second_score = 0.0
    second_token: str | None = None

    for candidate in candidates:
        if candidate is None:
            continue
        score = similarity(token, candidate)
        if score > best_score:
            second_score, second_token = best_score, best_token
            best_score, best_token = score, candidate
        elif score > second_score:
            second_score, second_token = score, candidate

    original = token or ""
    if best_token is None or best_score <= APPLY_THRESHOLD:
        logger.debug(
            "Not recovering %r: best %r scored %.3f", original, best_token, best_score
        )
        return AutoRecoveryResult(
            original_token=original,
            recovered_token="",
            confidence=0.0,
            applied=False,
            second_best_token=second_token or "",
            second_best_confidence=second_score,
        )

    return AutoRecoveryResult(
        original_token=original,
        recovered_token=best_token,
        confidence=best_score,
        applied=True,
        second_best_token=second_token or "",
        second_best_confidence=second_score,
    )
