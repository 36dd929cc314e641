"""String metrics shared by every suggester.

All three functions are total: ``None`` inputs produce neutral results
instead of raising.
"""

from __future__ import annotations

import sys

# Distance reported when either side is absent.
MAX_DISTANCE = sys.maxsize


def levenshtein_distance(a: str | None, b: str | None) -> int:
    """Classic edit distance with unit insert/delete/substitute costs.

    Uses a dense ``(len(a) + 1) x (len(b) + 1)`` table.
    """
    if a is None or b is None:
        return MAX_DISTANCE

    rows, cols = len(a) + 1, len(b) + 1
    dp = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        dp[i][0] = i
    for j in range(cols):
        dp[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
                dp[i - 1][j - 1] + cost,
            )

    return dp[-1][-1]


def jaccard_index(a: str | None, b: str | None) -> int:
    """Overlap of the distinct byte values of ``a`` and ``b``, scaled 0-100.

    This is a byte-set measure over the UTF-8 encoding, not a word/token
    one: ``jaccard_index("abc", "abd") == 50``.
    """
    set_a = set(a.encode("utf-8")) if a else set()
    set_b = set(b.encode("utf-8")) if b else set()

    total = len(set_a | set_b)
    if total == 0:
        return 0
    match = sum(1 for c in set_b if c in set_a)
    return (100 * match) // total


def similarity(a: str | None, b: str | None) -> float:
    """Normalised similarity in ``[0, 1]`` derived from edit distance."""
    if a is None or b is None:
        return 0.0
    if not a and not b:
        return 1.0

    distance = levenshtein_distance(a, b)
    return 1.0 - distance / max(len(a), len(b))
