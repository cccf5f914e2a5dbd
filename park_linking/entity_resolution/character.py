"""
Character-level similarity for park entity resolution.

Uses Levenshtein edit distance over aggressively normalized names, so
"Yellowstone National Park" and "yellowstone-national park!" compare as
identical while "Yellowstone NP" still scores high.

Key Insight: both sources spell park names with different punctuation,
spacing and casing. Stripping everything except [a-z0-9] removes that noise
before the edit distance is computed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_NON_ALNUM = re.compile(r"[^a-z0-9]")


@dataclass
class NameScore:
    """Result of name similarity scoring."""

    score: float  # Similarity score 0-1
    name_a_normalized: str
    name_b_normalized: str
    edit_distance: int
    method: str = "levenshtein"


def normalize(text: str | None) -> str:
    """
    Normalize a park name for comparison.

    Lower-cases and drops every character outside [a-z0-9]. Non-ASCII
    letters are dropped rather than folded. Idempotent; None and "" map to "".
    """
    if not text:
        return ""
    return _NON_ALNUM.sub("", text.lower()).strip()


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions turning ``a`` into ``b``.

    Full (len(a)+1) x (len(b)+1) table; park names are tens of characters.
    """
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(dp[i - 1][j], dp[i][j - 1], dp[i - 1][j - 1])

    return dp[m][n]


def score_name_similarity(name_a: str | None, name_b: str | None) -> NameScore:
    """
    Score name similarity and keep the intermediate values for explanation.

    Args:
        name_a: Raw name from source A
        name_b: Raw label from source B

    Returns:
        NameScore with similarity in [0, 1]
    """
    norm_a = normalize(name_a)
    norm_b = normalize(name_b)

    if not norm_a or not norm_b:
        return NameScore(
            score=0.0,
            name_a_normalized=norm_a,
            name_b_normalized=norm_b,
            edit_distance=max(len(norm_a), len(norm_b)),
            method="empty_input",
        )

    if norm_a == norm_b:
        return NameScore(
            score=1.0,
            name_a_normalized=norm_a,
            name_b_normalized=norm_b,
            edit_distance=0,
            method="exact",
        )

    distance = levenshtein_distance(norm_a, norm_b)
    max_length = max(len(norm_a), len(norm_b))

    return NameScore(
        score=1 - distance / max_length,
        name_a_normalized=norm_a,
        name_b_normalized=norm_b,
        edit_distance=distance,
    )


def name_similarity(name_a: str | None, name_b: str | None) -> float:
    """
    Edit-distance similarity of two park names.

    Returns 0.0 if either normalized name is empty, 1.0 if they are equal,
    otherwise ``1 - distance / max(len)``. Symmetric.
    """
    return score_name_similarity(name_a, name_b).score


# Threshold constants for interpreting name scores
NAME_THRESHOLD_HIGH = 0.85
NAME_THRESHOLD_MEDIUM = 0.6
NAME_THRESHOLD_LOW = 0.4


def interpret_name_score(score: float) -> str:
    """
    Interpret a name similarity score.

    Returns:
        Human-readable interpretation
    """
    if score >= NAME_THRESHOLD_HIGH:
        return "strong_name_match"
    elif score >= NAME_THRESHOLD_MEDIUM:
        return "moderate_name_match"
    elif score >= NAME_THRESHOLD_LOW:
        return "weak_name_match"
    else:
        return "poor_name_match"

