"""Factor scorers and weighted aggregation (pure functions).

Each numeric factor is split into three bands (easy, medium, hard) covering
roughly a third of the 0-100 range each. Values are interpolated linearly
inside a band and grow linearly past the hard threshold, capped at 100.
"""

from __future__ import annotations

import math

from .config import (
    BAND_EASY_MAX,
    BAND_HARD_MIN,
    BAND_MEDIUM_MIN,
    BAND_MEDIUM_SPAN,
    BODY_LENGTH_TAIL_POINTS,
    BODY_LENGTH_TAIL_STEP,
    BODY_LENGTH_THRESHOLDS,
    COMMENT_TAIL_POINTS,
    COMMENT_TAIL_STEP,
    COMMENT_THRESHOLDS,
    FACTOR_WEIGHTS,
    LABEL_SCORES,
    LEVEL_CUTOFFS,
    SCORE_MAX,
    SCORE_MIN,
)
from .labels import classify_labels
from .models import DifficultyLevel, FactorScores, IssueRecord, LabelClass


def clamp_score(value: float) -> float:
    return max(SCORE_MIN, min(SCORE_MAX, value))


def banded_score(
    value: float,
    easy: float,
    medium: float,
    tail_step: float,
    tail_points: float,
) -> float:
    """Piecewise-linear score for a non-negative magnitude.

    Parameters
    ----------
    value : float
        Raw magnitude (comment count, body length, ...).
    easy : float
        Inclusive upper bound of the easy band.
    medium : float
        Inclusive upper bound of the medium band.
    tail_step, tail_points : float
        Points added per ``tail_step`` units beyond ``medium``.

    Returns
    -------
    float
        Score in [0, 100].
    """
    value = max(value, 0)
    if value <= easy:
        return clamp_score((value / easy) * BAND_EASY_MAX)
    if value <= medium:
        position = (value - easy) / (medium - easy)
        return clamp_score(BAND_MEDIUM_MIN + position * BAND_MEDIUM_SPAN)
    excess = value - medium
    # Past this point the tail is capped; also keeps huge ints out of float division
    if excess >= (SCORE_MAX - BAND_HARD_MIN) * tail_step / tail_points:
        return SCORE_MAX
    return clamp_score(min(BAND_HARD_MIN + (excess / tail_step) * tail_points, SCORE_MAX))


def label_score(label_class: LabelClass) -> float:
    return LABEL_SCORES.get(label_class, LABEL_SCORES["NEUTRAL"])


def discussion_score(comment_count: int) -> float:
    return banded_score(
        comment_count,
        COMMENT_THRESHOLDS["easy"],
        COMMENT_THRESHOLDS["medium"],
        COMMENT_TAIL_STEP,
        COMMENT_TAIL_POINTS,
    )


def length_score(body_length: int) -> float:
    return banded_score(
        body_length,
        BODY_LENGTH_THRESHOLDS["easy"],
        BODY_LENGTH_THRESHOLDS["medium"],
        BODY_LENGTH_TAIL_STEP,
        BODY_LENGTH_TAIL_POINTS,
    )


def score_factors(record: IssueRecord) -> FactorScores:
    label_class = classify_labels(record.labels)
    return FactorScores(
        labels=label_score(label_class),
        discussion=discussion_score(record.comment_count),
        length=length_score(record.body_length),
        label_class=label_class,
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves up (33.5 -> 34), unlike ``round``."""
    return int(math.floor(value + 0.5))


def score_to_level(score: int) -> DifficultyLevel:
    if score <= LEVEL_CUTOFFS["easy"]:
        return "easy"
    if score <= LEVEL_CUTOFFS["medium"]:
        return "medium"
    return "hard"


def weighted_score(labels: float, discussion: float, length: float) -> float:
    return (
        clamp_score(labels) * FACTOR_WEIGHTS["labels"]
        + clamp_score(discussion) * FACTOR_WEIGHTS["discussion"]
        + clamp_score(length) * FACTOR_WEIGHTS["length"]
    )


def aggregate(labels: float, discussion: float, length: float) -> tuple[int, DifficultyLevel]:
    """Combine sub-scores into an integer score and its level."""
    score = round_half_up(weighted_score(labels, discussion, length))
    return score, score_to_level(score)
