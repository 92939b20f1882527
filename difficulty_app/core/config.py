"""Central configuration, constants, and shared column definitions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# =============================================================================
# Label Vocabularies
# Matched case-insensitively after stripping whitespace and hyphens, with
# containment in either direction (see core.labels).
# =============================================================================
EASY_LABELS: Sequence[str] = (
    "good first issue",
    "good-first-issue",
    "beginner",
    "beginner-friendly",
    "easy",
    "starter",
    "first-timers-only",
    "documentation",
    "docs",
    "typo",
)

HARD_LABELS: Sequence[str] = (
    "complex",
    "difficult",
    "hard",
    "advanced",
    "architecture",
    "security",
    "performance",
    "breaking-change",
    "major",
)

# =============================================================================
# Factor Thresholds
# =============================================================================
# 0-2 comments easy, 3-10 medium, 11+ hard
COMMENT_THRESHOLDS: dict[str, int] = {
    "easy": 2,
    "medium": 10,
}
COMMENT_TAIL_STEP: int = 1
COMMENT_TAIL_POINTS: float = 3.0  # per step beyond "medium"

# <= 500 chars easy, 501-2000 medium, > 2000 hard
BODY_LENGTH_THRESHOLDS: dict[str, int] = {
    "easy": 500,
    "medium": 2000,
}
BODY_LENGTH_TAIL_STEP: int = 1000
BODY_LENGTH_TAIL_POINTS: float = 10.0  # per step beyond "medium"

# Sub-score bands shared by the numeric factors
BAND_EASY_MAX: float = 33.0
BAND_MEDIUM_MIN: float = 34.0
BAND_MEDIUM_SPAN: float = 32.0
BAND_HARD_MIN: float = 67.0
SCORE_MIN: float = 0.0
SCORE_MAX: float = 100.0

LABEL_SCORES: dict[str, float] = {
    "EASY": 0.0,
    "NEUTRAL": 50.0,
    "HARD": 100.0,
}

# =============================================================================
# Aggregation
# =============================================================================
FACTOR_WEIGHTS: dict[str, float] = {
    "labels": 0.40,
    "discussion": 0.30,
    "length": 0.30,
}

# Inclusive upper bounds, checked low to high; anything above is "hard"
LEVEL_CUTOFFS: dict[str, int] = {
    "easy": 33,
    "medium": 66,
}
LEVEL_ORDER: Sequence[str] = ("easy", "medium", "hard")

# =============================================================================
# Explanation Vocabulary
# =============================================================================
FACTOR_PHRASES: dict[str, str] = {
    "easy_labels": "beginner-friendly labels",
    "hard_labels": "complex labels",
    "low_discussion": "low discussion",
    "active_discussion": "active discussion",
    "concise_scope": "concise scope",
    "detailed_requirements": "detailed requirements",
}

# =============================================================================
# Display Tokens (consumed by renderers, keyed by level)
# =============================================================================
DIFFICULTY_DISPLAY: dict[str, dict[str, str]] = {
    "easy": {
        "label": "Easy",
        "bg_class": "bg-green-500/15",
        "text_class": "text-green-400",
    },
    "medium": {
        "label": "Medium",
        "bg_class": "bg-amber-500/15",
        "text_class": "text-amber-400",
    },
    "hard": {
        "label": "Hard",
        "bg_class": "bg-red-500/15",
        "text_class": "text-red-400",
    },
}

# =============================================================================
# Jira Field Settings
# =============================================================================
JIRA_DESCRIPTION_FIELD = "description"
JIRA_COMMENT_FIELD = "comment"
JIRA_LABELS_FIELD = "labels"

# Batch classification tuning
# Batches of BATCH_MIN_PARALLEL or more records are classified on a thread pool.
BATCH_MAX_WORKERS = 8
BATCH_MIN_PARALLEL = 64  # below this, stay sequential to reduce overhead

# =============================================================================
# Column Orders
# =============================================================================
DIFFICULTY_COLUMNS: Sequence[str] = (
    "difficulty_level",
    "difficulty_score",
    "difficulty_explanation",
)

DISPLAY_ORDER_DIFFICULTY: Sequence[str] = (
    "key",
    "summary",
    "difficulty_level",
    "difficulty_score",
    "difficulty_explanation",
    "labels",
    "comment_count",
    "body_length",
)

DISPLAY_ORDER_DISTRIBUTION: Sequence[str] = (
    "difficulty_level",
    "count",
    "share",
)


@dataclass(slots=True)
class AppSettings:
    batch_max_workers: int = BATCH_MAX_WORKERS
    batch_min_parallel: int = BATCH_MIN_PARALLEL


SETTINGS = AppSettings()
