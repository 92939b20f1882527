"""Label normalization and difficulty-signal matching.

Labels are compared to the fixed vocabularies in ``config`` after
normalization. A label matches a pattern when either normalized string
contains the other, so ``good-first-issue-2024`` still matches
``good first issue``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from functools import lru_cache

from .config import EASY_LABELS, HARD_LABELS
from .models import LabelClass

_STRIP_RE = re.compile(r"[\s-]")


def normalize_label(label: str) -> str:
    """Lower-case a label and remove whitespace and hyphens.

    Examples
    --------
    >>> normalize_label("Good First Issue")
    'goodfirstissue'
    >>> normalize_label("breaking-change")
    'breakingchange'
    """
    return _STRIP_RE.sub("", str(label).lower())


@lru_cache(maxsize=32)
def _normalized_patterns(patterns: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(normalize_label(p) for p in patterns)


def _matches_any(normalized: str, patterns: Sequence[str]) -> bool:
    return any(normalized in pattern or pattern in normalized for pattern in patterns)


def has_matching_label(labels: Iterable[str] | None, patterns: Sequence[str]) -> bool:
    """Check whether any label matches any pattern.

    Parameters
    ----------
    labels : Iterable[str] | None
        Raw label names.
    patterns : Sequence[str]
        Raw pattern vocabulary; normalized here.

    Returns
    -------
    bool
        True if at least one label contains, or is contained in, a pattern.
    """
    if not labels:
        return False
    normalized_patterns = _normalized_patterns(tuple(patterns))
    return any(_matches_any(normalize_label(label), normalized_patterns) for label in labels)


def classify_labels(labels: Iterable[str] | None) -> LabelClass:
    """Resolve a label set to EASY, HARD or NEUTRAL.

    Easy labels are checked first, so a record carrying both an easy and a
    hard label is EASY.
    """
    labels = tuple(labels or ())
    if has_matching_label(labels, EASY_LABELS):
        return "EASY"
    if has_matching_label(labels, HARD_LABELS):
        return "HARD"
    return "NEUTRAL"
