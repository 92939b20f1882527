"""Issue difficulty calculation.

Scores an issue on three factors and combines them with fixed weights:

- Labels (40%): presence of beginner-friendly or complex labels
- Discussion (30%): fewer comments means easier
- Description length (30%): shorter body means simpler scope

The weighted score is rounded half-up and mapped to easy (<= 33),
medium (34-66) or hard (>= 67).
"""

from __future__ import annotations

from typing import Any

from .explain import generate_explanation
from .mappers import to_record
from .models import DifficultyResult, IssueRecord
from .scoring import aggregate, score_factors


def calculate_difficulty(issue: IssueRecord | Any) -> DifficultyResult:
    """Calculate the difficulty level of an issue.

    Parameters
    ----------
    issue : IssueRecord or Any
        An ``IssueRecord``, ``None``, or a raw payload accepted by
        ``mappers.to_record`` (Jira issue JSON, GitHub issue node, flat dict).
        Missing fields count as empty/zero.

    Returns
    -------
    DifficultyResult
        Level, integer score in [0, 100] and explanation.

    Examples
    --------
    >>> calculate_difficulty(IssueRecord()).explanation
    'Easy: low discussion, concise scope'
    >>> calculate_difficulty({"labels": ["security"], "comment_count": 25, "body_length": 3000}).score
    93
    """
    record = to_record(issue)
    factors = score_factors(record)
    score, level = aggregate(factors.labels, factors.discussion, factors.length)
    explanation = generate_explanation(
        factors.label_class,
        record.comment_count,
        record.body_length,
        level,
    )
    return DifficultyResult(level=level, score=score, explanation=explanation)
