"""Human-readable rationale for a difficulty rating."""

from __future__ import annotations

from .config import BODY_LENGTH_THRESHOLDS, COMMENT_THRESHOLDS, FACTOR_PHRASES
from .models import DifficultyLevel, LabelClass


def factor_phrases(label_class: LabelClass, comment_count: int, body_length: int) -> list[str]:
    """List the factor phrases that apply, in label/discussion/length order.

    Uses the same band boundaries as the scorers, not the numeric sub-scores.
    """
    phrases: list[str] = []

    if label_class == "EASY":
        phrases.append(FACTOR_PHRASES["easy_labels"])
    elif label_class == "HARD":
        phrases.append(FACTOR_PHRASES["hard_labels"])

    if comment_count <= COMMENT_THRESHOLDS["easy"]:
        phrases.append(FACTOR_PHRASES["low_discussion"])
    elif comment_count > COMMENT_THRESHOLDS["medium"]:
        phrases.append(FACTOR_PHRASES["active_discussion"])

    if body_length <= BODY_LENGTH_THRESHOLDS["easy"]:
        phrases.append(FACTOR_PHRASES["concise_scope"])
    elif body_length > BODY_LENGTH_THRESHOLDS["medium"]:
        phrases.append(FACTOR_PHRASES["detailed_requirements"])

    return phrases


def capitalize_level(level: str) -> str:
    # str.capitalize() would lower-case the remainder
    return level[:1].upper() + level[1:]


def generate_explanation(
    label_class: LabelClass,
    comment_count: int,
    body_length: int,
    level: DifficultyLevel,
) -> str:
    """Render ``"<Level>: phrase, ..."`` or ``"<Level> difficulty"``.

    Examples
    --------
    >>> generate_explanation("NEUTRAL", 5, 1000, "medium")
    'Medium difficulty'
    >>> generate_explanation("EASY", 0, 0, "easy")
    'Easy: beginner-friendly labels, low discussion, concise scope'
    """
    title = capitalize_level(level)
    phrases = factor_phrases(label_class, comment_count, body_length)
    if not phrases:
        return f"{title} difficulty"
    return f"{title}: {', '.join(phrases)}"
