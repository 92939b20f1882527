"""Value types for issue records and difficulty results."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Any, Literal

DifficultyLevel = Literal["easy", "medium", "hard"]
LabelClass = Literal["EASY", "HARD", "NEUTRAL"]

logger = logging.getLogger(__name__)


def coerce_count(value: Any, name: str = "value") -> int:
    """Coerce a count-like value into a non-negative integer.

    ``None``, NaN, negatives and anything unparseable become ``0``. Only the
    unparseable case is logged, since missing values are expected upstream.

    Parameters
    ----------
    value : Any
        Raw count (int, float, numeric string, ...).
    name : str
        Field name used in the warning message.

    Returns
    -------
    int
        Non-negative integer.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Ignoring non-numeric %s: %r", name, value)
        return 0
    if math.isnan(number) or math.isinf(number) or number <= 0:
        return 0
    return int(number)


def coerce_labels(value: Any) -> tuple[str, ...]:
    """Normalize a label collection into a tuple of strings.

    Accepts ``None``, a single string, or any iterable. ``None`` entries are
    dropped and other non-string entries are stringified.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, Iterable):
        logger.warning("Ignoring non-iterable labels: %r", value)
        return ()
    return tuple(str(v) for v in value if v is not None)


@dataclass(frozen=True, slots=True)
class IssueRecord:
    labels: tuple[str, ...] = ()
    comment_count: int = 0
    body_length: int = 0
    key: str | None = None

    @classmethod
    def build(
        cls,
        labels: Any = None,
        comment_count: Any = None,
        body_length: Any = None,
        key: str | None = None,
    ) -> IssueRecord:
        return cls(
            labels=coerce_labels(labels),
            comment_count=coerce_count(comment_count, "comment_count"),
            body_length=coerce_count(body_length, "body_length"),
            key=key,
        )


@dataclass(frozen=True, slots=True)
class DifficultyResult:
    level: DifficultyLevel
    score: int
    explanation: str

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class DifficultyDisplay:
    label: str
    bg_class: str
    text_class: str


@dataclass(frozen=True, slots=True)
class FactorScores:
    """Intermediate 0-100 sub-scores, before weighting."""

    labels: float
    discussion: float
    length: float
    label_class: LabelClass = "NEUTRAL"
