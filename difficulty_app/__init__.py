"""Issue difficulty classifier.

Rates tracked issues as easy, medium or hard from their labels, discussion
volume and description length.
"""

from .core.difficulty import calculate_difficulty
from .core.display import display_for
from .core.models import DifficultyDisplay, DifficultyLevel, DifficultyResult, IssueRecord

__all__ = [
    "calculate_difficulty",
    "display_for",
    "DifficultyDisplay",
    "DifficultyLevel",
    "DifficultyResult",
    "IssueRecord",
]
