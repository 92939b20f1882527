"""Static display properties per difficulty level."""

from __future__ import annotations

from .config import DIFFICULTY_DISPLAY
from .models import DifficultyDisplay

_DISPLAY: dict[str, DifficultyDisplay] = {
    level: DifficultyDisplay(**props) for level, props in DIFFICULTY_DISPLAY.items()
}


def display_for(level: str) -> DifficultyDisplay:
    """Return the label and style tokens for a level.

    Raises
    ------
    ValueError
        If ``level`` is not one of easy, medium, hard.
    """
    try:
        return _DISPLAY[level]
    except KeyError:
        raise ValueError(f"Unknown difficulty level: {level!r}") from None
