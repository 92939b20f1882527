import pytest

from difficulty_app import DifficultyDisplay, display_for
from difficulty_app.core.config import LEVEL_ORDER


def test_display_entries():
    assert display_for("easy") == DifficultyDisplay("Easy", "bg-green-500/15", "text-green-400")
    assert display_for("medium") == DifficultyDisplay("Medium", "bg-amber-500/15", "text-amber-400")
    assert display_for("hard") == DifficultyDisplay("Hard", "bg-red-500/15", "text-red-400")


def test_display_covers_every_level():
    for level in LEVEL_ORDER:
        assert display_for(level).label == level.capitalize()


def test_unknown_level_raises():
    with pytest.raises(ValueError):
        display_for("extreme")
