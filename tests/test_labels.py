import pytest

from difficulty_app.core.config import EASY_LABELS, HARD_LABELS
from difficulty_app.core.labels import classify_labels, has_matching_label, normalize_label


def test_normalize_label_strips_case_spaces_and_hyphens():
    assert normalize_label("Good First Issue") == "goodfirstissue"
    assert normalize_label("good-first-issue") == "goodfirstissue"
    assert normalize_label("  Breaking - Change\t") == "breakingchange"


@pytest.mark.parametrize(
    "labels",
    [
        ["good first issue"],
        ["Good-First-Issue"],
        ["good-first-issue-2024"],
        ["beginner friendly"],
        ["Docs"],
        ["typo"],
        ["first-timers-only"],
    ],
)
def test_easy_labels(labels):
    assert classify_labels(labels) == "EASY"


@pytest.mark.parametrize(
    "labels",
    [
        ["security"],
        ["Performance"],
        ["breaking change"],
        ["area: architecture"],
        ["major-release"],
    ],
)
def test_hard_labels(labels):
    assert classify_labels(labels) == "HARD"


def test_short_label_contained_in_pattern_matches():
    # "doc" is contained in "docs", so containment works in both directions
    assert has_matching_label(["doc"], EASY_LABELS)
    assert has_matching_label(["perf"], HARD_LABELS)


def test_neutral_labels():
    assert classify_labels(["bug", "enhancement"]) == "NEUTRAL"
    assert classify_labels([]) == "NEUTRAL"
    assert classify_labels(None) == "NEUTRAL"


def test_easy_takes_precedence_over_hard():
    assert classify_labels(["security", "good first issue"]) == "EASY"
    assert classify_labels(["good first issue", "security"]) == "EASY"


def test_label_order_is_irrelevant():
    labels = ["bug", "performance", "ui"]
    assert classify_labels(labels) == classify_labels(list(reversed(labels)))
